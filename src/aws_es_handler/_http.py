#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from urllib.parse import urlunsplit


class Field:
    """A header name with one or more values.

    Names are matched case-insensitively by :py:class:`Fields` but the casing given
    here is preserved for transmission.
    """

    def __init__(self, *, name: str, values: Iterable[str] | None = None):
        self.name = name
        self.values: list[str] = list(values) if values is not None else []

    def as_tuples(self) -> list[tuple[str, str]]:
        """Get list of ``name``, ``value`` tuples where each tuple represents one
        value."""
        return [(self.name, val) for val in self.values]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return False
        return self.name == other.name and self.values == other.values

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, values={self.values!r})"


class Fields:
    """Ordered, case-insensitive multimap of header fields."""

    def __init__(self, initial: Iterable[Field] | None = None):
        self.entries: OrderedDict[str, Field] = OrderedDict()
        for fld in initial or ():
            self.extend_field(fld)

    @classmethod
    def from_mapping(cls, headers: Mapping[str, Sequence[str] | str]) -> Fields:
        """Build fields from a ``name -> values`` mapping.

        Keys differing only by case are merged into one field that keeps the casing
        of the first key seen.
        """
        fields = cls()
        for name, values in headers.items():
            if isinstance(values, str):
                values = [values]
            fields.extend_field(Field(name=name, values=values))
        return fields

    def set_field(self, field: Field) -> None:
        """Set or override the entry for ``field.name``."""
        self.entries[self._normalize_field_name(field.name)] = field

    def extend_field(self, field: Field) -> None:
        """Append the values of ``field`` to an existing entry, or add it."""
        existing = self.get(field.name)
        if existing is None:
            self.set_field(Field(name=field.name, values=field.values))
        else:
            existing.values.extend(field.values)

    def get(self, key: str, default: Field | None = None) -> Field | None:
        return self[key] if key in self else default

    def __getitem__(self, name: str) -> Field:
        return self.entries[self._normalize_field_name(name)]

    def __delitem__(self, name: str) -> None:
        del self.entries[self._normalize_field_name(name)]

    def _normalize_field_name(self, name: str) -> str:
        return name.lower()

    def as_mapping(self) -> dict[str, list[str]]:
        """Render the fields as a ``name -> values`` dict using the stored casing."""
        return {fld.name: list(fld.values) for fld in self.entries.values()}

    def as_tuples(self) -> list[tuple[str, str]]:
        return [pair for fld in self.entries.values() for pair in fld.as_tuples()]

    def copy(self) -> Fields:
        return Fields(Field(name=fld.name, values=fld.values) for fld in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return False
        return self.entries == other.entries

    def __iter__(self) -> Iterator[Field]:
        yield from self.entries.values()

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Fields({list(self.entries.values())})"

    def __contains__(self, key: str) -> bool:
        return self._normalize_field_name(key) in self.entries


@dataclass(kw_only=True, frozen=True)
class URI:
    """Target location of a :py:class:`CanonicalRequest`."""

    scheme: str = "https"
    """Either ``http`` or ``https``."""

    host: str
    """The hostname, without a port."""

    path: str = "/"
    """Path component of the URI."""

    query: str | None = None
    """Query component of the URI as string, never empty."""

    def render_path(self) -> str:
        """The request target sent on the wire: path plus query."""
        query = f"?{self.query}" if self.query else ""
        return f"{self.path}{query}"

    def build(self) -> str:
        """Construct the string form ``{scheme}://{host}{path}?{query}``."""
        return urlunsplit((self.scheme, self.host, self.path, self.query or "", ""))


@dataclass(kw_only=True)
class CanonicalRequest:
    """A normalized request ready to be handed to the SigV4 signer."""

    method: str
    uri: URI
    fields: Fields = field(default_factory=Fields)
    body: bytes = b""


@dataclass(kw_only=True)
class SignedRequest(CanonicalRequest):
    """A :py:class:`CanonicalRequest` carrying the SigV4 authentication headers.

    Apart from the added headers, method, URI, other headers and body are those of
    the request that was signed.
    """
