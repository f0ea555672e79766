#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""Wire-neutral request records exchanged with search clients and transports."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

HeaderMapping: TypeAlias = Mapping[str, Sequence[str]]


@dataclass(kw_only=True)
class InboundRequest:
    """A request as produced by a search client, before signing."""

    method: str
    """The HTTP method, for example ``GET``."""

    scheme: str
    """Either ``http`` or ``https``."""

    uri_path: str
    """The request path, for example ``/index/_doc/1``."""

    headers: HeaderMapping = field(default_factory=dict)
    """Header names mapped to their ordered values.

    Must contain a ``Host`` (or ``host``) entry.
    """

    query_string: str | None = None
    """The query string without the leading ``?``."""

    body: bytes | str | None = None
    """The request payload. ``str`` bodies are encoded as UTF-8."""

    options: Mapping[str, Any] = field(default_factory=dict)
    """Transport-specific settings such as ``timeout``.

    These are not touched by signing and are handed to the transport unchanged.
    """


@dataclass(kw_only=True)
class OutboundRequest:
    """A signed request in the shape transport handlers consume."""

    method: str
    scheme: str
    uri_path: str
    headers: dict[str, list[str]]
    query_string: str | None = None

    body: bytes | None = None
    """The request payload.

    ``None`` means no body at all, which transports treat differently from an
    empty payload.
    """

    options: Mapping[str, Any] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Return the first value of header ``name``, compared case-insensitively."""
        for key, values in self.headers.items():
            if key.lower() == name.lower() and values:
                return values[0]
        return None
