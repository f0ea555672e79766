#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from typing import Final
from urllib.parse import urlsplit

from ._http import URI, CanonicalRequest, Field, Fields
from .exceptions import MalformedRequestError
from .records import InboundRequest

logger: Final = logging.getLogger(__name__)

HOST_HEADER: Final = "Host"
SUPPORTED_SCHEMES: Final = ("http", "https")


def normalize(inbound: InboundRequest) -> CanonicalRequest:
    """Convert an inbound request record into a :py:class:`CanonicalRequest`.

    The host header is reduced to a bare hostname and re-emitted as ``Host``. The
    search service only listens on the default port of each scheme, so any port in
    the header is dropped. A host value that can't be parsed is kept as given.

    :raises MalformedRequestError: If the method, scheme, path, host header or body
        can't be used to build a request.
    """
    if not inbound.method:
        raise MalformedRequestError("Request method must be a non-empty string.")

    scheme = inbound.scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise MalformedRequestError(
            f"Unsupported URL scheme {inbound.scheme!r}, expected one of "
            f"{', '.join(SUPPORTED_SCHEMES)}."
        )

    host_key = _host_key(inbound)
    host_values = inbound.headers[host_key]
    if isinstance(host_values, str):
        host_values = [host_values]
    if not host_values or not host_values[0].strip():
        raise MalformedRequestError(f"The {host_key!r} header has no value.")
    host = _strip_host(host_values[0])

    path, query = _split_path(inbound.uri_path)
    if inbound.query_string:
        query = inbound.query_string

    fields = Fields.from_mapping(
        {
            name: values
            for name, values in inbound.headers.items()
            if name.lower() != "host"
        }
    )
    fields.set_field(Field(name=HOST_HEADER, values=[host]))

    return CanonicalRequest(
        method=inbound.method.upper(),
        uri=URI(scheme=scheme, host=host, path=path, query=query or None),
        fields=fields,
        body=_body_bytes(inbound.body),
    )


def _host_key(inbound: InboundRequest) -> str:
    # Some clients send "Host", others "host".
    for key in ("Host", "host"):
        if key in inbound.headers:
            return key
    for key in inbound.headers:
        if key.lower() == "host":
            return key
    raise MalformedRequestError("Request is missing a Host header.")


def _strip_host(value: str) -> str:
    target = value if "//" in value else f"//{value}"
    try:
        parts = urlsplit(target)
        hostname = parts.hostname
    except ValueError:
        hostname = None
    if not hostname:
        logger.debug("Unable to parse host header %r, leaving it unchanged.", value)
        return value
    # hostname is lowercased, so cut the port off netloc to keep the given casing.
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[: host.index("]") + 1]
    return host.partition(":")[0]


def _split_path(uri_path: str) -> tuple[str, str]:
    try:
        parts = urlsplit(uri_path)
    except ValueError as e:
        raise MalformedRequestError(f"Unable to parse request path {uri_path!r}.") from e
    if parts.scheme or parts.netloc:
        raise MalformedRequestError(
            f"Request path {uri_path!r} must not carry a scheme or host."
        )
    if any(char.isspace() for char in parts.path):
        raise MalformedRequestError(f"Request path {uri_path!r} contains whitespace.")
    if "#" in uri_path:
        raise MalformedRequestError(f"Request path {uri_path!r} contains a fragment.")
    path = parts.path or "/"
    if not path.startswith("/"):
        path = f"/{path}"
    return path, parts.query


def _body_bytes(body: bytes | str | None) -> bytes:
    if body is None:
        return b""
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, bytes | bytearray | memoryview):
        return bytes(body)
    raise MalformedRequestError(
        f"Request body must be bytes, str or None, got {type(body).__name__}."
    )
