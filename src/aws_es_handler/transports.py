#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""Default transport handlers backed by the installed search client library."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from importlib import import_module
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Final, Protocol, TypeAlias

from .exceptions import MissingDependencyError, UnsupportedClientVersionError
from .records import OutboundRequest

logger: Final = logging.getLogger(__name__)

TransportHandler: TypeAlias = Callable[[OutboundRequest], Any | Awaitable[Any]]

DEFAULT_PORTS: Final[dict[str, int]] = {"http": 80, "https": 443}


class ClientLibrary(Enum):
    """Search client libraries that can supply a default transport."""

    OPENSEARCH = "opensearch-py"
    """The ``opensearch-py`` client, imported as ``opensearchpy``."""

    ELASTICSEARCH = "elasticsearch"
    """The ``elasticsearch`` client, major versions 7 and older."""

    def provider(self) -> "TransportHandlerProvider":
        return _PROVIDERS[self]()

    def default_handler(self) -> TransportHandler:
        return self.provider().default_handler()


class TransportHandlerProvider(Protocol):
    """Builds the default transport handler for one client library."""

    def default_handler(self) -> TransportHandler: ...


class Connection(Protocol):
    """The subset of a search client ``Connection`` used to send requests."""

    def perform_request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
        timeout: float | None = None,
        ignore: tuple[int, ...] = (),
        headers: dict[str, str] | None = None,
    ) -> tuple[int, dict[str, str], str]: ...


ConnectionFactory: TypeAlias = Callable[..., Connection]


class ConnectionTransportHandler:
    """Sends outbound requests through a search client ``Connection`` class.

    One connection is kept per scheme and host. Requests always target the default
    port of the scheme. The blocking ``perform_request`` call runs in a worker
    thread, and its ``(status, headers, data)`` result is returned unchanged.
    """

    def __init__(self, connection_factory: ConnectionFactory) -> None:
        self._connection_factory = connection_factory
        self._connections: dict[tuple[str, str], Connection] = {}

    async def __call__(self, request: OutboundRequest) -> Any:
        connection = self._get_connection(request)
        url = request.uri_path
        if request.query_string:
            url = f"{url}?{request.query_string}"
        headers = {name: ",".join(values) for name, values in request.headers.items()}
        return await asyncio.to_thread(
            connection.perform_request,
            request.method,
            url,
            body=request.body,
            timeout=request.options.get("timeout"),
            ignore=tuple(request.options.get("ignore", ())),
            headers=headers,
        )

    def _get_connection(self, request: OutboundRequest) -> Connection:
        host = request.header("Host")
        if host is None:
            raise ValueError("Outbound request has no Host header.")
        key = (request.scheme, host)
        connection = self._connections.get(key)
        if connection is None:
            connection = self._connection_factory(
                host=host.strip("[]"),
                port=DEFAULT_PORTS[request.scheme],
                use_ssl=request.scheme == "https",
            )
            self._connections[key] = connection
        return connection


class OpenSearchHandlerProvider(TransportHandlerProvider):
    def default_handler(self) -> TransportHandler:
        module = _import_client("opensearchpy")
        return ConnectionTransportHandler(module.Urllib3HttpConnection)


class ElasticsearchHandlerProvider(TransportHandlerProvider):
    def default_handler(self) -> TransportHandler:
        module = _import_client("elasticsearch")
        return ConnectionTransportHandler(module.Urllib3HttpConnection)


_PROVIDERS: Final[dict[ClientLibrary, type[TransportHandlerProvider]]] = {
    ClientLibrary.OPENSEARCH: OpenSearchHandlerProvider,
    ClientLibrary.ELASTICSEARCH: ElasticsearchHandlerProvider,
}

# elasticsearch 8 moved to elastic-transport and dropped the Connection classes.
_ELASTICSEARCH_MAX_MAJOR_VERSION: Final = 7


def _import_client(name: str) -> Any:
    try:
        return import_module(name)
    except ImportError as e:
        raise MissingDependencyError(
            f"Attempted to use the {name} transport, but {name} is not installed."
        ) from e


def _installed_version(distribution: str) -> str | None:
    try:
        return version(distribution)
    except PackageNotFoundError:
        return None


def _major_version(raw_version: str) -> int:
    head = raw_version.split(".", 1)[0]
    digits = "".join(char for char in head if char.isdigit())
    return int(digits) if digits else 0


def detect_client_library() -> ClientLibrary:
    """Find the installed search client library to send requests with.

    ``opensearch-py`` is preferred, then ``elasticsearch`` up to major version 7.

    :raises UnsupportedClientVersionError: If only ``elasticsearch`` 8 or newer is
        installed.
    :raises MissingDependencyError: If no search client is installed.
    """
    opensearch_version = _installed_version(ClientLibrary.OPENSEARCH.value)
    if opensearch_version is not None:
        logger.debug("Using opensearch-py %s for transport.", opensearch_version)
        return ClientLibrary.OPENSEARCH

    elasticsearch_version = _installed_version(ClientLibrary.ELASTICSEARCH.value)
    if elasticsearch_version is not None:
        if _major_version(elasticsearch_version) > _ELASTICSEARCH_MAX_MAJOR_VERSION:
            raise UnsupportedClientVersionError(
                f"elasticsearch {elasticsearch_version} is not supported. Install "
                "opensearch-py, or elasticsearch<8, or pass a transport_handler."
            )
        logger.debug("Using elasticsearch %s for transport.", elasticsearch_version)
        return ClientLibrary.ELASTICSEARCH

    raise MissingDependencyError(
        "No supported search client is installed. Install opensearch-py or "
        "elasticsearch<8, or pass a transport_handler."
    )
