#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import inspect
import logging
import os
from typing import Any, Final, Self

from .credentials import (
    CallableCredentialSource,
    CredentialSource,
    default_credential_source,
)
from .credentials.callables import CredentialCallable
from .normalizer import normalize
from .records import InboundRequest, OutboundRequest
from .signer import SERVICE_NAME, SigV4RequestSigner
from .transports import ClientLibrary, TransportHandler, detect_client_library
from .translator import to_outbound

logger: Final = logging.getLogger(__name__)

REGION_ENV_VARS: Final = ("AWS_REGION", "AWS_DEFAULT_REGION")


class SigV4Handler:
    """An AWS Signature V4 signing handler for search service clients.

    Each call resolves credentials, signs the request and hands the signed request
    to the wrapped transport handler, returning whatever that handler returns.
    """

    def __init__(
        self,
        region: str,
        *,
        credential_source: CredentialSource | CredentialCallable | None = None,
        transport_handler: TransportHandler | None = None,
        client_library: ClientLibrary | None = None,
        null_empty_body: bool = True,
        service: str = SERVICE_NAME,
    ) -> None:
        """
        :param region: The region of the search domain.
        :param credential_source: Where to load credentials from. A zero-argument
            callable returning credentials, or a future or awaitable of them, is also
            accepted. Defaults to environment variables followed by the awscrt
            default provider chain.
        :param transport_handler: The handler that sends signed requests. Defaults
            to a handler built from the installed search client library.
        :param client_library: The library to build the default transport handler
            from. Detected from the installed packages when not given. Ignored if
            ``transport_handler`` is set.
        :param null_empty_body: Send ``None`` instead of an empty body.
        :param service: The signing name of the target service.
        :raises UnsupportedClientVersionError: If the default transport is needed and
            the installed search client is too new.
        :raises MissingDependencyError: If the default transport is needed and no
            search client is installed.
        """
        self._signer = SigV4RequestSigner(region=region, service=service)
        self._credential_source = self._resolve_credential_source(credential_source)
        self._null_empty_body = null_empty_body

        if transport_handler is None:
            if client_library is None:
                client_library = detect_client_library()
            transport_handler = client_library.default_handler()
        self._transport_handler = transport_handler

    @classmethod
    def from_environment(cls, **kwargs: Any) -> Self:
        """Construct a handler with the region taken from the environment.

        ``AWS_REGION`` is checked first, then ``AWS_DEFAULT_REGION``.
        """
        for env_var in REGION_ENV_VARS:
            region = os.getenv(env_var)
            if region:
                return cls(region, **kwargs)
        raise ValueError(
            f"No region configured. Set one of {', '.join(REGION_ENV_VARS)}."
        )

    @property
    def region(self) -> str:
        return self._signer.region

    async def __call__(self, request: InboundRequest) -> Any:
        outbound = await self.sign_request(request)
        logger.debug(
            "Delegating signed %s %s to %s.",
            outbound.method,
            outbound.uri_path,
            type(self._transport_handler),
        )
        result = self._transport_handler(outbound)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def sign_request(self, request: InboundRequest) -> OutboundRequest:
        """Sign ``request`` and return the outbound record without sending it."""
        credentials = await self._credential_source.resolve()
        canonical = normalize(request)
        signed = await self._signer.sign(canonical, credentials)
        return to_outbound(
            signed, options=request.options, null_empty_body=self._null_empty_body
        )

    def _resolve_credential_source(
        self, credential_source: CredentialSource | CredentialCallable | None
    ) -> CredentialSource:
        if credential_source is None:
            return default_credential_source()
        if isinstance(credential_source, CredentialSource):
            return credential_source
        return CallableCredentialSource(credential_source)
