#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
#  pyright: reportMissingTypeStubs=false,reportUnknownMemberType=false
import asyncio
import logging
from typing import Final

from awscrt import auth as crt_auth
from awscrt.exceptions import AwsCrtError

from ..exceptions import CredentialError
from ..identity import CredentialSet
from .interfaces import CredentialSource

logger: Final = logging.getLogger(__name__)


class CrtCredentialSource(CredentialSource):
    """Resolves credentials from an ``awscrt`` credentials provider.

    Without an explicit provider the CRT default chain is used, which consults
    environment variables, the shared config and credentials files, container
    credentials and EC2 instance metadata. The CRT provider handles its own caching
    and refreshing.
    """

    def __init__(self, provider: crt_auth.AwsCredentialsProvider | None = None) -> None:
        self._provider = provider

    @property
    def provider(self) -> crt_auth.AwsCredentialsProvider:
        # Built on first use so constructing a handler never touches the CRT.
        if self._provider is None:
            self._provider = crt_auth.AwsCredentialsProvider.new_default_chain()
        return self._provider

    async def resolve(self) -> CredentialSet:
        logger.debug("Resolving credentials from awscrt provider.")
        try:
            credentials = await asyncio.wrap_future(self.provider.get_credentials())
        except AwsCrtError as e:
            raise CredentialError(
                f"Unable to resolve credentials from awscrt provider: {e.name}"
            ) from e

        return CredentialSet(
            access_key_id=credentials.access_key_id,
            secret_access_key=credentials.secret_access_key,
            session_token=credentials.session_token or None,
            expiration=getattr(credentials, "expiration", None),
        )
