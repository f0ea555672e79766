#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import os

from ..exceptions import CredentialError
from ..identity import CredentialSet
from .interfaces import CredentialSource


class EnvironmentCredentialSource(CredentialSource):
    """Resolves AWS Credentials from system environment variables."""

    ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
    ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"  # noqa: S105
    ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"  # noqa: S105

    async def resolve(self) -> CredentialSet:
        access_key_id = os.getenv(self.ENV_ACCESS_KEY_ID)
        secret_access_key = os.getenv(self.ENV_SECRET_ACCESS_KEY)
        session_token = os.getenv(self.ENV_SESSION_TOKEN)

        if not access_key_id or not secret_access_key:
            raise CredentialError(
                f"{self.ENV_ACCESS_KEY_ID} and {self.ENV_SECRET_ACCESS_KEY} are required"
            )

        return CredentialSet(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token or None,
        )
