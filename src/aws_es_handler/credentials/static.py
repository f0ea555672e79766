#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from ..identity import CredentialSet
from .interfaces import CredentialSource


class StaticCredentialSource(CredentialSource):
    """Resolve a fixed set of credentials."""

    def __init__(self, credentials: CredentialSet) -> None:
        self._credentials = credentials

    async def resolve(self) -> CredentialSet:
        return self._credentials
