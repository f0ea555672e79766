#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Protocol, runtime_checkable

from ..identity import CredentialSet


@runtime_checkable
class CredentialSource(Protocol):
    """Used to load a :py:class:`CredentialSet` for signing.

    Sources may cache and refresh credentials internally, but must be safe to call
    repeatedly and concurrently.
    """

    async def resolve(self) -> CredentialSet:
        """Load the credentials from this source.

        :raises CredentialError: If the source can't provide credentials.
        """
        ...
