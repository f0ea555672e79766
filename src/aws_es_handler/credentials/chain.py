#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from collections.abc import Sequence
from typing import Final

from ..exceptions import CredentialError
from ..identity import CredentialSet
from .interfaces import CredentialSource

logger: Final = logging.getLogger(__name__)


class ChainedCredentialSource(CredentialSource):
    """Attempts to resolve credentials by checking a sequence of sub-sources.

    If a nested source raises a :py:class:`CredentialError`, the next source in the
    chain will be attempted. Resolved credentials are reused until they expire.
    """

    def __init__(self, sources: Sequence[CredentialSource]) -> None:
        """Construct a ChainedCredentialSource.

        :param sources: The sequence of sources to resolve credentials from.
        """
        if not sources:
            raise ValueError("At least one credential source is required.")
        self._sources = tuple(sources)
        self._cached: CredentialSet | None = None

    async def resolve(self) -> CredentialSet:
        if self._cached is None or self._cached.is_expired:
            self._cached = await self._resolve()
        return self._cached

    async def _resolve(self) -> CredentialSet:
        logger.debug("Attempting to resolve credentials from source chain.")
        for source in self._sources:
            try:
                logger.debug("Attempting to resolve credentials from %s.", type(source))
                return await source.resolve()
            except CredentialError as e:
                logger.debug(
                    "Failed to resolve credentials from %s: %s", type(source), e
                )

        raise CredentialError("Failed to resolve credentials from source chain.")
