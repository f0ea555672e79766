#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import concurrent.futures
import inspect
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from ..exceptions import CredentialError
from ..identity import CredentialSet
from .interfaces import CredentialSource

CredentialCallable: TypeAlias = Callable[
    [],
    CredentialSet
    | Awaitable[CredentialSet]
    | concurrent.futures.Future[CredentialSet],
]


class CallableCredentialSource(CredentialSource):
    """Adapts a zero-argument callable into a :py:class:`CredentialSource`.

    The callable may return the credentials directly, an awaitable of them, or a
    :py:class:`concurrent.futures.Future` of them.
    """

    def __init__(self, provider: CredentialCallable) -> None:
        if not callable(provider):
            raise TypeError(f"Expected a callable, got {type(provider).__name__}.")
        self._provider = provider

    async def resolve(self) -> CredentialSet:
        result = self._provider()
        if isinstance(result, concurrent.futures.Future):
            result = await asyncio.wrap_future(result)
        elif inspect.isawaitable(result):
            result = await result

        if not isinstance(result, CredentialSet):
            raise CredentialError(
                "Credential provider returned an unexpected value. Expected "
                f"CredentialSet but received {type(result)}."
            )
        return result
