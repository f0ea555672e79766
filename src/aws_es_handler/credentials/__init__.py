#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from .callables import CallableCredentialSource
from .chain import ChainedCredentialSource
from .crt import CrtCredentialSource
from .environment import EnvironmentCredentialSource
from .interfaces import CredentialSource
from .static import StaticCredentialSource


def default_credential_source() -> CredentialSource:
    """Creates the default credential source chain.

    Environment variables are checked first, then the awscrt default provider chain.
    """
    return ChainedCredentialSource(
        sources=(EnvironmentCredentialSource(), CrtCredentialSource())
    )


__all__ = (
    "CallableCredentialSource",
    "ChainedCredentialSource",
    "CredentialSource",
    "CrtCredentialSource",
    "EnvironmentCredentialSource",
    "StaticCredentialSource",
    "default_credential_source",
)
