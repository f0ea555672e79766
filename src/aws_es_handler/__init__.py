#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""AWS Signature Version 4 signing handler for OpenSearch and Elasticsearch
clients talking to Amazon OpenSearch Service domains."""

from ._http import URI, CanonicalRequest, Field, Fields, SignedRequest
from .credentials import (
    CallableCredentialSource,
    ChainedCredentialSource,
    CredentialSource,
    CrtCredentialSource,
    EnvironmentCredentialSource,
    StaticCredentialSource,
    default_credential_source,
)
from .exceptions import (
    AwsEsHandlerError,
    ClockError,
    CredentialError,
    MalformedRequestError,
    MissingDependencyError,
    SigningError,
    UnsupportedClientVersionError,
)
from .handler import SigV4Handler
from .identity import CredentialSet
from .normalizer import normalize
from .records import InboundRequest, OutboundRequest
from .signer import SigV4RequestSigner
from .transports import ClientLibrary, detect_client_library
from .translator import to_outbound

__license__ = "Apache-2.0"
__version__ = "0.1.0"

__all__ = (
    "URI",
    "AwsEsHandlerError",
    "CallableCredentialSource",
    "CanonicalRequest",
    "ChainedCredentialSource",
    "ClientLibrary",
    "ClockError",
    "CredentialError",
    "CredentialSet",
    "CredentialSource",
    "CrtCredentialSource",
    "EnvironmentCredentialSource",
    "Field",
    "Fields",
    "InboundRequest",
    "MalformedRequestError",
    "MissingDependencyError",
    "OutboundRequest",
    "SigV4Handler",
    "SigV4RequestSigner",
    "SignedRequest",
    "SigningError",
    "StaticCredentialSource",
    "UnsupportedClientVersionError",
    "default_credential_source",
    "detect_client_library",
    "normalize",
    "to_outbound",
)
