#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0


class AwsEsHandlerError(Exception):
    """Base exception type for all exceptions raised by aws-es-handler."""


class MalformedRequestError(AwsEsHandlerError, ValueError):
    """The inbound request could not be turned into a signable request.

    This indicates a defect in the caller and is never retried.
    """


class CredentialError(AwsEsHandlerError):
    """Credential material was missing, invalid, or could not be resolved."""


class ClockError(AwsEsHandlerError):
    """The system clock could not provide a usable signing date."""


class SigningError(AwsEsHandlerError):
    """The SigV4 signer failed for a reason other than the credentials."""


class UnsupportedClientVersionError(AwsEsHandlerError):
    """An installed search client has a major version this package cannot drive."""


class MissingDependencyError(AwsEsHandlerError):
    """Exception type raised when a feature that requires a missing optional dependency
    is called."""
