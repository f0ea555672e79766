#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
#  pyright: reportMissingTypeStubs=false,reportUnknownMemberType=false
import asyncio
import logging
from datetime import UTC, datetime
from io import BytesIO
from typing import Final

from awscrt import auth as crt_auth
from awscrt import http as crt_http
from awscrt.exceptions import AwsCrtError

from ._http import CanonicalRequest, Field, SignedRequest
from .exceptions import ClockError, CredentialError, SigningError
from .identity import CredentialSet

logger: Final = logging.getLogger(__name__)

SERVICE_NAME: Final = "es"

AUTHORIZATION_HEADER: Final = "Authorization"
DATE_HEADER: Final = "X-Amz-Date"
SECURITY_TOKEN_HEADER: Final = "X-Amz-Security-Token"
SIGNING_HEADERS: Final = (AUTHORIZATION_HEADER, DATE_HEADER, SECURITY_TOKEN_HEADER)

HEADERS_EXCLUDED_FROM_SIGNING: tuple[str, ...] = (
    "authorization",
    "expect",
    "user-agent",
    "x-amzn-trace-id",
)


class SigV4RequestSigner:
    """Sign requests using the AWS Signature Version 4 algorithm.

    The algorithm itself is provided by ``awscrt``. This class translates a
    :py:class:`CanonicalRequest` to and from the CRT request type and fixes the
    signing parameters for the search service.
    """

    ALGORITHM: crt_auth.AwsSigningAlgorithm = crt_auth.AwsSigningAlgorithm.V4
    SIGNATURE_TYPE: crt_auth.AwsSignatureType = (
        crt_auth.AwsSignatureType.HTTP_REQUEST_HEADERS
    )
    USE_DOUBLE_URI_ENCODE: bool = True
    SHOULD_NORMALIZE_URI_PATH: bool = True

    def __init__(self, *, region: str, service: str = SERVICE_NAME) -> None:
        """
        :param region: The region of the search domain, for example ``us-west-2``.
        :param service: The signing name of the target service.
        """
        if not region:
            raise ValueError("A signing region is required.")
        self.region = region
        self.service = service

    async def sign(
        self,
        request: CanonicalRequest,
        credentials: CredentialSet,
        *,
        date: datetime | None = None,
    ) -> SignedRequest:
        """Sign ``request`` and return a copy carrying the authentication headers.

        Signing the same request with the same credentials and date always
        produces the same ``Authorization`` value.

        :param request: The request to sign. It is not modified.
        :param credentials: The credentials to sign with.
        :param date: The signing time. Defaults to the current time.
        :raises CredentialError: If the credentials are incomplete or expired.
        :raises ClockError: If the current time can't be read.
        :raises SigningError: If the CRT signer fails.
        """
        self._validate_credentials(credentials)
        signing_date = date if date is not None else self._now()
        config = self._signing_config(credentials=credentials, date=signing_date)
        crt_request = self._crt_request_from_canonical_request(request)
        logger.debug(
            "Signing %s %s for %s.", request.method, request.uri.build(), self.region
        )

        try:
            await asyncio.wrap_future(crt_auth.aws_sign_request(crt_request, config))
        except AwsCrtError as e:
            raise SigningError(f"Failed to sign request: {e.name}") from e

        fields = request.fields.copy()
        for name in SIGNING_HEADERS:
            value = self._get_header(crt_request.headers, name)
            if value is not None:
                fields.set_field(Field(name=name, values=[value]))
            elif name in fields:
                # Drop stale values the signer did not produce this time.
                del fields[name]

        return SignedRequest(
            method=request.method,
            uri=request.uri,
            fields=fields,
            body=request.body,
        )

    def _validate_credentials(self, credentials: CredentialSet) -> None:
        if not credentials.access_key_id or not credentials.secret_access_key:
            raise CredentialError(
                "Both an access key ID and a secret access key are required to sign "
                "requests."
            )
        if credentials.is_expired:
            raise CredentialError(
                f"Provided credentials expired at {credentials.expiration}. Please "
                "refresh the credentials or update the expiration parameter."
            )

    def _now(self) -> datetime:
        try:
            return datetime.now(UTC)
        except (OSError, OverflowError, ValueError) as e:
            raise ClockError("Unable to read the system clock.") from e

    def _signing_config(
        self, *, credentials: CredentialSet, date: datetime
    ) -> crt_auth.AwsSigningConfig:
        provider = crt_auth.AwsCredentialsProvider.new_static(
            access_key_id=credentials.access_key_id,
            secret_access_key=credentials.secret_access_key,
            session_token=credentials.session_token,
        )
        return crt_auth.AwsSigningConfig(
            algorithm=self.ALGORITHM,
            signature_type=self.SIGNATURE_TYPE,
            credentials_provider=provider,
            region=self.region,
            service=self.service,
            date=date,
            should_sign_header=self._should_sign_header,
            use_double_uri_encode=self.USE_DOUBLE_URI_ENCODE,
            should_normalize_uri_path=self.SHOULD_NORMALIZE_URI_PATH,
        )

    def _crt_request_from_canonical_request(
        self, request: CanonicalRequest
    ) -> crt_http.HttpRequest:
        headers = crt_http.HttpHeaders(request.fields.as_tuples())
        for name in SIGNING_HEADERS:
            # The signer must not see authentication headers from a previous signing.
            if self._get_header(headers, name) is not None:
                headers.remove(name)
        body_stream = BytesIO(request.body) if request.body else None
        return crt_http.HttpRequest(
            method=request.method,
            path=request.uri.render_path(),
            headers=headers,
            body_stream=body_stream,
        )

    def _get_header(self, headers: crt_http.HttpHeaders, name: str) -> str | None:
        # Later values win, the CRT appends what it adds.
        found = None
        for key, value in headers:
            if key.lower() == name.lower():
                found = value
        return found

    def _should_sign_header(self, name: str) -> bool:
        return name.lower() not in HEADERS_EXCLUDED_FROM_SIGNING
