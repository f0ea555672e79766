#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from concurrent.futures import Future
from datetime import UTC, datetime
from unittest.mock import Mock, patch

import pytest
from aws_es_handler import CredentialError, CrtCredentialSource
from awscrt.exceptions import AwsCrtError


def _provider(result: object) -> Mock:
    future: Future[object] = Future()
    if isinstance(result, BaseException):
        future.set_exception(result)
    else:
        future.set_result(result)
    provider = Mock()
    provider.get_credentials.return_value = future
    return provider


async def test_resolves_crt_credentials() -> None:
    expiration = datetime(2026, 10, 19, 13, 0, tzinfo=UTC)
    crt_credentials = Mock(
        access_key_id="akid",
        secret_access_key="secret",
        session_token="token",
        expiration=expiration,
    )
    credentials = await CrtCredentialSource(_provider(crt_credentials)).resolve()

    assert credentials.access_key_id == "akid"
    assert credentials.secret_access_key == "secret"
    assert credentials.session_token == "token"
    assert credentials.expiration == expiration


async def test_empty_session_token_is_none() -> None:
    crt_credentials = Mock(
        access_key_id="akid",
        secret_access_key="secret",
        session_token=None,
        expiration=None,
    )
    credentials = await CrtCredentialSource(_provider(crt_credentials)).resolve()
    assert credentials.session_token is None
    assert credentials.expiration is None


async def test_crt_errors_become_credential_errors() -> None:
    error = AwsCrtError(
        code=1, name="AWS_AUTH_CREDENTIALS_PROVIDER_CHAIN_SOURCE_FAILURE", message=""
    )
    source = CrtCredentialSource(_provider(error))
    with pytest.raises(CredentialError, match="CHAIN_SOURCE_FAILURE"):
        await source.resolve()


def test_default_chain_built_lazily() -> None:
    with patch(
        "aws_es_handler.credentials.crt.crt_auth.AwsCredentialsProvider"
    ) as provider_cls:
        source = CrtCredentialSource()
        provider_cls.new_default_chain.assert_not_called()

        assert source.provider is provider_cls.new_default_chain.return_value
        assert source.provider is provider_cls.new_default_chain.return_value
        provider_cls.new_default_chain.assert_called_once_with()
