#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import pytest
from aws_es_handler import CredentialSet, InboundRequest


@pytest.fixture(autouse=True)
def clear_credential_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def credentials() -> CredentialSet:
    return CredentialSet(access_key_id="foo", secret_access_key="bar", session_token="baz")


@pytest.fixture
def inbound_request() -> InboundRequest:
    return InboundRequest(
        method="GET",
        scheme="https",
        uri_path="/index/_doc/1",
        headers={"host": ["search.example.com"]},
    )
