#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import pytest
from aws_es_handler import CredentialError, EnvironmentCredentialSource


async def test_no_values_set() -> None:
    with pytest.raises(CredentialError):
        await EnvironmentCredentialSource().resolve()


@pytest.mark.parametrize(
    "env",
    [
        {"AWS_ACCESS_KEY_ID": "akid"},
        {"AWS_SECRET_ACCESS_KEY": "secret"},
        {"AWS_ACCESS_KEY_ID": "", "AWS_SECRET_ACCESS_KEY": "secret"},
        {"AWS_ACCESS_KEY_ID": "akid", "AWS_SECRET_ACCESS_KEY": ""},
    ],
)
async def test_required_values_missing(
    monkeypatch: pytest.MonkeyPatch, env: dict[str, str]
) -> None:
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    with pytest.raises(CredentialError):
        await EnvironmentCredentialSource().resolve()


async def test_required_values_set(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "akid")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")

    credentials = await EnvironmentCredentialSource().resolve()

    assert credentials.access_key_id == "akid"
    assert credentials.secret_access_key == "secret"
    assert credentials.session_token is None
    assert credentials.expiration is None


@pytest.mark.parametrize("token, expected", [("session", "session"), ("", None)])
async def test_session_token(
    monkeypatch: pytest.MonkeyPatch, token: str, expected: str | None
) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "akid")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv("AWS_SESSION_TOKEN", token)

    credentials = await EnvironmentCredentialSource().resolve()

    assert credentials.session_token == expected


async def test_values_read_on_each_resolve(monkeypatch: pytest.MonkeyPatch) -> None:
    source = EnvironmentCredentialSource()
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "first")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    assert (await source.resolve()).access_key_id == "first"

    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "second")
    assert (await source.resolve()).access_key_id == "second"
