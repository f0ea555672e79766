#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(kw_only=True, frozen=True)
class CredentialSet:
    """Container for AWS authentication credentials."""

    access_key_id: str
    """A unique identifier for an AWS user or role."""

    secret_access_key: str = field(repr=False)
    """A secret key used in conjunction with the access key ID to authenticate
    programmatic access to AWS services."""

    session_token: str | None = field(default=None, repr=False)
    """A temporary token used to specify the current session for the supplied
    credentials."""

    expiration: datetime | None = None
    """The expiration time of the credentials.

    If time zone is provided, it is updated to UTC. Naive values are assumed to
    already be in UTC. ``None`` means the credentials never expire.
    """

    @property
    def is_expired(self) -> bool:
        """Whether the credentials are expired."""
        if self.expiration is None:
            return False
        return datetime.now(tz=UTC) >= self.expiration

    def __post_init__(self) -> None:
        if self.expiration is not None:
            if self.expiration.tzinfo is None:
                expiration = self.expiration.replace(tzinfo=UTC)
            else:
                expiration = self.expiration.astimezone(UTC)
            object.__setattr__(self, "expiration", expiration)
