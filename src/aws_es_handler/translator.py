#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping
from typing import Any

from ._http import SignedRequest
from .records import OutboundRequest


def to_outbound(
    signed: SignedRequest,
    *,
    options: Mapping[str, Any] | None = None,
    null_empty_body: bool = True,
) -> OutboundRequest:
    """Convert a signed request into the record a transport handler consumes.

    :param signed: The request returned by the signer.
    :param options: Transport-specific settings to carry through unchanged.
    :param null_empty_body: Emit ``None`` instead of ``b""`` for an empty body.
        Transports built on the legacy search clients only omit the payload when
        the body is ``None``.
    """
    body: bytes | None = signed.body
    if null_empty_body and not body:
        body = None

    return OutboundRequest(
        method=signed.method,
        scheme=signed.uri.scheme,
        uri_path=signed.uri.path,
        headers=signed.fields.as_mapping(),
        query_string=signed.uri.query or None,
        body=body,
        options=dict(options or {}),
    )
