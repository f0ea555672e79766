#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import pytest
from aws_es_handler import OutboundRequest
from aws_es_handler.testing import MockTransportError, RecordingTransportHandler


def _request(path: str = "/") -> OutboundRequest:
    return OutboundRequest(
        method="GET",
        scheme="https",
        uri_path=path,
        headers={"Host": ["search.example.com"]},
    )


async def test_results_returned_in_order() -> None:
    transport = RecordingTransportHandler()
    transport.add_result("first")
    transport.add_result("second")

    assert await transport(_request("/a")) == "first"
    assert await transport(_request("/b")) == "second"
    assert transport.call_count == 2
    assert [r.uri_path for r in transport.captured_requests] == ["/a", "/b"]


async def test_queued_exceptions_raised() -> None:
    transport = RecordingTransportHandler()
    transport.add_result(TimeoutError("slow"))
    with pytest.raises(TimeoutError):
        await transport(_request())
    assert transport.call_count == 1


async def test_empty_queue() -> None:
    transport = RecordingTransportHandler()
    with pytest.raises(MockTransportError):
        await transport(_request())


async def test_captured_requests_are_copies() -> None:
    transport = RecordingTransportHandler()
    transport.add_result(None)
    request = _request()
    await transport(request)

    request.headers["Host"].append("other.example.com")
    assert transport.captured_requests[0].headers == {"Host": ["search.example.com"]}
