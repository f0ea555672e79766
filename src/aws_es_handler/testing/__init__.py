#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

"""Shared utilities for testing code that uses aws-es-handler."""

from .recording import MockTransportError, RecordingTransportHandler

__all__ = (
    "MockTransportError",
    "RecordingTransportHandler",
)
