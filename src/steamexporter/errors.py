# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
from enum import Enum


class DownReason(str, Enum):
    RESOLVE_ERROR = "resolve_error"
    SOCKET_ERROR = "socket_error"
    WRITE_ERROR = "write_error"
    READ_ERROR = "read_error"
    TIMEOUT = "timeout"
    RESPONSE_TOO_SHORT = "response_too_short"
    WRONG_HEADER = "wrong_header"
    FIELD_TRUNCATED = "field_truncated"


class ConfigurationError(Exception):
    """Raised when the exporter configuration is unusable."""


class NoTargetsConfigured(ConfigurationError):
    def __init__(self, message: str = "no servers configured"):
        super().__init__(message)


class DecodeError(Exception):
    """Base class for malformed A2S_INFO responses."""

    reason: DownReason = DownReason.FIELD_TRUNCATED


class ResponseTooShort(DecodeError):
    reason = DownReason.RESPONSE_TOO_SHORT

    def __init__(self, length: int, minimum: int):
        super().__init__(f"response too short {length} < {minimum} byte")
        self.length = length
        self.minimum = minimum


class WrongHeader(DecodeError):
    reason = DownReason.WRONG_HEADER

    def __init__(self, header: bytes):
        super().__init__(f"incorrect response header {header.hex()}")
        self.header = header


class FieldTruncated(DecodeError):
    reason = DownReason.FIELD_TRUNCATED

    def __init__(self, field: str):
        super().__init__(f"can not read {field}: unexpected end of response")
        self.field = field


def categorize_exception(exc: Exception) -> DownReason:
    """
    Map socket-layer exceptions to DownReason.

    Used when the failing step does not already determine the reason.
    """
    if isinstance(exc, DecodeError):
        return exc.reason

    if isinstance(exc, (TimeoutError, socket.timeout)):
        return DownReason.TIMEOUT

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return DownReason.RESOLVE_ERROR

    if isinstance(exc, ConnectionError):
        return DownReason.READ_ERROR

    return DownReason.SOCKET_ERROR


def down_reason_to_text(reason: DownReason | None) -> str:
    """Human-readable reason string for logs and CLI output."""
    mapping = {
        DownReason.RESOLVE_ERROR: "can not resolve address",
        DownReason.SOCKET_ERROR: "can not create UDP socket",
        DownReason.WRITE_ERROR: "can not write datagram",
        DownReason.READ_ERROR: "error reading from socket",
        DownReason.TIMEOUT: "server timed out",
        DownReason.RESPONSE_TOO_SHORT: "response too short",
        DownReason.WRONG_HEADER: "incorrect response header",
        DownReason.FIELD_TRUNCATED: "truncated response field",
        None: "",
    }
    return mapping.get(reason, "probe failed")
