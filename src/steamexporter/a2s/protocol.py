# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire constants for the A2S_INFO query."""

PACKET_PREFIX = b"\xff\xff\xff\xff"

# 0x54 ("T") is the A2S_INFO request type, followed by the query string.
QUERY_REQUEST = PACKET_PREFIX + b"TSource Engine Query\x00"

# 0x49 ("I") marks an info response; split packets (0xFE prefix) are not supported.
INFO_RESPONSE_TYPE = 0x49
RESPONSE_HEADER = PACKET_PREFIX + bytes([INFO_RESPONSE_TYPE])

# header + protocol byte + four empty strings + app id + seven single-byte fields
MIN_RESPONSE_SIZE = 19
MAX_PACKET_SIZE = 1400

__all__ = [
    "INFO_RESPONSE_TYPE",
    "MAX_PACKET_SIZE",
    "MIN_RESPONSE_SIZE",
    "PACKET_PREFIX",
    "QUERY_REQUEST",
    "RESPONSE_HEADER",
]
