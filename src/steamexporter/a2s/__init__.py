# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""A2S_INFO protocol client exports."""

from .adapters import StubQueryClient
from .client import QueryClient, create_default_query_client
from .decoder import decode_info_response
from .models import ProbeOutcome, ServerStatus
from .protocol import MAX_PACKET_SIZE, MIN_RESPONSE_SIZE, QUERY_REQUEST, RESPONSE_HEADER
from .udp_client import UdpQueryClient

__all__ = [
    "MAX_PACKET_SIZE",
    "MIN_RESPONSE_SIZE",
    "ProbeOutcome",
    "QUERY_REQUEST",
    "QueryClient",
    "RESPONSE_HEADER",
    "ServerStatus",
    "StubQueryClient",
    "UdpQueryClient",
    "create_default_query_client",
    "decode_info_response",
]
