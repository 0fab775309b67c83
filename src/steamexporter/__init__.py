# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
steam-exporter package entrypoint.

This package probes Source engine game servers with the A2S_INFO UDP query
and exposes reachability, latency and player counts as Prometheus gauges.
The UDP transport is abstracted behind an injectable QueryClient interface,
and wire records are modeled with typed dataclasses.
"""

from .a2s import (
    ProbeOutcome,
    QueryClient,
    ServerStatus,
    StubQueryClient,
    UdpQueryClient,
    create_default_query_client,
    decode_info_response,
)
from .collector import ProbeOrchestrator, StatusCollector, build_registry
from .config import ExporterSettings, ServerTarget, load_settings
from .errors import (
    ConfigurationError,
    DecodeError,
    DownReason,
    FieldTruncated,
    NoTargetsConfigured,
    ResponseTooShort,
    WrongHeader,
)
from .log import setup_logging
from .runtime import SteamExporter
from .version import __version__

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DownReason",
    "ExporterSettings",
    "FieldTruncated",
    "NoTargetsConfigured",
    "ProbeOrchestrator",
    "ProbeOutcome",
    "QueryClient",
    "ResponseTooShort",
    "ServerStatus",
    "ServerTarget",
    "StatusCollector",
    "SteamExporter",
    "StubQueryClient",
    "UdpQueryClient",
    "WrongHeader",
    "build_registry",
    "create_default_query_client",
    "decode_info_response",
    "load_settings",
    "setup_logging",
    "__version__",
]
