# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe orchestration and the Prometheus measurement sink."""

from .metrics import METRIC_DESCRIPTIONS, StatusCollector, build_registry
from .orchestrator import METRIC_NAMES, ProbeOrchestrator, status_measurements

__all__ = [
    "METRIC_DESCRIPTIONS",
    "METRIC_NAMES",
    "ProbeOrchestrator",
    "StatusCollector",
    "build_registry",
    "status_measurements",
]
