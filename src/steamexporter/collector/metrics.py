# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Prometheus sink for orchestrator measurements."""

from __future__ import annotations

import threading
from collections.abc import Iterator

from prometheus_client import CollectorRegistry
from prometheus_client.core import GaugeMetricFamily

from .orchestrator import (
    METRIC_BOTS,
    METRIC_MAX_PLAYERS,
    METRIC_PLAYERS,
    METRIC_RESPONSE_TIME,
    METRIC_SERVER_UP,
    ProbeOrchestrator,
)

LABELS = ["address"]

# measurement name -> (exposed metric name, help text)
METRIC_DESCRIPTIONS: dict[str, tuple[str, str]] = {
    METRIC_SERVER_UP: ("steam_server_up", "Set to 1 if the server is reachable."),
    METRIC_RESPONSE_TIME: (
        "steam_server_response_time_seconds",
        "Shows the response time of the server in seconds.",
    ),
    METRIC_PLAYERS: ("steam_server_players_total", "Shows current number of players on the server."),
    METRIC_MAX_PLAYERS: ("steam_server_max_players_total", "Shows maximum number of players on the server."),
    METRIC_BOTS: ("steam_server_bots_total", "Shows current number of bots on the server."),
}


def _empty_families() -> dict[str, GaugeMetricFamily]:
    return {
        name: GaugeMetricFamily(metric_name, documentation, labels=LABELS)
        for name, (metric_name, documentation) in METRIC_DESCRIPTIONS.items()
    }


class StatusCollector:
    """
    Custom collector that runs one probing pass per scrape.

    Scrapes are serialized; the orchestrator must not run concurrently with itself.
    """

    def __init__(self, orchestrator: ProbeOrchestrator):
        self.orchestrator = orchestrator
        self._lock = threading.Lock()

    def describe(self) -> list[GaugeMetricFamily]:
        return list(_empty_families().values())

    def collect(self) -> Iterator[GaugeMetricFamily]:
        families = _empty_families()

        def emit(name: str, tags: dict[str, str], value: float) -> None:
            families[name].add_metric([tags["address"]], value)

        with self._lock:
            self.orchestrator.run(emit)

        yield from families.values()


def build_registry(collector: StatusCollector) -> CollectorRegistry:
    """Create a dedicated registry holding only the status collector."""
    registry = CollectorRegistry()
    registry.register(collector)
    return registry


__all__ = ["LABELS", "METRIC_DESCRIPTIONS", "StatusCollector", "build_registry"]
