# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sequential probing pass over all configured servers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..a2s.client import QueryClient
from ..a2s.models import ProbeOutcome, ServerStatus
from ..config import ServerTarget
from ..errors import NoTargetsConfigured, categorize_exception

METRIC_SERVER_UP = "serverUp"
METRIC_RESPONSE_TIME = "serverResponseTimeSeconds"
METRIC_PLAYERS = "playersTotal"
METRIC_MAX_PLAYERS = "maxPlayersTotal"
METRIC_BOTS = "botsTotal"

METRIC_NAMES = (
    METRIC_SERVER_UP,
    METRIC_RESPONSE_TIME,
    METRIC_PLAYERS,
    METRIC_MAX_PLAYERS,
    METRIC_BOTS,
)

Emit = Callable[[str, dict[str, str], float], None]


def status_measurements(status: ServerStatus) -> list[tuple[str, float]]:
    """Measurements emitted for a reachable server, in emission order."""
    return [
        (METRIC_SERVER_UP, 1.0),
        (METRIC_RESPONSE_TIME, float(status.latency)),
        (METRIC_PLAYERS, float(status.players)),
        (METRIC_MAX_PLAYERS, float(status.max_players)),
        (METRIC_BOTS, float(status.bots)),
    ]


class ProbeOrchestrator:
    """
    Probes every target in configured order and emits its measurements.

    A down target yields a single `serverUp = 0`; a reachable one yields the
    five measurements from `status_measurements`. Failures never stop the pass.
    """

    def __init__(
        self,
        client: QueryClient,
        targets: Iterable[str | ServerTarget],
        timeout: float,
        logger: logging.Logger | None = None,
    ):
        addresses = tuple(getattr(target, "address", target) for target in targets)
        if not addresses:
            raise NoTargetsConfigured()
        self.client = client
        self.targets = addresses
        self.timeout = timeout
        self.log = logger or logging.getLogger(__name__)

    def _probe(self, address: str) -> ProbeOutcome:
        try:
            return self.client.probe(address, self.timeout)
        except Exception as exc:  # noqa: BLE001
            return ProbeOutcome.down(address, categorize_exception(exc), str(exc))

    def run(self, emit: Emit) -> list[ProbeOutcome]:
        outcomes: list[ProbeOutcome] = []
        for address in self.targets:
            outcome = self._probe(address)
            outcomes.append(outcome)

            if not outcome.ok or outcome.status is None:
                self.log.error("Can not ping %r: %s", address, outcome.error_message)
                emit(METRIC_SERVER_UP, {"address": address}, 0.0)
                continue

            self.log.debug("Data for %r: %r", address, outcome.status)
            for name, value in status_measurements(outcome.status):
                emit(name, {"address": address}, value)
        return outcomes


__all__ = [
    "METRIC_BOTS",
    "METRIC_MAX_PLAYERS",
    "METRIC_NAMES",
    "METRIC_PLAYERS",
    "METRIC_RESPONSE_TIME",
    "METRIC_SERVER_UP",
    "Emit",
    "ProbeOrchestrator",
    "status_measurements",
]
