# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process QueryClient adapters."""

from __future__ import annotations

from ..errors import DownReason
from .client import QueryClient
from .models import ProbeOutcome


class StubQueryClient(QueryClient):
    """Deterministic, programmable QueryClient for tests and dry runs."""

    def __init__(self, outcomes: dict[str, ProbeOutcome] | None = None):
        self._outcomes = outcomes or {}
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def add(self, address: str, outcome: ProbeOutcome) -> None:
        self._outcomes[address] = outcome

    def probe(self, address: str, timeout: float) -> ProbeOutcome:
        self.calls.append((address, timeout))
        if address in self._outcomes:
            return self._outcomes[address]
        return ProbeOutcome.down(address, DownReason.TIMEOUT, "No stubbed outcome configured")

    def close(self) -> None:
        self.closed = True
