# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Query client abstraction and factory."""

from typing import Protocol

from .models import ProbeOutcome


class QueryClient(Protocol):
    """Minimal protocol for probing one game server."""

    def probe(self, address: str, timeout: float) -> ProbeOutcome: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_query_client() -> QueryClient:
    """Factory for the default UDP socket client."""
    from .udp_client import UdpQueryClient

    return UdpQueryClient()
