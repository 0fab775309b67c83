# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level steam-exporter facade wiring client, orchestrator and registry."""

from __future__ import annotations

import logging
from contextlib import suppress

from .a2s.client import QueryClient, create_default_query_client
from .a2s.models import ProbeOutcome
from .collector.metrics import StatusCollector, build_registry
from .collector.orchestrator import Emit, ProbeOrchestrator
from .config import ExporterSettings
from .version import __git_commit__, __version__
from .web.app import WSGIApp, create_app, serve


def _discard(name: str, tags: dict[str, str], value: float) -> None:  # noqa: ARG001
    return None


class SteamExporter:
    """
    Convenience wrapper that shares one query client across scrapes.

    Construction validates the target list (via ProbeOrchestrator) before any
    socket is opened.
    """

    def __init__(
        self,
        settings: ExporterSettings,
        query_client: QueryClient | None = None,
        logger: logging.Logger | None = None,
    ):
        self.settings = settings
        self.log = logger or logging.getLogger("steamexporter")
        self.orchestrator = ProbeOrchestrator(
            query_client or create_default_query_client(),
            settings.servers,
            settings.data_timeout,
            logger=self.log,
        )
        self.query_client = self.orchestrator.client
        self.collector = StatusCollector(self.orchestrator)
        self.registry = build_registry(self.collector)

    def probe_once(self, emit: Emit | None = None) -> list[ProbeOutcome]:
        """Run a single pass outside of a scrape."""
        return self.orchestrator.run(emit or _discard)

    def create_app(self) -> WSGIApp:
        return create_app(self.registry, version=__version__, commit=__git_commit__)

    def serve(self) -> None:
        serve(self.create_app(), self.settings.listen_address)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.query_client, "close"):
                self.query_client.close()

    def __enter__(self) -> SteamExporter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
