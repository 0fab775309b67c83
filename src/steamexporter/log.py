# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for steam-exporter."""

from __future__ import annotations

import logging
import os


def default_log_level() -> str:
    return os.getenv("STEAM_EXPORTER_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str | None = None, *, verbose: bool = False) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = "DEBUG" if verbose else (level or default_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["default_log_level", "setup_logging"]
