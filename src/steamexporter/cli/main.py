# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""steam-exporter CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from ..config import DEFAULT_CONFIG_FILE, ExporterSettings, load_settings
from ..errors import ConfigurationError
from ..log import setup_logging
from ..runtime import SteamExporter
from ..utils import parse_duration

logger = logging.getLogger("steamexporter")

EXIT_CONFIG_ERROR = 2


def _duration_arg(value: str) -> float:
    try:
        seconds = parse_duration(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if seconds <= 0:
        raise argparse.ArgumentTypeError("timeout must be positive")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steam-exporter",
        description="Prometheus exporter for Source engine game servers (A2S_INFO)",
    )
    parser.add_argument(
        "-c",
        "--config-file",
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILE}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debugging output.")
    parser.add_argument("--listen-address", default=None, help="Address to serve metrics on (default: :9791).")
    parser.add_argument(
        "--timeout",
        type=_duration_arg,
        default=None,
        help="Per-server response timeout, e.g. 1s or 500ms.",
    )
    parser.add_argument(
        "--server",
        dest="servers",
        action="append",
        default=[],
        metavar="HOST:PORT",
        help="Server to probe; may be repeated and is added to the configured servers.",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Probe all servers once, print the results and exit instead of serving.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --once, output JSON instead of a human-friendly summary",
    )
    return parser


def _print_json(outcomes: list[Any]) -> None:
    payload = [outcome.to_dict() if hasattr(outcome, "to_dict") else outcome for outcome in outcomes]
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(outcomes: list[Any]) -> None:
    for outcome in outcomes:
        if not outcome.ok or outcome.status is None:
            print(f"{outcome.address}: DOWN ({outcome.error_message})")
            continue
        status = outcome.status
        print(
            f"{outcome.address}: UP {status.latency * 1000:.1f}ms "
            f"{status.name!r} map={status.map} "
            f"players={status.players}/{status.max_players} bots={status.bots}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        settings: ExporterSettings = load_settings(
            args.config_file,
            servers=args.servers,
            listen_address=args.listen_address,
            data_timeout=args.timeout,
            verbose=args.verbose,
        )
        exporter = SteamExporter(settings)
    except ConfigurationError as exc:
        logger.error("Error reading configuration: %s", exc)
        return EXIT_CONFIG_ERROR

    with exporter:
        if args.once:
            outcomes = exporter.probe_once()
            if args.json:
                _print_json(outcomes)
            else:
                _pretty_print(outcomes)
            return 0

        try:
            exporter.serve()
        except KeyboardInterrupt:
            logger.info("Shutting down")
        except OSError as exc:
            logger.error("Error creating listener: %s", exc)
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
