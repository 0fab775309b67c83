# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for steam-exporter."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigurationError, NoTargetsConfigured
from .utils import parse_duration, parse_listen_address, split_host_port

DEFAULT_CONFIG_FILE = "steam-exporter.yml"
DEFAULT_LISTEN_ADDRESS = ":9791"
DEFAULT_DATA_TIMEOUT = 1.0

_FILE_KEYS = {"listenAddress", "dataTimeout", "servers"}
_SERVER_KEYS = {"address"}


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return parse_duration(value) if value is not None else default
    except ValueError:
        return default


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class ServerTarget:
    """One configured game server, addressed as `host:port`."""

    address: str


@dataclass
class ExporterSettings:
    """Exporter defaults."""

    config_file: str = DEFAULT_CONFIG_FILE
    verbose: bool = False
    listen_address: str = DEFAULT_LISTEN_ADDRESS
    data_timeout: float = DEFAULT_DATA_TIMEOUT
    servers: list[ServerTarget] = field(default_factory=list)

    @property
    def addresses(self) -> list[str]:
        return [server.address for server in self.servers]

    def apply_env(self) -> ExporterSettings:
        """Apply environment overrides (evaluated at call time)."""
        self.listen_address = _str_env("STEAM_EXPORTER_LISTEN_ADDRESS", self.listen_address)
        self.data_timeout = _float_env("STEAM_EXPORTER_DATA_TIMEOUT", self.data_timeout)
        return self

    def apply_mapping(self, data: Mapping[str, Any]) -> ExporterSettings:
        """Merge a decoded configuration file into these settings."""
        unknown = set(data) - _FILE_KEYS
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {', '.join(sorted(unknown))}")

        if "listenAddress" in data:
            self.listen_address = str(data["listenAddress"])
        if "dataTimeout" in data:
            try:
                self.data_timeout = parse_duration(data["dataTimeout"])
            except ValueError as exc:
                raise ConfigurationError(f"invalid dataTimeout: {exc}") from exc
        if "servers" in data:
            self.servers = _parse_servers(data["servers"])
        return self

    def validate(self) -> ExporterSettings:
        if not self.servers:
            raise NoTargetsConfigured()
        for server in self.servers:
            try:
                split_host_port(server.address)
            except ValueError as exc:
                raise ConfigurationError(f"invalid server address: {exc}") from exc
        if self.data_timeout <= 0:
            raise ConfigurationError(f"dataTimeout must be positive, got {self.data_timeout}")
        try:
            parse_listen_address(self.listen_address)
        except ValueError as exc:
            raise ConfigurationError(f"invalid listenAddress: {exc}") from exc
        return self


def _parse_servers(raw: Any) -> list[ServerTarget]:
    if not isinstance(raw, list):
        raise ConfigurationError("servers must be a list")
    servers: list[ServerTarget] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"server entry must be an object, got {entry!r}")
        unknown = set(entry) - _SERVER_KEYS
        if unknown:
            raise ConfigurationError(f"unknown server keys: {', '.join(sorted(unknown))}")
        address = str(entry.get("address") or "").strip()
        if not address:
            raise ConfigurationError("server entry without address")
        servers.append(ServerTarget(address=address))
    return servers


def read_config_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML configuration file. Unknown keys are rejected by apply_mapping."""
    try:
        with open(path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigurationError(f"can not open configuration file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"can not read configuration file: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError("configuration file must contain a mapping")
    return data


def load_settings(
    config_file: str | None = None,
    *,
    servers: Iterable[str] | None = None,
    listen_address: str | None = None,
    data_timeout: float | None = None,
    verbose: bool = False,
) -> ExporterSettings:
    """
    Build validated settings.

    Precedence (lowest first): defaults, configuration file, environment,
    explicit arguments. The configuration file may only be absent when it was
    not named explicitly and servers are supplied as arguments.
    """
    extra_servers = [ServerTarget(address=address) for address in servers or []]
    explicit_file = config_file or os.getenv("STEAM_EXPORTER_CONFIG_FILE")

    settings = ExporterSettings(config_file=explicit_file or DEFAULT_CONFIG_FILE, verbose=verbose)
    if explicit_file or not extra_servers or Path(settings.config_file).exists():
        settings.apply_mapping(read_config_file(settings.config_file))

    settings.apply_env()

    if extra_servers:
        settings.servers = [*settings.servers, *extra_servers]
    if listen_address is not None:
        settings.listen_address = listen_address
    if data_timeout is not None:
        settings.data_timeout = data_timeout

    return settings.validate()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_DATA_TIMEOUT",
    "DEFAULT_LISTEN_ADDRESS",
    "ExporterSettings",
    "ServerTarget",
    "load_settings",
    "read_config_file",
]
