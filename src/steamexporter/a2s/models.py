# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""A2S_INFO status and probe outcome models."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..errors import DownReason, down_reason_to_text


@dataclass(frozen=True)
class ServerStatus:
    """Decoded A2S_INFO response. `latency` is filled in by the query client."""

    protocol_version: int
    name: str
    map: str
    folder: str
    game: str
    app_id: int
    players: int
    max_players: int
    bots: int
    server_type: int
    environment: int
    visibility: int
    vac: int
    latency: float = 0.0

    def with_latency(self, latency: float) -> ServerStatus:
        return replace(self, latency=latency)


@dataclass
class ProbeOutcome:
    address: str
    ok: bool
    status: ServerStatus | None = None
    reason: DownReason | None = None
    error_message: str | None = None

    @classmethod
    def up(cls, address: str, status: ServerStatus) -> ProbeOutcome:
        return cls(address=address, ok=True, status=status)

    @classmethod
    def down(cls, address: str, reason: DownReason, error_message: str | None = None) -> ProbeOutcome:
        return cls(
            address=address,
            ok=False,
            reason=reason,
            error_message=error_message or down_reason_to_text(reason),
        )

    def to_dict(self) -> dict:
        data: dict = {"address": self.address, "up": self.ok}
        if self.status is not None:
            data["status"] = {
                "latency_seconds": self.status.latency,
                "protocol_version": self.status.protocol_version,
                "name": self.status.name,
                "map": self.status.map,
                "folder": self.status.folder,
                "game": self.status.game,
                "app_id": self.status.app_id,
                "players": self.status.players,
                "max_players": self.status.max_players,
                "bots": self.status.bots,
                "server_type": self.status.server_type,
                "environment": self.status.environment,
                "visibility": self.status.visibility,
                "vac": self.status.vac,
            }
        if self.reason is not None:
            data["reason"] = self.reason.value
            data["error_message"] = self.error_message
        return data
