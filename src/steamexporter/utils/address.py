# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""host:port helpers shared by configuration and the query client."""

from __future__ import annotations


def split_host_port(address: str) -> tuple[str, int]:
    """
    Split a `host:port` string.

    Bracketed IPv6 literals (`[::1]:27015`) are unwrapped. Raises ValueError
    when the port is missing or not in 1..65535.
    """
    raw = str(address or "").strip()
    host, sep, port_text = raw.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {raw!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"too many colons in address {raw!r}")
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port {port_text!r} in address {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"port out of range in address {raw!r}")
    return host, port


def parse_listen_address(address: str) -> tuple[str, int]:
    """Like split_host_port, but an empty host (`:9791`) means all interfaces."""
    host, port = split_host_port(address)
    return host or "0.0.0.0", port


__all__ = ["parse_listen_address", "split_host_port"]
