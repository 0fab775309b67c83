# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility exports."""

from .address import parse_listen_address, split_host_port
from .duration import parse_duration

__all__ = ["parse_duration", "parse_listen_address", "split_host_port"]
