# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP exports."""

from .app import create_app, serve

__all__ = ["create_app", "serve"]
