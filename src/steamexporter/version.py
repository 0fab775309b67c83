# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Version metadata for steam-exporter."""

import os

__version__ = "0.3.0"
__git_commit__ = os.getenv("STEAM_EXPORTER_GIT_COMMIT", "")
