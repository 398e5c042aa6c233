from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the file model, the unit
converter and the exporters.
"""

from typing import Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# Ordered from smallest to largest; the converter never indexes past the end
SIZE_UNITS: Tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")
SIZE_STEP: int = 1024

# Text preview used by both exporters
DEFAULT_PREVIEW_LENGTH: int = 30
PREVIEW_ELLIPSIS: str = "..."

# -----------------------------------------------------------------------------
# EXPORTER KEYS
# -----------------------------------------------------------------------------
EXPORTER_HUMAN = "human"
EXPORTER_XML = "xml"
DEFAULT_EXPORTER_KEY = EXPORTER_HUMAN
