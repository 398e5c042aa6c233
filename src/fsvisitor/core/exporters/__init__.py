from __future__ import annotations

from .base import BaseExporter
from .human import HumanReadableExporter
from .registry import (
    UnknownExporterError,
    available_exporters,
    create_exporter,
    exporter_keys,
)
from .xml import XmlExporter

__all__ = [
    "BaseExporter",
    "HumanReadableExporter",
    "XmlExporter",
    "UnknownExporterError",
    "available_exporters",
    "create_exporter",
    "exporter_keys",
]
