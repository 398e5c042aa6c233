from __future__ import annotations

"""
Export Result Data Models.

Defines the immutable result returned by the export service to the
interface layer, plus factories for the success and failure cases.
"""

from dataclasses import dataclass
from typing import Any, Dict

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ExportResult:
    """
    Outcome of a single export run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        exporter_key: Registry key of the exporter used.
        exporter_title: Human label of the exporter used.
        text: Exported report ('' on failure).
        total_size: Aggregated size of the exported tree in bytes.
        file_count: Number of leaf files in the exported tree.
        output_path: File the report was written to, if any.
    """
    ok: bool
    error: str
    exporter_key: str
    exporter_title: str = ""
    text: str = ""
    total_size: int = 0
    file_count: int = 0
    output_path: str = ""

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, cfg: Dict[str, Any], exporter_title: str = "") -> ExportResult:
    """Create a failed export result."""
    return ExportResult(
        ok=False,
        error=error,
        exporter_key=cfg.get("exporter", ""),
        exporter_title=exporter_title,
    )


def create_success_result(
        cfg: Dict[str, Any],
        exporter_title: str,
        text: str,
        total_size: int,
        file_count: int,
        output_path: str = "",
) -> ExportResult:
    """Create a successful export result."""
    return ExportResult(
        ok=True,
        error="",
        exporter_key=cfg.get("exporter", ""),
        exporter_title=exporter_title,
        text=text,
        total_size=total_size,
        file_count=file_count,
        output_path=output_path,
    )
