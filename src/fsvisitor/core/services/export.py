from __future__ import annotations

"""
Export Orchestration Service.

Runs one export: normalizes the configuration, creates the selected
exporter, visits the tree from its root and optionally persists the
report. Failures are reported through the result object instead of
exceptions so interfaces can render them uniformly.
"""

import logging
from typing import Any, Dict, Optional

from fsvisitor.core.exporters.registry import UnknownExporterError, create_exporter
from fsvisitor.core.services.validator import validate_config
from fsvisitor.domain.export_models import (
    ExportResult,
    create_error_result,
    create_success_result,
)
from fsvisitor.domain.file_models import Directory
from fsvisitor.infra.fs import normalize_path, write_text_output

logger = logging.getLogger(__name__)


def run_export(root: Directory, cfg: Optional[Dict[str, Any]] = None) -> ExportResult:
    """
    Export a directory tree with the exporter selected in the configuration.

    Args:
        root: Root directory of the tree to export.
        cfg: Raw configuration. Missing keys use defaults.

    Returns:
        ExportResult: Report text and metrics, or the error description.
    """
    clean_cfg, warnings = validate_config(cfg or {})
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    key = clean_cfg["exporter"]
    try:
        exporter = create_exporter(
            key,
            preview_length=clean_cfg["preview_length"],
            close_tags=clean_cfg["xml_close_tags"],
        )
    except UnknownExporterError as e:
        msg = e.args[0]
        logger.error(msg)
        return create_error_result(msg, clean_cfg)

    logger.info(f"Exporting '{root.title}' using: {exporter.title}")
    text = root.accept(exporter)
    file_count = sum(1 for _ in root.iter_files())
    total_size = root.get_size()
    logger.debug(f"Exported {file_count} files ({total_size} bytes) into {len(text)} characters")

    output_path = normalize_path(clean_cfg["output_path"])
    if output_path:
        ok, err = write_text_output(output_path, text)
        if not ok:
            msg = f"Failed to write report to '{output_path}': {err}"
            logger.error(msg)
            return create_error_result(msg, clean_cfg, exporter_title=exporter.title)
        logger.info(f"Report saved to {output_path}")

    return create_success_result(
        clean_cfg,
        exporter_title=exporter.title,
        text=text,
        total_size=total_size,
        file_count=file_count,
        output_path=output_path,
    )
