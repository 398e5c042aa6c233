from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, merges configuration sources (defaults, persisted
file, CLI overrides), exports the sample library and renders the result.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fsvisitor.core.exporters.registry import available_exporters
from fsvisitor.core.services.catalog import build_sample_tree
from fsvisitor.core.services.export import run_export
from fsvisitor.core.services.validator import validate_config
from fsvisitor.domain.config import get_default_config, load_config
from fsvisitor.domain.export_models import ExportResult
from fsvisitor.infra.fs import normalize_path
from fsvisitor.infra.logging import LoggingConfig, configure_logging, get_logger
from fsvisitor.interface.cli import args as cli_args
from fsvisitor.utils.units import bytes_to_string

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 export failure, 2 bad input).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    try:
        clean_conf, warnings = validate_config(raw_conf, strict=True)
    except (TypeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    configure_logging(
        LoggingConfig(
            level=clean_conf["log_level"],
            console=True,
            log_file=normalize_path(clean_conf["log_file"]) or None,
        )
    )
    logger.debug("CLI execution initiated.")
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.list_exporters:
        for key, title in available_exporters().items():
            print(f"{key}: {title}")
        return 0

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    try:
        result = run_export(build_sample_tree(), clean_conf)
    except KeyboardInterrupt:
        logger.warning("Export interrupted by user.")
        return 130

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, show_summary=args.summary)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for known keys into the base config."""
    out = dict(base)
    for k in get_default_config():
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: ExportResult, show_summary: bool = False) -> None:
    """Print the report (or where it was saved) followed by optional metrics."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.output_path:
        print(f"Report saved to: {result.output_path}")
    else:
        sys.stdout.write(result.text)

    if show_summary:
        print(f"Exporter: {result.exporter_title}")
        print(f"Files exported: {result.file_count}")
        print(f"Total size: {bytes_to_string(result.total_size)}")


if __name__ == "__main__":
    sys.exit(main())
