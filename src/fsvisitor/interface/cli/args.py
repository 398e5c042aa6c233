from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace
into configuration overrides understood by the export service.
"""

import argparse
from typing import Any, Dict

from fsvisitor.core.exporters.registry import exporter_keys
from fsvisitor.infra.logging import get_default_log_path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fsvisitor CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fsvisitor",
        description="Export the sample file library as human-readable or XML-like text.",
    )

    # --- Export Format ---
    p.add_argument(
        "-f", "--format",
        dest="exporter",
        choices=exporter_keys(),
        default=None,
        help="Exporter to use (defaults to the configured one).",
    )
    p.add_argument(
        "--close-tags",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Close XML leaf blocks with '</type>' instead of repeating '<type>' "
             "(--no-close-tags overrides a persisted setting).",
    )
    p.add_argument(
        "--preview-length",
        dest="preview_length",
        type=int,
        default=None,
        help="Characters of text content shown before truncation.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full export result as JSON.",
    )
    p.add_argument(
        "--summary",
        action="store_true",
        help="Print file count and total size after the report.",
    )

    # --- Discovery and Diagnostics ---
    p.add_argument(
        "--list-exporters",
        action="store_true",
        help="List available exporters and exit.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=True,
        default=None,
        metavar="PATH",
        help="Also write logs to PATH (or to the user data directory when no PATH is given).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides; None values mean 'keep the base value'.
    """
    overrides: Dict[str, Any] = {
        "exporter": args.exporter,
        "preview_length": args.preview_length,
        "output_path": args.output_path,
    }

    if args.close_tags is not None:
        overrides["xml_close_tags"] = args.close_tags
    if args.log_file is True:
        overrides["log_file"] = get_default_log_path()
    elif args.log_file:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
