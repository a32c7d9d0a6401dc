from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages, argument
types and defaults. Provides logic to translate raw argparse namespaces into
session configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from file_replacer.domain.models import DEFAULT_MAX_DEPTH

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the file-replacer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="file-replacer",
        description=(
            "Overwrite files in DESTINATION with the content of same-named "
            "files found in SOURCE, keeping the destination layout intact."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "source_path",
        metavar="SOURCE",
        help="File or directory providing the new content.",
    )
    p.add_argument(
        "destination_path",
        metavar="DESTINATION",
        help="File or directory whose matching files are overwritten.",
    )

    # --- Traversal ---
    p.add_argument(
        "-d", "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help=f"Maximum directory depth to descend (default: {DEFAULT_MAX_DEPTH}).",
    )
    p.add_argument(
        "-a", "--hidden",
        dest="include_hidden",
        action="store_true",
        help="Descend into hidden directories.",
    )
    p.add_argument(
        "-e", "--exclude",
        dest="exclude_paths",
        action="append",
        default=None,
        metavar="PATH",
        help="Path to skip during traversal. Repeatable; accepts comma-separated values.",
    )

    # --- Matching ---
    p.add_argument(
        "-c", "--case-sensitive",
        dest="case_sensitive",
        action="store_true",
        help="Match file names case-sensitively.",
    )

    # --- Failure Policy ---
    p.add_argument(
        "-k", "--keep-going",
        dest="continue_on_error",
        action="store_true",
        help="Continue after a failed copy and report all failures at the end.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log run progress at INFO level.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["source_path"] = args.source_path
    overrides["destination_path"] = args.destination_path
    overrides["max_depth"] = args.max_depth

    if args.include_hidden:
        overrides["include_hidden"] = True
    if args.case_sensitive:
        overrides["case_sensitive"] = True
    if args.continue_on_error:
        overrides["continue_on_error"] = True

    if args.exclude_paths:
        excluded: List[str] = []
        for value in args.exclude_paths:
            excluded.extend(_split_csv(value) or [])
        overrides["exclude_paths"] = excluded

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
