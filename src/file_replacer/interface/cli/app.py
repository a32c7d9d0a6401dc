from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, merging of the
default configuration with command-line overrides, pre-flight validation of
both root paths, engine execution with a terminal progress bar, and result
rendering. Owns the mapping from run outcome to process exit code.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import List, Optional

from file_replacer.core.engine import run_sync
from file_replacer.core.validator import validate_config
from file_replacer.domain.config import get_default_config, merge_config
from file_replacer.domain.models import SyncResult
from file_replacer.infra.fs import normalize_path
from file_replacer.infra.logging import LoggingConfig, configure_logging, get_logger
from file_replacer.interface.cli import args as cli_args
from file_replacer.interface.cli.progress import TqdmProgressSink

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_PATH = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    if args.debug:
        log_level = "DEBUG"
    elif args.verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge command-line overrides into defaults
    overrides = cli_args.args_to_overrides(args)
    raw_conf = merge_config(get_default_config(), overrides)

    # 4. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Pre-flight root verification
    for label, key in (("Source", "source_path"), ("Destination", "destination_path")):
        path = normalize_path(clean_conf[key])
        if not os.path.exists(path):
            msg = f"{label} path does not exist: {path}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return EXIT_INVALID_PATH

    # 6. Engine execution phase
    sink = TqdmProgressSink(disable=args.no_progress or args.json_output)
    try:
        result = run_sync(clean_conf, sink=sink)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return exit_code_for(result)


def exit_code_for(result: SyncResult) -> int:
    """
    Map a run result to a process exit code.

    Args:
        result: The engine result.

    Returns:
        int: 0 on success, 2 for a missing root, 1 for any other failure.
    """
    if result.ok:
        return EXIT_OK
    if result.error_kind == "not_found":
        return EXIT_INVALID_PATH
    return EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: SyncResult) -> None:
    """
    Format and print the run result.

    Args:
        result: The engine result to render.
    """
    if not result.ok and not result.failures:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Source: {result.source_path} ({result.source_files} files)")
    print(f"Destination: {result.destination_path} ({result.destination_files} files)")

    stats = {
        "Files replaced": result.copied,
        "Files without match": result.unmatched,
        "Files skipped": result.skipped,
        "Failures": len(result.failures),
    }
    for label, value in stats.items():
        print(f"{label}: {value}")

    if result.failures:
        print(f"\nERROR: {result.error}", file=sys.stderr)
        for failure in result.failures:
            print(f"  - {failure.destination}: {failure.error}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
