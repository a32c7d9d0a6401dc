from __future__ import annotations

"""
Core orchestration engine.

Coordinates a complete replacement run:
1. Validates the session configuration.
2. Normalizes and verifies both root paths.
3. Walks the source and destination trees.
4. Runs one matching pass over the two file lists.
5. Folds the report, or the first fatal error, into a SyncResult.
"""

import logging
import os
from typing import Any, Dict, Optional

from file_replacer.core.progress import ProgressSink
from file_replacer.core.services.matcher import synchronize
from file_replacer.core.services.walker import walk
from file_replacer.core.validator import validate_config
from file_replacer.domain.config import to_match_config, to_traversal_config
from file_replacer.domain.errors import ReplacerError, RootNotFoundError
from file_replacer.domain.models import SyncResult
from file_replacer.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_sync(
        config: Optional[Dict[str, Any]],
        *,
        sink: Optional[ProgressSink] = None,
) -> SyncResult:
    """
    Execute a full replacement run.

    Args:
        config: The configuration dictionary (raw or partial).
        sink: Progress receiver for the matching pass.

    Returns:
        SyncResult: Object containing status, counters and failures.
    """
    logger.info("Replacement run started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    source_path = normalize_path(cfg["source_path"])
    destination_path = normalize_path(cfg["destination_path"])

    traversal = to_traversal_config(cfg)
    matching = to_match_config(cfg)

    try:
        # ---------------------------------------------------------------------
        # 2) Root Verification
        # ---------------------------------------------------------------------
        for root in (source_path, destination_path):
            if not root or not os.path.exists(root):
                raise RootNotFoundError(root)

        # ---------------------------------------------------------------------
        # 3) Traversal
        # ---------------------------------------------------------------------
        source_files = walk(source_path, traversal)
        logger.info(f"Source: {len(source_files)} files under '{source_path}'")

        dest_files = walk(destination_path, traversal)
        logger.info(f"Destination: {len(dest_files)} files under '{destination_path}'")

        # ---------------------------------------------------------------------
        # 4) Matching & Replacement
        # ---------------------------------------------------------------------
        report = synchronize(
            source_files,
            dest_files,
            matching,
            sink,
            continue_on_error=cfg["continue_on_error"],
        )

    except ReplacerError as e:
        logger.error(f"Replacement run aborted: {e}")
        return SyncResult(
            ok=False,
            error=str(e),
            error_kind=e.kind,
            source_path=source_path,
            destination_path=destination_path,
        )

    # -------------------------------------------------------------------------
    # 5) Result Assembly
    # -------------------------------------------------------------------------
    error = ""
    if report.failures:
        error = f"{len(report.failures)} file(s) could not be replaced."

    logger.info("Replacement run finished.")

    return SyncResult(
        ok=report.ok,
        error=error,
        error_kind="copy" if report.failures else "",
        source_path=source_path,
        destination_path=destination_path,
        source_files=len(source_files),
        destination_files=len(dest_files),
        copied=len(report.copied),
        unmatched=len(report.unmatched),
        skipped=len(report.skipped),
        failures=list(report.failures),
    )
