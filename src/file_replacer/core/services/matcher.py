from __future__ import annotations

"""
Name Matching and Content Replacement Service.

Pairs every destination file with a source file sharing its base name and
overwrites the destination content with the source content. Source files
are indexed by (case-normalized) base name before the destination pass;
when several sources share a name, the last one in walk order wins.
"""

import logging
import os
import shutil
import string
from typing import Dict, List, Optional

from file_replacer.core.progress import NullProgressSink, ProgressSink
from file_replacer.domain.errors import CopyError
from file_replacer.domain.models import (
    CopyFailure,
    CopyOutcome,
    FileList,
    MatchConfig,
    SyncReport,
)
from file_replacer.infra.fs import replace_file_contents

logger = logging.getLogger(__name__)

# Folds A-Z only; every other character is compared as-is
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


# ==============================================================================
# NAME COMPARISON
# ==============================================================================

def normalize_name(name: str, case_sensitive: bool) -> str:
    """
    Produce the comparison key of a base name under the configured case policy.

    Args:
        name: File base name.
        case_sensitive: If False, ASCII letters are folded to lower case.

    Returns:
        str: Comparison key.
    """
    if case_sensitive:
        return name
    return name.translate(_ASCII_FOLD)


def build_source_index(source_files: FileList, config: MatchConfig) -> Dict[str, List[str]]:
    """
    Index source files by base name.

    Each key keeps every matching source in walk order; the last entry is
    the one whose content ends up in the destination.

    Args:
        source_files: Source paths in walk order.
        config: Matching parameters.

    Returns:
        Dict[str, List[str]]: Comparison key -> source paths in walk order.
    """
    index: Dict[str, List[str]] = {}
    for src in source_files:
        key = normalize_name(os.path.basename(src), config.case_sensitive)
        candidates = index.setdefault(key, [])
        if candidates:
            logger.debug(f"Duplicate source name '{key}': '{src}' supersedes '{candidates[-1]}'")
        candidates.append(src)
    return index


def select_source(candidates: List[str], destination: str) -> Optional[str]:
    """
    Pick the last candidate that is not the destination file itself.

    Copying a file onto itself leaves it unchanged, so such candidates are
    passed over in favor of the previous one in walk order.

    Args:
        candidates: Matching source paths in walk order.
        destination: File about to be overwritten.

    Returns:
        Optional[str]: Source to copy from, or None if every candidate is
                       the destination itself.
    """
    for src in reversed(candidates):
        if not _is_same_file(src, destination):
            return src
    return None


def _is_same_file(a: str, b: str) -> bool:
    """Check whether two paths refer to one file; unreadable paths never do."""
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


# ==============================================================================
# PUBLIC API
# ==============================================================================

def synchronize(
        source_files: FileList,
        dest_files: FileList,
        config: MatchConfig,
        sink: Optional[ProgressSink] = None,
        *,
        continue_on_error: bool = False,
) -> SyncReport:
    """
    Overwrite every destination file that has a same-named source file.

    Destination files without a matching source are left untouched, and so
    are destinations whose only matching sources are the file itself. One
    progress tick is emitted per destination file and the sink is always
    finished, including when the pass aborts.

    Args:
        source_files: Source paths in walk order.
        dest_files: Destination paths in walk order.
        config: Matching parameters.
        sink: Progress receiver; defaults to a no-op sink.
        continue_on_error: If True, record copy failures and keep going
                           instead of aborting on the first one.

    Returns:
        SyncReport: Copied, unmatched, skipped and failed destinations.

    Raises:
        CopyError: On the first copy failure when continue_on_error is False.
    """
    if sink is None:
        sink = NullProgressSink()
    index = build_source_index(source_files, config)

    copied: List[CopyOutcome] = []
    unmatched: List[str] = []
    skipped: List[str] = []
    failures: List[CopyFailure] = []

    sink.set_total(len(dest_files))
    try:
        for dst in dest_files:
            key = normalize_name(os.path.basename(dst), config.case_sensitive)
            candidates = index.get(key)

            src = select_source(candidates, dst) if candidates else None

            if not candidates:
                unmatched.append(dst)
            elif src is None:
                logger.warning(f"Source and destination are the same file, skipping: {dst}")
                skipped.append(dst)
            else:
                try:
                    replace_file_contents(src, dst)
                    logger.debug(f"Replaced '{dst}' with '{src}'")
                    copied.append(CopyOutcome(source=src, destination=dst))
                except shutil.SameFileError:
                    logger.warning(f"Source and destination are the same file, skipping: {dst}")
                    skipped.append(dst)
                except OSError as exc:
                    logger.error(f"Failed to copy '{src}' -> '{dst}': {exc}")
                    if not continue_on_error:
                        raise CopyError(src, dst, str(exc)) from exc
                    failures.append(CopyFailure(source=src, destination=dst, error=str(exc)))

            sink.increment(1)
    finally:
        sink.finish()

    logger.info(
        f"Matching pass complete: {len(copied)} replaced, {len(unmatched)} unmatched, "
        f"{len(skipped)} skipped, {len(failures)} failed."
    )

    return SyncReport(
        total=len(dest_files),
        copied=copied,
        unmatched=unmatched,
        skipped=skipped,
        failures=failures,
    )
