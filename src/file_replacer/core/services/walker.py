from __future__ import annotations

"""
Directory Traversal Service.

Collects the regular files reachable from a root path. The expansion is
iterative and bounded by a maximum number of directory rounds, prunes hidden
and explicitly excluded entries before descending, and either returns the
complete file list or raises; a partial list is never returned.
"""

import logging
import os
import stat
from typing import List, Tuple

from file_replacer.domain.errors import RootNotFoundError, WalkError
from file_replacer.domain.models import FileList, TraversalConfig

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


# ==============================================================================
# PUBLIC API
# ==============================================================================

def walk(root: str, config: TraversalConfig) -> FileList:
    """
    Produce the flat list of regular files reachable from a root path.

    A file root yields itself regardless of the traversal settings. A
    directory root is expanded breadth-first, one round per depth level;
    at most `config.max_depth` rounds are performed, so a depth of 0 yields
    an empty list and a depth of 1 yields only the files directly inside
    the root. Symbolic links are followed as their target type.

    Args:
        root: Path to a file or directory.
        config: Traversal parameters.

    Returns:
        FileList: Absolute file paths in traversal order.

    Raises:
        RootNotFoundError: If the root does not exist.
        WalkError: If any directory cannot be listed.
    """
    root_abs = os.path.abspath(root)

    if os.path.isfile(root_abs):
        return [root_abs]
    if not os.path.isdir(root_abs):
        if not os.path.exists(root_abs):
            logger.error(f"Traversal root does not exist: {root_abs}")
            raise RootNotFoundError(root_abs)
        logger.warning(f"Traversal root is neither a file nor a directory: {root_abs}")
        return []

    files: FileList = []
    frontier: List[str] = [root_abs]

    for depth in range(config.max_depth):
        if not frontier:
            break

        descend = depth + 1 < config.max_depth
        next_frontier: List[str] = []

        for directory in frontier:
            sub_dirs, sub_files = _expand_directory(directory, config)
            files.extend(sub_files)
            if descend:
                next_frontier.extend(sub_dirs)
            elif sub_dirs:
                logger.debug(f"Depth limit reached, not descending below: {directory}")

        frontier = next_frontier

    logger.debug(f"Collected {len(files)} files under '{root_abs}'")
    return files


def is_hidden_dir(entry: os.DirEntry) -> bool:
    """
    Check whether a directory entry is hidden under the platform convention.

    Dot-prefixed names are hidden everywhere; on Windows the hidden file
    attribute is honored as well.

    Args:
        entry: Directory entry produced by os.scandir.

    Returns:
        bool: True if the entry should be treated as hidden.
    """
    if entry.name.startswith(HIDDEN_PREFIX):
        return True

    if os.name == "nt":
        try:
            attrs = getattr(entry.stat(), "st_file_attributes", 0)
        except OSError:
            return False
        return bool(attrs & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0))

    return False


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _expand_directory(directory: str, config: TraversalConfig) -> Tuple[List[str], List[str]]:
    """
    List the immediate children of a directory and classify them.

    Entries that vanish between listing and inspection, and symbolic links
    whose target cannot be resolved (loops, denied access), are neither a
    file nor a directory and are ignored.

    Args:
        directory: Absolute directory path.
        config: Traversal parameters.

    Returns:
        Tuple[List[str], List[str]]: (Accepted sub-directories, Accepted files).

    Raises:
        WalkError: If the directory cannot be listed.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.error(f"Failed to list directory '{directory}': {exc}")
        raise WalkError(directory, str(exc)) from exc

    sub_dirs: List[str] = []
    sub_files: List[str] = []

    for entry in entries:
        path = os.path.join(directory, entry.name)

        if path in config.excluded_paths:
            logger.debug(f"Excluded: {path}")
            continue

        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            logger.warning(f"Cannot resolve entry type, skipping: {path}: {exc}")
            continue

        if is_dir:
            if not config.include_hidden and is_hidden_dir(entry):
                logger.debug(f"Skipping hidden directory: {path}")
                continue
            sub_dirs.append(path)
        elif is_file:
            sub_files.append(path)

    return sub_dirs, sub_files
