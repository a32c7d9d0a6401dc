from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path normalization and the low-level content
replacement primitive. Acts as an abstraction over the 'os' and 'shutil'
modules to ensure uniform behavior across Windows and Unix-like systems.
"""

import os
import shutil
from typing import Iterable, List, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: Optional[str] = None) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path, or an empty string if both the input
             and the fallback are empty.
    """
    p = (path or "").strip()
    if not p:
        if not fallback:
            return ""
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def normalize_paths(paths: Iterable[str]) -> List[str]:
    """
    Normalize a collection of paths, dropping empty entries.

    Args:
        paths: Raw path strings.

    Returns:
        List[str]: Absolute paths in input order.
    """
    out: List[str] = []
    for raw in paths:
        p = normalize_path(raw)
        if p:
            out.append(p)
    return out

# -----------------------------------------------------------------------------
# CONTENT REPLACEMENT API
# -----------------------------------------------------------------------------

def replace_file_contents(source: str, destination: str) -> None:
    """
    Overwrite the destination file with the full content of the source file.

    The destination is truncated and rewritten; its name, location and
    permission bits are kept.

    Args:
        source: File to read.
        destination: File to overwrite.

    Raises:
        OSError: If reading the source or writing the destination fails.
    """
    shutil.copyfile(source, destination)
