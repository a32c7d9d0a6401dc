from __future__ import annotations

"""
Replacement Domain Data Models.

Defines the immutable configuration objects consumed by the traversal and
matching services, plus the report and result structures exchanged between
the core engine and interface layers (CLI).
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List

# Ordered sequence of absolute file paths in traversal order
FileList = List[str]

DEFAULT_MAX_DEPTH = 255

# -----------------------------------------------------------------------------
# CONFIGURATION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalConfig:
    """
    Parameters for a single directory walk.

    Attributes:
        max_depth: Maximum number of directory expansion rounds.
        include_hidden: Whether dot-directories are descended into.
        excluded_paths: Absolute paths (files or directories) never collected
                        nor descended into.
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    include_hidden: bool = False
    excluded_paths: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class MatchConfig:
    """
    Parameters for a single matching pass.

    Attributes:
        case_sensitive: If False, base names are compared after ASCII folding.
    """
    case_sensitive: bool = False

# -----------------------------------------------------------------------------
# REPORTING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CopyOutcome:
    """A destination file that received the content of a source file."""
    source: str
    destination: str


@dataclass(frozen=True)
class CopyFailure:
    """A pair that could not be copied, recorded in continue-on-error mode."""
    source: str
    destination: str
    error: str


@dataclass(frozen=True)
class SyncReport:
    """
    Outcome of one matching pass.

    Attributes:
        total: Number of destination files examined.
        copied: Pairs whose destination was overwritten.
        unmatched: Destination files with no source of the same base name.
        skipped: Destination files left untouched because the matching
                 source is the very same file on disk.
        failures: Copy failures (only populated in continue-on-error mode).
    """
    total: int
    copied: List[CopyOutcome] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[CopyFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class SyncResult:
    """
    Unified result of a complete engine run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Taxonomy identifier ('not_found', 'walk', 'copy').
        source_path: Normalized source root.
        destination_path: Normalized destination root.
        source_files: Number of files collected under the source root.
        destination_files: Number of files collected under the destination root.
        copied: Number of destination files overwritten.
        unmatched: Number of destination files without a matching source.
        skipped: Number of same-file pairs left untouched.
        failures: Failures recorded in continue-on-error mode.
    """
    ok: bool
    error: str = ""
    error_kind: str = ""

    source_path: str = ""
    destination_path: str = ""

    source_files: int = 0
    destination_files: int = 0
    copied: int = 0
    unmatched: int = 0
    skipped: int = 0
    failures: List[CopyFailure] = field(default_factory=list)
