from __future__ import annotations

"""
Domain Error Taxonomy.

Structured failures raised by the traversal and replacement services.
Every error carries the filesystem path(s) involved so that interface
layers can render a precise message without parsing exception text.
"""

from typing import Optional


class ReplacerError(Exception):
    """Base class for every failure surfaced by the replacement core."""

    kind: str = "error"


# -----------------------------------------------------------------------------
# TRAVERSAL ERRORS
# -----------------------------------------------------------------------------

class WalkError(ReplacerError):
    """
    A directory could not be listed during traversal.

    Attributes:
        path: Directory whose listing failed.
        reason: Underlying OS error message.
    """

    kind = "walk"

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot list directory '{path}'{detail}")


class RootNotFoundError(WalkError):
    """A traversal root does not exist."""

    kind = "not_found"

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.args = (f"Path does not exist: '{path}'",)


# -----------------------------------------------------------------------------
# COPY ERRORS
# -----------------------------------------------------------------------------

class CopyError(ReplacerError):
    """
    Reading a source file or writing a destination file failed.

    Attributes:
        source: File whose content was being copied.
        destination: File being overwritten.
        reason: Underlying OS error message.
    """

    kind = "copy"

    def __init__(self, source: str, destination: str, reason: Optional[str] = None) -> None:
        self.source = source
        self.destination = destination
        self.reason = reason or ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot copy '{source}' -> '{destination}'{detail}")
