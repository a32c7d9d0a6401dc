from __future__ import annotations

"""
Progress Reporting Contract.

The matching pass reports per-file progress to a caller-supplied sink.
Interfaces provide a concrete display; headless callers use the no-op sink.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressSink(Protocol):
    """Receiver of progress ticks emitted by the matching pass."""

    def set_total(self, n: int) -> None:
        """Announce the number of ticks the pass will emit."""
        ...

    def increment(self, by: int = 1) -> None:
        """Advance the progress counter."""
        ...

    def finish(self) -> None:
        """Signal that no further ticks will be emitted."""
        ...


class NullProgressSink:
    """Progress sink that discards every signal."""

    def set_total(self, n: int) -> None:
        pass

    def increment(self, by: int = 1) -> None:
        pass

    def finish(self) -> None:
        pass
