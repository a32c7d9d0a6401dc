from __future__ import annotations

"""
Terminal Progress Display.

Implements the core ProgressSink contract on top of a tqdm progress bar
rendered on stderr, leaving stdout free for the run summary.
"""

import sys
from typing import Optional

from tqdm import tqdm


class TqdmProgressSink:
    """
    ProgressSink rendering a tqdm bar.

    The bar is created lazily on set_total so that a sink can be built
    before the number of destination files is known.
    """

    def __init__(self, desc: str = "Replacing", *, disable: bool = False) -> None:
        self.desc = desc
        self.disable = disable
        self._bar: Optional[tqdm] = None

    def set_total(self, n: int) -> None:
        if self._bar is not None:
            self._bar.close()
        self._bar = tqdm(
            total=n,
            desc=self.desc,
            unit="file",
            file=sys.stderr,
            disable=self.disable,
            leave=False,
        )

    def increment(self, by: int = 1) -> None:
        if self._bar is not None:
            self._bar.update(by)

    def finish(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None
