from __future__ import annotations

"""
Logging Configuration Model.

Settings consumed by configure_logging. Output formats are fixed: a short
console line for terminal use and a timestamped line for log files.
"""

from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for one process.

    Attributes:
        level: Level name (DEBUG, INFO, WARNING, ...); unknown names mean INFO.
        console: Write records to stderr.
        log_file: Also write records to this file, rotated by size.
        max_bytes: Rotation threshold of the log file.
        backup_count: Rotated log files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3
