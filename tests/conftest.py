from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'file_replacer.domain.config'.
    """
    return {
        "source_path": str(tmp_path / "src"),
        "destination_path": str(tmp_path / "des"),
        "max_depth": 255,
        "case_sensitive": False,
        "include_hidden": False,
        "exclude_paths": [],
        "continue_on_error": False,
    }


@pytest.fixture
def make_tree() -> Callable[[Path, Dict[str, str]], Path]:
    """
    Return a helper materializing {relative_path: content} under a root.

    Returns:
        Callable: make(root, files) -> root.
    """
    def _make(root: Path, files: Dict[str, str]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make
