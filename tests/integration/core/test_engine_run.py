from __future__ import annotations

"""
Integration tests for the core orchestration engine.

Runs complete replacement sessions over temporary trees and verifies that
every fatal error is folded into a failed SyncResult.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from file_replacer.core.engine import run_sync
from file_replacer.core.progress import NullProgressSink


def test_run_sync_end_to_end(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-01: Nested destinations are matched by base name across the trees."""
    make_tree(tmp_path / "src", {"a.txt": "1", "b.txt": "2", "lib/core.dll": "patched"})
    des = make_tree(tmp_path / "des", {"a.txt": "x", "c.txt": "y", "bin/x64/core.dll": "stale"})

    result = run_sync(mock_config_dict, sink=NullProgressSink())

    assert result.ok
    assert result.error == ""
    assert (result.source_files, result.destination_files) == (3, 3)
    assert (result.copied, result.unmatched, result.skipped) == (2, 1, 0)
    assert (des / "a.txt").read_text(encoding="utf-8") == "1"
    assert (des / "c.txt").read_text(encoding="utf-8") == "y"
    assert (des / "bin" / "x64" / "core.dll").read_text(encoding="utf-8") == "patched"


def test_run_sync_file_roots(tmp_path: Path, mock_config_dict) -> None:
    """TC-02: Two file roots with the same name are paired directly."""
    (tmp_path / "src").mkdir()
    (tmp_path / "des").mkdir()
    src = tmp_path / "src" / "app.cfg"
    dst = tmp_path / "des" / "app.cfg"
    src.write_text("new", encoding="utf-8")
    dst.write_text("old", encoding="utf-8")
    mock_config_dict.update({"source_path": str(src), "destination_path": str(dst), "max_depth": 0})

    result = run_sync(mock_config_dict)

    assert result.ok and result.copied == 1
    assert dst.read_text(encoding="utf-8") == "new"


def test_run_sync_missing_root(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-03: A missing root yields a not_found result without touching anything."""
    make_tree(tmp_path / "src", {"a.txt": "1"})

    result = run_sync(mock_config_dict)

    assert not result.ok
    assert result.error_kind == "not_found"
    assert str(tmp_path / "des") in result.error


def test_run_sync_walk_failure(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-04: A listing failure aborts the run before any copy happens."""
    make_tree(tmp_path / "src", {"a.txt": "1"})
    des = make_tree(tmp_path / "des", {"a.txt": "x"})

    with patch("file_replacer.core.services.walker.os.scandir", side_effect=PermissionError(13, "Permission denied")):
        result = run_sync(mock_config_dict)

    assert not result.ok
    assert result.error_kind == "walk"
    assert "Permission denied" in result.error
    assert (des / "a.txt").read_text(encoding="utf-8") == "x"


def test_run_sync_exclusions_and_hidden(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-05: Excluded and hidden destination subtrees are never overwritten."""
    make_tree(tmp_path / "src", {"a.txt": "1"})
    des = make_tree(tmp_path / "des", {
        "keep/a.txt": "excluded",
        ".cache/a.txt": "hidden",
        "use/a.txt": "x",
    })
    mock_config_dict["exclude_paths"] = [str(des / "keep")]

    result = run_sync(mock_config_dict)

    assert result.ok and result.copied == 1
    assert (des / "keep" / "a.txt").read_text(encoding="utf-8") == "excluded"
    assert (des / ".cache" / "a.txt").read_text(encoding="utf-8") == "hidden"
    assert (des / "use" / "a.txt").read_text(encoding="utf-8") == "1"


def test_run_sync_continue_on_error(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-06: Continue mode reports failures through the result."""
    make_tree(tmp_path / "src", {"a.txt": "1", "b.txt": "2"})
    des = make_tree(tmp_path / "des", {"a.txt": "x", "b.txt": "y"})
    mock_config_dict["continue_on_error"] = True

    from file_replacer.infra.fs import replace_file_contents as real_replace

    def flaky(source: str, destination: str) -> None:
        if destination.endswith("a.txt"):
            raise OSError(28, "No space left on device")
        real_replace(source, destination)

    with patch("file_replacer.core.services.matcher.replace_file_contents", side_effect=flaky):
        result = run_sync(mock_config_dict)

    assert not result.ok
    assert result.error_kind == "copy"
    assert result.copied == 1
    assert len(result.failures) == 1
    assert (des / "b.txt").read_text(encoding="utf-8") == "2"


def test_run_sync_overlapping_roots_skip_same_file(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-07: Using one tree as both source and destination changes nothing."""
    tree = make_tree(tmp_path / "tree", {"a.txt": "1", "sub/b.txt": "2"})
    mock_config_dict.update({"source_path": str(tree), "destination_path": str(tree)})

    result = run_sync(mock_config_dict)

    assert result.ok
    assert result.copied == 0
    assert result.skipped == 2
    assert (tree / "a.txt").read_text(encoding="utf-8") == "1"


def test_run_sync_destination_nested_in_source(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-08: A destination inside the source tree takes the content of its same-named sibling."""
    root = make_tree(tmp_path / "p", {"a/X.txt": "new", "des/X.txt": "old"})
    mock_config_dict.update({"source_path": str(root), "destination_path": str(root / "des")})

    result = run_sync(mock_config_dict)

    assert result.ok
    assert (result.copied, result.skipped) == (1, 0)
    assert (root / "des" / "X.txt").read_text(encoding="utf-8") == "new"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_run_sync_ignores_symlink_loop(tmp_path: Path, make_tree, mock_config_dict) -> None:
    """TC-09: A self-referencing link in the destination neither raises nor stops the run."""
    make_tree(tmp_path / "src", {"a.txt": "1"})
    des = make_tree(tmp_path / "des", {"a.txt": "x"})
    try:
        os.symlink("loop", des / "loop")
    except OSError:
        pytest.skip("symlink creation not permitted")

    result = run_sync(mock_config_dict)

    assert result.ok
    assert (result.destination_files, result.copied) == (1, 1)
    assert (des / "a.txt").read_text(encoding="utf-8") == "1"
