from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process to verify exit codes, human and JSON output,
and configuration dumping.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from file_replacer.domain.models import CopyFailure, SyncResult
from file_replacer.interface.cli.app import exit_code_for, main


@pytest.fixture(autouse=True)
def no_logging_bootstrap():
    """Keep the root logger untouched so output capture stays per-test."""
    with patch("file_replacer.interface.cli.app.configure_logging"):
        yield


@pytest.fixture
def trees(tmp_path: Path, make_tree):
    src = make_tree(tmp_path / "src", {"a.txt": "1", "b.txt": "2"})
    des = make_tree(tmp_path / "des", {"a.txt": "x", "c.txt": "y"})
    return src, des


def test_main_replaces_and_summarizes(trees, capsys) -> None:
    """TC-01: A successful run exits 0 and prints the counters."""
    src, des = trees
    code = main([str(src), str(des), "--no-progress"])

    out = capsys.readouterr().out
    assert code == 0
    assert (des / "a.txt").read_text(encoding="utf-8") == "1"
    assert "Files replaced: 1" in out
    assert "Files without match: 1" in out


def test_main_missing_source_exits_2(tmp_path: Path, capsys) -> None:
    """TC-02: A missing root is rejected before any traversal."""
    des = tmp_path / "des"
    des.mkdir()
    code = main([str(tmp_path / "missing"), str(des)])

    assert code == 2
    assert "Source path does not exist" in capsys.readouterr().err


def test_main_json_output(trees, capsys) -> None:
    """TC-03: --json prints the result structure."""
    src, des = trees
    code = main([str(src), str(des), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["ok"] is True
    assert data["copied"] == 1
    assert data["unmatched"] == 1
    assert data["destination_path"] == str(des)


def test_main_dump_config(trees, capsys) -> None:
    """TC-04: --dump-config prints the resolved configuration and exits 0."""
    src, des = trees
    code = main([str(src), str(des), "-d", "2", "-c", "--dump-config"])

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["max_depth"] == 2
    assert data["case_sensitive"] is True
    # Nothing was copied
    assert (des / "a.txt").read_text(encoding="utf-8") == "x"


def test_main_copy_failure_exits_1(trees, capsys) -> None:
    """TC-05: A copy failure is reported on stderr with exit code 1."""
    src, des = trees
    with patch(
        "file_replacer.core.services.matcher.replace_file_contents",
        side_effect=PermissionError(13, "Permission denied"),
    ):
        code = main([str(src), str(des), "--no-progress"])

    assert code == 1
    assert "Permission denied" in capsys.readouterr().err


def test_main_interrupt_exits_130(trees) -> None:
    """TC-06: Ctrl+C during the run maps to exit code 130."""
    src, des = trees
    with patch("file_replacer.interface.cli.app.run_sync", side_effect=KeyboardInterrupt):
        assert main([str(src), str(des), "--no-progress"]) == 130


def test_exit_code_mapping() -> None:
    """TC-07: Results map to the documented exit codes."""
    assert exit_code_for(SyncResult(ok=True)) == 0
    assert exit_code_for(SyncResult(ok=False, error_kind="not_found")) == 2
    assert exit_code_for(SyncResult(ok=False, error_kind="walk")) == 1
    assert exit_code_for(SyncResult(ok=False, error_kind="copy", failures=[CopyFailure("s", "d", "e")])) == 1
