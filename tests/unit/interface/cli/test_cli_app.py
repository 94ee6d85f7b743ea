from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process against temporary folders. Folder chains with
a single child per level keep the expected output independent of the
filesystem's enumeration order.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from foldertree.interface.cli.app import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USAGE,
    NO_SUBFOLDERS_MSG,
    format_banner,
    main,
)

pytestmark = pytest.mark.usefixtures("reset_logging")


@pytest.fixture
def chain(tmp_path: Path) -> Path:
    """
    Structure:
    /root
      top.txt
      /outer
        /inner
          leaf.txt
    """
    root = tmp_path / "root"
    (root / "outer" / "inner").mkdir(parents=True)
    (root / "top.txt").write_text("x", encoding="utf-8")
    (root / "outer" / "inner" / "leaf.txt").write_text("y", encoding="utf-8")
    return root


def test_directories_only(chain: Path, capsys) -> None:
    code = main([str(chain), "--no-banner"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert out.splitlines() == ["└───outer", "    └───inner"]


def test_show_files_ascii(chain: Path, capsys) -> None:
    code = main([str(chain), "/F", "/A", "--no-banner"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert out.splitlines() == [
        "|   top.txt",
        "|   ",
        "\\---outer",
        "    \\---inner",
        "            leaf.txt",
        "            ",
    ]


def test_banner_precedes_tree(chain: Path, capsys) -> None:
    main([str(chain)])
    lines = capsys.readouterr().out.splitlines()

    assert lines[0].startswith("Folder PATH listing for volume")
    assert lines[1].startswith("Volume serial number is ")
    assert lines[3] == "└───outer"


def test_format_banner_root_line(chain: Path) -> None:
    given = format_banner(str(chain), path_given=True)
    implicit = format_banner(str(chain), path_given=False)

    expected_root = str(chain).upper() if os.name == "nt" else str(chain)
    assert given[2] == expected_root
    assert implicit[2].endswith(".")
    assert len(given[1].split()[-1].split("-")) == 2


def test_no_subfolders_notice(tmp_path: Path, capsys) -> None:
    (tmp_path / "only.txt").write_text("x", encoding="utf-8")
    code = main([str(tmp_path), "--no-banner"])
    captured = capsys.readouterr()

    assert code == EXIT_OK
    assert captured.out == ""
    assert NO_SUBFOLDERS_MSG in captured.err


def test_invalid_path(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing"
    code = main([str(missing)])
    captured = capsys.readouterr()

    assert code == EXIT_USAGE
    assert "Invalid path - " in captured.err
    assert NO_SUBFOLDERS_MSG in captured.err


def test_too_many_parameters(tmp_path: Path, capsys) -> None:
    code = main([str(tmp_path), "second"])
    captured = capsys.readouterr()

    assert code == EXIT_USAGE
    assert "Too many parameters - second" in captured.err
    assert captured.out == ""


def test_usage(capsys) -> None:
    code = main(["/?"])
    captured = capsys.readouterr()

    assert code == EXIT_OK
    assert "TREE [drive:][path] [/F] [/A]" in captured.err


def test_default_root_is_working_directory(chain: Path, capsys, monkeypatch) -> None:
    monkeypatch.chdir(chain / "outer")
    code = main(["--no-banner"])

    assert code == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["└───inner"]


def test_output_file_matches_stdout(chain: Path, tmp_path: Path, capsys) -> None:
    target = tmp_path / "out" / "tree.txt"
    code = main([str(chain), "/f", "--no-banner", "--output", str(target)])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert target.read_text(encoding="utf-8") == out


def test_env_enables_files(chain: Path, capsys, monkeypatch) -> None:
    monkeypatch.setenv("FOLDERTREE_SHOW_FILES", "1")
    main([str(chain), "--no-banner"])
    assert "│   top.txt" in capsys.readouterr().out.splitlines()


def test_switch_word_creates_no_stray_file(chain: Path, tmp_path: Path, capsys, monkeypatch) -> None:
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    code = main([str(chain), "-Foo", "-help", "--no-banner"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "top.txt" in out
    assert list(workdir.iterdir()) == []


# -----------------------------------------------------------------------------
# FAILURE CONTRACT WHILE STREAMING
# -----------------------------------------------------------------------------

def _failing_render(exc: BaseException):
    def _render(root_path, options):
        yield "└───first"
        raise exc
    return _render


def test_interrupt_while_streaming_returns_130(chain: Path, capsys, monkeypatch) -> None:
    monkeypatch.setattr(
        "foldertree.interface.cli.app.render_tree_with_options", _failing_render(KeyboardInterrupt())
    )
    code = main([str(chain), "--no-banner"])
    captured = capsys.readouterr()

    assert code == EXIT_INTERRUPTED
    assert captured.out.splitlines() == ["└───first"]
    assert "Interrupted." in captured.err


def test_unexpected_error_while_streaming_returns_1(chain: Path, capsys, monkeypatch) -> None:
    monkeypatch.setattr(
        "foldertree.interface.cli.app.render_tree_with_options", _failing_render(RuntimeError("disk on fire"))
    )
    with patch("foldertree.interface.cli.app.logger") as mock_logger:
        code = main([str(chain), "--no-banner"])

    assert code == EXIT_FAILURE
    assert "ERROR: disk on fire" in capsys.readouterr().err
    mock_logger.critical.assert_called_once()
    assert "disk on fire" in mock_logger.critical.call_args[0][0]


@pytest.mark.parametrize("exc_type", [MemoryError, BrokenPipeError])
def test_fatal_errors_while_streaming_propagate(chain: Path, monkeypatch, exc_type) -> None:
    monkeypatch.setattr(
        "foldertree.interface.cli.app.render_tree_with_options", _failing_render(exc_type())
    )
    with pytest.raises(exc_type):
        main([str(chain), "--no-banner"])
