"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from fieldname_access.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["plan", "--output", "/tmp/plan.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["plan", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_declaration_file_returns_domain_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["check", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Declaration file not found" in captured.err
    assert "Traceback" not in captured.err
