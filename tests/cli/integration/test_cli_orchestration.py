"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from fieldname_access.cli import cli, main


def _write_config(tmp_path: Path, records: list[dict[str, object]] | None = None) -> Path:
    if records is None:
        records = [
            {
                "name": "User",
                "fields": [
                    {"name": "name", "type": "String"},
                    {"name": "age", "type": "u64"},
                    {"name": "does_love_ranni", "type": "bool"},
                ],
            },
            {
                "name": "NamedFieldname",
                "enum_name": "NewName",
                "derive_all": ["Debug"],
                "fields": [
                    {"name": "name", "type": "String"},
                    {"name": "age", "type": "i64", "variant_name": "MyAge"},
                    {"name": "dog_age", "type": "i64"},
                ],
            },
        ]
    path = tmp_path / "records.yaml"
    path.write_text(yaml.safe_dump({"records": records}, sort_keys=False), encoding="utf-8")
    return path


def test_plan_command_writes_plan_document(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "out" / "plan.json"

    result = runner.invoke(
        cli, ["plan", "--config", str(config_path), "--output", str(output_path)]
    )

    assert result.exit_code == 0, result.output
    assert str(output_path.resolve()) in result.output
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert [record["record"] for record in document["records"]] == ["User", "NamedFieldname"]
    assert document["records"][1]["unions"]["mutable"]["name"] == "NewNameMut"


def test_plan_command_filters_records(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "plan.json"

    result = runner.invoke(
        cli,
        [
            "plan",
            "--config",
            str(config_path),
            "--output",
            str(output_path),
            "--record",
            "NamedFieldname",
        ],
    )

    assert result.exit_code == 0, result.output
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert [record["record"] for record in document["records"]] == ["NamedFieldname"]


def test_plan_command_is_repeatable_byte_for_byte(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"

    assert main(["plan", "--config", str(config_path), "--output", str(first)]) == 0
    assert main(["plan", "--config", str(config_path), "--output", str(second)]) == 0

    assert first.read_bytes() == second.read_bytes()


def test_unknown_record_selection_fails(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path)

    exit_code = main(
        [
            "plan",
            "--config",
            str(config_path),
            "--output",
            str(tmp_path / "plan.json"),
            "--record",
            "Ghost",
        ]
    )

    assert exit_code == 1
    assert "Unknown record(s): Ghost" in capsys.readouterr().err
    assert not (tmp_path / "plan.json").exists()


def test_check_command_summarizes_records(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["check", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "User: UserField/UserFieldMut variants=String,U64,Bool",
        "NamedFieldname: NewName/NewNameMut variants=String,MyAge,I64",
    ]


def test_check_command_reports_collisions(tmp_path: Path, capsys) -> None:
    config_path = _write_config(
        tmp_path,
        [
            {
                "name": "Units",
                "fields": [
                    {"name": "count", "type": "u64"},
                    {"name": "other", "type": "units::U64"},
                ],
            }
        ],
    )

    exit_code = main(["check", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Variant name collision in record 'Units'" in captured.err
    assert "'count'" in captured.err
    assert "'other'" in captured.err
    assert "Traceback" not in captured.err


def test_check_command_reports_malformed_schema(tmp_path: Path, capsys) -> None:
    config_path = _write_config(
        tmp_path,
        [
            {
                "name": "User",
                "fields": [
                    {"name": "age", "type": "u8"},
                    {"name": "age", "type": "u16"},
                ],
            }
        ],
    )

    exit_code = main(["check", "--config", str(config_path)])

    assert exit_code == 1
    assert "duplicate field name" in capsys.readouterr().err


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "records.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])
    assert result.exit_code == 0
    assert output_path.exists()

    exit_code = main(["generate-config", "--output", str(output_path)])
    assert exit_code == 1
