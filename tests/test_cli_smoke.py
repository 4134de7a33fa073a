"""Smoke tests for the CLI entry point."""
from __future__ import annotations

import json

import pandas as pd
import pytest

from client_manager import __main__
from client_manager.cli import main
from client_manager.config import DATA_FILE_ENV_VAR

VALID_CLIENTS = [
    {"id": 1, "full_name": "John Doe", "email": "john.doe@example.com"},
    {"id": 2, "full_name": "Jane Smith", "email": "jane.smith@example.com"},
    {"id": 3, "full_name": "Bob Johnson", "email": "bob.johnson@example.com"},
    {"id": 4, "full_name": "Alice Smith", "email": "alice.smith@example.com"},
    {"id": 5, "full_name": "Another Jane Smith", "email": "Jane.Smith@example.com "},
]


@pytest.fixture(autouse=True)
def _clear_data_file_env(monkeypatch) -> None:
    monkeypatch.delenv(DATA_FILE_ENV_VAR, raising=False)


@pytest.fixture()
def clients_file(tmp_path):
    path = tmp_path / "valid_clients.json"
    path.write_text(json.dumps(VALID_CLIENTS), encoding="utf-8")
    return path


def test_search_prints_matching_clients(clients_file, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["search", "john", "--file", str(clients_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Search results for 'john'" in out
    assert "=" * 80 in out
    assert "Found 2 client(s)" in out
    assert "ID: 1\nName: John Doe\nEmail: john.doe@example.com" in out
    assert "Name: Bob Johnson" in out
    assert "Email: john.doe@example.com\n\nID: 3" in out


def test_search_is_case_insensitive(clients_file, capsys: pytest.CaptureFixture[str]) -> None:
    main(["search", "SMITH", "--file", str(clients_file)])

    out = capsys.readouterr().out
    assert "Found 3 client(s)" in out
    assert "Another Jane Smith" in out


def test_search_without_matches(clients_file, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["search", "xyz123nonexistent", "--file", str(clients_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Search results for 'xyz123nonexistent'" in out
    assert "No clients found matching your search" in out


def test_blank_search_term_is_an_error(clients_file, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["search", "   ", "--file", str(clients_file)])

    assert exit_code == 1
    assert "Error: search_term cannot be empty" in capsys.readouterr().err


def test_duplicates_lists_shared_emails(clients_file, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["duplicates", "--file", str(clients_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Duplicate Email Analysis" in out
    assert "Found 1 duplicate email(s)" in out
    assert "Email: jane.smith@example.com (2 occurrences)" in out
    assert "ID: 2, Name: Jane Smith" in out
    assert "ID: 5, Name: Another Jane Smith" in out


def test_duplicates_without_matches(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "no_duplicates.json"
    path.write_text(json.dumps(VALID_CLIENTS[:2]), encoding="utf-8")

    exit_code = main(["duplicates", "--file", str(path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "No duplicate emails found" in out


@pytest.mark.parametrize("command", [["search", "john"], ["duplicates"]])
def test_missing_file_exits_with_error(tmp_path, command, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([*command, "--file", str(tmp_path / "nonexistent_file.json")])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "Error: Failed to load clients: File not found" in err


def test_malformed_json_exits_with_error(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "invalid_json.json"
    path.write_text("[{", encoding="utf-8")

    exit_code = main(["search", "john", "--file", str(path)])

    assert exit_code == 1
    assert "Invalid JSON format" in capsys.readouterr().err


def test_invalid_types_exit_with_error(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "invalid_types.json"
    path.write_text(json.dumps([{"id": "1", "full_name": "John", "email": "j@example.com"}]), encoding="utf-8")

    exit_code = main(["duplicates", "--file", str(path)])

    assert exit_code == 1
    assert "index 0: id must be a positive integer" in capsys.readouterr().err


def test_data_file_from_config(clients_file, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"data_file: {clients_file.name}\n", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "search", "alice"])

    assert exit_code == 0
    assert "Alice Smith" in capsys.readouterr().out


def test_bad_config_exits_with_error(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--config", str(tmp_path / "missing.yaml"), "duplicates"])

    assert exit_code == 1
    assert "Error: Configuration file" in capsys.readouterr().err


def test_data_file_from_environment(clients_file, monkeypatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv(DATA_FILE_ENV_VAR, str(clients_file))

    exit_code = main(["search", "bob"])

    assert exit_code == 0
    assert "Bob Johnson" in capsys.readouterr().out


def test_default_data_file_is_used(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["search", "john"])

    assert exit_code == 0
    assert "Search results" in capsys.readouterr().out


def test_search_results_can_be_exported(clients_file, tmp_path) -> None:
    output_path = tmp_path / "results.csv"

    exit_code = main(["search", "smith", "--file", str(clients_file), "--output", str(output_path)])

    assert exit_code == 0
    assert pd.read_csv(output_path)["id"].tolist() == [2, 4, 5]


def test_duplicates_can_be_exported(clients_file, tmp_path) -> None:
    output_path = tmp_path / "duplicates.xlsx"

    exit_code = main(["duplicates", "--file", str(clients_file), "-o", str(output_path)])

    assert exit_code == 0
    frame = pd.read_excel(output_path)
    assert frame["normalized_email"].unique().tolist() == ["jane.smith@example.com"]


def test_unsupported_export_extension(clients_file, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["duplicates", "--file", str(clients_file), "-o", str(tmp_path / "out.json")])

    assert exit_code == 1
    assert "Unsupported export file extension" in capsys.readouterr().err


def test_end_to_end_scenario(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "clients.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "full_name": "John Doe", "email": "duplicate@example.com"},
                {"id": 2, "full_name": "Jane Smith", "email": "unique@example.com"},
                {"id": 3, "full_name": "Bob Jones", "email": "duplicate@example.com"},
            ]
        ),
        encoding="utf-8",
    )

    assert main(["search", "jo", "--file", str(path)]) == 0
    search_out = capsys.readouterr().out
    assert search_out.index("John Doe") < search_out.index("Bob Jones")
    assert "Jane Smith" not in search_out

    assert main(["duplicates", "--file", str(path)]) == 0
    duplicates_out = capsys.readouterr().out
    assert "Email: duplicate@example.com (2 occurrences)" in duplicates_out
    assert "ID: 1, Name: John Doe" in duplicates_out
    assert "ID: 3, Name: Bob Jones" in duplicates_out


def test_module_entry_point_delegates_to_cli(clients_file, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = __main__.main(["search", "doe", "--file", str(clients_file)])

    assert exit_code == 0
    assert "Found 1 client(s)" in capsys.readouterr().out


def test_module_entry_point_without_arguments_shows_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = __main__.main([])

    captured = capsys.readouterr()
    assert "python -m client_manager" in captured.out
    assert exit_code == 2


def test_undecodable_config_exits_with_error(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_bytes(b"\xff\xfe\x00data_file: clients.json\n")

    exit_code = main(["--config", str(config_path), "duplicates"])

    assert exit_code == 1
    assert "Error: Configuration file" in capsys.readouterr().err


def test_export_to_directory_exits_with_error(clients_file, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    output_dir = tmp_path / "dir.csv"
    output_dir.mkdir()

    exit_code = main(["search", "john", "--file", str(clients_file), "-o", str(output_dir)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Search results for 'john'" in captured.out
    assert "Error: Failed to export results" in captured.err
