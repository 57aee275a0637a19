# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todostore.cli import InvalidDescriptionError, main, validate_description
from todostore.storage import FileStorage, TaskStorage


def run(path: Path, *args: str) -> int:
    command, *rest = args
    return main([command, *rest, "--file", str(path)])


def stored(path: Path) -> list:
    return [t.model_dump() for t in TaskStorage(FileStorage(path)).load()]


@pytest.fixture()
def path(tmp_path: Path) -> Path:
    return tmp_path / "storage.json"


def test_validate_description_trims() -> None:
    assert validate_description("  buy milk \n") == "buy milk"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_validate_description_rejects_blank(text: str) -> None:
    with pytest.raises(InvalidDescriptionError):
        validate_description(text)


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_add_stores_trimmed_text(path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(path, "add", "  buy milk  ") == 0
    assert "[1] buy milk" in capsys.readouterr().out
    assert stored(path) == [{"id": 1, "description": "buy milk", "completed": False}]


def test_add_rejects_blank_text(path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(path, "add", "   ") == 1
    assert "cannot be empty" in capsys.readouterr().out
    assert not path.exists()


def test_edit_rejects_blank_text(path: Path) -> None:
    run(path, "add", "buy milk")
    assert run(path, "edit", "1", "  ") == 1
    assert stored(path)[0]["description"] == "buy milk"


def test_edit_updates_description(path: Path) -> None:
    run(path, "add", "buy milk")
    assert run(path, "edit", "1", "buy oat milk") == 0
    assert stored(path)[0]["description"] == "buy oat milk"


def test_unknown_id_exits_nonzero(path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run(path, "add", "buy milk")
    capsys.readouterr()

    assert run(path, "toggle", "9") == 1
    assert run(path, "remove", "9") == 1
    assert run(path, "edit", "9", "x") == 1
    assert capsys.readouterr().out.count("Task not found: 9") == 3


def test_toggle_and_remove(path: Path) -> None:
    run(path, "add", "a")
    run(path, "add", "b")

    assert run(path, "toggle", "1") == 0
    assert stored(path)[0]["completed"] is True

    assert run(path, "remove", "1") == 0
    assert [t["id"] for t in stored(path)] == [2]


def test_toggle_all_and_clear_completed(path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    for text in ("a", "b", "c"):
        run(path, "add", text)

    assert run(path, "toggle-all", "--done") == 0
    assert all(t["completed"] for t in stored(path))

    assert run(path, "toggle-all", "--undone") == 0
    assert not any(t["completed"] for t in stored(path))

    run(path, "toggle", "2")
    capsys.readouterr()
    assert run(path, "clear-completed") == 0
    assert "Cleared 1" in capsys.readouterr().out
    assert [t["id"] for t in stored(path)] == [1, 3]


def test_list_json_applies_search_sort_and_filter(path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    for text in ("buy milk", "buy bread", "call mom"):
        run(path, "add", text)
    run(path, "toggle", "2")
    capsys.readouterr()

    assert run(path, "list", "--search", "BUY", "--sort", "completedFirst", "--json") == 0
    assert [t["id"] for t in json.loads(capsys.readouterr().out)] == [2, 1]

    assert run(path, "list", "--filter", "pending", "--json") == 0
    assert [t["id"] for t in json.loads(capsys.readouterr().out)] == [1, 3]


def test_list_and_status_text(path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run(path, "add", "buy milk")
    run(path, "add", "call mom")
    run(path, "toggle", "1")
    capsys.readouterr()

    assert run(path, "list", "--filter", "completed") == 0
    out = capsys.readouterr().out
    assert "buy milk" in out
    assert "call mom" not in out
    assert "1 item left" in out

    assert run(path, "status") == 0
    out = capsys.readouterr().out
    assert "[x]" in out and "[ ]" in out


def test_list_rejects_unknown_sort(path: Path) -> None:
    with pytest.raises(SystemExit):
        run(path, "list", "--sort", "alphabetical")
