"""Tests for TodoStore — whole-file JSON load/save."""

import json

import pytest

from todo_api.storage import TodoStore


def test_missing_file_loads_empty(tmp_path):
    store = TodoStore(str(tmp_path / "nope.json"))
    assert store.load() == []


def test_corrupt_file_loads_empty(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text("{not json", encoding="utf-8")
    assert TodoStore(str(path)).load() == []


def test_directory_in_place_of_file_loads_empty(tmp_path):
    assert TodoStore(str(tmp_path)).load() == []


def test_save_writes_pretty_json_and_creates_dir(tmp_path):
    path = tmp_path / "nested" / "todos.json"
    store = TodoStore(str(path))
    todos = [{"id": 1, "title": "a", "completed": False}]
    store.save(todos)

    raw = path.read_text(encoding="utf-8")
    assert raw == json.dumps(todos, indent=2)
    assert store.load() == todos
    assert not (tmp_path / "nested" / "todos.json.tmp").exists()


def test_save_overwrites_whole_collection(tmp_path):
    store = TodoStore(str(tmp_path / "todos.json"))
    store.save([{"id": 1, "title": "a", "completed": False},
                {"id": 2, "title": "b", "completed": True}])
    store.save([{"id": 2, "title": "b", "completed": True}])
    assert store.load() == [{"id": 2, "title": "b", "completed": True}]


def test_save_keeps_non_ascii_titles(tmp_path):
    path = tmp_path / "todos.json"
    TodoStore(str(path)).save([{"id": 1, "title": "café", "completed": False}])
    assert "café" in path.read_text(encoding="utf-8")


def test_save_failure_propagates(tmp_path):
    # target path is an existing directory, so the final replace fails
    target = tmp_path / "todos.json"
    target.mkdir()
    with pytest.raises(OSError):
        TodoStore(str(target)).save([])
