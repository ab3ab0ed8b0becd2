"""Shared fixtures: an app whose data and log files live under tmp_path."""

import json

import pytest

from todo_api import create_app


@pytest.fixture
def todos_file(tmp_path):
    return tmp_path / "data" / "todos.json"


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "data" / "logs.txt"


@pytest.fixture
def app(tmp_path):
    # both files are derived from DATA_DIR
    return create_app({"DATA_DIR": str(tmp_path / "data")})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(todos_file):
    """Write a collection straight to disk."""

    def _seed(todos):
        todos_file.parent.mkdir(parents=True, exist_ok=True)
        todos_file.write_text(json.dumps(todos), encoding="utf-8")

    return _seed
