"""Shared fixtures for unit tests."""

import json
from pathlib import Path

import pytest

from genassert.config import GenassertConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings, ignoring any pyproject.toml."""
    set_config(GenassertConfig())
    yield
    set_config(None)


@pytest.fixture
def generated_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A small generated project; the working directory is its root."""
    (tmp_path / "testFile").write_text("Roses are red.\n", encoding="utf-8")
    (tmp_path / "testFile2").write_text("Violets are blue.\n", encoding="utf-8")
    (tmp_path / "crlfFile").write_bytes(b"line one\r\nline two\r\n")
    (tmp_path / "templates").mkdir()
    (tmp_path / "dummy.json").write_text(
        json.dumps({"a": {"b": 1}, "b": [1, 2], "c": "x", "d": None}),
        encoding="utf-8",
    )
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    return tmp_path
