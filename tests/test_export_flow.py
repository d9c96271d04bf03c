from __future__ import annotations

import json

import pytest

from backend import export_utils
from backend.sessions import InvalidFormatError
from utils import make_session


@pytest.fixture
def fixed_date(monkeypatch):
    class FixedDatetime(export_utils.datetime):  # type: ignore
        @classmethod
        def now(cls, tz=None):
            return cls(2025, 8, 22, 14, 37, 5)

    monkeypatch.setattr(export_utils, "datetime", FixedDatetime)


def test_make_export_name(fixed_date):
    assert export_utils.make_export_name() == "workout-logs-2025-08-22.json"


def test_export_sessions_writes_pretty_json(store, tmp_path, fixed_date):
    store.append(make_session(1))
    store.append(make_session(2))
    dest_dir = tmp_path / "dest"
    dest_dir.mkdir()

    exported = export_utils.export_sessions(store, dest_dir=dest_dir)
    assert exported.name == "workout-logs-2025-08-22.json"
    assert exported.parent == dest_dir.resolve()
    text = exported.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert json.loads(text) == store.list()


def test_export_empty_store_refused(store, tmp_path):
    dest_dir = tmp_path / "dest"
    dest_dir.mkdir()
    with pytest.raises(ValueError, match="No workout data"):
        export_utils.export_sessions(store, dest_dir=dest_dir)
    assert list(dest_dir.iterdir()) == []


def test_export_missing_destination_raises(store, tmp_path):
    store.append(make_session(1))
    with pytest.raises(FileNotFoundError):
        export_utils.export_sessions(store, dest_dir=tmp_path / "missing")


def test_default_export_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("WORKOUT_LOG_EXPORT_DIR", str(tmp_path / "exports"))
    assert export_utils.default_export_dir() == tmp_path / "exports"
    assert (tmp_path / "exports").is_dir()


def test_export_then_import_is_noop(store, tmp_path):
    store.append(make_session(1))
    store.append(make_session(2, day="Pull"))
    before = store.list()
    path = export_utils.export_sessions(store, dest_dir=tmp_path)
    store.replace_all(export_utils.load_import_file(path))
    assert store.list() == before


def test_import_replaces_existing(store, tmp_path):
    store.append(make_session(1))
    src = tmp_path / "import.json"
    src.write_text(json.dumps([make_session(8), make_session(9)]), encoding="utf-8")
    store.replace_all(export_utils.load_import_file(src))
    assert [s["id"] for s in store.list()] == [8, 9]


@pytest.mark.parametrize(
    "content",
    ['{"a": 1}', "not json", "42", "[1]", '[{"id": 1}]', '[{"id": 1, "day": "Push", "exercises": 5}]'],
)
def test_invalid_import_file_leaves_store_unchanged(store, tmp_path, content):
    store.append(make_session(1))
    before = store.list()
    src = tmp_path / "bad.json"
    src.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidFormatError):
        export_utils.load_import_file(src)
    assert store.list() == before


def test_import_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        export_utils.load_import_file(tmp_path / "missing.json")


def test_import_rejects_non_utf8_file(tmp_path):
    src = tmp_path / "bad.json"
    src.write_bytes(b"\xff\xfe[")
    with pytest.raises(InvalidFormatError):
        export_utils.load_import_file(src)
