import json

import pytest

from api.completion import CookieCompletionStore
from submission_form.services import completion_store
from submission_form.services.completion_store import (
    InMemoryCompletionStore, JsonFileCompletionStore,
)


def test_in_memory_store():
    store = InMemoryCompletionStore()
    assert store.has_completed() is False
    store.mark_completed()
    assert store.has_completed() is True


def test_json_file_store_missing_file_means_not_completed(tmp_path):
    store = JsonFileCompletionStore(str(tmp_path / "nested" / "completion.json"))
    assert store.has_completed() is False


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "completion.json"
    JsonFileCompletionStore(str(path)).mark_completed()

    assert json.loads(path.read_text(encoding="utf-8")) == {"submitted": True}
    assert JsonFileCompletionStore(str(path)).has_completed() is True


def test_json_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "completion.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileCompletionStore(str(path))
    assert store.has_completed() is False

    store.mark_completed()
    assert store.has_completed() is True


def test_cookie_store():
    assert CookieCompletionStore(None).has_completed() is False
    assert CookieCompletionStore("false").has_completed() is False
    assert CookieCompletionStore("true").has_completed() is True

    store = CookieCompletionStore()
    store.mark_completed()
    assert store.has_completed() is True


def test_json_file_store_interrupted_write_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "completion.json"
    store = JsonFileCompletionStore(str(path))
    store.mark_completed()

    def broken_dump(data, f):
        f.write('{"subm')
        raise OSError("disk full")

    monkeypatch.setattr(completion_store.json, "dump", broken_dump)
    with pytest.raises(OSError):
        store.mark_completed()

    assert JsonFileCompletionStore(str(path)).has_completed() is True
    assert [p.name for p in tmp_path.iterdir()] == ["completion.json"]
