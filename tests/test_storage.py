import os

import pytest

from surf_browser.bookmarks import BookmarkIndex
from surf_browser.common.errors import StoreIOError
from surf_browser.history import HistoryLog
from surf_browser.storage import PersistenceStore, decode_records, encode_records
from surf_browser.storage import persistence_store


def make_state(history_urls=(), bookmark_urls=()):
    history = HistoryLog()
    for url in history_urls:
        history.append(url)
    bookmarks = BookmarkIndex()
    for url in bookmark_urls:
        bookmarks.add(url)
    return history, bookmarks


def read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


# --- Record Format Tests ---

def test_encode_records():
    text = encode_records(["home", "google.com"], ["google.com"])

    assert text == "H:home\nH:google.com\nB:google.com\n"


def test_decode_records_skips_unknown_lines():
    text = "H:home\n\nX:nope\nB:https://openai.com\ngarbage\n"

    assert decode_records(text) == [("H", "home"), ("B", "https://openai.com")]


# --- PersistenceStore Tests ---

def test_round_trip(tmp_path):
    store = PersistenceStore(str(tmp_path / "data.txt"))
    store.save(*make_state(["home", "google.com"], ["google.com"]))

    history, bookmarks = store.load()

    assert list(history) == ["home", "google.com"]
    assert history.current == "google.com"
    assert bookmarks.list() == ["google.com"]


def test_save_writes_combined_snapshot(tmp_path):
    path = str(tmp_path / "data.txt")
    store = PersistenceStore(path)
    store.save(*make_state(["home"], ["m.com", "c.com", "x.com"]))

    assert read(path) == "H:home\nB:m.com\nB:c.com\nB:x.com\n"

    # 히스토리가 비어 있어도 북마크는 유지
    store.save(*make_state([], ["m.com"]))
    assert read(path) == "B:m.com\n"


def test_load_missing_file_returns_empty(tmp_path):
    store = PersistenceStore(str(tmp_path / "missing.txt"))

    history, bookmarks = store.load()

    assert len(history) == 0
    assert len(bookmarks) == 0


def test_load_preserves_persisted_duplicates(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("H:home\nB:a.com\nB:a.com\n", encoding="utf-8")

    history, bookmarks = PersistenceStore(str(path)).load()

    assert bookmarks.count_of("a.com") == 2


def test_load_unreadable_store_raises(tmp_path):
    store = PersistenceStore(str(tmp_path))

    with pytest.raises(StoreIOError):
        store.load()


def test_failed_save_leaves_store_untouched(tmp_path, monkeypatch):
    path = str(tmp_path / "data.txt")
    store = PersistenceStore(path)
    store.save(*make_state(["home"]))

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(persistence_store.os, "replace", fail_replace)

    with pytest.raises(StoreIOError):
        store.save(*make_state(["home", "google.com"]))

    assert read(path) == "H:home\n"
    assert os.listdir(tmp_path) == ["data.txt"]


def test_save_into_missing_directory_raises(tmp_path):
    store = PersistenceStore(str(tmp_path / "nope" / "data.txt"))

    with pytest.raises(StoreIOError):
        store.save(*make_state(["home"]))


def test_load_skips_lines_that_are_not_utf8(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"H:google.com\nB:openai.com\nH:caf\xe9\n")

    history, bookmarks = PersistenceStore(str(path)).load()

    assert list(history) == ["google.com"]
    assert bookmarks.list() == ["openai.com"]


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
def test_save_keeps_existing_file_mode(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("H:home\n", encoding="utf-8")
    os.chmod(path, 0o644)

    PersistenceStore(str(path)).save(*make_state(["home", "google.com"]))

    assert os.stat(path).st_mode & 0o777 == 0o644
    assert read(str(path)) == "H:home\nH:google.com\n"
