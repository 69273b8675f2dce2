# tests/unit/cache/test_unit_sqlite_store.py — v2
"""Tests for cache/sqlite_store.py — full functional tests (stdlib sqlite3)."""

from __future__ import annotations

import sqlite3

import pytest

from rudolf.core.errors import StoreOpenError, StoreQueryError, StoreWriteError
from rudolf.core.models import PuzzleRecord
from rudolf.cache.sqlite_store import SqlitePuzzleStore


@pytest.fixture
def store(db_path):
    s = SqlitePuzzleStore(db_path=db_path)
    s.open()
    yield s
    s.close()


class TestOpen:
    def test_creates_file_and_parent_dirs(self, db_path):
        assert not db_path.parent.exists()
        with SqlitePuzzleStore(db_path):
            pass
        assert db_path.is_file()

    def test_schema_creation_is_idempotent(self, db_path):
        for _ in range(3):
            with SqlitePuzzleStore(db_path) as s:
                assert s.get(2022, 1) is None
        conn = sqlite3.connect(str(db_path))
        tables = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table'"
        ).fetchall()
        conn.close()
        assert tables == [("puzzles",)]

    def test_corrupt_file(self, db_path):
        db_path.parent.mkdir(parents=True)
        db_path.write_bytes(b"x" * 4096)
        with pytest.raises(StoreOpenError, match="Cannot open"):
            SqlitePuzzleStore(db_path).open()

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(StoreOpenError):
            SqlitePuzzleStore(blocker / "rudolf.db").open()

    def test_open_twice(self, store):
        with pytest.raises(StoreOpenError, match="already open"):
            store.open()


class TestGetPut:
    def test_get_missing(self, store):
        assert store.get(2022, 1) is None

    def test_put_and_get_exact(self, store, sample_input):
        store.put(2022, 1, sample_input)
        assert store.get(2022, 1) == sample_input

    def test_preserves_whitespace_and_unicode(self, store):
        text = "  #..#\r\n\t.##.\n\n★\n"
        store.put(2019, 25, text)
        assert store.get(2019, 25) == text

    def test_get_record(self, store, sample_input):
        store.put(2022, 1, sample_input)
        record = store.get_record(2022, 1)
        assert record == PuzzleRecord(year=2022, day=1, text=sample_input)
        assert store.get_record(2022, 2) is None

    def test_keys_are_independent(self, store):
        store.put(2022, 1, "one")
        store.put(2022, 2, "two")
        store.put(2021, 1, "other year")
        assert store.get(2022, 1) == "one"
        assert store.get(2022, 2) == "two"
        assert store.get(2021, 1) == "other year"
        assert store.get(2021, 2) is None

    def test_duplicate_put_fails_loudly(self, store):
        store.put(2022, 1, "original")
        with pytest.raises(StoreWriteError, match="2022/01"):
            store.put(2022, 1, "replacement")
        assert store.get(2022, 1) == "original"

    def test_persists_across_handles(self, db_path, sample_input):
        with SqlitePuzzleStore(db_path) as s:
            s.put(2022, 1, sample_input)
        with SqlitePuzzleStore(db_path) as s:
            assert s.get(2022, 1) == sample_input


class TestClose:
    def test_get_after_close(self, store):
        store.close()
        with pytest.raises(StoreQueryError, match="not open"):
            store.get(2022, 1)

    def test_put_after_close(self, store):
        store.close()
        with pytest.raises(StoreWriteError, match="not open"):
            store.put(2022, 1, "x")

    def test_close_is_idempotent(self, db_path):
        s = SqlitePuzzleStore(db_path)
        s.close()
        s.open()
        s.close()
        s.close()
        assert s.is_open is False

    def test_context_manager_closes_on_error(self, db_path):
        s = SqlitePuzzleStore(db_path)
        with pytest.raises(RuntimeError):
            with s:
                assert s.is_open
                raise RuntimeError("boom")
        assert s.is_open is False

    def test_reopen_after_close(self, db_path):
        s = SqlitePuzzleStore(db_path)
        with s:
            s.put(2022, 3, "abc")
        with s:
            assert s.get(2022, 3) == "abc"
