"""Tests for console writer and store callbacks"""

import io
import json
import threading

import pytest

from stability_log import LogEntry, LoggerBuilder, LogLevel
from stability_log.writers import ConsoleWriter, FileStore, MemoryStore


class TestConsoleWriter:
    """Test console output."""

    def test_write_appends_newline(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream).write("line")
        assert stream.getvalue() == "line\n"

    def test_colored_output(self):
        stream = io.StringIO()
        ConsoleWriter(colored=True, stream=stream).write("bad", LogLevel.ERROR)
        assert stream.getvalue() == "\033[31mbad\033[0m\n"

    def test_colored_needs_level(self):
        stream = io.StringIO()
        ConsoleWriter(colored=True, stream=stream).write("plain")
        assert stream.getvalue() == "plain\n"

    def test_write_raw(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream).write_raw("a", 1, None)
        assert stream.getvalue() == "a 1 None\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleWriter().write("to stdout")
        assert capsys.readouterr().out == "to stdout\n"


class TestMemoryStore:
    """Test in-memory store."""

    def test_assigns_sequential_ids(self):
        store = MemoryStore()
        store(LogEntry.create("a"))
        store(LogEntry.create("b"))

        assert [e.id for e in store.entries()] == [1, 2]
        assert [e.content for e in store.entries()] == ["a", "b"]

    def test_max_entries(self):
        store = MemoryStore(max_entries=2)
        for text in "abc":
            store(LogEntry.create(text))

        assert [e.content for e in store.entries()] == ["b", "c"]
        assert [e.id for e in store.entries()] == [2, 3]

    def test_invalid_max_entries(self):
        with pytest.raises(ValueError):
            MemoryStore(max_entries=0)

    def test_by_level(self):
        store = MemoryStore()
        store(LogEntry.create("a", level=LogLevel.INFO))
        store(LogEntry.create("b", level=LogLevel.ERROR))

        assert [e.content for e in store.by_level(LogLevel.ERROR)] == ["b"]

    def test_clear_keeps_counting(self):
        store = MemoryStore()
        store(LogEntry.create("a"))
        store.clear()
        store(LogEntry.create("b"))

        assert len(store) == 1
        assert store.entries()[0].id == 2

    def test_concurrent_store(self):
        store = MemoryStore()

        def worker():
            for _ in range(100):
                store(LogEntry.create("x"))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = sorted(e.id for e in store.entries())
        assert ids == list(range(1, 401))


class TestFileStore:
    """Test JSON-lines file store."""

    def test_writes_json_lines(self, tmp_path):
        path = tmp_path / "logs" / "app.jsonl"
        store = FileStore(path)
        store(LogEntry.create("first", level=LogLevel.INFO))
        store(LogEntry.create("second", level=LogLevel.ERROR))
        store.close()

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["content"] == "first"
        assert json.loads(lines[1])["id"] == 2

    def test_read_entries(self, tmp_path):
        path = tmp_path / "app.jsonl"
        store = FileStore(path)
        original = LogEntry.create("x", level=LogLevel.WARNING, file="/a/F.py",
                                   function="f", line=1)
        stored = store.store(original)
        store.close()

        entries = FileStore.read_entries(path)
        assert entries == [stored]
        assert entries[0].file_info == "F.py.f[1]"

    def test_ids_continue_after_reopen(self, tmp_path):
        path = tmp_path / "app.jsonl"
        store = FileStore(path)
        store(LogEntry.create("a"))
        store.close()

        store = FileStore(path)
        store(LogEntry.create("b"))
        store.close()

        assert [e.id for e in FileStore.read_entries(path)] == [1, 2]

    def test_write_after_close(self, tmp_path):
        store = FileStore(tmp_path / "app.jsonl")
        store.close()
        with pytest.raises(ValueError):
            store(LogEntry.create("late"))

    def test_malformed_line(self, tmp_path):
        path = tmp_path / "bad.jsonl"
        path.write_text("{not json}\n", encoding="utf-8")
        with pytest.raises(ValueError):
            FileStore.read_entries(path)


class TestFileStoreWithLogger:
    """Test a file store wired in through the builder."""

    def test_flush_reaches_file(self, tmp_path):
        path = tmp_path / "app.jsonl"
        logger = (LoggerBuilder()
            .with_level(LogLevel.INFO)
            .with_console(stream=io.StringIO())
            .with_file_store(path)
            .build())

        logger.info("persisted")
        logger.flush()

        assert [e.content for e in FileStore.read_entries(path)] == ["persisted"]
        logger.shutdown()

    def test_shutdown_closes_store(self, tmp_path):
        path = tmp_path / "app.jsonl"
        logger = (LoggerBuilder()
            .with_level(LogLevel.INFO)
            .with_console(stream=io.StringIO())
            .with_file_store(path)
            .build())

        logger.info("one")
        logger.error("two")
        logger.shutdown()

        entries = FileStore.read_entries(path)
        assert [e.content for e in entries] == ["one", "two"]
        assert [e.id for e in entries] == [1, 2]
        with pytest.raises(ValueError):
            logger.store_callback(LogEntry.create("late"))
