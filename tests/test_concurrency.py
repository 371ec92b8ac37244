"""Tests for ordered delivery from concurrent callers"""

import io
import threading
import time

from stability_log import Logger, LoggerConfig, LogLevel
from stability_log.writers import ConsoleWriter, MemoryStore


class TestOrderedDelivery:
    """Test the single-worker FIFO delivery."""

    def make_logger(self, store):
        return Logger(
            LoggerConfig(level=LogLevel.VERBOSE, store_callback=store),
            console=ConsoleWriter(stream=io.StringIO()),
        )

    def test_single_thread_order(self):
        store = MemoryStore()
        logger = self.make_logger(store)

        for i in range(200):
            logger.info(str(i))
        logger.flush()

        assert [e.content for e in store.entries()] == [str(i) for i in range(200)]
        logger.shutdown()

    def test_per_thread_order_preserved(self):
        store = MemoryStore()
        logger = self.make_logger(store)
        thread_count = 8
        per_thread = 100
        barrier = threading.Barrier(thread_count)

        def worker(n):
            barrier.wait()
            for i in range(per_thread):
                logger.info(f"{n}:{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(thread_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        logger.flush()

        entries = store.entries()
        assert len(entries) == thread_count * per_thread

        seen = {n: [] for n in range(thread_count)}
        for entry in entries:
            n, i = entry.content.split(":")
            seen[int(n)].append(int(i))
        for n in range(thread_count):
            assert seen[n] == list(range(per_thread))
        logger.shutdown()

    def test_store_and_console_see_same_order(self):
        stream = io.StringIO()
        store = MemoryStore()
        logger = Logger(
            LoggerConfig(level=LogLevel.VERBOSE, store_callback=store,
                         show_date=False, show_file_info=False),
            console=ConsoleWriter(stream=stream),
        )

        def worker(n):
            for i in range(20):
                logger.info(f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        logger.flush()

        console_order = [
            line for line in stream.getvalue().splitlines()
            if line and not line.startswith("*") and not line.startswith("🔷")
        ]
        assert console_order == [e.content for e in store.entries()]
        logger.shutdown()

    def test_slow_store_does_not_block_callers(self):
        release = threading.Event()

        def slow_store(entry):
            release.wait(timeout=5)

        logger = Logger(
            LoggerConfig(level=LogLevel.VERBOSE, store_callback=slow_store),
            console=ConsoleWriter(stream=io.StringIO()),
        )

        start = time.monotonic()
        for i in range(20):
            logger.info(str(i))
        elapsed = time.monotonic() - start

        assert elapsed < 1.0
        release.set()
        logger.flush()
        assert logger.get_metrics()["processed"] == 20
        logger.shutdown()

    def test_delivery_runs_on_worker_thread(self):
        threads_seen = []
        logger = Logger(
            LoggerConfig(name="ordered", level=LogLevel.VERBOSE,
                         store_callback=lambda e: threads_seen.append(threading.current_thread().name)),
            console=ConsoleWriter(stream=io.StringIO()),
        )

        logger.info("a")
        logger.info("b")
        logger.flush()

        assert threads_seen == ["ordered-log-worker"] * 2
        logger.shutdown()


class TestShutdownDelivery:
    """Test that shutdown keeps single-worker FIFO delivery."""

    def test_shutdown_waits_for_slow_store(self):
        release = threading.Event()
        order = []
        threads_seen = set()

        def slow_store(entry):
            if entry.content == "first":
                release.wait(timeout=10)
            order.append(entry.content)
            threads_seen.add(threading.current_thread().name)

        logger = Logger(
            LoggerConfig(name="slow", level=LogLevel.VERBOSE, store_callback=slow_store),
            console=ConsoleWriter(stream=io.StringIO()),
        )

        logger.info("first")
        logger.info("second")
        threading.Timer(0.3, release.set).start()
        logger.shutdown()

        assert order == ["first", "second"]
        assert threads_seen == {"slow-log-worker"}

    def test_no_record_lost_when_shutdown_races_callers(self):
        store = MemoryStore()
        logger = Logger(
            LoggerConfig(level=LogLevel.VERBOSE, store_callback=store),
            console=ConsoleWriter(stream=io.StringIO()),
        )
        thread_count = 6
        per_thread = 300
        barrier = threading.Barrier(thread_count + 1)

        def worker(n):
            barrier.wait()
            for i in range(per_thread):
                logger.info(f"{n}:{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(thread_count)]
        for t in threads:
            t.start()
        barrier.wait()
        time.sleep(0.01)
        logger.shutdown()
        for t in threads:
            t.join()

        metrics = logger.get_metrics()
        assert metrics["logged"] + metrics["dropped"] == thread_count * per_thread
        assert metrics["processed"] == metrics["logged"]
        assert len(store) == metrics["logged"]
