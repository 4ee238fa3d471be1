"""Asynchronous logger with pluggable sinks."""

from __future__ import annotations

import threading
import time
from collections import deque
from enum import IntEnum
from typing import Callable

from .enums import to_string


class Level(IntEnum):
    NONE = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TEST = 255


Sink = Callable[[Level, str], object]


class Logger:
    """Queues log entries and formats them on a background thread for every sink.

    Entries are held until at least one sink is registered, up to a
    configurable maximum; the oldest are dropped beyond that.
    """

    _instance: "Logger | None" = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entry_ready = threading.Condition(self._lock)
        self._written = threading.Condition()
        self._entries: deque[Callable[[], tuple[Level, str]]] = deque()
        self._max_entries = 100
        self._stop = False
        self._sinks: dict[int, Sink] = {}
        self._next_sink_id = 0
        self._entries_logged = 0
        self._entries_written = 0
        self._thread = threading.Thread(target=self._run, name="pivkit-logger", daemon=True)
        self._thread.start()

    @classmethod
    def instance(cls) -> "Logger":
        """Return the shared logger, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def add(self, level: Level, fmt: str, *args) -> int:
        """Queue a message; returns its entry id, or 0 once the logger is closed."""
        if self._stop:
            return 0
        level = Level(level)
        now = time.time_ns()
        thread_id = threading.get_ident()
        texts = tuple(str(arg) for arg in args)

        def entry() -> tuple[Level, str]:
            prefix = f"[{now}] ({thread_id}) {to_string(level)}: "
            return level, prefix + fmt.format(*texts)

        with self._lock:
            self._entries_logged += 1
            entry_id = self._entries_logged
            self._entries.append(entry)
            while len(self._entries) > self._max_entries:
                self._entries.popleft()
            self._entry_ready.notify()
        return entry_id

    def add_sink(self, sink: Sink) -> int:
        """Register a sink taking (level, line); returns its id."""
        with self._lock:
            sink_id = self._next_sink_id
            self._next_sink_id += 1
            self._sinks[sink_id] = sink
            self._entry_ready.notify()
        return sink_id

    def remove_sink(self, sink_id: int) -> bool:
        """Remove a sink; returns True if it was registered."""
        with self._lock:
            return self._sinks.pop(sink_id, None) is not None

    def set_max_entries_size(self, size: int) -> None:
        """Set how many unwritten entries are kept."""
        with self._lock:
            self._max_entries = size
            while len(self._entries) > self._max_entries:
                self._entries.popleft()

    def wait_until_written(self, entry_id: int) -> None:
        """Block until at least ``entry_id`` entries have been handed to sinks."""
        with self._written:
            self._written.wait_for(lambda: entry_id <= self._entries_written)

    def close(self) -> None:
        """Stop the background thread after flushing queued entries."""
        with self._lock:
            self._stop = True
            self._entry_ready.notify_all()
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join()

    def _run(self) -> None:
        while True:
            with self._lock:
                self._entry_ready.wait_for(
                    lambda: self._stop or (bool(self._sinks) and bool(self._entries))
                )
                batch = list(self._entries)
                self._entries.clear()
                sinks = list(self._sinks.values())
                stopping = self._stop

            for entry in batch:
                try:
                    level, line = entry()
                except (IndexError, KeyError, ValueError):
                    continue
                for sink in sinks:
                    try:
                        sink(level, line)
                    except Exception:  # a failing sink must not stop the logger
                        pass

            with self._written:
                self._entries_written += len(batch)
                self._written.notify_all()

            if stopping:
                break


def fatal(fmt: str, *args) -> None:
    Logger.instance().add(Level.FATAL, fmt, *args)


def error(fmt: str, *args) -> None:
    Logger.instance().add(Level.ERROR, fmt, *args)


def warn(fmt: str, *args) -> None:
    Logger.instance().add(Level.WARN, fmt, *args)


def info(fmt: str, *args) -> None:
    Logger.instance().add(Level.INFO, fmt, *args)


def debug(fmt: str, *args) -> None:
    Logger.instance().add(Level.DEBUG, fmt, *args)


def sync_debug(fmt: str, *args) -> None:
    """Log at DEBUG level and wait until the entry has been written."""
    logger = Logger.instance()
    entry_id = logger.add(Level.DEBUG, fmt, *args)
    logger.wait_until_written(entry_id)