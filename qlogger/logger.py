"""Asynchronous logger that writes templated messages to the console and/or a file."""

from __future__ import annotations

import atexit
import enum
import queue
import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

DEFAULT_TEMPLATE = "{t} | {L} | {f}:{l} -> {m}"
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_STARTUP_FORMAT = "%Y-%m-%d_%H-%M-%S"
_BOM = "\ufeff"
_STOP = object()


class LogLevel(enum.IntEnum):
    """Severity of a log message, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    def label(self) -> str:
        """Return the name shown in formatted messages."""
        return self.name


class OutputTarget(enum.IntFlag):
    """Where formatted messages are written."""

    CONSOLE = 1
    FILE = 2
    BOTH = CONSOLE | FILE


@dataclass(frozen=True)
class LogRecord:
    """One message waiting to be written."""

    level: LogLevel
    message: str
    file: str
    line: int
    timestamp: str


def format_record(template: str, record: LogRecord) -> str:
    """Fill the placeholders {t}, {L}, {f}, {l} and {m} of a template."""
    result = template
    for placeholder, value in (
        ("{t}", record.timestamp),
        ("{L}", record.level.label()),
        ("{f}", record.file),
        ("{l}", str(record.line)),
        ("{m}", record.message),
    ):
        result = result.replace(placeholder, value)
    return result


def timestamped_path(file_path: str, startup_time: str) -> str:
    """Insert ``_<startup_time>`` before the last extension of a path."""
    text = str(file_path)
    stem, dot, extension = text.rpartition(".")
    if not dot:
        return f"{text}_{startup_time}"
    return f"{stem}_{startup_time}.{extension}"


class Logger:
    """Queue messages and write them from a background thread."""

    def __init__(self, console: TextIO | None = None) -> None:
        self.level = LogLevel.TRACE
        self.target = OutputTarget.CONSOLE
        self.format_template = DEFAULT_TEMPLATE
        self.startup_time = datetime.now().strftime(_STARTUP_FORMAT)
        self.file_path: str | None = None
        self._console = console
        self._file: TextIO | None = None
        self._file_lock = threading.Lock()
        self._queue: queue.Queue[Any] = queue.Queue()
        self._closed = False
        self._worker = threading.Thread(
            target=self._run, name="qlogger-worker", daemon=True
        )
        self._worker.start()

    def init(
        self,
        level: LogLevel,
        file_path: str,
        append: bool = True,
        add_timestamp_suffix: bool = True,
    ) -> None:
        """Set the minimum level and open the log file, creating its directory."""
        self.level = LogLevel(level)
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        path = (
            timestamped_path(file_path, self.startup_time)
            if add_timestamp_suffix
            else str(file_path)
        )
        handle = open(path, "a" if append else "w", encoding="utf-8")
        if handle.tell() == 0:
            handle.write(_BOM)
            handle.flush()
        with self._file_lock:
            if self._file is not None:
                self._file.close()
            self._file = handle
            self.file_path = path

    def log(self, level: LogLevel, message: str, file: str, line: int) -> None:
        """Queue a message if its level is at least the current minimum."""
        if self._closed:
            raise RuntimeError("logger is closed")
        if level < self.level:
            return
        record = LogRecord(
            level=LogLevel(level),
            message=message,
            file=file,
            line=line,
            timestamp=datetime.now().strftime(_TIMESTAMP_FORMAT),
        )
        self._queue.put(record)

    def _emit(self, level: LogLevel, args: tuple[Any, ...], depth: int) -> None:
        frame = sys._getframe(depth + 1)
        self.log(
            level,
            "".join(str(arg) for arg in args),
            frame.f_code.co_filename,
            frame.f_lineno,
        )

    def log_args(self, level: LogLevel, *args: Any) -> None:
        """Join the arguments into one message, tagged with the caller's location."""
        self._emit(level, args, 1)

    def trace(self, *args: Any) -> None:
        self._emit(LogLevel.TRACE, args, 1)

    def debug(self, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, args, 1)

    def info(self, *args: Any) -> None:
        self._emit(LogLevel.INFO, args, 1)

    def warning(self, *args: Any) -> None:
        self._emit(LogLevel.WARNING, args, 1)

    def error(self, *args: Any) -> None:
        self._emit(LogLevel.ERROR, args, 1)

    def critical(self, *args: Any) -> None:
        self._emit(LogLevel.CRITICAL, args, 1)

    def format_message(self, record: LogRecord) -> str:
        """Format a record with the current template."""
        return format_record(self.format_template, record)

    @property
    def _stream(self) -> TextIO:
        return self._console if self._console is not None else sys.stdout

    def _write(self, record: LogRecord) -> None:
        output = self.format_message(record)
        stream = self._stream
        target = self.target
        if target & OutputTarget.CONSOLE:
            print(f"[Console] {output}", file=stream, flush=True)
        if target & OutputTarget.FILE:
            with self._file_lock:
                if self._file is None:
                    print("[File] Файл не открыт!", file=stream, flush=True)
                    return
                print(f"[File] Запись в файл: {self.file_path}", file=stream)
                print(
                    f"[File] Записано байт: {len(output.encode('utf-8'))}",
                    file=stream,
                    flush=True,
                )
                self._file.write(output + "\n")
                self._file.flush()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                try:
                    self._write(item)
                except (OSError, ValueError) as exc:
                    print(f"qlogger: cannot write message: {exc}", file=sys.stderr)
            finally:
                self._queue.task_done()

    def flush(self) -> None:
        """Block until every queued message has been written."""
        self._queue.join()

    def close(self) -> None:
        """Write the remaining messages, stop the worker and close the file."""
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        self._worker.join()
        with self._file_lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


_default: Logger | None = None
_default_lock = threading.Lock()


def default_logger() -> Logger:
    """Return the shared process-wide logger, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Logger()
            atexit.register(_default.close)
        return _default


def trace(*args: Any) -> None:
    default_logger()._emit(LogLevel.TRACE, args, 1)


def debug(*args: Any) -> None:
    default_logger()._emit(LogLevel.DEBUG, args, 1)


def info(*args: Any) -> None:
    default_logger()._emit(LogLevel.INFO, args, 1)


def warning(*args: Any) -> None:
    default_logger()._emit(LogLevel.WARNING, args, 1)


def error(*args: Any) -> None:
    default_logger()._emit(LogLevel.ERROR, args, 1)


def critical(*args: Any) -> None:
    default_logger()._emit(LogLevel.CRITICAL, args, 1)