# logger_utils.py -  for logging messages and performance metrics, timestamps etc

from __future__ import annotations
import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """
    Lightweight leveled logger for messages and metrics.
    Lines look like: [YYYY-MM-DD HH:MM:SS] INFO    | message
     - path: append to this file (None = no file)
     - console: also echo to `stream`, colored when use_color is set
     - level: anything below it is dropped
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        level: str = "INFO",
        console: bool = False,
        use_color: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.path = path
        self.level = level.upper()
        if self.level not in LEVELS:
            raise ValueError(f"unknown log level: {level!r}")
        self.console = console
        self.use_color = use_color
        self.stream = stream

    @classmethod
    def quiet(cls) -> "Log":
        """Warnings and errors only, nowhere but stderr. Default for the core classes."""
        return cls(level="WARNING", console=True, use_color=False, stream=sys.stderr)

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file (if any) and echo it to the console (if enabled).
        """
        if not self.enabled_for(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            _append(self.path, line)

        if self.console:
            out = self.stream or sys.stdout
            if self.use_color and level in self.COLORS:
                out.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
            else:
                out.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str) -> None:
        self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts) at INFO.
        Example: suggest done: 0.002s
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("train_file"):
                do_some_work()
        The elapsed time is logged as a metric when the block exits.
        """
        return _Timer(self, label)


def _append(path: str, line: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit record how long the block took; exceptions propagate."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False
