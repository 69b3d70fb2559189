"""Console output with comment prefixes, line wrapping and a monitor file."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

from .fmt import format_message
from .settings import Settings


def _ticks() -> int:
    return int(time.process_time() * 1_000_000)


class Printer:
    """Writes formatted output, honouring the prlevel, prcomment, linesize and
    iodelay settings, and copies it into a monitor file when one is open."""

    def __init__(
        self,
        settings: Settings | None = None,
        stream: TextIO | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock if clock is not None else _ticks
        self.flushnum = 0
        self.cmd_error = False
        self._monitor: TextIO | None = None
        self._last_flush = 0

    def __enter__(self) -> "Printer":
        return self

    def __exit__(self, *exc) -> None:
        self.end_monitor()

    @property
    def monitoring(self) -> bool:
        return self._monitor is not None

    def _emit(self, text: str, force: bool = False) -> None:
        if not force and self.settings.get("prlevel") > 0:
            return
        self.stream.write(text)
        if self._monitor is not None:
            self._monitor.write(text)
            self._monitor.flush()

    def print(self, fmt: str, *args) -> None:
        self._emit(format_message(fmt, *args))

    def printnew(self, fmt: str, *args) -> None:
        self.newline()
        self.print(fmt, *args)

    def prinput(self, fmt: str, *args) -> None:
        """Write a prompt of the form '! <text> ? '."""
        self.print("! ")
        self.print(fmt, *args)
        self.print(" ? ")

    def prerror(self, fmt: str, *args) -> None:
        """Write an error message even when output is suppressed."""
        self._emit(format_message(fmt, *args), force=True)
        self.cmd_error = True

    def prflush(self, fmt: str, *args) -> None:
        """Write progress text, wrapping once the line grows past linesize."""
        text = format_message(fmt, *args)
        length = len(text)
        self.flushnum += length
        if self.flushnum > self.settings.get("linesize"):
            self.print("\n")
            self.flushnum = length
            self.newline()
        self._emit(text)
        ticks = self.clock()
        if ticks > self._last_flush + self.settings.get("iodelay"):
            self._last_flush = ticks
            self.stream.flush()

    def intflush(self, fmt: str, num: int) -> None:
        self.prflush("%s", format_message(fmt, num))

    def newline(self) -> None:
        """Start an output line, prefixed with '; ' when prcomment is on."""
        if self.settings.get("prcomment") > 0:
            self.print("; ")
            self.flushnum += 2

    def start_monitor(self, path) -> None:
        if self._monitor is not None:
            raise RuntimeError("monitoring is already being done")
        self._monitor = open(path, "w", encoding="utf-8")

    def end_monitor(self) -> None:
        if self._monitor is None:
            return
        monitor, self._monitor = self._monitor, None
        monitor.close()

    def monprint(self, fmt: str, *args) -> None:
        """Write only to the monitor file, if one is open."""
        if self._monitor is not None:
            self._monitor.write(format_message(fmt, *args))