"""Elapsed-time reporting and a flag set by keyboard interrupts."""

from __future__ import annotations

import signal
import time
from typing import Callable

from .output import Printer
from .settings import Settings


def format_elapsed(label: str, total: int) -> str:
    """Describe ``total`` seconds in minutes and seconds after ``label``."""
    minutes, seconds = divmod(total, 60)
    parts = [f"{label} "]
    if minutes > 1:
        parts.append(f"{minutes} minutes and ")
    elif minutes == 1:
        parts.append("1 minute and ")
    parts.append("1 second\n" if seconds == 1 else f"{seconds} seconds\n")
    return "".join(parts)


class Timer:
    """Measures processor time from a mark and reports it when the timer
    setting is on."""

    def __init__(
        self,
        settings: Settings | None = None,
        printer: Printer | None = None,
        clock: Callable[[], float] = time.process_time,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.printer = printer
        self._clock = clock
        self._start = clock()

    def mark(self) -> None:
        self._start = self._clock()

    def elapsed_seconds(self) -> int:
        return int(self._clock() - self._start)

    def report(self, label: str) -> str | None:
        """Return (and print, if a printer is set) the elapsed-time message.

        Nothing is reported while the timer setting is off or no whole
        second has passed.
        """
        if self.settings.get("timer") <= 0:
            return None
        total = self.elapsed_seconds()
        if total == 0:
            return None
        text = format_elapsed(label, total)
        if self.printer is not None:
            self.printer.newline()
            self.printer.print("%s", text)
        return text


class InterruptFlag:
    """Records that an interrupt arrived, to be polled by long computations."""

    def __init__(self) -> None:
        self._flag = False

    def _handle(self, signum, frame) -> None:
        self._flag = True

    def install(self):
        """Catch SIGINT into this flag; returns the handler it replaces."""
        self._flag = False
        return signal.signal(signal.SIGINT, self._handle)

    def set(self) -> None:
        self._flag = True

    def pending(self) -> bool:
        """Return whether an interrupt is waiting, clearing it if so."""
        if self._flag:
            self._flag = False
            return True
        return False

    def clear(self) -> None:
        self._flag = False