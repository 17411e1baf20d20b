"""Thinking indicator built on yaspin."""
from __future__ import annotations

from yaspin import yaspin

from .ansi import console


class Spinner:
    """Display a small spinner next to a prefix while work is done."""

    def __init__(self, prefix: str = "", text: str = ""):
        self._prefix = prefix
        self._started = False
        # spinner after the text so prefix stays at the start
        self._spinner = yaspin(text=text, side="right")

    @property
    def running(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            return
        console.print(self._prefix, end="")
        console.file.flush()
        self._spinner.start()
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        self._spinner.stop()
        # wipe the indicator line so the reply starts at column 0
        console.print("\r" + " " * console.width + "\r", end="", markup=False, highlight=False)
        console.file.flush()
        self._started = False
