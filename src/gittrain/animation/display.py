"""
Display layer - character-cell screens the train is drawn on.

``CursesDisplay`` adapts a curses window; ``run_on_terminal`` owns the terminal
for the duration of a callback and restores it on every exit path.
"""

from __future__ import annotations

import curses
from typing import Callable, Protocol, Tuple, TypeVar

T = TypeVar("T")


class Display(Protocol):
    """A fixed-size grid of character cells with a buffered flush."""

    def size(self) -> Tuple[int, int]:
        """Return ``(columns, rows)``."""

    def clear(self) -> None: ...

    def put(self, col: int, row: int, ch: str) -> None: ...

    def show(self) -> None: ...


class CursesDisplay:
    """Display backed by a curses window. Writes are buffered until ``show``."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr

    def size(self) -> Tuple[int, int]:
        rows, cols = self.stdscr.getmaxyx()
        return cols, rows

    def clear(self) -> None:
        self.stdscr.erase()

    def put(self, col: int, row: int, ch: str) -> None:
        rows, cols = self.stdscr.getmaxyx()
        # addch cannot advance the cursor past the bottom-right cell
        if row == rows - 1 and col == cols - 1:
            self.stdscr.insch(row, col, ch)
        else:
            self.stdscr.addch(row, col, ch)

    def show(self) -> None:
        self.stdscr.refresh()


def draw_text(display: Display, col: int, row: int, text: str) -> None:
    """Write ``text`` starting at ``(col, row)``, skipping cells off screen."""
    width, height = display.size()
    if row < 0 or row >= height:
        return
    for i, ch in enumerate(text):
        x = col + i
        if 0 <= x < width:
            display.put(x, row, ch)


def run_on_terminal(func: Callable[[Display], T]) -> T:
    """Run ``func`` with the terminal as a curses display.

    The cursor is hidden while ``func`` runs; the terminal is restored when it
    returns or raises, ``KeyboardInterrupt`` included.
    """

    def _main(stdscr) -> T:
        curses.curs_set(0)
        stdscr.clear()
        return func(CursesDisplay(stdscr))

    return curses.wrapper(_main)
