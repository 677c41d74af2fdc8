"""
Animation engine - scrolls the train across a display one column per tick.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence

from gittrain.animation.display import Display, draw_text
from gittrain.animation.sprites import (
    BODY_HEIGHT,
    CARRIAGE_OFFSET,
    CARRIAGE_WIDTH,
    COAL_OFFSET,
    D51_BODY,
    D51_COAL,
    D51_WHEELS,
    Sprite,
    total_assembly_width,
)

# Columns travelled per wheel frame
WHEEL_FRAME_STEP = 3


class Phase(Enum):
    """Where the train is relative to the screen."""

    APPROACHING = "approaching"
    CROSSING = "crossing"
    DEPARTED = "departed"


@dataclass
class AnimationState:
    offset: int  # Column of the assembly origin, may be negative
    anchor: int  # Row of the top of the locomotive
    ticks: int = 0


@dataclass(frozen=True)
class Placement:
    """A sprite positioned relative to the screen."""

    col: int
    row: int
    sprite: Sprite


class Ticker:
    """Fixed-period clock. ``wait`` blocks until the next tick boundary.

    Boundaries missed while a frame was drawing are dropped rather than
    replayed in a burst.
    """

    def __init__(
        self,
        period: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.period = period
        self._clock = clock
        self._sleep = sleep
        self._next = clock() + period

    def wait(self) -> None:
        now = self._clock()
        delay = self._next - now
        if delay > 0:
            self._sleep(delay)
            self._next += self.period
        else:
            self._next = now + self.period


def wheel_frame_index(offset: int, total_width: int) -> int:
    """Wheel sprite for the current position; rotation follows distance, not time."""
    return ((offset + total_width) // WHEEL_FRAME_STEP) % len(D51_WHEELS)


def compose_train(offset: int, anchor: int, carriages: Sequence[Sprite]) -> List[Placement]:
    """Lay out every sprite of the train, left to right, for one frame."""
    total_width = total_assembly_width(len(carriages))
    placements = [
        Placement(offset, anchor, D51_BODY),
        Placement(offset, anchor + BODY_HEIGHT, D51_WHEELS[wheel_frame_index(offset, total_width)]),
        Placement(offset + COAL_OFFSET, anchor, D51_COAL),
    ]
    for i, carriage in enumerate(carriages):
        placements.append(Placement(offset + CARRIAGE_OFFSET + i * CARRIAGE_WIDTH, anchor, carriage))
    return placements


class AnimationEngine:
    """Drives the train from the right edge until it has fully left the screen.

    One tick is one full render pass followed by a blocking wait; the engine
    knows nothing about what happens after the train departs.
    """

    def __init__(self, display: Display, carriages: Sequence[Sprite], ticker: Ticker):
        self.display = display
        self.carriages = list(carriages)
        self.ticker = ticker
        self.total_width = total_assembly_width(len(self.carriages))

    def initial_state(self) -> AnimationState:
        cols, rows = self.display.size()
        return AnimationState(offset=cols, anchor=rows // 2 - BODY_HEIGHT // 2)

    def phase(self, state: AnimationState) -> Phase:
        if state.offset + self.total_width < 0:
            return Phase.DEPARTED
        cols, _ = self.display.size()
        if state.offset >= cols:
            return Phase.APPROACHING
        return Phase.CROSSING

    def draw(self, state: AnimationState) -> None:
        self.display.clear()
        for placement in compose_train(state.offset, state.anchor, self.carriages):
            for i, line in enumerate(placement.sprite):
                draw_text(self.display, placement.col, placement.row + i, line)
        self.display.show()

    def tick(self, state: AnimationState) -> AnimationState:
        """Render one frame, wait for the next boundary, move one column left."""
        self.draw(state)
        self.ticker.wait()
        state.offset -= 1
        state.ticks += 1
        return state

    def run(self) -> AnimationState:
        state = self.initial_state()
        while self.phase(state) is not Phase.DEPARTED:
            self.tick(state)
        self.display.clear()
        self.display.show()
        return state


def play(display: Display, carriages: Sequence[Sprite], tick_seconds: float) -> int:
    """Run a full crossing on ``display`` and return the number of ticks drawn."""
    engine = AnimationEngine(display, carriages, Ticker(tick_seconds))
    return engine.run().ticks
