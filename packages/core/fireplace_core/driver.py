"""Animation driver: size, resample, compose, write, sleep, forever."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from typing import Callable, Iterator

from fireplace_animation import BLOCK_GLYPH, Frame, FrameSet, compose, resample
from fireplace_animation.ansi import CLEAR_SCREEN
from fireplace_terminal import DisplaySurface, DisplaySurfaceSizer, TerminalOutput

from .logging_setup import log_event


@dataclass
class DriverStatus:
    ticks: int = 0
    frame_index: int | None = None
    surface: DisplaySurface | None = None
    last_render_s: float = 0.0


class AnimationDriver:
    """Plays a FrameSet in a loop on the terminal.

    One tick re-queries the surface, renders the frame, writes it in one call
    and then blocks for the frame's display duration. Late frames are never
    skipped and drift is not corrected.
    """

    def __init__(
        self,
        frames: FrameSet,
        sizer: DisplaySurfaceSizer | None = None,
        output: TerminalOutput | None = None,
        *,
        glyph: str = BLOCK_GLYPH,
        sleep: Callable[[float], None] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.frames = frames
        self.sizer = sizer or DisplaySurfaceSizer()
        self.output = output or TerminalOutput()
        self.glyph = glyph
        self._sleep = sleep or time.sleep
        self._clock = clock or time.monotonic
        self._start: float | None = None
        self._status = DriverStatus()

    @property
    def status(self) -> DriverStatus:
        return self._status

    @property
    def started_at(self) -> float | None:
        return self._start

    def start(self) -> None:
        if self._start is not None:
            return
        self._start = self._clock()
        self.output.write(CLEAR_SCREEN)
        log_event(
            "driver_started",
            f"animation started frames={len(self.frames)} loop_ms={self.frames.loop_ms}",
            frames=len(self.frames),
            loop_ms=self.frames.loop_ms,
        )

    def elapsed(self) -> float:
        if self._start is None:
            return 0.0
        return max(0.0, self._clock() - self._start)

    def schedule(self) -> Iterator[tuple[int, Frame, int]]:
        for index in itertools.cycle(range(len(self.frames))):
            frame, duration_ms = self.frames[index]
            yield index, frame, duration_ms

    def tick(self, frame: Frame, index: int | None = None) -> str:
        began = time.perf_counter()
        surface = self.sizer.query()
        grid = resample(frame, surface.columns, surface.rows)
        buffer = compose(grid, surface.columns, surface.rows, self.elapsed(), glyph=self.glyph)
        self.output.write(buffer)

        self._status.ticks += 1
        self._status.frame_index = index
        self._status.surface = surface
        self._status.last_render_s = time.perf_counter() - began
        return buffer

    def run(self, limit: int | None = None) -> DriverStatus:
        """Play until ``limit`` ticks have been rendered; ``None`` never returns."""
        self.start()
        if limit is not None and limit <= 0:
            return self._status

        for index, frame, duration_ms in self.schedule():
            self.tick(frame, index)
            if duration_ms > 0:
                self._sleep(duration_ms / 1000.0)
            if limit is not None and self._status.ticks >= limit:
                break
        return self._status
