"""Typed animation models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np


@dataclass(frozen=True, eq=False)
class Frame:
    """One decoded still image, stored as a read-only (height, width, 3) uint8 array."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        pixels = np.array(self.pixels, dtype=np.uint8, copy=True)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Frame pixels must have shape (height, width, 3), got {pixels.shape}")
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)


@dataclass(frozen=True)
class FrameSet:
    frames: tuple[Frame, ...]
    durations_ms: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        frames = tuple(self.frames)
        durations = tuple(int(d) for d in self.durations_ms) if self.durations_ms else (0,) * len(frames)
        if not frames:
            raise ValueError("FrameSet requires at least one frame")
        if len(durations) != len(frames):
            raise ValueError("Every frame needs exactly one display duration")
        if any(d < 0 for d in durations):
            raise ValueError("Display durations must be non-negative")
        object.__setattr__(self, "frames", frames)
        object.__setattr__(self, "durations_ms", durations)

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[tuple[Frame, int]]:
        return iter(zip(self.frames, self.durations_ms))

    def __getitem__(self, index: int) -> tuple[Frame, int]:
        return self.frames[index], self.durations_ms[index]

    @property
    def loop_ms(self) -> int:
        return sum(self.durations_ms)
