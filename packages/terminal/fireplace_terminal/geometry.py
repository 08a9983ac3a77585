"""Terminal geometry lookup with a fixed fallback surface."""

from __future__ import annotations

import os
import sys

from .models import DisplaySurface

DEFAULT_SURFACE = DisplaySurface(columns=80, rows=24)


def terminal_size(fd: int) -> tuple[int, int, bool]:
    """Ask the OS for the character grid of ``fd`` as ``(columns, rows, ok)``."""
    try:
        size = os.get_terminal_size(fd)
    except (OSError, ValueError):
        return 0, 0, False
    return int(size.columns), int(size.lines), True


class DisplaySurfaceSizer:
    """Re-reads the terminal size on every call; never raises.

    A failed query and a zero-sized window are both answered with the fallback.
    """

    def __init__(self, fd: int | None = None, fallback: DisplaySurface = DEFAULT_SURFACE) -> None:
        self.fd = fd
        self.fallback = fallback

    def _fileno(self) -> int | None:
        if self.fd is not None:
            return self.fd
        try:
            return sys.stdout.fileno()
        except (AttributeError, OSError, ValueError):
            return None

    def query(self) -> DisplaySurface:
        fd = self._fileno()
        if fd is None:
            return self.fallback
        columns, rows, ok = terminal_size(fd)
        if not ok or columns <= 0 or rows <= 0:
            return self.fallback
        return DisplaySurface(columns=columns, rows=rows)
