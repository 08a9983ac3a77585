"""Terminal package: geometry queries and single-write frame output."""

from .geometry import DEFAULT_SURFACE, DisplaySurfaceSizer, terminal_size
from .models import DisplaySurface
from .output import TerminalOutput

__all__ = [
    "DEFAULT_SURFACE",
    "DisplaySurface",
    "DisplaySurfaceSizer",
    "TerminalOutput",
    "terminal_size",
]
