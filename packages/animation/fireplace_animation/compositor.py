"""Compose a resampled grid and the uptime overlay into one terminal buffer."""

from __future__ import annotations

import math

import numpy as np

from . import ansi

BLOCK_GLYPH = "█"
OVERLAY_LABEL = "Uptime"


def format_uptime(elapsed: float) -> str:
    """``"Uptime: HH:MM:SS"`` for ``elapsed`` seconds, rounded to the nearest second.

    Hours keep counting past 24.
    """
    total = int(math.floor(max(0.0, float(elapsed)) + 0.5))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{OVERLAY_LABEL}: {hours:02d}:{minutes:02d}:{seconds:02d}"


def overlay_column(columns: int, text_len: int) -> int:
    """1-based start column that centers ``text_len`` cells, never left of column 1."""
    return max(1, (columns - text_len) // 2)


def compose(
    grid: np.ndarray,
    columns: int,
    rows: int,
    elapsed: float,
    glyph: str = BLOCK_GLYPH,
) -> str:
    """Build the complete escape-coded text for one frame.

    The pixel section holds one truecolor glyph per cell and ends each row with
    a style reset and a line break. The overlay is drawn on the last row; it is
    never truncated, so it may wrap on narrow terminals.
    """
    parts: list[str] = [ansi.CURSOR_HOME]
    row_end = ansi.RESET + "\n"

    for row in grid.tolist():
        for r, g, b in row:
            parts.append(ansi.fg_rgb(r, g, b))
            parts.append(glyph)
        parts.append(row_end)

    text = format_uptime(elapsed)
    parts.append(ansi.cursor_to(rows, overlay_column(columns, len(text))))
    parts.append(ansi.OVERLAY_STYLE)
    parts.append(text)
    parts.append(ansi.RESET)
    return "".join(parts)
