"""Terminal control sequences written by the compositor and driver."""

from __future__ import annotations

ESC = "\x1b"

CURSOR_HOME = f"{ESC}[H"
CLEAR_SCREEN = f"{ESC}[2J"
RESET = f"{ESC}[0m"
OVERLAY_STYLE = f"{ESC}[38;2;255;255;255;48;2;0;0;0m"


def fg_rgb(r: int, g: int, b: int) -> str:
    return f"{ESC}[38;2;{r};{g};{b}m"


def cursor_to(row: int, col: int) -> str:
    # 1-based coordinates
    return f"{ESC}[{row};{col}H"
