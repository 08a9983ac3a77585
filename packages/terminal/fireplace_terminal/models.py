"""Typed terminal models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplaySurface:
    columns: int
    rows: int
