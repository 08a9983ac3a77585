"""Animation package: GIF frame decoding, resampling, and terminal frame composition."""

from .compositor import BLOCK_GLYPH, OVERLAY_LABEL, compose, format_uptime, overlay_column
from .models import Frame, FrameSet
from .resample import resample
from .source import AssetDecodeError, load, load_embedded, read_payload

__all__ = [
    "AssetDecodeError",
    "BLOCK_GLYPH",
    "OVERLAY_LABEL",
    "Frame",
    "FrameSet",
    "compose",
    "format_uptime",
    "load",
    "load_embedded",
    "overlay_column",
    "read_payload",
    "resample",
]
