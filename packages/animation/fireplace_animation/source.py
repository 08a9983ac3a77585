"""Animation source: base64 transport text -> GIF -> FrameSet."""

from __future__ import annotations

import base64
import binascii
from importlib import resources
from io import BytesIO
from pathlib import Path

import numpy as np
from PIL import Image, ImageSequence, UnidentifiedImageError

from .models import Frame, FrameSet

EMBEDDED_ASSET = "fireplace.txt"


class AssetDecodeError(RuntimeError):
    """The animation payload could not be decoded; raised before playback starts."""

    def __init__(self, stage: str, detail: str) -> None:
        super().__init__(f"{stage} decode failed: {detail}")
        self.stage = stage
        self.detail = detail


def _decode_transport(payload: str | bytes) -> bytes:
    try:
        if isinstance(payload, str):
            payload = payload.encode("ascii")
        # Line breaks are allowed between base64 lines, nothing else.
        compact = b"".join(payload.split())
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise AssetDecodeError("base64", str(exc)) from exc


def _decode_gif(raw: bytes) -> FrameSet:
    frames: list[Frame] = []
    durations: list[int] = []
    try:
        with Image.open(BytesIO(raw)) as image:
            if image.format != "GIF":
                raise AssetDecodeError("gif", f"expected GIF data, got {image.format}")
            for frame in ImageSequence.Iterator(image):
                # Pillow already reports the GIF delay (1/100 s) in milliseconds.
                durations.append(max(0, int(frame.info.get("duration") or 0)))
                frames.append(Frame(np.asarray(frame.convert("RGB"), dtype=np.uint8)))
    except AssetDecodeError:
        raise
    except (UnidentifiedImageError, OSError, ValueError, EOFError) as exc:
        raise AssetDecodeError("gif", str(exc)) from exc

    if not frames:
        raise AssetDecodeError("gif", "no frames in animation")
    return FrameSet(frames=tuple(frames), durations_ms=tuple(durations))


def load(payload: str | bytes) -> FrameSet:
    return _decode_gif(_decode_transport(payload))


def read_payload(path: Path | str) -> str:
    return Path(path).expanduser().read_text(encoding="ascii")


def embedded_payload() -> str:
    return resources.files(__package__).joinpath("assets").joinpath(EMBEDDED_ASSET).read_text(encoding="ascii")


def load_embedded() -> FrameSet:
    return load(embedded_payload())
