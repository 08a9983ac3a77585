"""Single-write output stream for composed frames."""

from __future__ import annotations

import io
import sys
from typing import Any


class TerminalOutput:
    """Thin wrapper over stdout that emits each composed buffer in one write call."""

    def __init__(self, stream: Any | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> Any:
        if self._stream is not None:
            return self._stream
        return getattr(sys.stdout, "buffer", sys.stdout)

    def write(self, text: str) -> int:
        stream = self.stream
        if isinstance(stream, io.TextIOBase):
            written = stream.write(text)
        else:
            written = stream.write(text.encode("utf-8"))
        # stdout is block-buffered when not a tty; push the frame out now.
        self.flush()
        return int(written or 0)

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()
