import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "terminal"))

from fireplace_terminal.geometry import DEFAULT_SURFACE, DisplaySurfaceSizer, terminal_size
from fireplace_terminal.models import DisplaySurface


class TerminalSizeTests(unittest.TestCase):
    def test_non_terminal_fd_reports_failure(self):
        with tempfile.TemporaryFile() as fh:
            self.assertEqual(terminal_size(fh.fileno()), (0, 0, False))

    def test_bad_fd_reports_failure(self):
        self.assertEqual(terminal_size(-1), (0, 0, False))


class SizerTests(unittest.TestCase):
    def test_default_fallback_is_80x24(self):
        self.assertEqual(DEFAULT_SURFACE, DisplaySurface(columns=80, rows=24))

    def test_real_geometry(self):
        with patch("fireplace_terminal.geometry.terminal_size", return_value=(120, 40, True)):
            self.assertEqual(DisplaySurfaceSizer(fd=1).query(), DisplaySurface(120, 40))

    def test_failed_query_uses_fallback(self):
        with patch("fireplace_terminal.geometry.terminal_size", return_value=(0, 0, False)):
            self.assertEqual(DisplaySurfaceSizer(fd=1).query(), DEFAULT_SURFACE)

    def test_zero_sized_window_uses_fallback(self):
        sizer = DisplaySurfaceSizer(fd=1)
        with patch("fireplace_terminal.geometry.terminal_size", return_value=(0, 40, True)):
            self.assertEqual(sizer.query(), DEFAULT_SURFACE)
        with patch("fireplace_terminal.geometry.terminal_size", return_value=(120, 0, True)):
            self.assertEqual(sizer.query(), DEFAULT_SURFACE)

    def test_custom_fallback(self):
        sizer = DisplaySurfaceSizer(fd=-1, fallback=DisplaySurface(40, 12))
        self.assertEqual(sizer.query(), DisplaySurface(40, 12))

    def test_requeries_every_call(self):
        sizes = iter([(100, 30, True), (0, 0, False), (60, 20, True)])
        sizer = DisplaySurfaceSizer(fd=1)
        with patch("fireplace_terminal.geometry.terminal_size", side_effect=lambda fd: next(sizes)):
            got = [sizer.query(), sizer.query(), sizer.query()]
        self.assertEqual(got, [DisplaySurface(100, 30), DEFAULT_SURFACE, DisplaySurface(60, 20)])

    def test_stdout_without_fileno_uses_fallback(self):
        with patch("fireplace_terminal.geometry.sys.stdout", object()):
            self.assertEqual(DisplaySurfaceSizer().query(), DEFAULT_SURFACE)


if __name__ == "__main__":
    unittest.main()
