import io
import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "animation"))
sys.path.insert(0, str(ROOT / "packages" / "terminal"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from fireplace_animation import ansi
from fireplace_animation.models import Frame, FrameSet
from fireplace_core.driver import AnimationDriver
from fireplace_terminal.models import DisplaySurface
from fireplace_terminal.output import TerminalOutput


class FixedSizer:
    def __init__(self, *surfaces: DisplaySurface) -> None:
        self.surfaces = list(surfaces)
        self.calls = 0

    def query(self) -> DisplaySurface:
        self.calls += 1
        return self.surfaces[min(self.calls - 1, len(self.surfaces) - 1)]


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


def _solid(value: int) -> Frame:
    return Frame(np.full((2, 2, 3), value, dtype=np.uint8))


def _driver(durations, surface=DisplaySurface(2, 1), clock=None):
    frames = FrameSet(frames=tuple(_solid(i * 10) for i in range(len(durations))), durations_ms=tuple(durations))
    stream = io.StringIO()
    sleeps: list[float] = []
    driver = AnimationDriver(
        frames,
        sizer=FixedSizer(surface),
        output=TerminalOutput(stream),
        sleep=sleeps.append,
        clock=clock or FakeClock(),
    )
    return driver, stream, sleeps


class ScheduleTests(unittest.TestCase):
    def test_cycles_in_order_and_wraps(self):
        driver, _, _ = _driver([10, 20, 30])
        order = []
        for index, _frame, duration in driver.schedule():
            order.append((index, duration))
            if len(order) == 7:
                break
        self.assertEqual([i for i, _ in order], [0, 1, 2, 0, 1, 2, 0])
        self.assertEqual([d for _, d in order], [10, 20, 30, 10, 20, 30, 10])

    def test_single_frame_repeats(self):
        driver, _, _ = _driver([5])
        it = driver.schedule()
        self.assertEqual([next(it)[0] for _ in range(3)], [0, 0, 0])


class RunTests(unittest.TestCase):
    def test_start_clears_once(self):
        driver, stream, _ = _driver([10])
        driver.start()
        driver.start()
        self.assertEqual(stream.getvalue(), ansi.CLEAR_SCREEN)

    def test_sleeps_each_display_duration(self):
        driver, _, sleeps = _driver([100, 0, 80])
        status = driver.run(limit=5)
        self.assertEqual(status.ticks, 5)
        self.assertEqual(status.frame_index, 1)
        self.assertEqual(sleeps, [0.1, 0.08, 0.1])

    def test_zero_limit_renders_nothing(self):
        driver, stream, sleeps = _driver([10])
        status = driver.run(limit=0)
        self.assertEqual(status.ticks, 0)
        self.assertEqual(stream.getvalue(), ansi.CLEAR_SCREEN)
        self.assertEqual(sleeps, [])

    def test_overlay_uses_elapsed_since_start(self):
        clock = FakeClock(50.0)
        driver, _, _ = _driver([10], clock=clock)
        driver.start()
        clock.now = 50.0 + 3661
        buffer = driver.tick(driver.frames[0][0], 0)
        self.assertIn("Uptime: 01:01:01", buffer)

    def test_surface_requeried_every_tick(self):
        frames = FrameSet(frames=(_solid(0),), durations_ms=(0,))
        sizer = FixedSizer(DisplaySurface(3, 2), DisplaySurface(1, 1))
        stream = io.StringIO()
        driver = AnimationDriver(frames, sizer=sizer, output=TerminalOutput(stream), sleep=lambda s: None, clock=FakeClock())
        first = driver.tick(frames[0][0])
        second = driver.tick(frames[0][0])
        self.assertEqual(sizer.calls, 2)
        self.assertEqual(first.count("█"), 6)
        self.assertEqual(second.count("█"), 1)
        self.assertEqual(driver.status.surface, DisplaySurface(1, 1))

    def test_each_tick_is_one_write(self):
        writes: list[str] = []

        class RecordingOutput:
            def write(self, text: str) -> int:
                writes.append(text)
                return len(text)

        frames = FrameSet(frames=(_solid(1), _solid(2)), durations_ms=(0, 0))
        driver = AnimationDriver(frames, sizer=FixedSizer(DisplaySurface(2, 1)), output=RecordingOutput(), sleep=lambda s: None, clock=FakeClock())
        driver.run(limit=4)
        self.assertEqual(len(writes), 5)
        self.assertEqual(writes[0], ansi.CLEAR_SCREEN)
        self.assertTrue(all(w.startswith(ansi.CURSOR_HOME) for w in writes[1:]))


if __name__ == "__main__":
    unittest.main()
