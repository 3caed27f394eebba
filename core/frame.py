"""core/frame.py — Frame timer.

Turns the monotonically increasing timestamps handed out by the frame
scheduler (milliseconds) into per-step delta-time in seconds.

    timer = FrameTimer()
    dt = timer.tick(pygame.time.get_ticks())

The first tick only records a baseline and returns 0.0 so the first
simulation step never sees a huge delta.
"""

from __future__ import annotations


class FrameTimer:
    def __init__(self):
        self.last_time: float | None = None

    @property
    def started(self) -> bool:
        return self.last_time is not None

    def tick(self, timestamp: float) -> float:
        """Return seconds elapsed since the previous tick."""
        if self.last_time is None:
            self.last_time = timestamp
            return 0.0
        dt = (timestamp - self.last_time) / 1000.0
        self.last_time = timestamp
        # Clock went backwards: treat as a zero-length frame
        return max(0.0, dt)

    def reset(self):
        """Forget the baseline; the next tick returns 0.0 again."""
        self.last_time = None
