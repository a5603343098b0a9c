"""Countdown timer driven by frame deltas."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Timer:
    """Counts down from ``duration`` seconds while the game is playing."""

    duration: float
    time_left: float = field(init=False)

    def __post_init__(self) -> None:
        self.time_left = self.duration

    def update(self, dt: float, playing: bool) -> None:
        """Advance the timer by ``dt`` seconds, but only while playing."""
        if playing:
            self.time_left -= dt

    def reset(self) -> None:
        """Restore the full duration."""
        self.time_left = self.duration

    def is_done(self) -> bool:
        """Return True once the time has run out."""
        return self.time_left <= 0