"""Time of day with one-second resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

MAX_HOUR = 24
MAX_MIN_SEC = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

_CLOCK_RE = re.compile(
    r"\s*([+-]?\d+)\s*\S\s*([+-]?\d+)\s*\S\s*([+-]?\d+)\s*"
)


@total_ordering
@dataclass(frozen=True)
class Clock:
    """A time of day stored as seconds since midnight."""

    seconds: int = 0

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> Clock:
        """Build a clock from hours, minutes and seconds, checking their ranges."""
        if not (
            0 <= hours < MAX_HOUR
            and 0 <= minutes < MAX_MIN_SEC
            and 0 <= seconds < MAX_MIN_SEC
        ):
            raise ValueError("Argumentos no validos")
        return cls(hours * SECONDS_PER_HOUR + minutes * MAX_MIN_SEC + seconds)

    @classmethod
    def parse(cls, text: str) -> Clock:
        """Parse ``hh:mm:ss``; any single separator character is accepted."""
        match = _CLOCK_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"not a time of day: {text!r}")
        hours, minutes, seconds = (int(part) for part in match.groups())
        return cls.from_hms(hours, minutes, seconds)

    def __add__(self, other: object) -> Clock:
        if not isinstance(other, Clock):
            return NotImplemented
        total = self.seconds + other.seconds
        if total >= SECONDS_PER_DAY:
            raise OverflowError("hoy no")
        return Clock(total)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Clock):
            return NotImplemented
        return self.seconds < other.seconds

    def __str__(self) -> str:
        hours, rest = divmod(self.seconds, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, MAX_MIN_SEC)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"