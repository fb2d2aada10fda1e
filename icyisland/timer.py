"""Game tick clock with pause support, and countdown timers built on it."""

from __future__ import annotations

import struct
import time
from typing import BinaryIO, Callable, Optional

_MASK = 0xFFFFFFFF
_RECORD = struct.Struct("<III")


def _monotonic_source() -> Callable[[], int]:
    origin = time.monotonic()

    def ticks() -> int:
        return int((time.monotonic() - origin) * 1000)

    return ticks


class GameClock:
    """Millisecond clock whose game ticks stand still while paused."""

    def __init__(self, source: Optional[Callable[[], int]] = None) -> None:
        self._source = source if source is not None else _monotonic_source()
        self.pause_ticks = 0
        self.pause_count = 0

    def raw_ticks(self) -> int:
        """Ticks of the underlying source, unaffected by pauses."""
        return int(self._source()) & _MASK

    def ticks(self) -> int:
        """Game ticks: source ticks minus all time spent paused."""
        if self.pause_count:
            return (self.pause_count - self.pause_ticks) & _MASK
        return (self.raw_ticks() - self.pause_ticks) & _MASK

    def reset(self) -> None:
        self.pause_ticks = 0
        self.pause_count = 0

    def pause(self) -> None:
        if self.pause_count == 0:
            self.pause_count = self.raw_ticks()

    def resume(self) -> None:
        if self.pause_count == 0:
            return
        self.pause_ticks = (self.pause_ticks + self.raw_ticks() - self.pause_count) & _MASK
        self.pause_count = 0

    def is_paused(self) -> bool:
        return self.pause_count != 0


class Timer:
    """A countdown of ``period`` milliseconds, measured in game or raw ticks."""

    def __init__(self, clock: GameClock, use_game_ticks: bool = True) -> None:
        self.clock = clock
        self.init(use_game_ticks)

    def init(self, use_game_ticks: bool) -> None:
        self.period = 0
        self.time = 0
        self.use_game_ticks = bool(use_game_ticks)

    def _now(self) -> int:
        return self.clock.ticks() if self.use_game_ticks else self.clock.raw_ticks()

    def start(self, period: int) -> None:
        self.time = self._now()
        self.period = period

    def stop(self) -> None:
        self.init(self.use_game_ticks)

    def check(self) -> bool:
        """True while the timer runs; once it has expired it is reset."""
        if self.time != 0 and self.time + self.period > self._now():
            return True
        self.time = 0
        return False

    def started(self) -> bool:
        return self.time != 0

    def time_left(self) -> int:
        """Milliseconds left; negative once the period has passed."""
        return self.period - (self._now() - self.time)

    def time_gone(self) -> int:
        return self._now() - self.time

    def write(self, stream: BinaryIO) -> None:
        """Store period, elapsed ticks and tick mode as three 32-bit words."""
        elapsed = (self._now() - self.time) & _MASK if self.time != 0 else 0
        stream.write(_RECORD.pack(self.period & _MASK, elapsed, int(self.use_game_ticks)))

    def read(self, stream: BinaryIO) -> None:
        """Restore a timer stored by :meth:`write`, relative to the current ticks."""
        data = stream.read(_RECORD.size)
        if len(data) != _RECORD.size:
            raise ValueError("truncated timer record")
        period, elapsed, mode = _RECORD.unpack(data)
        self.period = period
        self.use_game_ticks = bool(mode)
        self.time = (self._now() - elapsed) & _MASK if elapsed != 0 else 0