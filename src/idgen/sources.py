"""Clock and randomness abstractions for injectable time and entropy sources."""

from __future__ import annotations

import secrets
import time
from typing import Protocol


class Clock(Protocol):
    def time_ns(self) -> int: ...


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SystemClock:
    """Default implementation: wall clock in nanoseconds since the Unix epoch."""

    def time_ns(self) -> int:
        return time.time_ns()


class SystemRandom:
    """Default implementation: cryptographically strong random bytes."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)
