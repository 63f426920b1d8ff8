"""Pytest configuration and shared fixtures."""

import pytest


class FixedClock:
    """Clock frozen at a given number of nanoseconds since the Unix epoch."""

    def __init__(self, ns: int = 0):
        self.ns = ns

    def time_ns(self) -> int:
        return self.ns


class SequenceClock:
    """Clock returning the given readings in order, one per call."""

    def __init__(self, *readings: int):
        self.readings = list(readings)

    def time_ns(self) -> int:
        return self.readings.pop(0)


class ConstantRandom:
    """Random source returning the same byte over and over."""

    def __init__(self, byte: int = 0):
        self.byte = byte

    def token_bytes(self, n: int) -> bytes:
        return bytes([self.byte]) * n


class ScriptedRandom:
    """Random source replaying a fixed byte stream."""

    def __init__(self, data: bytes):
        self.data = data
        self.position = 0

    def token_bytes(self, n: int) -> bytes:
        chunk = self.data[self.position : self.position + n]
        assert len(chunk) == n, "scripted random stream exhausted"
        self.position += n
        return chunk


@pytest.fixture
def zero_random() -> ConstantRandom:
    return ConstantRandom(0x00)


@pytest.fixture
def ones_random() -> ConstantRandom:
    return ConstantRandom(0xFF)


@pytest.fixture
def epoch_clock() -> FixedClock:
    return FixedClock(0)
