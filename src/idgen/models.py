"""
Identifier value types.

Each value wraps the raw bytes of one identifier. Values are immutable and
render to their canonical text through the family codec.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from idgen.codecs import OBJECTID_CODEC, ULID_CODEC, UUID_CODEC

#: RFC 4122 variant, the top two bits of byte 8
RFC4122_VARIANT = 0b10


@dataclass(frozen=True)
class UuidValue:
    """
    A 128-bit UUID.

    Time-based layouts (v1) partition the bytes as
    time_low(4) / time_mid(2) / time_hi_and_version(2) /
    clock_seq_hi_and_variant(1) / clock_seq_low(1) / node(6).
    """

    raw: bytes

    def __post_init__(self) -> None:
        UUID_CODEC.check_length(self.raw)

    @classmethod
    def parse(cls, text: str) -> UuidValue:
        """Decode canonical text (either case)."""
        return cls(UUID_CODEC.decode(text))

    def __str__(self) -> str:
        return UUID_CODEC.encode(self.raw)

    @property
    def as_int(self) -> int:
        return int.from_bytes(self.raw, "big")

    @property
    def version(self) -> int:
        return self.raw[6] >> 4

    @property
    def variant(self) -> int:
        return self.raw[8] >> 6

    @property
    def clock_seq(self) -> Optional[int]:
        """14-bit clock sequence for Gregorian time-based versions."""
        if self.version not in (1, 6):
            return None
        return ((self.raw[8] & 0x3F) << 8) | self.raw[9]

    @property
    def node(self) -> Optional[bytes]:
        if self.version not in (1, 6):
            return None
        return self.raw[10:]

    @property
    def timestamp(self) -> Optional[int]:
        """
        Decoded time field.

        100-ns ticks since 1582-10-15 for v1 and v6, Unix milliseconds for v7,
        None for every other version.
        """
        value = self.as_int
        if self.version == 1:
            time_low = value >> 96
            time_mid = (value >> 80) & 0xFFFF
            time_hi = (value >> 64) & 0x0FFF
            return (time_hi << 48) | (time_mid << 32) | time_low
        if self.version == 6:
            time_high = value >> 96
            time_mid = (value >> 80) & 0xFFFF
            time_low = (value >> 64) & 0x0FFF
            return (time_high << 28) | (time_mid << 12) | time_low
        if self.version == 7:
            return value >> 80
        return None


@dataclass(frozen=True)
class UlidValue:
    """A 128-bit ULID: 48-bit millisecond timestamp + 80-bit randomness."""

    raw: bytes

    def __post_init__(self) -> None:
        ULID_CODEC.check_length(self.raw)

    @classmethod
    def from_parts(cls, timestamp: int, randomness: int) -> UlidValue:
        return cls(timestamp.to_bytes(6, "big") + randomness.to_bytes(10, "big"))

    @classmethod
    def parse(cls, text: str) -> UlidValue:
        return cls(ULID_CODEC.decode(text))

    def __str__(self) -> str:
        return ULID_CODEC.encode(self.raw)

    @property
    def timestamp(self) -> int:
        return int.from_bytes(self.raw[:6], "big")

    @property
    def randomness(self) -> int:
        return int.from_bytes(self.raw[6:], "big")


@dataclass(frozen=True)
class ObjectIdValue:
    """A 96-bit ObjectId: seconds(4) + machine(5) + counter(3)."""

    raw: bytes

    def __post_init__(self) -> None:
        OBJECTID_CODEC.check_length(self.raw)

    @classmethod
    def from_parts(cls, timestamp: int, machine: bytes, counter: int) -> ObjectIdValue:
        return cls(timestamp.to_bytes(4, "big") + machine + counter.to_bytes(3, "big"))

    @classmethod
    def parse(cls, text: str) -> ObjectIdValue:
        return cls(OBJECTID_CODEC.decode(text))

    def __str__(self) -> str:
        return OBJECTID_CODEC.encode(self.raw)

    @property
    def timestamp(self) -> int:
        return int.from_bytes(self.raw[:4], "big")

    @property
    def machine(self) -> bytes:
        return self.raw[4:9]

    @property
    def counter(self) -> int:
        return int.from_bytes(self.raw[9:], "big")
