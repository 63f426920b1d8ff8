"""ULID generator with monotonic randomness inside a batch."""

from __future__ import annotations

import logging

from idgen.exceptions import RandomOverflow
from idgen.generators.base import IdGenerator, check_count, check_timestamp
from idgen.models import UlidValue
from idgen.sources import Clock, RandomSource

logger = logging.getLogger(__name__)

TIMESTAMP_BITS = 48
RANDOM_BITS = 80
MAX_RANDOM = (1 << RANDOM_BITS) - 1


class UlidGenerator(IdGenerator[UlidValue]):
    """ULID generator.

    Single generation always draws fresh randomness. Batch generation keeps
    the last timestamp and random component so that identifiers minted in the
    same millisecond increase by one and sort in generation order.
    """

    def __init__(self, clock: Clock | None = None, rng: RandomSource | None = None):
        super().__init__(clock, rng)
        self._last_timestamp: int | None = None
        self._last_random: int | None = None

    def generate(self, timestamp: int | None = None) -> UlidValue:
        """Generate a ULID with fresh randomness.

        Args:
            timestamp: Unix milliseconds (default: now)

        Raises:
            InvalidTimestamp: If timestamp is outside [0, 2**48)
        """
        millis = self._timestamp(timestamp)
        return UlidValue.from_parts(millis, self.random_int(RANDOM_BITS // 8))

    def generate_batch(self, count: int, timestamp: int | None = None) -> list[UlidValue]:
        """Generate a monotonic batch of ULIDs.

        Args:
            count: Number of ULIDs
            timestamp: Unix milliseconds for every ULID (default: clock per item)

        Returns:
            ULIDs whose text sorts in generation order

        Raises:
            InvalidTimestamp: If timestamp is outside [0, 2**48)
            RandomOverflow: If the random component would pass 2**80 - 1
        """
        check_count(count)
        if timestamp is not None:
            check_timestamp(timestamp, TIMESTAMP_BITS, "milliseconds since 1970-01-01")
        self._last_timestamp = None
        self._last_random = None

        ulids = [self._next(timestamp) for _ in range(count)]
        logger.debug(f"Generated {count} ULIDs")
        return ulids

    def _timestamp(self, timestamp: int | None) -> int:
        if timestamp is None:
            timestamp = self.clock.time_ns() // 1_000_000
        return check_timestamp(timestamp, TIMESTAMP_BITS, "milliseconds since 1970-01-01")

    def _next(self, timestamp: int | None) -> UlidValue:
        millis = self._timestamp(timestamp)

        if self._last_timestamp is not None and millis <= self._last_timestamp:
            # Same millisecond, or the clock stepped back: keep the last one
            if self._last_random == MAX_RANDOM:
                raise RandomOverflow(self._last_timestamp)
            millis = self._last_timestamp
            randomness = self._last_random + 1
        else:
            randomness = self.random_int(RANDOM_BITS // 8)

        self._last_timestamp = millis
        self._last_random = randomness
        return UlidValue.from_parts(millis, randomness)
