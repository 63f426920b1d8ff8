"""ObjectId generator."""

from __future__ import annotations

import logging

from idgen.generators.base import IdGenerator, check_count, check_timestamp
from idgen.models import ObjectIdValue
from idgen.sources import Clock, RandomSource

logger = logging.getLogger(__name__)

TIMESTAMP_BITS = 32
MACHINE_BYTES = 5
COUNTER_BYTES = 3
COUNTER_MODULUS = 1 << 24


class ObjectIdGenerator(IdGenerator[ObjectIdValue]):
    """ObjectId generator: seconds(4) + machine(5) + counter(3).

    The machine component and the counter start value are drawn once per
    instance. Identifiers from one instance are ordered by timestamp, then by
    counter. The counter wraps modulo 2**24 without error.
    """

    def __init__(self, clock: Clock | None = None, rng: RandomSource | None = None):
        super().__init__(clock, rng)
        self.machine = self.rng.token_bytes(MACHINE_BYTES)
        self._counter = self.random_int(COUNTER_BYTES)

    @property
    def counter(self) -> int:
        """Counter value the next ObjectId will carry."""
        return self._counter

    def generate(self, timestamp: int | None = None) -> ObjectIdValue:
        """Generate an ObjectId.

        Args:
            timestamp: Unix seconds (default: now)

        Raises:
            InvalidTimestamp: If timestamp is outside [0, 2**32)
        """
        if timestamp is None:
            timestamp = self.clock.time_ns() // 1_000_000_000
        seconds = check_timestamp(timestamp, TIMESTAMP_BITS, "seconds since 1970-01-01")

        counter = self._counter
        self._counter = (counter + 1) % COUNTER_MODULUS
        if self._counter == 0:
            logger.debug("ObjectId counter wrapped around")

        return ObjectIdValue.from_parts(seconds, self.machine, counter)

    def generate_batch(self, count: int, timestamp: int | None = None) -> list[ObjectIdValue]:
        """Generate batch of ObjectIds sharing one optional timestamp.

        Raises:
            InvalidArgument: If count is negative
            InvalidTimestamp: If timestamp is outside [0, 2**32), even for an empty batch
        """
        check_count(count)
        if timestamp is not None:
            check_timestamp(timestamp, TIMESTAMP_BITS, "seconds since 1970-01-01")
        return super().generate_batch(count, timestamp=timestamp)
