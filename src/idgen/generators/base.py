"""Base generator interface."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from idgen.exceptions import InvalidArgument, InvalidTimestamp
from idgen.sources import Clock, RandomSource, SystemClock, SystemRandom

V = TypeVar("V")


class IdGenerator(ABC, Generic[V]):
    """Base class for identifier generators.

    A generator owns its clock, its random source and any per-instance state.
    Instances are not safe for concurrent use; give each worker its own.
    """

    def __init__(self, clock: Clock | None = None, rng: RandomSource | None = None):
        """Initialize generator.

        Args:
            clock: Time source (defaults to the system clock)
            rng: Entropy source (defaults to the secrets module)
        """
        self.clock = clock or SystemClock()
        self.rng = rng or SystemRandom()

    @abstractmethod
    def generate(self, **kwargs: Any) -> V:
        """Generate a single identifier."""
        pass

    def generate_batch(self, count: int, **kwargs: Any) -> list[V]:
        """Generate batch of identifiers.

        Args:
            count: Number of identifiers to generate
            **kwargs: Options passed to every generate() call

        Returns:
            Identifiers in generation order

        Raises:
            InvalidArgument: If count is negative
        """
        check_count(count)
        return [self.generate(**kwargs) for _ in range(count)]

    def random_int(self, n_bytes: int) -> int:
        return int.from_bytes(self.rng.token_bytes(n_bytes), "big")


def check_count(count: int) -> None:
    if count < 0:
        raise InvalidArgument(f"count must be zero or positive, got {count}")


def check_timestamp(value: Any, bits: int, unit: str) -> int:
    """Validate a timestamp override against the width of its field.

    Raises:
        InvalidTimestamp: If value is not an int in [0, 2**bits)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimestamp(value, bits, unit)
    if not 0 <= value < 1 << bits:
        raise InvalidTimestamp(value, bits, unit)
    return value
