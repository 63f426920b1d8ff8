"""UUID generator for versions 1, 3, 4, 5, 6, 7 and 8."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Callable

from idgen.exceptions import InvalidArgument, InvalidPayloadLength
from idgen.generators.base import IdGenerator, check_count, check_timestamp
from idgen.models import UuidValue
from idgen.parsing import MAX_DATA_BYTES, parse_namespace
from idgen.sources import Clock, RandomSource

logger = logging.getLogger(__name__)

#: 100-ns intervals between 1582-10-15 and 1970-01-01
GREGORIAN_OFFSET = 0x01B21DD213814000

GREGORIAN_BITS = 60
UNIX_MS_BITS = 48

SUPPORTED_VERSIONS = (1, 3, 4, 5, 6, 7, 8)
TIMESTAMP_VERSIONS = (1, 6, 7)


def stamp(value: int, version: int) -> bytes:
    """Set version nibble and RFC 4122 variant bits, leaving every other bit alone."""
    value &= ~(0xF000 << 64)
    value |= version << 76
    value &= ~(0xC000 << 48)
    value |= 0x8000 << 48
    return value.to_bytes(16, "big")


@dataclass(frozen=True)
class UuidOptions:
    """Per-call options; which ones apply depends on the version."""

    timestamp: int | None = None
    namespace: bytes | None = None
    name: str | None = None
    data: bytes | None = None
    node_id: bytes | None = None


class UuidGenerator(IdGenerator[UuidValue]):
    """UUID generator dispatching on version.

    Every version maps to one builder returning the 128-bit layout as an int.
    The version and variant bits are stamped afterwards in a single place.

    Example:
        >>> gen = UuidGenerator()
        >>> str(gen.generate(5, namespace="dns", name="example.com"))
        'cfbff0d1-9375-5685-968c-48ce8b15ae17'
    """

    def __init__(
        self,
        clock: Clock | None = None,
        rng: RandomSource | None = None,
        node_id: bytes | None = None,
    ):
        """Initialize generator.

        Args:
            clock: Time source
            rng: Entropy source
            node_id: Pinned 6-byte node for v1/v6 (default: random per instance)
        """
        super().__init__(clock, rng)
        if node_id is not None:
            _check_node_id(node_id)
        self.node_id = node_id
        self._pseudo_node: bytes | None = None
        self._builders: dict[int, Callable[[UuidOptions], int]] = {
            1: self._build_v1,
            3: self._build_v3,
            4: self._build_v4,
            5: self._build_v5,
            6: self._build_v6,
            7: self._build_v7,
            8: self._build_v8,
        }

    def generate(
        self,
        version: int = 4,
        *,
        timestamp: int | None = None,
        namespace: str | bytes | None = None,
        name: str | None = None,
        data: bytes | None = None,
        node_id: bytes | None = None,
    ) -> UuidValue:
        """Generate a UUID.

        Args:
            version: UUID version (1, 3, 4, 5, 6, 7 or 8)
            timestamp: v1/v6: 100-ns ticks since 1582-10-15; v7: Unix milliseconds
            namespace: v3/v5: well-known name, UUID text or 16 raw bytes
            name: v3/v5: name hashed after the namespace
            data: v8: 1 to 16 payload bytes
            node_id: v1/v6: 6-byte node overriding the instance node

        Returns:
            Generated UUID

        Raises:
            InvalidArgument: Unsupported version or missing/conflicting option
            InvalidTimestamp: Timestamp out of range for the version
            InvalidPayloadLength: v8 data longer than 16 bytes
        """
        options = self.check_options(
            version,
            timestamp=timestamp,
            namespace=namespace,
            name=name,
            data=data,
            node_id=node_id,
        )
        return UuidValue(stamp(self._builders[version](options), version))

    def check_options(
        self,
        version: int,
        *,
        timestamp: int | None = None,
        namespace: str | bytes | None = None,
        name: str | None = None,
        data: bytes | None = None,
        node_id: bytes | None = None,
    ) -> UuidOptions:
        """Validate options for a version without drawing any entropy.

        Returns:
            Resolved options ready for the version's builder

        Raises:
            Same as generate()
        """
        if version not in self._builders:
            raise InvalidArgument(
                f"Unsupported UUID version: {version}. "
                f"Available: {', '.join(str(v) for v in SUPPORTED_VERSIONS)}"
            )

        if timestamp is not None:
            if version not in TIMESTAMP_VERSIONS:
                raise InvalidArgument(
                    f"--timestamp cannot be used with UUID version {version}; "
                    f"only versions {', '.join(str(v) for v in TIMESTAMP_VERSIONS)} are time-based"
                )
            if version == 7:
                check_timestamp(timestamp, UNIX_MS_BITS, "milliseconds since 1970-01-01")
            else:
                check_timestamp(timestamp, GREGORIAN_BITS, "100-ns ticks since 1582-10-15")

        if node_id is not None:
            _check_node_id(node_id)

        options = UuidOptions(
            timestamp=timestamp,
            namespace=_resolve_namespace(namespace),
            name=name,
            data=data,
            node_id=node_id,
        )

        if version in (3, 5) and (options.namespace is None or options.name is None):
            raise InvalidArgument(
                "Name-based UUIDs require both --namespace and --name.\n\n"
                "Example:\n"
                "   idgen uuid -v 5 --namespace dns --name example.com"
            )

        if version == 8:
            if not data:
                raise InvalidArgument("UUID version 8 requires non-empty --data")
            if len(data) > MAX_DATA_BYTES:
                raise InvalidPayloadLength(len(data), MAX_DATA_BYTES)

        return options

    def generate_batch(self, count: int, version: int = 4, **kwargs: object) -> list[UuidValue]:
        """Generate batch of UUIDs.

        Options are checked once up front, so an invalid call fails even
        when count is zero.
        """
        check_count(count)
        self.check_options(version, **kwargs)
        uuids = super().generate_batch(count, version=version, **kwargs)
        logger.debug(f"Generated {count} UUIDv{version} values")
        return uuids

    # Gregorian time-based layouts

    def _gregorian_fields(self, options: UuidOptions) -> tuple[int, int, int]:
        if options.timestamp is None:
            ticks = self.clock.time_ns() // 100 + GREGORIAN_OFFSET
        else:
            ticks = options.timestamp
        ticks = check_timestamp(ticks, GREGORIAN_BITS, "100-ns ticks since 1582-10-15")

        # Fresh clock sequence per call
        clock_seq = self.random_int(2) & 0x3FFF
        node = options.node_id or self._node()
        return ticks, clock_seq, int.from_bytes(node, "big")

    def _node(self) -> bytes:
        if self.node_id is not None:
            return self.node_id
        if self._pseudo_node is None:
            mac = bytearray(self.rng.token_bytes(6))
            # Locally administered, unicast
            mac[0] = (mac[0] | 0x02) & 0xFE
            self._pseudo_node = bytes(mac)
            logger.debug(f"Drew pseudo node id {self._pseudo_node.hex(':')}")
        return self._pseudo_node

    def _build_v1(self, options: UuidOptions) -> int:
        ticks, clock_seq, node = self._gregorian_fields(options)
        time_low = ticks & 0xFFFFFFFF
        time_mid = (ticks >> 32) & 0xFFFF
        time_hi = (ticks >> 48) & 0x0FFF
        return time_low << 96 | time_mid << 80 | time_hi << 64 | clock_seq << 48 | node

    def _build_v6(self, options: UuidOptions) -> int:
        ticks, clock_seq, node = self._gregorian_fields(options)
        time_high = ticks >> 28
        time_mid = (ticks >> 12) & 0xFFFF
        time_low = ticks & 0x0FFF
        return time_high << 96 | time_mid << 80 | time_low << 64 | clock_seq << 48 | node

    # Name-based layouts

    def _name_input(self, options: UuidOptions) -> bytes:
        return options.namespace + options.name.encode("utf-8")

    def _build_v3(self, options: UuidOptions) -> int:
        digest = hashlib.md5(self._name_input(options)).digest()
        return int.from_bytes(digest, "big")

    def _build_v5(self, options: UuidOptions) -> int:
        digest = hashlib.sha1(self._name_input(options)).digest()
        return int.from_bytes(digest[:16], "big")

    # Random, Unix time and custom layouts

    def _build_v4(self, options: UuidOptions) -> int:
        return self.random_int(16)

    def _build_v7(self, options: UuidOptions) -> int:
        if options.timestamp is None:
            millis = self.clock.time_ns() // 1_000_000
        else:
            millis = options.timestamp
        millis = check_timestamp(millis, UNIX_MS_BITS, "milliseconds since 1970-01-01")

        # 80 random bits; stamping overwrites 6 of them
        return millis << 80 | self.random_int(10)

    def _build_v8(self, options: UuidOptions) -> int:
        return int.from_bytes(options.data.ljust(MAX_DATA_BYTES, b"\x00"), "big")


def _check_node_id(node_id: bytes) -> None:
    if len(node_id) != 6:
        raise InvalidArgument(f"node id must be 6 bytes, got {len(node_id)}")


def _resolve_namespace(namespace: str | bytes | None) -> bytes | None:
    if namespace is None:
        return None
    if isinstance(namespace, str):
        return parse_namespace(namespace)
    if len(namespace) != 16:
        raise InvalidArgument(f"namespace must be 16 bytes, got {len(namespace)}")
    return bytes(namespace)
