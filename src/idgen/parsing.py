"""
Parsers for command-line option values.

Each parser turns raw option text into the typed value a generator expects
and raises the matching idgen exception on bad input. Range checks that
depend on the identifier layout stay in the generators.
"""

import re
import uuid as stdlib_uuid

from idgen.codecs import UUID_CODEC
from idgen.exceptions import InvalidArgument, InvalidPayloadLength, InvalidTimestamp

MAX_DATA_BYTES = 16

#: Well-known RFC 4122 namespaces, keyed by CLI name
NAMESPACES: dict[str, bytes] = {
    "dns": stdlib_uuid.NAMESPACE_DNS.bytes,
    "url": stdlib_uuid.NAMESPACE_URL.bytes,
    "oid": stdlib_uuid.NAMESPACE_OID.bytes,
    "x500": stdlib_uuid.NAMESPACE_X500.bytes,
}

DIGITS_REGEX = re.compile(r"^[0-9]+$")
HEX_REGEX = re.compile(r"^[0-9a-fA-F]+$")
MAC_REGEX = re.compile(
    r"^[0-9a-fA-F]{2}([:-]?)[0-9a-fA-F]{2}(?:\1[0-9a-fA-F]{2}){4}$"
)


def parse_timestamp(value: str, bits: int, unit: str) -> int:
    """Parse a non-negative integer timestamp.

    Args:
        value: Raw option text
        bits: Width of the target time field
        unit: Unit name used in error messages

    Returns:
        Timestamp as int

    Raises:
        InvalidTimestamp: If value is not made of digits only, or has more
            significant digits than the largest value of the field
    """
    text = value.strip()
    if not DIGITS_REGEX.match(text) or len(text.lstrip("0")) > len(str((1 << bits) - 1)):
        raise InvalidTimestamp(value, bits, unit)
    return int(text)


def parse_data(value: str) -> bytes:
    """Parse a hex payload for UUID v8.

    An odd number of hex digits is completed with a trailing zero nibble,
    so ``abc`` becomes ``ab c0``.

    Raises:
        InvalidArgument: If value is empty or not hexadecimal
        InvalidPayloadLength: If value encodes more than 16 bytes
    """
    text = value.strip()
    if not text:
        raise InvalidArgument("--data must not be empty")
    if not HEX_REGEX.match(text):
        raise InvalidArgument(f"--data must contain only hex characters, got {value!r}")

    byte_length = (len(text) + 1) // 2
    if byte_length > MAX_DATA_BYTES:
        raise InvalidPayloadLength(byte_length, MAX_DATA_BYTES)

    if len(text) % 2:
        text += "0"
    return bytes.fromhex(text)


def parse_node_id(value: str) -> bytes:
    """Parse a 48-bit MAC address.

    Accepts ``01:23:45:67:89:ab``, ``01-23-45-67-89-ab`` or ``0123456789ab``.

    Raises:
        InvalidArgument: If value is not a MAC address
    """
    text = value.strip()
    if not MAC_REGEX.match(text):
        raise InvalidArgument(
            f"Invalid node id {value!r}: expected a MAC address such as 01:23:45:67:89:ab"
        )
    return bytes.fromhex(re.sub(r"[:-]", "", text))


def parse_namespace(value: str) -> bytes:
    """Resolve a namespace name or custom 16-byte value.

    Args:
        value: One of dns/url/oid/x500 (any case), a hyphenated UUID,
            or 32 hex characters

    Returns:
        16 namespace bytes

    Raises:
        InvalidArgument: If value is neither a known name nor 16 bytes
    """
    text = value.strip()
    known = NAMESPACES.get(text.lower())
    if known is not None:
        return known

    if UUID_CODEC.validate_format(text):
        return UUID_CODEC.decode(text)

    if len(text) == 32 and HEX_REGEX.match(text):
        return bytes.fromhex(text)

    raise InvalidArgument(
        f"Unknown namespace {value!r}.\n\n"
        f"Suggestions:\n"
        f"1. Use one of: {', '.join(NAMESPACES)}\n"
        f"2. Or pass a custom namespace as a UUID or 32 hex characters"
    )
