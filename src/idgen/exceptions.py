"""Custom exceptions with helpful error messages."""


class IdgenError(Exception):
    """Base exception for idgen errors."""

    pass


class InvalidTimestamp(IdgenError, ValueError):
    """Timestamp override does not fit the identifier's time field."""

    def __init__(self, value: object, bits: int, unit: str):
        self.value = value
        self.bits = bits
        super().__init__(
            f"Invalid timestamp {value!r}: expected a non-negative integer "
            f"number of {unit} below 2**{bits} ({(1 << bits) - 1}).\n\n"
            f"Suggestions:\n"
            f"1. Use digits only, no sign or decimal point\n"
            f"2. Check the unit expected by the identifier type"
        )


class InvalidPayloadLength(IdgenError, ValueError):
    """Custom UUID payload is longer than 16 bytes."""

    def __init__(self, length: int, limit: int = 16):
        self.length = length
        super().__init__(
            f"Payload is {length} bytes long, but at most {limit} bytes "
            f"({limit * 2} hex characters) fit in a UUID.\n\n"
            f"Suggestions:\n"
            f"1. Shorten --data to {limit * 2} hex characters or fewer\n"
            f"2. Shorter payloads are right-padded with zero bytes"
        )


class MalformedText(IdgenError, ValueError):
    """Identifier text does not match the canonical encoding."""

    def __init__(self, family: str, text: str, reason: str):
        self.family = family
        self.text = text
        super().__init__(f"Invalid {family} text {text!r}: {reason}")


class RandomOverflow(IdgenError):
    """ULID random component cannot be incremented within the same millisecond."""

    def __init__(self, timestamp: int):
        self.timestamp = timestamp
        super().__init__(
            f"ULID random component overflowed at millisecond {timestamp}.\n\n"
            f"Suggestions:\n"
            f"1. Request fewer identifiers for a fixed --timestamp\n"
            f"2. Omit --timestamp so the clock can advance"
        )


class InvalidArgument(IdgenError, ValueError):
    """Missing, conflicting or unparseable generator option."""

    pass
