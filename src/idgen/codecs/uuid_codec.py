"""Hyphenated hex codec for UUIDs."""

import re

from idgen.codecs.base import TextCodec
from idgen.exceptions import MalformedText


class UuidCodec(TextCodec):
    """RFC 4122 text form: 8-4-4-4-12 hex groups, 36 characters.

    Format: xxxxxxxx-xxxx-Mxxx-Nxxx-xxxxxxxxxxxx

    Components:
        M: Version nibble
        N: Variant bits (8, 9, a or b for RFC 4122)

    Example:
        cfbff0d1-9375-5685-968c-48ce8b15ae17
    """

    family = "UUID"
    byte_length = 16

    PATTERN_REGEX = re.compile(
        r"^([0-9a-fA-F]{8})-([0-9a-fA-F]{4})-([0-9a-fA-F]{4})"
        r"-([0-9a-fA-F]{4})-([0-9a-fA-F]{12})$"
    )

    # Group boundaries in hex characters
    GROUPS = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))

    def encode(self, raw: bytes) -> str:
        """Encode 16 bytes as lower-case hyphenated hex.

        Example:
            >>> UuidCodec().encode(bytes(16))
            '00000000-0000-0000-0000-000000000000'
        """
        self.check_length(raw)
        digits = raw.hex()
        return "-".join(digits[start:end] for start, end in self.GROUPS)

    def decode(self, text: str) -> bytes:
        """Decode hyphenated hex in either case."""
        match = self.PATTERN_REGEX.fullmatch(text)
        if not match:
            raise MalformedText(
                self.family, text, "expected 8-4-4-4-12 hexadecimal groups"
            )
        return bytes.fromhex("".join(match.groups()))
