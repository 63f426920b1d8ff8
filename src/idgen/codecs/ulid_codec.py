"""Crockford Base32 codec for ULIDs.

ULID text is 26 characters of Crockford Base32 with no padding. 26 characters
carry 130 bits, so the first character never exceeds ``7`` for a 128-bit
value. The alphabet leaves out I, L, O and U.
"""

from typing import Final

from idgen.codecs.base import TextCodec
from idgen.exceptions import MalformedText

ALPHABET: Final[str] = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

_DECODE_MAP: Final[dict[str, int]] = {
    **{ch: i for i, ch in enumerate(ALPHABET)},
    **{ch.lower(): i for i, ch in enumerate(ALPHABET)},
}


class UlidCodec(TextCodec):
    """Fixed-width, upper-case Crockford Base32."""

    family = "ULID"
    byte_length = 16
    text_length = 26

    def encode(self, raw: bytes) -> str:
        self.check_length(raw)
        value = int.from_bytes(raw, "big")
        chars: list[str] = []
        for _ in range(self.text_length):
            value, rem = divmod(value, 32)
            chars.append(ALPHABET[rem])
        chars.reverse()
        return "".join(chars)

    def decode(self, text: str) -> bytes:
        if len(text) != self.text_length:
            raise MalformedText(
                self.family,
                text,
                f"expected {self.text_length} characters, got {len(text)}",
            )

        value = 0
        for ch in text:
            digit = _DECODE_MAP.get(ch)
            if digit is None:
                raise MalformedText(
                    self.family, text, f"character {ch!r} is not in the Crockford alphabet"
                )
            value = value * 32 + digit

        if value >> 128:
            raise MalformedText(self.family, text, "value exceeds 128 bits")

        return value.to_bytes(self.byte_length, "big")
