"""Hex codec for ObjectIds."""

import re

from idgen.codecs.base import TextCodec
from idgen.exceptions import MalformedText


class ObjectIdCodec(TextCodec):
    """24 lower-case hex characters, two per byte.

    Format: TTTTTTTTMMMMMMMMMMCCCCCC

    Components:
        T: Unix seconds (4 bytes)
        M: Machine/process random component (5 bytes)
        C: Counter (3 bytes)
    """

    family = "ObjectId"
    byte_length = 12

    PATTERN_REGEX = re.compile(r"^[0-9a-fA-F]{24}$")

    def encode(self, raw: bytes) -> str:
        self.check_length(raw)
        return raw.hex()

    def decode(self, text: str) -> bytes:
        if not self.PATTERN_REGEX.fullmatch(text):
            raise MalformedText(
                self.family, text, "expected exactly 24 hexadecimal characters"
            )
        return bytes.fromhex(text)
