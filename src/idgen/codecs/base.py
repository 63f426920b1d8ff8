"""Base codec interface."""

from abc import ABC, abstractmethod


class TextCodec(ABC):
    """Base class for identifier text codecs.

    A codec maps a fixed-size byte sequence to its canonical string and back.
    Codecs are stateless; a single shared instance per family is enough.
    """

    #: Human-readable family name used in error messages
    family: str = ""

    #: Exact number of raw bytes the codec accepts
    byte_length: int = 0

    def check_length(self, raw: bytes) -> None:
        """Reject raw values of the wrong size.

        Raises:
            ValueError: If raw is not exactly byte_length bytes
        """
        if len(raw) != self.byte_length:
            raise ValueError(
                f"{self.family} requires {self.byte_length} bytes, got {len(raw)}"
            )

    @abstractmethod
    def encode(self, raw: bytes) -> str:
        """Encode raw bytes to canonical text.

        Args:
            raw: Identifier bytes (exactly byte_length long)

        Returns:
            Canonical identifier string
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode canonical text to raw bytes.

        Args:
            text: Identifier string

        Returns:
            Identifier bytes

        Raises:
            MalformedText: If text is not a valid encoding
        """
        pass

    def validate_format(self, text: str) -> bool:
        """Validate identifier text format.

        Args:
            text: Identifier string to validate

        Returns:
            True if text decodes cleanly
        """
        try:
            self.decode(text)
        except ValueError:
            return False
        return True
