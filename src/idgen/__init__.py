"""
idgen - Unique Identifier Generation Library

Generates UUIDs (versions 1, 3, 4, 5, 6, 7, 8), ULIDs and ObjectIds and
renders them in their canonical text encodings.
"""

from idgen.exceptions import (
    IdgenError,
    InvalidArgument,
    InvalidPayloadLength,
    InvalidTimestamp,
    MalformedText,
    RandomOverflow,
)
from idgen.generators import ObjectIdGenerator, UlidGenerator, UuidGenerator
from idgen.models import ObjectIdValue, UlidValue, UuidValue

__version__ = "0.1.0"

__all__ = [
    "UuidGenerator",
    "UlidGenerator",
    "ObjectIdGenerator",
    "UuidValue",
    "UlidValue",
    "ObjectIdValue",
    "IdgenError",
    "InvalidArgument",
    "InvalidPayloadLength",
    "InvalidTimestamp",
    "MalformedText",
    "RandomOverflow",
]
