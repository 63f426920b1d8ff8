"""Canonical text codecs, one per identifier family."""

from idgen.codecs.base import TextCodec
from idgen.codecs.objectid_codec import ObjectIdCodec
from idgen.codecs.ulid_codec import UlidCodec
from idgen.codecs.uuid_codec import UuidCodec

UUID_CODEC = UuidCodec()
ULID_CODEC = UlidCodec()
OBJECTID_CODEC = ObjectIdCodec()

__all__ = [
    "TextCodec",
    "UuidCodec",
    "UlidCodec",
    "ObjectIdCodec",
    "UUID_CODEC",
    "ULID_CODEC",
    "OBJECTID_CODEC",
]
