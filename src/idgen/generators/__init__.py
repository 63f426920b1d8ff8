"""Identifier generators, one per family."""

from idgen.generators.base import IdGenerator
from idgen.generators.objectid_generator import ObjectIdGenerator
from idgen.generators.ulid_generator import UlidGenerator
from idgen.generators.uuid_generator import SUPPORTED_VERSIONS, UuidGenerator

__all__ = [
    "IdGenerator",
    "UuidGenerator",
    "UlidGenerator",
    "ObjectIdGenerator",
    "SUPPORTED_VERSIONS",
]
