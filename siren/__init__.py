"""
Siren hypermedia values: immutable models with order-independent equality,
sparse matching against criteria, and a JSON codec.
"""
from siren.exceptions import DecodeError, EncodeError, SchemaError, SirenError
from siren.models import (
    Action,
    ActionCriteria,
    EmbeddedEntity,
    Entity,
    EntityCriteria,
    Field,
    FieldCriteria,
    Link,
    LinkCriteria,
    MatchResult,
    SirenModel,
    compare,
    equals,
)
from siren.services.codec import decode, decode_value, encode, to_dict
from siren.utils.matching import matches

__all__ = [
    "Action",
    "ActionCriteria",
    "DecodeError",
    "EmbeddedEntity",
    "EncodeError",
    "Entity",
    "EntityCriteria",
    "Field",
    "FieldCriteria",
    "Link",
    "LinkCriteria",
    "MatchResult",
    "SchemaError",
    "SirenError",
    "SirenModel",
    "compare",
    "decode",
    "decode_value",
    "encode",
    "equals",
    "matches",
    "to_dict",
]
