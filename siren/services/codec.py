"""
JSON codec for Siren values.

Decoding validates the payload through the pydantic models, so unknown
attributes are ignored and missing required attributes surface as a
SchemaError naming the attribute and the path of the object that lacks it.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from siren.config.settings import settings
from siren.exceptions import DecodeError, EncodeError, SchemaError
from siren.models.base import SirenModel
from siren.models.entity import Entity

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=SirenModel)

# Union tags inserted by pydantic into error locations of sub-entities
_SUB_ENTITY_TAGS = frozenset({"entity", "link"})

# Errors meaning the payload is not a JSON object at all
_DOCUMENT_ERRORS = frozenset({"json_invalid", "json_type", "model_type", "model_attributes_type"})


# -----------------------------------------------------------------------------
# Decode
# -----------------------------------------------------------------------------
def decode(text: Union[bytes, str]) -> Entity:
    """Decode a Siren document into an Entity."""
    return decode_value(text, Entity)


def decode_value(text: Union[bytes, str], model: type[M]) -> M:
    """Decode JSON text into any Siren value kind (Entity, Action, Link, Field)."""
    try:
        value = model.model_validate_json(text)
    except ValidationError as exc:
        raise _translate(exc, model) from exc

    logger.debug("Decoded %s from %d bytes", model.__name__, len(text))
    return value


def _translate(exc: ValidationError, model: type[SirenModel]) -> DecodeError:
    errors = exc.errors(include_url=False)
    first = errors[0]

    if first["type"] in _DOCUMENT_ERRORS and not first["loc"]:
        return DecodeError(f"Cannot decode {model.__name__}: {first['msg']}")

    loc = _clean_loc(first["loc"])
    field, path = _split_loc(loc)
    where = path or "<root>"
    if first["type"] == "missing":
        message = f"Missing required attribute '{field}' at {where}"
    else:
        message = f"Invalid attribute '{field}' at {where}: {first['msg']}"

    logger.debug("Schema error decoding %s: %s (%d error(s))", model.__name__, message, len(errors))
    return SchemaError(message, field=field, path=path, errors=errors)


def _clean_loc(loc: tuple[Union[str, int], ...]) -> list[Union[str, int]]:
    cleaned: list[Union[str, int]] = []
    for part in loc:
        if part in _SUB_ENTITY_TAGS and cleaned and isinstance(cleaned[-1], int):
            continue
        cleaned.append(part)
    return cleaned


def _split_loc(loc: list[Union[str, int]]) -> tuple[Optional[str], str]:
    """Split a location into the offending attribute and the path leading to it."""
    index = max((i for i, part in enumerate(loc) if isinstance(part, str)), default=None)
    if index is None:
        return None, render_path(loc)
    return str(loc[index]), render_path(loc[:index])


def render_path(loc: list[Union[str, int]]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


# -----------------------------------------------------------------------------
# Encode
# -----------------------------------------------------------------------------
def encode(value: SirenModel, indent: Optional[int] = None) -> bytes:
    """
    Render a Siren value as JSON bytes.

    Children are written in their in-memory order; output is always UTF-8,
    the only encoding `decode` reads. Raises EncodeError before anything is
    returned when a value is not JSON representable (including NaN and
    infinities).
    """
    if indent is None:
        indent = settings.SIREN_JSON_INDENT
    try:
        text = value.model_dump_json(by_alias=True, indent=indent)
    except (PydanticSerializationError, ValueError) as exc:
        raise EncodeError(f"Cannot encode {type(value).__name__}: {exc}") from exc

    payload = text.encode("utf-8")
    logger.debug("Encoded %s into %d bytes", type(value).__name__, len(payload))
    return payload


def to_dict(value: SirenModel) -> dict[str, Any]:
    """JSON-ready dict with the same omission rules as `encode`."""
    try:
        return value.model_dump(mode="json", by_alias=True)
    except (PydanticSerializationError, ValueError) as exc:
        raise EncodeError(f"Cannot encode {type(value).__name__}: {exc}") from exc
