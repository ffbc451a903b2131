from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.responses import Response

from siren.config.settings import settings
from siren.exceptions import DecodeError, SchemaError
from siren.models.base import SirenModel
from siren.models.entity import Entity
from siren.services.codec import decode, encode


# -----------------------------------------------------------------------------
# Response
# -----------------------------------------------------------------------------
class SirenResponse(Response):
    """Renders Siren values with the codec and the Siren media type."""
    media_type = settings.SIREN_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        if isinstance(content, SirenModel):
            return encode(content)
        return super().render(content)


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------
async def siren_body(request: Request) -> Entity:
    """
    FastAPI dependency decoding the request body as a Siren entity.
    Malformed JSON maps to 400, a payload missing required attributes to 422.
    """
    body = await request.body()
    try:
        return decode(body)
    except SchemaError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "field": exc.field, "path": exc.path},
        )
    except DecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )
