from __future__ import annotations

from typing import Any, Optional, Sequence


class SirenError(Exception):
    """Base class for every error raised by the siren package."""


class DecodeError(SirenError):
    """Payload could not be read as a Siren document (bad JSON, wrong root)."""


class SchemaError(DecodeError):
    """
    Payload is valid JSON but does not fit the Siren shape.

    `field` names the first offending attribute and `path` the attribute
    path of the object containing it (empty string for the root).
    """

    def __init__(
            self,
            message: str,
            field: Optional[str] = None,
            path: str = "",
            errors: Optional[Sequence[dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.path = path
        self.errors = list(errors or [])


class EncodeError(SirenError):
    """A value could not be rendered as JSON."""
