from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import Field as PydanticField

from siren.models.base import JsonValue, SirenModel
from siren.models.criteria import FieldCriteria, MatchResult
from siren.utils.matching import match_field
from siren.utils.structural import ordinal


# -----------------------------------------------------------------------------
# Field
# -----------------------------------------------------------------------------
class Field(SirenModel):
    """A single input of an Action."""
    kind: ClassVar[str] = "field"

    name: str = PydanticField(
        ...,
        min_length=1,
        description="Field name, unique among the fields of one action"
    )
    class_: tuple[str, ...] = PydanticField(
        (),
        alias="class",
        description="Classes describing the nature of the field"
    )
    type: Optional[str] = PydanticField(
        None,
        description="Input type (e.g. 'text', 'hidden'); absent means untyped"
    )
    value: JsonValue = PydanticField(
        None,
        description="Any JSON value; deep-frozen, passed through without coercion"
    )
    title: Optional[str] = PydanticField(
        None,
        description="Human readable description of the field"
    )

    def _scalars(self) -> tuple[Any, ...]:
        return (self.name, self.type, self.value, self.title)

    def _tags(self) -> tuple[tuple[str, ...], ...]:
        return (self.class_,)

    def compare_to(self, other: Optional[Field]) -> int:
        if other is None:
            return 1
        return ordinal(self.name, other.name)

    def matches(self, criteria: Optional[FieldCriteria] = None, **kwargs: Any) -> MatchResult:
        return match_field(self, criteria if criteria is not None else FieldCriteria(**kwargs))
