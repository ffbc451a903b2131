from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import Field as PydanticField

from siren.models.base import SirenModel
from siren.models.criteria import ActionCriteria, MatchResult
from siren.models.field import Field
from siren.utils.matching import match_action
from siren.utils.structural import ordinal


# -----------------------------------------------------------------------------
# Action
# -----------------------------------------------------------------------------
class Action(SirenModel):
    """
    A state transition the client can perform.

    `name` identifies the action among its siblings and is the sort key:
    `compare_to` orders actions by ordinal comparison of their names.
    """
    kind: ClassVar[str] = "action"
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"class_", "fields"})

    name: str = PydanticField(
        ...,
        min_length=1,
        description="Name of the action, unique among sibling actions"
    )
    href: str = PydanticField(
        ...,
        description="Absolute or relative URI reference the action targets"
    )
    class_: tuple[str, ...] = PydanticField(
        (),
        alias="class",
        description="Classes describing the nature of the action"
    )
    method: Optional[str] = PydanticField(
        None,
        description="HTTP method; clients assume GET when absent"
    )
    title: Optional[str] = PydanticField(
        None,
        description="Text describing the action"
    )
    type: Optional[str] = PydanticField(
        None,
        description="Encoding type for the fields"
    )
    fields: tuple[Field, ...] = PydanticField(
        (),
        description="Input fields of the action"
    )

    def _scalars(self) -> tuple[Any, ...]:
        return (self.name, self.href, self.method, self.title, self.type)

    def _tags(self) -> tuple[tuple[str, ...], ...]:
        return (self.class_,)

    def _children(self) -> tuple[tuple[SirenModel, ...], ...]:
        return (self.fields,)

    def compare_to(self, other: Optional[Action]) -> int:
        if other is None:
            return 1
        return ordinal(self.name, other.name)

    def get_field(self, name: str) -> Optional[Field]:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def matches(self, criteria: Optional[ActionCriteria] = None, **kwargs: Any) -> MatchResult:
        return match_action(self, criteria if criteria is not None else ActionCriteria(**kwargs))
