"""
Sparse match criteria.

A criterion counts as supplied only when it was passed explicitly at
construction time; everything else is "don't care". Passing `None`
explicitly is a supplied criterion meaning "must be absent".
"""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Criteria(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    @property
    def supplied(self) -> frozenset[str]:
        return frozenset(self.model_fields_set)

    def describe(self) -> str:
        """Render the supplied criteria as `attr=value` pairs."""
        parts = []
        for name in type(self).model_fields:
            if name in self.model_fields_set:
                parts.append(f"{name.rstrip('_')}={_render(getattr(self, name))}")
        return ", ".join(parts) or "anything"


def _render(value: Any) -> str:
    if isinstance(value, Criteria):
        return "{" + value.describe() + "}"
    if isinstance(value, tuple):
        return "[" + ", ".join(_render(item) for item in value) + "]"
    return repr(value)


# -----------------------------------------------------------------------------
# Criteria Schemas
# -----------------------------------------------------------------------------
class FieldCriteria(Criteria):
    name: Optional[str] = None
    class_: Optional[tuple[str, ...]] = Field(None, alias="class")
    type: Optional[str] = None
    value: Any = None
    title: Optional[str] = None


class LinkCriteria(Criteria):
    rel: Optional[tuple[str, ...]] = None
    class_: Optional[tuple[str, ...]] = Field(None, alias="class")
    href: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None


class ActionCriteria(Criteria):
    name: Optional[str] = None
    class_: Optional[tuple[str, ...]] = Field(None, alias="class")
    method: Optional[str] = None
    href: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None
    fields: Optional[tuple[FieldCriteria, ...]] = Field(
        None,
        description="Each entry must be satisfied by some field of the action"
    )


class EntityCriteria(Criteria):
    class_: Optional[tuple[str, ...]] = Field(None, alias="class")
    rel: Optional[tuple[str, ...]] = Field(
        None,
        description="Only embedded entities carry rel"
    )
    title: Optional[str] = None
    properties: Optional[dict[str, Any]] = Field(
        None,
        description="Every key must be present on the entity with an equal value"
    )
    actions: Optional[tuple[ActionCriteria, ...]] = None
    links: Optional[tuple[LinkCriteria, ...]] = None
    entities: Optional[tuple[Union[EntityCriteria, LinkCriteria], ...]] = Field(
        None,
        description="LinkCriteria match embedded links, EntityCriteria match embedded entities"
    )


EntityCriteria.model_rebuild()


# -----------------------------------------------------------------------------
# Result
# -----------------------------------------------------------------------------
class MatchResult(BaseModel):
    """Outcome of a match; truthy when matched. Never raised."""
    model_config = ConfigDict(frozen=True)

    matched: bool
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.matched

    @classmethod
    def success(cls) -> MatchResult:
        return cls(matched=True)

    @classmethod
    def mismatch(cls, message: str) -> MatchResult:
        return cls(matched=False, message=message)
