from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import Field

from siren.models.base import SirenModel
from siren.models.criteria import LinkCriteria, MatchResult
from siren.utils.matching import match_link


# -----------------------------------------------------------------------------
# Link
# -----------------------------------------------------------------------------
class Link(SirenModel):
    """
    Navigational link. Also used as the embedded-link form of a sub-entity,
    in which case `rel` doubles as the sub-entity relation.

    Links have no natural sort key; `compare_to` orders them by their
    canonical text, and collections of links keep insertion order when
    serialized.
    """
    kind: ClassVar[str] = "link"

    rel: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Relation(s) of the link to the containing entity"
    )
    class_: tuple[str, ...] = Field(
        (),
        alias="class",
        description="Classes describing the linked resource"
    )
    href: str = Field(
        ...,
        description="Absolute or relative URI reference"
    )
    title: Optional[str] = Field(
        None,
        description="Text describing the link"
    )
    type: Optional[str] = Field(
        None,
        description="Media type of the linked resource"
    )

    def _scalars(self) -> tuple[Any, ...]:
        return (self.href, self.title, self.type)

    def _tags(self) -> tuple[tuple[str, ...], ...]:
        return (self.rel, self.class_)

    def has_rel(self, rel: str) -> bool:
        return rel in self.rel

    def matches(self, criteria: Optional[LinkCriteria] = None, **kwargs: Any) -> MatchResult:
        return match_link(self, criteria if criteria is not None else LinkCriteria(**kwargs))
