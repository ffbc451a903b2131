from __future__ import annotations

from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import Discriminator, Field, Tag

from siren.models.action import Action
from siren.models.base import JsonObject, SirenModel
from siren.models.criteria import ActionCriteria, EntityCriteria, LinkCriteria, MatchResult
from siren.models.link import Link
from siren.utils.matching import match_entity

# Attributes only a full entity carries; any one of them marks an embedded
# sub-entity as a full entity rather than an embedded link.
ENTITY_ONLY_ATTRIBUTES = frozenset({"properties", "entities", "actions"})


def sub_entity_kind(value: Any) -> Optional[str]:
    """Discriminant for the sub-entity union, computed from attribute presence."""
    if isinstance(value, dict):
        return "entity" if ENTITY_ONLY_ATTRIBUTES.intersection(value) else "link"
    return getattr(value, "kind", None)


SubEntity = Annotated[
    Union[
        Annotated["EmbeddedEntity", Tag("entity")],
        Annotated[Link, Tag("link")],
    ],
    Discriminator(sub_entity_kind),
]


# -----------------------------------------------------------------------------
# Entity
# -----------------------------------------------------------------------------
class Entity(SirenModel):
    """
    Root Siren document.

    `entities`, `actions` and `links` compare as unordered collections but
    are serialized in the order they were given.
    """
    kind: ClassVar[str] = "entity"

    class_: tuple[str, ...] = Field(
        (),
        alias="class",
        description="Classes describing the nature of the entity"
    )
    properties: JsonObject = Field(
        default_factory=dict,
        validate_default=True,
        description="State of the entity as arbitrary JSON values, read-only"
    )
    entities: tuple[SubEntity, ...] = Field(
        (),
        description="Embedded entities and embedded links"
    )
    actions: tuple[Action, ...] = Field(
        (),
        description="Actions available on the entity"
    )
    links: tuple[Link, ...] = Field(
        (),
        description="Navigational links"
    )
    title: Optional[str] = Field(
        None,
        description="Text describing the entity"
    )

    def _scalars(self) -> tuple[Any, ...]:
        return (self.title, self.properties)

    def _tags(self) -> tuple[tuple[str, ...], ...]:
        return (self.class_,)

    def _children(self) -> tuple[tuple[SirenModel, ...], ...]:
        return (self.entities, self.actions, self.links)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    def has_class(self, class_: str) -> bool:
        return class_ in self.class_

    def get_action(self, name: str) -> Optional[Action]:
        for action in self.actions:
            if action.name == name:
                return action
        return None

    def get_actions_by_class(self, class_: str) -> list[Action]:
        return [action for action in self.actions if class_ in action.class_]

    def get_link(self, rel: str) -> Optional[Link]:
        for link in self.links:
            if link.has_rel(rel):
                return link
        return None

    def get_links(self, rel: Optional[str] = None, class_: Optional[str] = None) -> list[Link]:
        return [
            link for link in self.links
            if (rel is None or rel in link.rel) and (class_ is None or class_ in link.class_)
        ]

    def get_sub_entity(self, rel: str) -> Optional[Union[EmbeddedEntity, Link]]:
        for sub_entity in self.entities:
            if rel in sub_entity.rel:
                return sub_entity
        return None

    def get_sub_entities(
            self,
            rel: Optional[str] = None,
            class_: Optional[str] = None,
    ) -> list[Union[EmbeddedEntity, Link]]:
        return [
            sub_entity for sub_entity in self.entities
            if (rel is None or rel in sub_entity.rel) and (class_ is None or class_ in sub_entity.class_)
        ]

    def find_action(self, criteria: Optional[ActionCriteria] = None, **kwargs: Any) -> Optional[Action]:
        """First action satisfying the criteria, in declaration order."""
        criteria = criteria if criteria is not None else ActionCriteria(**kwargs)
        for action in self.actions:
            if action.matches(criteria):
                return action
        return None

    def find_link(self, criteria: Optional[LinkCriteria] = None, **kwargs: Any) -> Optional[Link]:
        criteria = criteria if criteria is not None else LinkCriteria(**kwargs)
        for link in self.links:
            if link.matches(criteria):
                return link
        return None

    def matches(self, criteria: Optional[EntityCriteria] = None, **kwargs: Any) -> MatchResult:
        return match_entity(self, criteria if criteria is not None else EntityCriteria(**kwargs))


class EmbeddedEntity(Entity):
    """A full entity nested inside another, tagged with its relation."""
    rel: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Relation(s) of the sub-entity to its parent"
    )

    def _tags(self) -> tuple[tuple[str, ...], ...]:
        return (self.class_, self.rel)


Entity.model_rebuild()
EmbeddedEntity.model_rebuild()
