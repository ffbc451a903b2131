from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainSerializer,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from siren.utils.structural import (
    canonical_json,
    freeze,
    freeze_json,
    same_members,
    sort_key,
    thaw_json,
    unordered_hash,
)

# JSON values deep-frozen on construction and written back as plain JSON
JsonValue = Annotated[Any, AfterValidator(freeze_json), PlainSerializer(thaw_json)]
JsonObject = Annotated[Mapping[str, Any], AfterValidator(freeze_json), PlainSerializer(thaw_json)]


# -----------------------------------------------------------------------------
# Base Value Model
# -----------------------------------------------------------------------------
class SirenModel(BaseModel):
    """
    Immutable Siren value.

    Equality is structural: scalars compare by JSON value, tag lists (`class`,
    `rel`) and child collections compare as multisets. Subclasses describe
    themselves through `_scalars`, `_tags` and `_children`.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Attributes left out of the JSON output when empty
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"class_"})

    def _scalars(self) -> tuple[Any, ...]:
        return ()

    def _tags(self) -> tuple[tuple[str, ...], ...]:
        return ()

    def _children(self) -> tuple[tuple["SirenModel", ...], ...]:
        return ()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------
    @model_serializer(mode="wrap")
    def serialize_siren(
            self,
            handler: SerializerFunctionWrapHandler,
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            key = field.alias if field.alias in data else name
            if key not in data:
                continue
            value = getattr(self, name)
            if value is None or (name in self.omit_when_empty and not value):
                del data[key]
        return data

    # -------------------------------------------------------------------------
    # Equality, hashing, ordering
    # -------------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        if freeze(self._scalars()) != freeze(other._scalars()):
            return False
        for mine, theirs in zip(self._tags(), other._tags()):
            if not same_members(mine, theirs):
                return False
        for mine, theirs in zip(self._children(), other._children()):
            if not same_members(mine, theirs, key=sort_key):
                return False
        return True

    def __hash__(self) -> int:
        return hash((
            self.__class__.__name__,
            freeze(self._scalars()),
            *(unordered_hash(tags) for tags in self._tags()),
            *(unordered_hash(children) for children in self._children()),
        ))

    def sort_key(self) -> str:
        """
        Canonical text for this value, independent of child ordering.

        Defines an arbitrary total order used to line up collections before
        they are compared.
        """
        return canonical_json([
            self.__class__.__name__,
            list(self._scalars()),
            [sorted(tags) for tags in self._tags()],
            [sorted(child.sort_key() for child in children) for children in self._children()],
        ])

    def compare_to(self, other: Optional["SirenModel"]) -> int:
        if other is None:
            return 1
        mine, theirs = self.sort_key(), other.sort_key()
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def __lt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.compare_to(other) > 0


def equals(left: Optional[SirenModel], right: Optional[SirenModel]) -> bool:
    """Structural equality that also accepts absent values on either side."""
    if left is None or right is None:
        return left is right
    return left == right


def compare(left: SirenModel, right: Optional[SirenModel]) -> int:
    return left.compare_to(right)
