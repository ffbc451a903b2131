"""Construction rules and lookups of Siren values."""

import pytest
from pydantic import ValidationError

from siren import Action, EmbeddedEntity, Entity, Field, Link


def test_values_are_immutable(submit_action: Action) -> None:
    with pytest.raises(ValidationError):
        submit_action.name = "other"


def test_lists_stored_as_tuples(submit_action: Action) -> None:
    assert submit_action.class_ == ("a", "b", "c")
    assert isinstance(submit_action.fields, tuple)


def test_class_accepts_json_name() -> None:
    assert Field(name="q", **{"class": ["required"]}).class_ == ("required",)


@pytest.mark.parametrize(
    "build",
    [
        lambda: Link(rel=[], href="/"),
        lambda: Action(name="", href="/"),
        lambda: Field(name=""),
        lambda: EmbeddedEntity(rel=[]),
    ],
)
def test_required_attributes_enforced(build) -> None:
    with pytest.raises(ValidationError):
        build()


def test_root_entity_cannot_be_embedded() -> None:
    """Ensure a sub-entity must carry rel, so a bare Entity is rejected."""
    with pytest.raises(ValidationError):
        Entity(entities=[Entity()])


def test_action_lookups(order_entity: Entity, submit_action: Action) -> None:
    assert order_entity.get_action("cancel").method == "DELETE"
    assert order_entity.get_action("missing") is None
    assert order_entity.get_actions_by_class("a") == [submit_action]
    assert submit_action.get_field("note").title == "Note"
    assert submit_action.get_field("missing") is None


def test_link_lookups(order_entity: Entity) -> None:
    assert order_entity.get_link("next").href == "https://api.example.com/orders/43"
    assert order_entity.get_link("missing") is None
    assert [link.rel for link in order_entity.get_links(class_="order")] == [("next",)]
    assert len(order_entity.get_links()) == 2


def test_sub_entity_lookups(order_entity: Entity) -> None:
    item = order_entity.get_sub_entity("https://rels.example.com/item")

    assert isinstance(item, EmbeddedEntity)
    assert item.get_link("self").href == "https://api.example.com/items/A1"
    assert order_entity.get_sub_entity("https://rels.example.com/customer").kind == "link"
    assert order_entity.get_sub_entities(class_="item") == [item]
    assert order_entity.get_sub_entity("missing") is None


def test_has_class(order_entity: Entity) -> None:
    assert order_entity.has_class("order")
    assert not order_entity.has_class("invoice")


def test_properties_are_read_only() -> None:
    """Ensure nested properties cannot be changed in place, keeping the hash stable."""
    entity = Entity(properties={"total": 10, "items": [{"sku": "A1"}]})
    before = hash(entity)

    with pytest.raises(TypeError):
        entity.properties["total"] = 11
    with pytest.raises(TypeError):
        entity.properties["items"][0]["sku"] = "B2"
    with pytest.raises(AttributeError):
        entity.properties["items"].append({"sku": "C3"})

    assert hash(entity) == before
    assert entity.properties == {"total": 10, "items": ({"sku": "A1"},)}


def test_default_properties_are_read_only() -> None:
    with pytest.raises(TypeError):
        Entity().properties["status"] = "new"


def test_field_value_is_read_only() -> None:
    field = Field(name="f", value=[1, {"a": [2]}])
    before = hash(field)

    with pytest.raises(AttributeError):
        field.value.append(3)
    with pytest.raises(TypeError):
        field.value[1]["a"] = 3

    assert hash(field) == before
    assert field.value == (1, {"a": (2,)})


def test_non_finite_numbers_rejected() -> None:
    with pytest.raises(ValidationError):
        Field(name="f", value=float("nan"))
    with pytest.raises(ValidationError):
        Entity(properties={"ratio": [1, float("inf")]})
