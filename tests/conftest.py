"""Pytest configuration and shared Siren fixtures."""

import json

import pytest

from siren import Action, EmbeddedEntity, Entity, Field, Link


@pytest.fixture
def submit_action() -> Action:
    return Action(
        name="submit",
        href="https://api.example.com/orders",
        method="POST",
        title="Submit order",
        type="application/json",
        class_=["a", "b", "c"],
        fields=[
            Field(name="quantity", type="number", value=1),
            Field(name="note", type="text", title="Note", class_=["optional"]),
        ],
    )


@pytest.fixture
def order_entity(submit_action: Action) -> Entity:
    return Entity(
        class_=["order"],
        title="Order 42",
        properties={"orderNumber": 42, "status": "pending", "items": [{"sku": "A1"}]},
        entities=[
            Link(rel=["https://rels.example.com/customer"], href="https://api.example.com/customers/7"),
            EmbeddedEntity(
                rel=["https://rels.example.com/item"],
                class_=["item"],
                properties={"sku": "A1", "quantity": 1},
                links=[Link(rel=["self"], href="https://api.example.com/items/A1")],
            ),
        ],
        actions=[
            submit_action,
            Action(name="cancel", href="https://api.example.com/orders/42", method="DELETE"),
        ],
        links=[
            Link(rel=["self"], href="https://api.example.com/orders/42"),
            Link(rel=["next"], href="https://api.example.com/orders/43", class_=["order"]),
        ],
    )


@pytest.fixture
def order_document() -> bytes:
    return json.dumps({
        "class": ["order"],
        "properties": {"orderNumber": 42, "total": 9.5},
        "entities": [
            {
                "class": ["items", "collection"],
                "rel": ["https://rels.example.com/order-items"],
                "href": "https://api.example.com/orders/42/items",
            },
            {
                "class": ["info", "customer"],
                "rel": ["https://rels.example.com/customer"],
                "properties": {"customerId": "pj123"},
                "links": [{"rel": ["self"], "href": "https://api.example.com/customers/pj123"}],
            },
        ],
        "actions": [
            {
                "name": "add-item",
                "title": "Add Item",
                "method": "POST",
                "href": "https://api.example.com/orders/42/items",
                "type": "application/x-www-form-urlencoded",
                "fields": [
                    {"name": "orderNumber", "type": "hidden", "value": "42"},
                    {"name": "productCode", "type": "text"},
                    {"name": "quantity", "type": "number"},
                ],
            }
        ],
        "links": [
            {"rel": ["self"], "href": "https://api.example.com/orders/42"},
            {"rel": ["previous"], "href": "https://api.example.com/orders/41"},
            {"rel": ["next"], "href": "https://api.example.com/orders/43"},
        ],
    }).encode("utf-8")
