"""
Partial-pattern matching of Siren values against sparse criteria.

Criteria are evaluated in a fixed order per value kind; the first failing
criterion decides the result and later ones are not evaluated.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence

from siren.models.criteria import (
    ActionCriteria,
    Criteria,
    EntityCriteria,
    FieldCriteria,
    LinkCriteria,
    MatchResult,
)
from siren.utils.structural import same_json

Check = Callable[[str, Any, Any], Optional[str]]


# -----------------------------------------------------------------------------
# Single Criterion Checks
# -----------------------------------------------------------------------------
def check_equal(label: str, expected: Any, actual: Any) -> Optional[str]:
    """JSON equality: `true` does not match `1`, arrays match tuples."""
    if same_json(expected, actual):
        return None
    return f"Expected {label} to be {expected!r} but was {actual!r}"


def check_subset(label: str, expected: Optional[Sequence[str]], actual: Sequence[str]) -> Optional[str]:
    """Every expected tag must be present; extra tags on the value are fine."""
    if expected is None:
        return None if not actual else f"Expected no {label} but was {list(actual)!r}"
    missing = [tag for tag in expected if tag not in actual]
    if not missing:
        return None
    return f"Expected {label} to contain {missing!r} but was {list(actual)!r}"


def check_properties(label: str, expected: Optional[Mapping[str, Any]], actual: Mapping[str, Any]) -> Optional[str]:
    if expected is None:
        return None if not actual else f"Expected no {label} but was {dict(actual)!r}"
    for key, value in expected.items():
        if key not in actual:
            return f"Expected {label} to contain {key!r}"
        if not same_json(actual[key], value):
            return f"Expected {label}[{key!r}] to be {value!r} but was {actual[key]!r}"
    return None


def _check_each(matcher: Callable[[Any, Any], MatchResult]) -> Check:
    """Every criterion in the list must be satisfied by some element of the value."""

    def check(label: str, expected: Optional[Sequence[Criteria]], actual: Sequence[Any]) -> Optional[str]:
        if expected is None:
            return None if not actual else f"Expected no {label} but found {len(actual)}"
        for criteria in expected:
            reasons = []
            for candidate in actual:
                result = matcher(candidate, criteria)
                if result:
                    break
                reasons.append(result.message)
            else:
                message = f"Expected {label} to contain a match for {{{criteria.describe()}}}"
                if len(reasons) == 1:
                    message += f": {reasons[0]}"
                return message
        return None

    return check


def _match(value: Any, criteria: Criteria, order: Sequence[tuple[str, Check]]) -> MatchResult:
    supplied = criteria.supplied
    for name, check in order:
        if name not in supplied:
            continue
        message = check(name.rstrip("_"), getattr(criteria, name), getattr(value, name, ()))
        if message is not None:
            return MatchResult.mismatch(message)
    return MatchResult.success()


# -----------------------------------------------------------------------------
# Value Matchers
# -----------------------------------------------------------------------------
def match_field(field: Any, criteria: FieldCriteria) -> MatchResult:
    return _match(field, criteria, FIELD_ORDER)


def match_link(link: Any, criteria: LinkCriteria) -> MatchResult:
    return _match(link, criteria, LINK_ORDER)


def match_action(action: Any, criteria: ActionCriteria) -> MatchResult:
    return _match(action, criteria, ACTION_ORDER)


def match_entity(entity: Any, criteria: EntityCriteria) -> MatchResult:
    return _match(entity, criteria, ENTITY_ORDER)


def match_sub_entity(sub_entity: Any, criteria: Criteria) -> MatchResult:
    """Link criteria apply to embedded links, entity criteria to embedded entities."""
    expected_kind = "link" if isinstance(criteria, LinkCriteria) else "entity"
    if sub_entity.kind != expected_kind:
        return MatchResult.mismatch(f"Expected an embedded {expected_kind} but was an embedded {sub_entity.kind}")
    return matches(sub_entity, criteria)


FIELD_ORDER: list[tuple[str, Check]] = [
    ("name", check_equal),
    ("class_", check_subset),
    ("type", check_equal),
    ("value", check_equal),
    ("title", check_equal),
]

LINK_ORDER: list[tuple[str, Check]] = [
    ("rel", check_subset),
    ("class_", check_subset),
    ("href", check_equal),
    ("title", check_equal),
    ("type", check_equal),
]

ACTION_ORDER: list[tuple[str, Check]] = [
    ("name", check_equal),
    ("method", check_equal),
    ("title", check_equal),
    ("type", check_equal),
    ("href", check_equal),
    ("class_", check_subset),
    ("fields", _check_each(match_field)),
]

ENTITY_ORDER: list[tuple[str, Check]] = [
    ("class_", check_subset),
    ("rel", check_subset),
    ("title", check_equal),
    ("properties", check_properties),
    ("actions", _check_each(match_action)),
    ("links", _check_each(match_link)),
    ("entities", _check_each(match_sub_entity)),
]

_MATCHERS: dict[type, Callable[[Any, Any], MatchResult]] = {
    FieldCriteria: match_field,
    LinkCriteria: match_link,
    ActionCriteria: match_action,
    EntityCriteria: match_entity,
}

_KINDS: dict[type, str] = {
    FieldCriteria: "field",
    LinkCriteria: "link",
    ActionCriteria: "action",
    EntityCriteria: "entity",
}


def matches(value: Any, criteria: Criteria) -> MatchResult:
    """
    Match `value` against criteria of the same kind.

    Raises TypeError when the criteria kind does not fit the value, e.g.
    ActionCriteria against a Link.
    """
    matcher = _MATCHERS.get(type(criteria))
    if matcher is None:
        raise TypeError(f"Unsupported criteria type: {type(criteria).__name__}")
    kind = getattr(value, "kind", None)
    if kind != _KINDS[type(criteria)]:
        raise TypeError(f"{type(criteria).__name__} cannot be matched against {type(value).__name__}")
    return matcher(value, criteria)
