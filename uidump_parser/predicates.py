# uidump_parser/predicates.py
from __future__ import annotations
from typing import Any, Optional

from .criteria import SearchCriterion, SecondaryFilter


def attribute_value(element: Any, name: str) -> Optional[str]:
    """Value of attribute `name`, or None when absent or not a valid attribute name."""
    try:
        return element.get(name)
    except ValueError:
        # lxml rejects malformed Clark names such as "{x"
        return None


def _attribute_equals(element: Any, attribute: str, expected: str) -> bool:
    actual = attribute_value(element, attribute)
    return actual is not None and actual == expected


def matches_primary(element: Any, criterion: SearchCriterion) -> bool:
    """Exact, case-sensitive equality on the criterion's attribute; absent never matches."""
    return _attribute_equals(element, criterion.attribute, criterion.value)


def matches_secondary(element: Any, secondary: Optional[SecondaryFilter]) -> bool:
    if secondary is None:
        return True
    return _attribute_equals(element, secondary.attribute, secondary.value)


def matches(element: Any, criterion: SearchCriterion, secondary: Optional[SecondaryFilter] = None) -> bool:
    return matches_primary(element, criterion) and matches_secondary(element, secondary)
