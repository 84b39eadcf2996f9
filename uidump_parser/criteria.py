# uidump_parser/criteria.py
"""
@file criteria.py
@brief Search criterion, secondary filter and print directive value types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CriterionKind(Enum):
    """Primary match kinds, in selection priority order."""
    RESOURCE_ID = "resource-id"
    CLASS_NAME = "class"
    TEXT = "text"
    ATTRIBUTE_FILTER = "filter-attribute"


@dataclass(frozen=True)
class SecondaryFilter:
    """Extra attribute-equality constraint ANDed with the primary criterion."""
    attribute: str
    value: str


@dataclass(frozen=True)
class SearchCriterion:
    """
    The single primary search key of a run.

    `attribute` is the element attribute probed; for the three named kinds it is
    fixed by the kind, for ATTRIBUTE_FILTER it comes from the filter itself.
    """
    kind: CriterionKind
    attribute: str
    value: str

    @classmethod
    def resource_id(cls, value: str) -> SearchCriterion:
        return cls(CriterionKind.RESOURCE_ID, "resource-id", value)

    @classmethod
    def class_name(cls, value: str) -> SearchCriterion:
        return cls(CriterionKind.CLASS_NAME, "class", value)

    @classmethod
    def text(cls, value: str) -> SearchCriterion:
        return cls(CriterionKind.TEXT, "text", value)

    @classmethod
    def attribute_filter(cls, attribute_filter: SecondaryFilter) -> SearchCriterion:
        return cls(CriterionKind.ATTRIBUTE_FILTER, attribute_filter.attribute, attribute_filter.value)

    def describe(self) -> str:
        if self.kind is CriterionKind.ATTRIBUTE_FILTER:
            return f"{self.kind.value} {self.attribute}={self.value}"
        return f"{self.kind.value}={self.value}"


@dataclass(frozen=True)
class PrintDirective:
    """Print one named attribute per match, or all of them when `attribute` is None."""
    attribute: Optional[str] = None

    @property
    def prints_all(self) -> bool:
        return not self.attribute


def parse_attribute_filter(raw: Optional[str]) -> Optional[SecondaryFilter]:
    """
    Parse an ``attr=value`` string, splitting on the first '='.

    Returns None when there is no '=' or either side is empty.
    """
    if not raw or "=" not in raw:
        return None
    attribute, value = raw.split("=", 1)
    if not attribute or not value:
        return None
    return SecondaryFilter(attribute=attribute, value=value)
