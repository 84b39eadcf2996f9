# uidump_parser/traversal.py
"""
@file traversal.py
@brief Depth-first search over a parsed UI dump element tree.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from lxml import etree

from .criteria import CriterionKind, SearchCriterion, SecondaryFilter
from .predicates import matches
from .utils.logging import get_logger

logger = get_logger(__name__)


def _first_child(element: Any) -> Optional[Any]:
    return next(element.iterchildren(tag=etree.Element), None)


def _next_sibling(element: Any) -> Optional[Any]:
    return next(element.itersiblings(tag=etree.Element), None)


def iter_subtree(root: Optional[Any]) -> Iterator[Any]:
    """Pre-order walk of `root` and its descendants, each node exactly once."""
    if root is None:
        return
    stack: List[Any] = [root]
    while stack:
        node = stack.pop()
        yield node
        children = list(node.iterchildren(tag=etree.Element))
        stack.extend(reversed(children))


def iter_sibling_chains(start: Optional[Any]) -> Iterator[Any]:
    """
    Walk `start`, then its first child's sibling chain (recursively), then the
    siblings following `start`.

    Matches the subtree walk for a document root, which has no element siblings.
    """
    stack: List[Optional[Any]] = [start]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        # next sibling is visited only after the whole child chain is exhausted
        stack.append(_next_sibling(node))
        stack.append(_first_child(node))


def walk(root: Optional[Any], criterion: SearchCriterion) -> Iterator[Any]:
    """Yield nodes in the visit order used for `criterion`."""
    if criterion.kind is CriterionKind.ATTRIBUTE_FILTER:
        return iter_sibling_chains(root)
    return iter_subtree(root)


def traverse(
    root: Optional[Any],
    criterion: SearchCriterion,
    secondary: Optional[SecondaryFilter],
    emit: Callable[[Any], None],
) -> int:
    """
    Call `emit` for every node matching `criterion` and `secondary`.

    Every node is tested; matches never stop the walk or skip a subtree.

    @return Number of matched nodes
    """
    matched = 0
    visited = 0
    for node in walk(root, criterion):
        visited += 1
        if matches(node, criterion, secondary):
            matched += 1
            emit(node)
    logger.debug(f"Visited {visited} node(s), matched {matched} for {criterion.describe()}")
    return matched
