# uidump_parser/dispatch.py
"""
@file dispatch.py
@brief Selects the search criterion for a run and drives traversal and output.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from .config import SearchConfig
from .projector import project
from .traversal import traverse
from .utils.logging import get_logger

logger = get_logger(__name__)

NO_CRITERIA_MESSAGE = (
    "No search criteria specified. Use --resource-id, --class, --text, "
    "or --filter-attribute <attr=value>."
)
NO_MATCHES_MESSAGE = "No matching nodes found."


def run(
    root: Any,
    config: SearchConfig,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Search the tree under `root` as configured and print every match.

    @param root Document root element
    @param config Run configuration
    @param out Stream for matches (stdout by default)
    @param err Stream for notices (stderr by default)
    @return Number of matched nodes; 0 when no criterion was given
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    criterion, secondary = config.select()
    if criterion is None:
        print(NO_CRITERIA_MESSAGE, file=err)
        return 0

    directive = config.directive()
    logger.debug(
        f"Searching by {criterion.describe()}"
        + (f" with filter {secondary.attribute}={secondary.value}" if secondary else "")
    )

    matched = traverse(root, criterion, secondary, lambda node: project(node, directive, out))
    if matched == 0:
        print(NO_MATCHES_MESSAGE, file=err)
    return matched
