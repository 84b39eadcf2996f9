# uidump_parser/projector.py
"""
@file projector.py
@brief Renders matched nodes to the output stream.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from .criteria import PrintDirective
from .predicates import attribute_value
from .utils.logging import get_logger

logger = get_logger(__name__)


def project(element: Any, directive: PrintDirective, out: Optional[TextIO] = None) -> None:
    """
    Write one matched node.

    With a single-attribute directive prints ``<name>: <value>``, or a
    not-found notice naming the node. Otherwise prints a ``Node:`` header, one
    indented line per attribute in document order and a blank separator line.
    """
    out = out if out is not None else sys.stdout
    tag = element.tag
    logger.debug(f"Processing node: {tag}")

    if not directive.prints_all:
        name = directive.attribute
        value = attribute_value(element, name)
        if value is not None:
            out.write(f"{name}: {value}\n")
        else:
            out.write(f"Attribute '{name}' not found on node {tag}\n")
        return

    out.write(f"Node: {tag}\n")
    if element.attrib:
        for name, value in element.attrib.items():
            out.write(f"  {name}: {value}\n")
    else:
        out.write(f"  No attributes found for node: {tag}\n")
    out.write("\n")
