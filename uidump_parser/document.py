# uidump_parser/document.py
"""
@file document.py
@brief Loads UI dump XML into an in-memory lxml element tree.
"""

from __future__ import annotations

import os
from typing import Any

from lxml import etree

from .exceptions import ConfigError, DocumentLoadError
from .utils.logging import get_logger

logger = get_logger(__name__)


def _make_parser() -> etree.XMLParser:
    """
    Parser that keeps elements only and never touches the network or external entities.

    huge_tree lifts the libxml2 nesting limit of 256 levels.
    """
    return etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
    )


def load_document(path: str) -> Any:
    """
    Parse the XML file at `path`.

    The file handle is only held for the duration of the parse.

    @return The document root element
    @throws ConfigError if path is empty
    @throws DocumentLoadError if the file cannot be read or is not well-formed XML
    """
    if not path:
        raise ConfigError("XML file is required. Use --file <xml_file>")

    logger.debug(f"Opening XML file: {path}")
    try:
        with open(path, "rb") as f:
            tree = etree.parse(f, _make_parser())
    except OSError as e:
        raise DocumentLoadError(path, e.strerror or str(e)) from e
    except etree.LxmlError as e:
        raise DocumentLoadError(path, str(e)) from e

    root = tree.getroot()
    if root is None:
        raise DocumentLoadError(path, "document has no root element")

    logger.debug(f"Successfully loaded XML file: {os.path.abspath(path)}")
    return root


def parse_document(data: bytes, source: str = "<bytes>") -> Any:
    """Parse XML bytes already in memory; `source` names them in errors."""
    try:
        return etree.fromstring(data, _make_parser())
    except etree.LxmlError as e:
        raise DocumentLoadError(source, str(e)) from e
