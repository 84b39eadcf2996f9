"""
uidump-parser - search Android UI dump XML for matching nodes.

This package provides:
- Criteria: SearchCriterion, SecondaryFilter and PrintDirective value types
- Predicates / traversal: exact attribute matching over a depth-first walk
- Projector: text rendering of matched nodes
- Dispatch: criterion selection and the search run
- Config: CLI/YAML configuration
"""

from uidump_parser.criteria import (
    CriterionKind,
    PrintDirective,
    SearchCriterion,
    SecondaryFilter,
    parse_attribute_filter,
)
from uidump_parser.config import SearchConfig, build_config, load_config_file
from uidump_parser.dispatch import run
from uidump_parser.document import load_document, parse_document
from uidump_parser.exceptions import ConfigError, DocumentLoadError, UIDumpError
from uidump_parser.predicates import matches, matches_primary, matches_secondary
from uidump_parser.projector import project
from uidump_parser.traversal import traverse, walk

__all__ = [
    "CriterionKind",
    "PrintDirective",
    "SearchCriterion",
    "SecondaryFilter",
    "parse_attribute_filter",
    "SearchConfig",
    "build_config",
    "load_config_file",
    "run",
    "load_document",
    "parse_document",
    "UIDumpError",
    "ConfigError",
    "DocumentLoadError",
    "matches",
    "matches_primary",
    "matches_secondary",
    "project",
    "traverse",
    "walk",
]

__version__ = "1.0.0"
