# uidump_parser/cli.py
"""
@file cli.py
@brief Command-line interface for uidump-parser.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import build_config, load_config_file
from .dispatch import run
from .document import load_document
from .exceptions import UIDumpError
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXAMPLES = """\
Examples:
  uidump-parser --file dump.xml --resource-id com.example --print-only bounds --debug
  uidump-parser --file dump.xml --resource-id com.example --filter-attribute text=Grindr --print-only bounds
  uidump-parser --file dump.xml --class android.widget.TextView --filter-attribute enabled=true
  uidump-parser --file dump.xml --text Instagram --filter-attribute package=com.example --bounds
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="uidump-parser",
        description="Search an Android UI dump XML file for matching nodes",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--file", "-f", default=None, help="Path to the XML file to parse (required)")
    p.add_argument("--resource-id", "-r", dest="resource_id", default=None, help="Search for a node with the given resource-id")
    p.add_argument("--class", "-c", dest="class_name", default=None, help="Search for a node with the given class name")
    p.add_argument("--text", "-t", default=None, help="Search for a node with the given text value")
    p.add_argument("--filter-attribute", "-F", dest="filter_attribute", default=None, metavar="ATTR=VAL",
                   help="Filter by any attribute dynamically (e.g., package, content-desc)")
    p.add_argument("--print-only", "-p", dest="print_only", default=None, metavar="ATTRIBUTE",
                   help="Print only the specified attribute for matched nodes")
    p.add_argument("--bounds", "-b", action="store_true", default=None, help="Print bounds for matched nodes")
    p.add_argument("--no-bounds", dest="bounds", action="store_false", default=None, help="Do not print bounds, even if the config file enables it")
    p.add_argument("--config", "-C", default=None, help="Optional YAML file with default option values")
    p.add_argument("--debug", "-d", action="store_true", default=None, help="Enable debug mode for verbose output")
    p.add_argument("--no-debug", dest="debug", action="store_false", default=None, help="Disable debug mode, even if the config file enables it")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)

    try:
        file_values = load_config_file(args.config) if args.config else {}
        config = build_config(args, file_values)
    except UIDumpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(debug=config.debug, log_file=config.log_file)

    try:
        root = load_document(config.file)
    except UIDumpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    matched = run(root, config)
    logger.debug(f"Search finished, {matched} match(es)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
