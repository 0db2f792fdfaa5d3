"""CLI entry point for the navigation tree utility."""

import argparse
import sys
from pathlib import Path

from ..reporter import ValidationReporter
from ..shared.navtree_parser import NavTreeSyntaxError
from ..utils.file_utils import write_file_content
from .checker import NavTreeChecker
from .data import default_tree
from .loader import NavTreeFormatError, load_tree
from .renderer import render_ascii, render_js, render_json


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Inspect, validate and regenerate documentation navigation data."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="navtreedata.js to read (default: the built-in Polynomial Calculator tree)",
    )
    parser.add_argument(
        "--format",
        choices=["ascii", "json", "js"],
        default="ascii",
        help="Output format (default: ascii)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the navigation data and report issues instead of rendering",
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the rendered tree to this file instead of stdout",
    )
    parser.add_argument(
        "--report",
        default="test-results/navtree-check.json",
        help="Output file for the detailed JSON check report",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Load the navigation tree and render or check it."""
    args = parse_args(argv)

    if args.path is not None and not Path(args.path).exists():
        print(f"Error: path '{args.path}' does not exist", file=sys.stderr)
        sys.exit(1)

    if args.check:
        checker = NavTreeChecker()
        if args.path is None:
            results = checker.check_source(render_js(default_tree()), source="<built-in>")
        else:
            results = checker.check_file(Path(args.path))
        reporter = ValidationReporter(args.report)
        format_type = "json" if args.format == "json" else "console"
        success = reporter.report_results(results, format_type=format_type)
        sys.exit(0 if success else 1)

    try:
        tree = default_tree() if args.path is None else load_tree(Path(args.path))
    except (NavTreeSyntaxError, NavTreeFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        rendered = render_json(tree)
    elif args.format == "js":
        rendered = render_js(tree)
    else:
        rendered = render_ascii(tree)

    if args.output:
        write_file_content(Path(args.output), rendered)
        print(f"Wrote {tree.entry_count} entries to {args.output}")
    else:
        print(rendered)


if __name__ == "__main__":
    main()
