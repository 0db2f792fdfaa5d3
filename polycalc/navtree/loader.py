"""Building NavTree objects from navigation scripts."""

from __future__ import annotations

from pathlib import Path

from ..shared.navtree_parser import parse_navtree_script
from ..utils.file_utils import get_file_content
from .checker import NavTreeChecker
from .nodes import NavNode, NavTree
from .rules import (
    INDEX_VARIABLE,
    NAVTREE_VARIABLE,
    SYNC_OFF_VARIABLE,
    SYNC_ON_VARIABLE,
)


class NavTreeFormatError(ValueError):
    """Raised when navigation data fails the well-formedness checks."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__("Malformed navigation data:\n" + "\n".join(
            f"  - {message}" for message in messages
        ))


def build_tree(variables: dict[str, object]) -> NavTree:
    """Convert parsed script variables into a NavTree, validating first."""
    results = NavTreeChecker().check_data(variables)
    if results.has_errors():
        raise NavTreeFormatError([
            f"{issue.location}: {issue.message}" if issue.location else issue.message
            for issue in results.errors
        ])

    return NavTree(
        roots=tuple(_build_node(entry) for entry in variables[NAVTREE_VARIABLE]),
        index=tuple(variables[INDEX_VARIABLE]),
        sync_on_message=variables[SYNC_ON_VARIABLE],
        sync_off_message=variables[SYNC_OFF_VARIABLE],
    )


def loads(content: str) -> NavTree:
    """Parse, check and build a NavTree from script content."""
    return build_tree(parse_navtree_script(content))


def load_tree(path: Path) -> NavTree:
    """Parse, check and build a NavTree from a script on disk."""
    return loads(get_file_content(Path(path)))


def _build_node(entry: list) -> NavNode:
    label, link, children = entry
    if isinstance(children, list):
        # An empty array is accepted with a warning and treated as a leaf.
        children = tuple(_build_node(child) for child in children) or None
    return NavNode(label=label, link=link, children=children)
