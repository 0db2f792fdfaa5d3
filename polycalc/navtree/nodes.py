"""Navigation tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class NavNode:
    """An entry in the documentation sidebar.

    ``children`` is None for a leaf, a tuple of nodes for an expanded
    section, or the name of a sub-tree script the viewer loads on demand.
    """

    label: str
    link: str | None
    children: tuple[NavNode, ...] | str | None = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @property
    def is_deferred(self) -> bool:
        return isinstance(self.children, str)

    @property
    def child_nodes(self) -> tuple[NavNode, ...]:
        """Inline children; empty for leaves and deferred sub-trees."""
        if isinstance(self.children, tuple):
            return self.children
        return ()

    @property
    def descendant_count(self) -> int:
        return sum(1 + c.descendant_count for c in self.child_nodes)

    @property
    def max_depth(self) -> int:
        return max((1 + c.max_depth for c in self.child_nodes), default=0)


@dataclass(frozen=True)
class NavTree:
    """The complete navigation data consumed by the documentation viewer."""

    roots: tuple[NavNode, ...]
    index: tuple[str, ...] = ()
    sync_on_message: str = ""
    sync_off_message: str = ""

    def walk(self) -> Iterator[tuple[int, NavNode]]:
        """Yield ``(depth, node)`` pairs in pre-order, roots at depth 0."""
        stack = [(0, node) for node in reversed(self.roots)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, child) for child in reversed(node.child_nodes))

    def find(self, label: str) -> NavNode | None:
        """Return the first node (pre-order) with the given label."""
        for _, node in self.walk():
            if node.label == label:
                return node
        return None

    def links(self) -> list[str]:
        return [node.link for _, node in self.walk() if node.link is not None]

    def deferred(self) -> list[NavNode]:
        """Nodes whose children live in a separately loaded script."""
        return [node for _, node in self.walk() if node.is_deferred]

    def sync_message(self, synchronized: bool) -> str:
        """Text for the panel synchronisation toggle.

        While the panels are synchronized the toggle offers to switch it off,
        so the "on" message is shown.
        """
        return self.sync_on_message if synchronized else self.sync_off_message

    @property
    def entry_count(self) -> int:
        return sum(1 + root.descendant_count for root in self.roots)

    @property
    def max_depth(self) -> int:
        return max((root.max_depth for root in self.roots), default=0)
