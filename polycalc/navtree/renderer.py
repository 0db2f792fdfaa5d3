"""Viewer script, ASCII tree and JSON rendering for navigation trees."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from .nodes import NavNode, NavTree
from .rules import (
    INDEX_VARIABLE,
    NAVTREE_VARIABLE,
    SYNC_OFF_VARIABLE,
    SYNC_ON_VARIABLE,
)

# Licence notice the documentation generator places above the navigation data.
LICENSE_HEADER = """\
/*
 @licstart  The following is the entire license notice for the JavaScript code in this file.

 The MIT License (MIT)

 Copyright (C) 1997-2020 by Dimitri van Heesch

 Permission is hereby granted, free of charge, to any person obtaining a copy of this software
 and associated documentation files (the "Software"), to deal in the Software without restriction,
 including without limitation the rights to use, copy, modify, merge, publish, distribute,
 sublicense, and/or sell copies of the Software, and to permit persons to whom the Software is
 furnished to do so, subject to the following conditions:

 The above copyright notice and this permission notice shall be included in all copies or
 substantial portions of the Software.

 THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING
 BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
 NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
 DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
 OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

 @licend  The above is the entire license notice for the JavaScript code in this file
*/"""

INDENT = "  "


def render_js(tree: NavTree) -> str:
    """Render the tree as the viewer's ``navtreedata.js`` script."""
    entries = ",\n".join(_render_entry(root, 1) for root in tree.roots)
    index = ",\n".join(_double_quote(page) for page in tree.index)
    parts = [
        LICENSE_HEADER,
        f"var {NAVTREE_VARIABLE} =\n[\n{entries}\n];\n",
        f"var {INDEX_VARIABLE} =\n[\n{index}\n];\n",
        f"var {SYNC_ON_VARIABLE} = {_single_quote(tree.sync_on_message)};\n"
        f"var {SYNC_OFF_VARIABLE} = {_single_quote(tree.sync_off_message)};",
    ]
    return "\n".join(parts)


def _render_entry(node: NavNode, level: int) -> str:
    """Render one [label, link, children] triple at the given nesting level."""
    indent = INDENT * level
    head = f"{indent}[ {_double_quote(node.label)}, {_double_quote(node.link)}, "
    if node.is_leaf:
        return head + "null ]"
    if node.is_deferred:
        return head + f"{_double_quote(node.children)} ]"
    children = ",\n".join(_render_entry(child, level + 1) for child in node.child_nodes)
    return f"{head}[\n{children}\n{indent}] ]"


def _double_quote(value: str | None) -> str:
    if value is None:
        return "null"
    return json.dumps(value, ensure_ascii=False)


def _single_quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def render_ascii(tree: NavTree) -> str:
    """Render the navigation tree as an ASCII string."""
    lines: list[str] = []
    for root in tree.roots:
        lines.append(_format_label(root))
        for i, child in enumerate(root.child_nodes):
            lines.extend(_render_subtree(child, "", i == len(root.child_nodes) - 1))

    lines.append("")
    lines.append(
        f"{tree.entry_count} entries | {len(tree.deferred())} deferred | "
        f"max depth {tree.max_depth}"
    )
    return "\n".join(lines)


def _format_label(node: NavNode) -> str:
    """Format the display line for a tree node."""
    text = node.label
    if node.link is not None:
        text += f" -> {node.link}"
    if node.is_deferred:
        text += f" [deferred: {node.children}]"
    return text


def _render_subtree(node: NavNode, prefix: str, is_last: bool) -> list[str]:
    """Recursively render a subtree as ASCII lines."""
    connector = "\u2514\u2500\u2500 " if is_last else "\u251c\u2500\u2500 "
    lines = [prefix + connector + _format_label(node)]
    extension = "    " if is_last else "\u2502   "
    child_prefix = prefix + extension
    children = node.child_nodes
    for i, child in enumerate(children):
        lines.extend(_render_subtree(child, child_prefix, i == len(children) - 1))
    return lines


def render_json(tree: NavTree) -> str:
    """Render the navigation tree as a JSON string."""
    output = {
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "total_entries": tree.entry_count,
        "deferred_entries": len(tree.deferred()),
        "max_depth": tree.max_depth,
        "index": list(tree.index),
        "messages": {
            "sync_on": tree.sync_on_message,
            "sync_off": tree.sync_off_message,
        },
        "tree": [_node_to_dict(root) for root in tree.roots],
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def _node_to_dict(node: NavNode) -> dict:
    """Convert a NavNode to a JSON-serializable dictionary."""
    return {
        "label": node.label,
        "link": node.link,
        "deferred": node.children if node.is_deferred else None,
        "children": (
            [_node_to_dict(child) for child in node.child_nodes]
            if isinstance(node.children, tuple) else None
        ),
    }
