"""Documentation navigation tree: model, validation and rendering."""

from .checker import NavTreeChecker
from .data import SYNCOFFMSG, SYNCONMSG, default_tree
from .loader import NavTreeFormatError, build_tree, load_tree, loads
from .nodes import NavNode, NavTree
from .renderer import render_ascii, render_js, render_json

__all__ = [
    "NavNode",
    "NavTree",
    "NavTreeChecker",
    "NavTreeFormatError",
    "SYNCOFFMSG",
    "SYNCONMSG",
    "build_tree",
    "default_tree",
    "load_tree",
    "loads",
    "render_ascii",
    "render_js",
    "render_json",
]
