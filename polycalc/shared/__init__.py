#!/usr/bin/env python3
"""
Shared utilities for reading documentation viewer scripts.

This module provides the literal parser used by the navigation tree loader
and checker.
"""

from .navtree_parser import (
    NavTreeScriptParser,
    NavTreeSyntaxError,
    Token,
    parse_navtree_script,
    unescape_string,
)

__all__ = [
    "NavTreeScriptParser",
    "NavTreeSyntaxError",
    "Token",
    "parse_navtree_script",
    "unescape_string",
]
