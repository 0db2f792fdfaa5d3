"""Utility modules for polycalc."""

from .file_utils import get_file_content, write_file_content

__all__ = [
    "get_file_content",
    "write_file_content",
]
