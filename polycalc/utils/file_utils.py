#!/usr/bin/env python3
"""
File utility functions.

Handles reading and writing the text files the tools work with.
"""

from pathlib import Path


def get_file_content(file_path: Path) -> str:
    """Get file content with error handling."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (UnicodeDecodeError, OSError):
        return ""


def write_file_content(file_path: Path, content: str) -> None:
    """Write text content, creating parent directories as needed."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    # newline='' keeps the content byte-exact on every platform
    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
