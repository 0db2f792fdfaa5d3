#!/usr/bin/env python3
"""
Well-formedness rules for navigation data.

Contains the checks applied to the raw variables of a navigation script:
- NAVTREE: every entry is a [label, link, children] triple, recursively
- NAVTREEINDEX: an array of page names
- SYNCONMSG / SYNCOFFMSG: the two toggle messages are strings
"""

from typing import Dict, List

from ..models import ErrorType, ValidationIssue


# Variable names the viewer reads
NAVTREE_VARIABLE = "NAVTREE"
INDEX_VARIABLE = "NAVTREEINDEX"
SYNC_ON_VARIABLE = "SYNCONMSG"
SYNC_OFF_VARIABLE = "SYNCOFFMSG"

# Thresholds
MAX_DEPTH = 32
ENTRY_SIZE = 3

BREADCRUMB_SEPARATOR = " > "


class NavTreeRules:
    """Implements the navigation data checks."""

    def __init__(self, max_depth: int = MAX_DEPTH):
        self.max_depth = max_depth

    # ------------------------------------------------------------------
    # 1. Tree entries
    # ------------------------------------------------------------------

    def check_tree(self, variables: Dict[str, object]) -> List[ValidationIssue]:
        """Check that NAVTREE is a well-formed nested array of entries."""
        issues: List[ValidationIssue] = []

        if NAVTREE_VARIABLE not in variables:
            issues.append(ValidationIssue.create_error(
                message=f"{NAVTREE_VARIABLE} is missing",
                error_type=ErrorType.MISSING_VARIABLE,
                recommendation=f"Declare 'var {NAVTREE_VARIABLE} = [ ... ];'",
            ))
            return issues

        entries = variables[NAVTREE_VARIABLE]
        if not isinstance(entries, list):
            issues.append(ValidationIssue.create_error(
                message=f"{NAVTREE_VARIABLE} must be an array, found {_describe(entries)}",
                error_type=ErrorType.MALFORMED_ENTRY,
            ))
            return issues

        if not entries:
            issues.append(ValidationIssue.create_warning(
                message=f"{NAVTREE_VARIABLE} has no entries",
                error_type=ErrorType.EMPTY_CHILDREN,
            ))

        self._check_entries(entries, [], 0, issues)
        return issues

    def _check_entries(
        self, entries: list, trail: List[str], depth: int, issues: List[ValidationIssue]
    ) -> None:
        for position, entry in enumerate(entries):
            if not isinstance(entry, list) or len(entry) != ENTRY_SIZE:
                issues.append(ValidationIssue.create_error(
                    message=(
                        f"Entry #{position} must be a [label, link, children] array, "
                        f"found {_describe(entry)}"
                    ),
                    error_type=ErrorType.MALFORMED_ENTRY,
                    location=_breadcrumb(trail),
                ))
                continue

            label, link, children = entry
            name = label if isinstance(label, str) and label.strip() else f"#{position}"
            location = _breadcrumb(trail + [name])

            if not isinstance(label, str) or not label.strip():
                issues.append(ValidationIssue.create_error(
                    message=f"Label must be a non-empty string, found {_describe(label)}",
                    error_type=ErrorType.INVALID_LABEL,
                    location=location,
                ))

            if link is not None and not isinstance(link, str):
                issues.append(ValidationIssue.create_error(
                    message=f"Link must be a string or null, found {_describe(link)}",
                    error_type=ErrorType.INVALID_LINK,
                    location=location,
                ))
            elif link == "":
                issues.append(ValidationIssue.create_warning(
                    message="Link is an empty string",
                    error_type=ErrorType.EMPTY_LINK,
                    location=location,
                    recommendation="Use null for entries without a target page",
                ))

            if children is None:
                continue
            if isinstance(children, str):
                if not children:
                    issues.append(ValidationIssue.create_error(
                        message="Deferred children script name is empty",
                        error_type=ErrorType.INVALID_CHILDREN,
                        location=location,
                    ))
                continue
            if not isinstance(children, list):
                issues.append(ValidationIssue.create_error(
                    message=(
                        f"Children must be an array, a script name or null, "
                        f"found {_describe(children)}"
                    ),
                    error_type=ErrorType.INVALID_CHILDREN,
                    location=location,
                ))
                continue
            if not children:
                issues.append(ValidationIssue.create_warning(
                    message="Children array is empty",
                    error_type=ErrorType.EMPTY_CHILDREN,
                    location=location,
                    recommendation="Use null as the leaf marker",
                ))
                continue
            if depth + 1 > self.max_depth:
                issues.append(ValidationIssue.create_error(
                    message=f"Nesting exceeds {self.max_depth} levels",
                    error_type=ErrorType.NESTING_DEPTH,
                    location=location,
                ))
                continue

            self._check_entries(children, trail + [name], depth + 1, issues)

    # ------------------------------------------------------------------
    # 2. Page index
    # ------------------------------------------------------------------

    def check_index(self, variables: Dict[str, object]) -> List[ValidationIssue]:
        """Check that NAVTREEINDEX is an array of page names."""
        if INDEX_VARIABLE not in variables:
            return [ValidationIssue.create_error(
                message=f"{INDEX_VARIABLE} is missing",
                error_type=ErrorType.MISSING_VARIABLE,
                recommendation=f"Declare 'var {INDEX_VARIABLE} = [ ... ];'",
            )]

        index = variables[INDEX_VARIABLE]
        if not isinstance(index, list):
            return [ValidationIssue.create_error(
                message=f"{INDEX_VARIABLE} must be an array, found {_describe(index)}",
                error_type=ErrorType.INVALID_INDEX,
            )]

        issues: List[ValidationIssue] = []
        for position, page in enumerate(index):
            if not isinstance(page, str) or not page:
                issues.append(ValidationIssue.create_error(
                    message=(
                        f"{INDEX_VARIABLE} entry #{position} must be a page name, "
                        f"found {_describe(page)}"
                    ),
                    error_type=ErrorType.INVALID_INDEX,
                ))
        return issues

    # ------------------------------------------------------------------
    # 3. Synchronisation messages
    # ------------------------------------------------------------------

    def check_messages(self, variables: Dict[str, object]) -> List[ValidationIssue]:
        """Check that both synchronisation toggle messages are strings."""
        issues: List[ValidationIssue] = []
        for name in (SYNC_ON_VARIABLE, SYNC_OFF_VARIABLE):
            if name not in variables:
                issues.append(ValidationIssue.create_error(
                    message=f"{name} is missing",
                    error_type=ErrorType.MISSING_VARIABLE,
                ))
            elif not isinstance(variables[name], str):
                issues.append(ValidationIssue.create_error(
                    message=f"{name} must be a string, found {_describe(variables[name])}",
                    error_type=ErrorType.INVALID_MESSAGE,
                ))
        return issues


def _breadcrumb(trail: List[str]) -> str:
    return BREADCRUMB_SEPARATOR.join(trail) if trail else NAVTREE_VARIABLE


def _describe(value: object) -> str:
    """Short JavaScript-flavoured description of a raw value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return f"array of {len(value)}"
    return type(value).__name__
