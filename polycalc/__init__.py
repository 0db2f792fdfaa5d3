"""Polynomial calculator and its documentation navigation tree."""

from .models import CheckResults, ErrorType, Severity, ValidationIssue

__all__ = [
    "CheckResults",
    "ErrorType",
    "Severity",
    "ValidationIssue",
]
