#!/usr/bin/env python3
"""
Data models for navigation tree validation.

Contains the issue and result structures shared by the checker and reporter.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum


class ErrorType(Enum):
    """Types of navigation tree problems."""
    SYNTAX = "syntax"
    MISSING_VARIABLE = "missing_variable"
    MALFORMED_ENTRY = "malformed_entry"
    INVALID_LABEL = "invalid_label"
    INVALID_LINK = "invalid_link"
    INVALID_CHILDREN = "invalid_children"
    EMPTY_CHILDREN = "empty_children"
    EMPTY_LINK = "empty_link"
    NESTING_DEPTH = "nesting_depth"
    INVALID_INDEX = "invalid_index"
    INVALID_MESSAGE = "invalid_message"


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """A single well-formedness problem found in a navigation tree."""
    message: str
    error_type: ErrorType
    severity: Severity = Severity.ERROR
    location: Optional[str] = None  # "Root > Section > Entry" breadcrumb
    recommendation: Optional[str] = None
    metadata: Optional[Dict] = field(default_factory=dict)

    @classmethod
    def create_error(
        cls,
        message: str,
        error_type: ErrorType,
        location: Optional[str] = None,
        recommendation: Optional[str] = None
    ) -> "ValidationIssue":
        """Create an issue with ERROR severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.ERROR,
            location=location,
            recommendation=recommendation
        )

    @classmethod
    def create_warning(
        cls,
        message: str,
        error_type: ErrorType,
        location: Optional[str] = None,
        recommendation: Optional[str] = None
    ) -> "ValidationIssue":
        """Create an issue with WARNING severity."""
        return cls(
            message=message,
            error_type=error_type,
            severity=Severity.WARNING,
            location=location,
            recommendation=recommendation
        )

    def to_dict(self) -> Dict:
        """Convert issue to dictionary for JSON serialization."""
        result = {
            "type": self.error_type.value,
            "severity": self.severity.value,
            "message": self.message,
            "location": self.location,
            "recommendation": self.recommendation,
        }

        if self.metadata:
            result.update(self.metadata)

        return result


@dataclass
class CheckResults:
    """Results of navigation tree validation."""
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    execution_time: float = 0.0
    source: str = "<built-in>"

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue to the appropriate list based on severity."""
        if issue.severity == Severity.ERROR:
            self.errors.append(issue)
        else:
            self.warnings.append(issue)

    def get_all_issues(self) -> List[ValidationIssue]:
        """Get all issues (errors + warnings)."""
        return self.errors + self.warnings

    def get_summary_by_type(self) -> Dict[str, int]:
        """Get count of issues by error type."""
        summary = {}
        for issue in self.get_all_issues():
            error_type = issue.error_type.value
            summary[error_type] = summary.get(error_type, 0) + 1
        return summary

    def has_errors(self) -> bool:
        """Check if there are any errors (not warnings)."""
        return len(self.errors) > 0

    def to_dict(self) -> Dict:
        """Convert results to dictionary for JSON serialization."""
        return {
            "timestamp": None,  # Will be set by reporter
            "source": self.source,
            "execution_time": self.execution_time,
            "summary": {
                "total_errors": len(self.errors),
                "total_warnings": len(self.warnings),
                "by_type": self.get_summary_by_type(),
            },
            "issues": [issue.to_dict() for issue in self.get_all_issues()]
        }
