#!/usr/bin/env python3
"""
Navigation check reporting module.

Handles result reporting, JSON output generation, and console summaries.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List

from .models import CheckResults, ErrorType, Severity, ValidationIssue


class ValidationReporter:
    """Handles reporting of navigation check results."""

    def __init__(self, output_file: str = "test-results/navtree-check.json"):
        self.output_file = Path(output_file)

    def report_results(self, results: CheckResults, format_type: str = "console") -> bool:
        """Report results to both JSON file and console. Returns True if no errors."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)

        self._write_json_report(results)

        if format_type == "json":
            self._display_json_output(results)
        else:
            self._display_console_summary(results)

        return not results.has_errors()

    def build_report(self, results: CheckResults) -> Dict:
        """Results dictionary with the report timestamp filled in."""
        report_data = results.to_dict()
        report_data["timestamp"] = datetime.now().isoformat()
        return report_data

    def _write_json_report(self, results: CheckResults) -> None:
        """Write detailed JSON report to file."""
        with open(self.output_file, 'w', encoding='utf-8') as f:
            json.dump(self.build_report(results), f, indent=2, ensure_ascii=False, default=str)

    def _display_console_summary(self, results: CheckResults) -> None:
        """Display summary information on console."""
        total_errors = len(results.errors)
        total_warnings = len(results.warnings)

        if total_errors > 0 or total_warnings > 0:
            print(f"Navigation check: {total_errors} errors, {total_warnings} warnings")
            print("=" * 72)

            type_summary = results.get_summary_by_type()
            if type_summary:
                print("By issue type:")
                for error_type, count in sorted(type_summary.items()):
                    print(f"  • {error_type}: {count}")
                print()

            self._display_issues(results.get_all_issues())

            print(f"Full report: {self.output_file}")
        else:
            print("✅ Navigation check passed!")
            print(f"Detailed report: {self.output_file}")

    def _display_issues(self, issues: List[ValidationIssue]) -> None:
        """Display issues grouped by type, errors first."""
        by_type: Dict[ErrorType, List[ValidationIssue]] = {}
        for issue in issues:
            by_type.setdefault(issue.error_type, []).append(issue)

        for error_type, grouped in by_type.items():
            print(error_type.value.upper())
            print("-" * 40)
            sorted_issues = sorted(
                grouped,
                key=lambda i: (0 if i.severity == Severity.ERROR else 1, i.message),
            )
            for n, issue in enumerate(sorted_issues[:10], 1):
                severity_icon = "E" if issue.severity == Severity.ERROR else "W"
                print(f"{n:2}. [{severity_icon}] {issue.message}")
                if issue.location:
                    print(f"      at {issue.location}")
                if issue.recommendation:
                    print(f"      fix: {issue.recommendation}")
            if len(sorted_issues) > 10:
                print(f"     ... and {len(sorted_issues) - 10} more")
            print()

    def _display_json_output(self, results: CheckResults) -> None:
        """Display results in JSON format."""
        print(json.dumps(self.build_report(results), indent=2, ensure_ascii=False, default=str))
