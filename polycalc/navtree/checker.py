#!/usr/bin/env python3
"""
Navigation data checker orchestrator.

Parses navigation scripts and runs all well-formedness rules.
"""

import time
from pathlib import Path
from typing import Dict

from ..models import CheckResults, ErrorType, ValidationIssue
from ..shared.navtree_parser import NavTreeScriptParser, NavTreeSyntaxError
from ..utils.file_utils import get_file_content
from .rules import NavTreeRules, MAX_DEPTH


class NavTreeChecker:
    """Orchestrates navigation data checks."""

    def __init__(self, max_depth: int = MAX_DEPTH):
        self.parser = NavTreeScriptParser()
        self.rules = NavTreeRules(max_depth=max_depth)

    def check_file(self, path: Path) -> CheckResults:
        """Read and check a navigation script on disk."""
        return self.check_source(get_file_content(Path(path)), source=str(path))

    def check_source(self, content: str, source: str = "<string>") -> CheckResults:
        """Parse and check navigation script content."""
        start_time = time.time()
        try:
            variables = self.parser.parse(content)
        except NavTreeSyntaxError as e:
            results = CheckResults(source=source)
            results.add_issue(ValidationIssue.create_error(
                message=str(e),
                error_type=ErrorType.SYNTAX,
            ))
            results.execution_time = time.time() - start_time
            return results

        results = self.check_data(variables, source=source)
        results.execution_time = time.time() - start_time
        return results

    def check_data(self, variables: Dict[str, object], source: str = "<data>") -> CheckResults:
        """Run all rules on already parsed variables."""
        start_time = time.time()
        results = CheckResults(source=source)

        for issue in self.rules.check_tree(variables):
            results.add_issue(issue)

        for issue in self.rules.check_index(variables):
            results.add_issue(issue)

        for issue in self.rules.check_messages(variables):
            results.add_issue(issue)

        results.execution_time = time.time() - start_time
        return results
