"""
Patterns Module for G-DAX Diagnosis

Classification and matching rules applied to scored surveys.
"""

from .quadrant import (
    AXIS_THRESHOLD,
    DiagnosisType,
    QuadrantClassifier,
    classify
)

from .issues import (
    ISSUE_THRESHOLD,
    ISSUE_RULES,
    EmploymentIssue,
    IssueDetector,
    IssueRule,
    IssueSeverity,
    detect_issues
)

from .solutions import (
    GovernmentProgram,
    Solution,
    SolutionMatcher,
    SolutionSet,
    match_solutions
)

__all__ = [
    # Quadrant classification
    'AXIS_THRESHOLD',
    'DiagnosisType',
    'QuadrantClassifier',
    'classify',
    # Employment issues
    'ISSUE_THRESHOLD',
    'ISSUE_RULES',
    'EmploymentIssue',
    'IssueDetector',
    'IssueRule',
    'IssueSeverity',
    'detect_issues',
    # Solutions
    'GovernmentProgram',
    'Solution',
    'SolutionMatcher',
    'SolutionSet',
    'match_solutions',
]
