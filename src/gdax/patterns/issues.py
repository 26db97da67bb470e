"""
Employment Issue Detection - G-DAX Diagnosis

Each employment answer is checked against ISSUE_THRESHOLD. A rule that fires
contributes one issue; rules are evaluated in table order and the result is
never re-sorted by severity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Any, Tuple
import logging

logger = logging.getLogger(__name__)

ISSUE_THRESHOLD = 4


class IssueSeverity(Enum):
    """Severity tiers for employment issues."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"

    @property
    def priority(self) -> int:
        """Numeric priority (lower = more urgent)."""
        return {
            IssueSeverity.CRITICAL: 1,
            IssueSeverity.HIGH: 2,
            IssueSeverity.MEDIUM: 3
        }[self]

    @property
    def color(self) -> str:
        """Standard color for visualization."""
        return {
            IssueSeverity.CRITICAL: "#dc3545",  # Red
            IssueSeverity.HIGH: "#fd7e14",      # Orange
            IssueSeverity.MEDIUM: "#ffc107"     # Yellow
        }[self]


@dataclass(frozen=True)
class EmploymentIssue:
    """A flagged employment risk."""
    key: str
    title: str
    message: str
    severity: IssueSeverity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "message": self.message,
            "severity": self.severity.value,
            "severity_priority": self.severity.priority,
            "severity_color": self.severity.color
        }


@dataclass(frozen=True)
class IssueRule:
    """Maps one survey answer onto the issue it raises."""
    field: str
    issue: EmploymentIssue


RECRUITMENT = "recruitment"
JOB_TRANSITION = "job_transition"
ANXIETY = "anxiety"
DIGITAL_SKILL_GAP = "digital_skill_gap"

ISSUE_RULES: Tuple[IssueRule, ...] = (
    IssueRule(
        "employment_status_1",
        EmploymentIssue(
            key=RECRUITMENT,
            title="Recruitment and skill-transfer crisis",
            message=(
                "Young workers are hard to recruit and the know-how of retiring staff is at risk. "
                "Without a skill-transfer plan the core production capability may be lost."
            ),
            severity=IssueSeverity.CRITICAL
        )
    ),
    IssueRule(
        "employment_status_2",
        EmploymentIssue(
            key=JOB_TRANSITION,
            title="Job transition pressure",
            message=(
                "Existing jobs are expected to disappear or change. Affected roles need to be "
                "identified early and employees moved into new positions."
            ),
            severity=IssueSeverity.HIGH
        )
    ),
    IssueRule(
        "employment_status_3",
        EmploymentIssue(
            key=ANXIETY,
            title="Organizational anxiety and communication gap",
            message=(
                "Employees are anxious about job security. Open communication about the "
                "transition plan is needed to keep trust and prevent labor conflict."
            ),
            severity=IssueSeverity.HIGH
        )
    ),
    IssueRule(
        "employment_status_4",
        EmploymentIssue(
            key=DIGITAL_SKILL_GAP,
            title="Digital skill gap",
            message=(
                "The workforce lacks the digital skills new equipment and systems require. "
                "Reskilling is needed before the new technology can pay off."
            ),
            severity=IssueSeverity.MEDIUM
        )
    ),
)


class IssueDetector:
    """
    Flags employment issues from survey answers.

    Example:
    ```python
    detector = IssueDetector()
    issues = detector.detect(survey)
    for issue in issues:
        print(issue.severity.value, issue.title)
    ```
    """

    def __init__(self, threshold: int = ISSUE_THRESHOLD, rules: Tuple[IssueRule, ...] = ISSUE_RULES):
        self.threshold = threshold
        self.rules = rules

    def detect(self, survey) -> List[EmploymentIssue]:
        """Evaluate every rule in order against the survey."""
        issues = [
            rule.issue for rule in self.rules
            if getattr(survey, rule.field) >= self.threshold
        ]
        if issues:
            logger.debug(f"Survey {survey.id}: flagged {[i.key for i in issues]}")
        return issues


_detector = IssueDetector()


def detect_issues(survey) -> List[EmploymentIssue]:
    """Detect employment issues with the standard rules."""
    return _detector.detect(survey)
