"""
Survey Response Model

Immutable snapshot of one company's survey submission. The engine reads a
record once, builds a SurveyResponse from it, and never mutates it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Any, Optional, Tuple

from .questions import LIKERT_FIELDS, LIKERT_MIN, LIKERT_MAX


class SurveyValidationError(ValueError):
    """Raised when a survey record is missing answers or holds invalid values."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        details = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        super().__init__(f"Invalid survey: {details}")


def check_likert_answers(answers: Dict[str, Any]) -> List[Dict[str, str]]:
    """
    Check every Likert field of a survey record.

    Returns a list of {field, message} errors; empty when all answers are
    integers within the scale.
    """
    errors = []
    for name in LIKERT_FIELDS:
        value = answers.get(name)
        if value is None:
            errors.append({"field": name, "message": "answer is required"})
        elif isinstance(value, bool) or not isinstance(value, int):
            errors.append({
                "field": name,
                "message": f"answer must be an integer, got {type(value).__name__}"
            })
        elif value < LIKERT_MIN or value > LIKERT_MAX:
            errors.append({
                "field": name,
                "message": f"answer must be between {LIKERT_MIN} and {LIKERT_MAX}, got {value}"
            })
    return errors


@dataclass(frozen=True)
class SurveyResponse:
    """A single company's diagnosis survey"""
    id: Optional[int]

    # Likert answers (1-5)
    climate_risk_1: int
    climate_risk_2: int
    climate_risk_3: int
    digital_urgency_1: int
    digital_urgency_2: int
    digital_urgency_3: int
    employment_status_1: int
    employment_status_2: int
    employment_status_3: int
    employment_status_4: int
    readiness_level: int

    # Company info
    company_name: str = ""
    ceo_name: str = ""
    location: str = ""
    main_product: str = ""
    employee_count: Optional[str] = None
    annual_revenue: float = 0

    # Contact info
    contact_name: str = ""
    contact_position: str = ""
    contact_email: str = ""
    contact_phone: str = ""

    support_areas: Tuple[str, ...] = field(default_factory=tuple)
    consulting_application: bool = False

    # Record state
    created_at: Optional[datetime] = None
    report_generated: bool = False
    report_sent: bool = False

    def __post_init__(self):
        errors = check_likert_answers(self.answers())
        if isinstance(self.support_areas, str):
            errors.append({
                "field": "support_areas",
                "message": "support areas must be a sequence of strings, got str"
            })
        if errors:
            raise SurveyValidationError(errors)
        if not isinstance(self.support_areas, tuple):
            object.__setattr__(self, "support_areas", tuple(self.support_areas))

    def answers(self) -> Dict[str, int]:
        """Likert answers keyed by field name"""
        return {name: getattr(self, name) for name in LIKERT_FIELDS}
