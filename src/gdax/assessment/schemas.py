"""Pydantic schemas for raw survey payloads.

Survey data reaches the engine either as a freshly submitted form payload or
as a row read back from storage. Both are validated here and converted into
an immutable SurveyResponse; nothing downstream re-checks the answers.
"""

import json
from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .questions import LIKERT_MIN, LIKERT_MAX
from .survey import SurveyResponse, SurveyValidationError

LikertAnswer = Annotated[int, Field(strict=True, ge=LIKERT_MIN, le=LIKERT_MAX)]

TEXT_FIELDS = (
    "company_name",
    "ceo_name",
    "location",
    "main_product",
    "contact_name",
    "contact_position",
    "contact_email",
    "contact_phone",
)


class SurveySubmission(BaseModel):
    """Survey payload as submitted by the form or stored as a row."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    id: Optional[int] = None

    # Company info
    company_name: str = ""
    ceo_name: str = ""
    location: str = ""
    main_product: str = ""
    employee_count: Optional[str] = None
    annual_revenue: float = 0

    # Climate risk
    climate_risk_1: LikertAnswer
    climate_risk_2: LikertAnswer
    climate_risk_3: LikertAnswer

    # Digital urgency
    digital_urgency_1: LikertAnswer
    digital_urgency_2: LikertAnswer
    digital_urgency_3: LikertAnswer

    # Employment status
    employment_status_1: LikertAnswer
    employment_status_2: LikertAnswer
    employment_status_3: LikertAnswer
    employment_status_4: LikertAnswer

    readiness_level: LikertAnswer

    support_areas: List[str] = Field(default_factory=list)
    consulting_application: bool = False

    # Contact info
    contact_name: str = ""
    contact_position: str = ""
    contact_email: str = ""
    contact_phone: str = ""

    # Record state
    created_at: Optional[datetime] = None
    report_generated: bool = False
    report_sent: bool = False

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("employee_count", mode="before")
    @classmethod
    def _employee_count_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("annual_revenue", mode="before")
    @classmethod
    def _revenue_default(cls, value: Any) -> Any:
        return 0 if value in (None, "") else value

    @field_validator("support_areas", mode="before")
    @classmethod
    def _decode_support_areas(cls, value: Any) -> Any:
        # Stored rows keep the list as a JSON string
        if value is None:
            return []
        if isinstance(value, str):
            try:
                return json.loads(value) if value.strip() else []
            except json.JSONDecodeError as exc:
                raise ValueError(f"support_areas is not valid JSON: {exc.msg}") from exc
        return value

    def to_survey(self) -> SurveyResponse:
        """Build the immutable survey snapshot the engine consumes."""
        data = self.model_dump()
        data["support_areas"] = tuple(data["support_areas"])
        return SurveyResponse(**data)


def _translate(exc: ValidationError) -> SurveyValidationError:
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "survey"
        errors.append({"field": field, "message": err["msg"]})
    return SurveyValidationError(errors)


def parse_submission(data: Dict[str, Any]) -> SurveyResponse:
    """
    Validate a newly submitted survey.

    Company name and contact email are mandatory for a new submission on top
    of the Likert answers.

    Raises:
        SurveyValidationError: if any field is missing or invalid
    """
    try:
        submission = SurveySubmission.model_validate(data)
    except ValidationError as exc:
        raise _translate(exc) from exc

    missing = [
        {"field": name, "message": "field is required"}
        for name in ("company_name", "contact_email")
        if not getattr(submission, name)
    ]
    if missing:
        raise SurveyValidationError(missing)

    return submission.to_survey()


def parse_record(data: Dict[str, Any]) -> SurveyResponse:
    """
    Validate a survey row read back from storage.

    Raises:
        SurveyValidationError: if the id or any Likert answer is missing or invalid
    """
    try:
        submission = SurveySubmission.model_validate(data)
    except ValidationError as exc:
        raise _translate(exc) from exc

    if submission.id is None:
        raise SurveyValidationError([{"field": "id", "message": "field is required"}])

    return submission.to_survey()


__all__ = [
    "SurveySubmission",
    "parse_submission",
    "parse_record",
]
