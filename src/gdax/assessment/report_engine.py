"""
G-DAX Diagnosis Report Engine

Turns a survey into a diagnosis report:
- Dimension scores and climate / digital axes
- Quadrant diagnosis type
- Employment issues
- Business, HR and government recommendations

The engine is pure: it reads one survey snapshot and returns a new report.
Persisting the "report generated" flag is left to the caller through the
on_generated callback.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union
import logging

from ..config import get_config
from ..patterns.issues import EmploymentIssue, IssueDetector
from ..patterns.quadrant import DiagnosisType, QuadrantClassifier
from ..patterns.solutions import SolutionMatcher, SolutionSet
from .schemas import parse_record
from .scoring import ScoreSet, aggregate
from .survey import SurveyResponse

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


def format_percent(value: float) -> str:
    """Render an axis percentage with one decimal place"""
    return f"{value:.1f}"


@dataclass(frozen=True)
class DiagnosisReport:
    """Complete diagnosis report for one survey"""
    survey_id: Optional[int]

    # Company info
    company_name: str
    ceo_name: str
    location: str
    main_product: str
    employee_count: Optional[str]

    # Contact info
    contact_name: str
    contact_position: str
    contact_email: str
    contact_phone: str

    # Diagnosis
    scores: ScoreSet
    diagnosis_type: DiagnosisType
    employment_messages: Tuple[EmploymentIssue, ...]
    solutions: SolutionSet
    climate_risk_percent: str  # one decimal, e.g. "60.0"
    digital_urgency_percent: str
    diagnosis_date: date

    # Pass-through
    support_areas: Tuple[str, ...]
    consulting_application: bool

    date_format: str = DEFAULT_DATE_FORMAT

    @property
    def formatted_date(self) -> str:
        return self.diagnosis_date.strftime(self.date_format)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "survey_id": self.survey_id,
            "company_name": self.company_name,
            "ceo_name": self.ceo_name,
            "location": self.location,
            "main_product": self.main_product,
            "employee_count": self.employee_count,
            "contact_name": self.contact_name,
            "contact_position": self.contact_position,
            "contact_email": self.contact_email,
            "contact_phone": self.contact_phone,
            "scores": {
                "climate": round(self.scores.climate, 1),
                "digital": round(self.scores.digital, 1),
                "employment": round(self.scores.employment, 1),
                "readiness": self.scores.readiness,
                "climate_total": self.scores.climate_total,
                "digital_total": self.scores.digital_total
            },
            "climate_risk_percent": self.climate_risk_percent,
            "digital_urgency_percent": self.digital_urgency_percent,
            "diagnosis_type": self.diagnosis_type.to_dict(),
            "employment_messages": [issue.to_dict() for issue in self.employment_messages],
            "solutions": self.solutions.to_dict(),
            "support_areas": list(self.support_areas),
            "consulting_application": self.consulting_application,
            "diagnosis_date": self.formatted_date
        }

    def notification_context(self, report_url: str) -> Dict[str, str]:
        """Fields the report notification email is rendered from"""
        return {
            "company_name": self.company_name,
            "ceo_name": self.ceo_name,
            "contact_name": self.contact_name,
            "report_url": report_url,
            "diagnosis_type": self.diagnosis_type.label,
            "diagnosis_date": self.formatted_date
        }


def assemble(
    survey: SurveyResponse,
    scores: ScoreSet,
    diagnosis_type: DiagnosisType,
    issues,
    solutions: SolutionSet,
    diagnosis_date: date,
    date_format: str = DEFAULT_DATE_FORMAT
) -> DiagnosisReport:
    """Compose the diagnosis parts into a report. No business logic here."""
    return DiagnosisReport(
        survey_id=survey.id,
        company_name=survey.company_name,
        ceo_name=survey.ceo_name,
        location=survey.location,
        main_product=survey.main_product,
        employee_count=survey.employee_count,
        contact_name=survey.contact_name,
        contact_position=survey.contact_position,
        contact_email=survey.contact_email,
        contact_phone=survey.contact_phone,
        scores=scores,
        diagnosis_type=diagnosis_type,
        employment_messages=tuple(issues),
        solutions=solutions,
        climate_risk_percent=format_percent(scores.climate_risk_percent),
        digital_urgency_percent=format_percent(scores.digital_urgency_percent),
        diagnosis_date=diagnosis_date,
        support_areas=tuple(survey.support_areas),
        consulting_application=survey.consulting_application,
        date_format=date_format
    )


class ReportEngine:
    """
    Engine for generating G-DAX diagnosis reports.

    Example:
        engine = ReportEngine()

        report = engine.generate_report(
            survey,
            on_generated=lambda survey_id: repository.mark_generated(survey_id)
        )
        print(report.diagnosis_type.label)
        print(report.to_dict())
    """

    def __init__(self, config_class=None, today: Optional[Callable[[], date]] = None):
        """Initialize the report engine"""
        self.config = config_class or get_config()
        self.classifier = QuadrantClassifier()
        self.detector = IssueDetector()
        self.matcher = SolutionMatcher()
        self._today = today or date.today

    @property
    def date_format(self) -> str:
        return getattr(self.config, "DIAGNOSIS_DATE_FORMAT", DEFAULT_DATE_FORMAT)

    def generate_report(
        self,
        survey: Union[SurveyResponse, Mapping[str, Any]],
        on_generated: Optional[Callable[[Optional[int]], None]] = None
    ) -> DiagnosisReport:
        """
        Generate a report for a survey, dated today.

        Args:
            survey: SurveyResponse, or a raw record validated with parse_record
            on_generated: Called with the survey id once the report is assembled

        Returns:
            DiagnosisReport

        Raises:
            SurveyValidationError: if a raw record is malformed
        """
        survey = self._as_survey(survey)
        report = self._build(survey, self._today())

        logger.info(
            f"Generated report for survey {survey.id}: {report.diagnosis_type.value}, "
            f"{len(report.employment_messages)} employment issues"
        )
        if on_generated is not None:
            on_generated(survey.id)
        return report

    def regenerate_report(
        self,
        survey: Union[SurveyResponse, Mapping[str, Any]]
    ) -> DiagnosisReport:
        """
        Rebuild a report for resending.

        The report keeps the date the survey was submitted rather than today.
        """
        survey = self._as_survey(survey)
        if survey.created_at is not None:
            diagnosis_date = survey.created_at.date()
        else:
            logger.warning(f"Survey {survey.id} has no creation timestamp; dating resend today")
            diagnosis_date = self._today()

        report = self._build(survey, diagnosis_date)
        logger.info(f"Regenerated report for survey {survey.id} dated {report.formatted_date}")
        return report

    def report_url(self, survey_id: Optional[int]) -> str:
        """Public link to a survey's report page"""
        base = getattr(self.config, "REPORT_BASE_URL", None)
        if not base:
            raise ValueError("REPORT_BASE_URL must be set to build report links")
        base = base.rstrip("/")
        return f"{base}/report/{survey_id}"

    def _as_survey(self, survey) -> SurveyResponse:
        if isinstance(survey, SurveyResponse):
            return survey
        return parse_record(dict(survey))

    def _build(self, survey: SurveyResponse, diagnosis_date: date) -> DiagnosisReport:
        scores = aggregate(survey)
        diagnosis_type = self.classifier.classify(
            scores.climate_risk_percent, scores.digital_urgency_percent
        )
        issues = self.detector.detect(survey)
        solutions = self.matcher.match(
            scores.climate_risk_percent, scores.digital_urgency_percent, issues
        )
        return assemble(
            survey, scores, diagnosis_type, issues, solutions,
            diagnosis_date=diagnosis_date,
            date_format=self.date_format
        )


# Singleton instance
_engine: Optional[ReportEngine] = None


def get_report_engine() -> ReportEngine:
    """Get or create singleton report engine"""
    global _engine
    if _engine is None:
        _engine = ReportEngine()
    return _engine


def generate_report(
    survey: Union[SurveyResponse, Mapping[str, Any]],
    on_generated: Optional[Callable[[Optional[int]], None]] = None
) -> DiagnosisReport:
    """Generate a report with the shared engine"""
    return get_report_engine().generate_report(survey, on_generated=on_generated)
