"""
Survey statistics for the admin overview
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable
import logging

from ..patterns.quadrant import QuadrantClassifier
from .scoring import aggregate
from .survey import SurveyResponse

logger = logging.getLogger(__name__)


@dataclass
class SurveyStatistics:
    """Counts across a set of surveys"""
    total_surveys: int = 0
    consulting_applications: int = 0
    reports_sent: int = 0
    reports_generated: int = 0
    diagnosis_distribution: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_surveys": self.total_surveys,
            "consulting_applications": self.consulting_applications,
            "reports_sent": self.reports_sent,
            "reports_generated": self.reports_generated,
            "diagnosis_distribution": self.diagnosis_distribution
        }


def summarize_surveys(surveys: Iterable[SurveyResponse]) -> SurveyStatistics:
    """Count submissions, consulting applications, reports and quadrants"""
    classifier = QuadrantClassifier()
    stats = SurveyStatistics()
    diagnoses = []

    for survey in surveys:
        stats.total_surveys += 1
        if survey.consulting_application:
            stats.consulting_applications += 1
        if survey.report_sent:
            stats.reports_sent += 1
        if survey.report_generated:
            stats.reports_generated += 1

        scores = aggregate(survey)
        diagnoses.append(
            classifier.classify(scores.climate_risk_percent, scores.digital_urgency_percent)
        )

    stats.diagnosis_distribution = classifier.get_distribution(diagnoses)
    logger.debug(f"Summarized {stats.total_surveys} surveys")
    return stats
