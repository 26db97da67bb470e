"""
Score Aggregation

Reduces the raw Likert answers into four dimension scores and the two
percentage axes used for quadrant placement:
- climate, digital, employment: mean of the dimension's answers
- readiness: the single readiness answer
- climate / digital axes: answer total scaled against AXIS_CEILING

Employment and readiness never feed the axes; they only drive the issue
and solution layers.
"""

from dataclasses import dataclass
from typing import Dict, Any
import logging

from .questions import LIKERT_MAX, get_dimension_fields
from .survey import SurveyResponse

logger = logging.getLogger(__name__)

ITEMS_PER_AXIS = 3
AXIS_CEILING = ITEMS_PER_AXIS * LIKERT_MAX  # 15


@dataclass(frozen=True)
class ScoreSet:
    """Dimension scores and classification axes for one survey"""
    climate: float  # mean, 1.0-5.0
    digital: float
    employment: float
    readiness: int
    climate_total: int  # sum, 3-15
    digital_total: int
    climate_risk_percent: float  # 20.0-100.0
    digital_urgency_percent: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "climate": self.climate,
            "digital": self.digital,
            "employment": self.employment,
            "readiness": self.readiness,
            "climate_total": self.climate_total,
            "digital_total": self.digital_total,
            "climate_risk_percent": self.climate_risk_percent,
            "digital_urgency_percent": self.digital_urgency_percent
        }


def axis_percent(total: int) -> float:
    """Scale an axis total (3-15) onto 0-100"""
    # Single division keeps 9/15 at exactly 60.0
    return total * 100 / AXIS_CEILING


def _dimension_answers(survey: SurveyResponse, dimension_id: str):
    return [getattr(survey, name) for name in get_dimension_fields(dimension_id)]


def aggregate(survey: SurveyResponse) -> ScoreSet:
    """
    Calculate dimension scores and axis percentages for a survey.

    Means are left unrounded; rounding is a presentation concern.
    """
    climate = _dimension_answers(survey, "climate")
    digital = _dimension_answers(survey, "digital")
    employment = _dimension_answers(survey, "employment")

    climate_total = sum(climate)
    digital_total = sum(digital)

    scores = ScoreSet(
        climate=climate_total / len(climate),
        digital=digital_total / len(digital),
        employment=sum(employment) / len(employment),
        readiness=survey.readiness_level,
        climate_total=climate_total,
        digital_total=digital_total,
        climate_risk_percent=axis_percent(climate_total),
        digital_urgency_percent=axis_percent(digital_total)
    )

    logger.debug(
        f"Survey {survey.id}: climate total {climate_total}, digital total {digital_total}"
    )
    return scores
