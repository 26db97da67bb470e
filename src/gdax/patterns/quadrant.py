"""
Quadrant Classification Pattern - G-DAX Diagnosis

Places a company on the climate-risk / digital-urgency matrix and returns
one of four diagnosis types. Both axes are 0-100 percentages; an axis counts
as "high" at or above AXIS_THRESHOLD.

    digital >= 60 |  DIGITAL_LEADER    | STRUCTURAL_TRANSFORMATION
    digital <  60 |  STABLE_OPERATION  | GREEN_TRANSITION
                     climate < 60        climate >= 60
"""

from enum import Enum
from typing import Dict, Iterable, Any
import logging

logger = logging.getLogger(__name__)

AXIS_THRESHOLD = 60.0


class DiagnosisType(Enum):
    """The four diagnosis quadrants with their display properties."""
    STRUCTURAL_TRANSFORMATION = "structural_transformation"
    DIGITAL_LEADER = "digital_leader"
    GREEN_TRANSITION = "green_transition"
    STABLE_OPERATION = "stable_operation"

    @property
    def label(self) -> str:
        """Display label."""
        return {
            DiagnosisType.STRUCTURAL_TRANSFORMATION: "Structural Transformation Required",
            DiagnosisType.DIGITAL_LEADER: "Digital Transition Priority",
            DiagnosisType.GREEN_TRANSITION: "Green Transition Priority",
            DiagnosisType.STABLE_OPERATION: "Stable Operation",
        }[self]

    @property
    def color(self) -> str:
        """Color token for visualization."""
        return {
            DiagnosisType.STRUCTURAL_TRANSFORMATION: "#dc2626",  # Red
            DiagnosisType.DIGITAL_LEADER: "#2563eb",             # Blue
            DiagnosisType.GREEN_TRANSITION: "#16a34a",           # Green
            DiagnosisType.STABLE_OPERATION: "#6b7280",           # Gray
        }[self]

    @property
    def description(self) -> str:
        """Narrative shown with the diagnosis."""
        return {
            DiagnosisType.STRUCTURAL_TRANSFORMATION: (
                "Both carbon-neutrality pressure and digital transformation urgency are high. "
                "The company faces a complex crisis that calls for a structural redesign of its "
                "business model, production process and workforce at the same time."
            ),
            DiagnosisType.DIGITAL_LEADER: (
                "Climate exposure is manageable but digital transformation is urgent. "
                "Priority should go to automation, smart factory adoption and the digital "
                "skills of the workforce."
            ),
            DiagnosisType.GREEN_TRANSITION: (
                "Digital pressure is manageable but climate risk is high. "
                "Priority should go to carbon reduction, energy transition and reorganizing "
                "carbon-intensive business lines."
            ),
            DiagnosisType.STABLE_OPERATION: (
                "Both climate risk and digital urgency are low. "
                "The company can keep its current operations while monitoring regulation and "
                "technology trends and preparing for the transition in advance."
            ),
        }[self]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.value,
            "label": self.label,
            "color": self.color,
            "description": self.description
        }


class QuadrantClassifier:
    """
    Classifies a pair of axis percentages into a diagnosis quadrant.

    Example:
    ```python
    classifier = QuadrantClassifier()
    diagnosis = classifier.classify(climate_risk_percent=60.0, digital_urgency_percent=60.0)
    print(diagnosis.label)  # "Structural Transformation Required"
    ```
    """

    QUADRANTS = {
        (True, True): DiagnosisType.STRUCTURAL_TRANSFORMATION,
        (False, True): DiagnosisType.DIGITAL_LEADER,
        (True, False): DiagnosisType.GREEN_TRANSITION,
        (False, False): DiagnosisType.STABLE_OPERATION,
    }

    def __init__(self, threshold: float = AXIS_THRESHOLD):
        self.threshold = threshold

    def is_high(self, percent: float) -> bool:
        """An axis at exactly the threshold counts as high."""
        return percent >= self.threshold

    def classify(
        self,
        climate_risk_percent: float,
        digital_urgency_percent: float
    ) -> DiagnosisType:
        """Classify a company by its two axis percentages."""
        diagnosis = self.QUADRANTS[(
            self.is_high(climate_risk_percent),
            self.is_high(digital_urgency_percent)
        )]
        logger.debug(
            f"Classified climate {climate_risk_percent:.1f}% / digital "
            f"{digital_urgency_percent:.1f}% as {diagnosis.value}"
        )
        return diagnosis

    def get_distribution(self, diagnoses: Iterable[DiagnosisType]) -> Dict[str, int]:
        """Count diagnoses per quadrant, including empty quadrants."""
        distribution = {dt.value: 0 for dt in DiagnosisType}
        for diagnosis in diagnoses:
            distribution[diagnosis.value] += 1
        return distribution


_classifier = QuadrantClassifier()


def classify(climate_risk_percent: float, digital_urgency_percent: float) -> DiagnosisType:
    """Classify with the standard threshold."""
    return _classifier.classify(climate_risk_percent, digital_urgency_percent)
