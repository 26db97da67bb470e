"""
Solution Matching - G-DAX Diagnosis

Selects recommended interventions from a static catalog:
- business: driven by the climate and digital axes
- hr: driven by flagged employment issues
- government: two baseline labor programs plus a climate-driven R&D subsidy

Every list keeps catalog order regardless of which conditions fired.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Iterable, Tuple
import logging

from .issues import EmploymentIssue, JOB_TRANSITION, ANXIETY, DIGITAL_SKILL_GAP
from .quadrant import AXIS_THRESHOLD

logger = logging.getLogger(__name__)

LABOR_MINISTRY = "Ministry of Employment and Labor"
INDUSTRY_MINISTRY = "Ministry of Trade, Industry and Energy"


@dataclass(frozen=True)
class Solution:
    """A business or HR intervention."""
    key: str
    title: str
    description: str
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords)
        }


@dataclass(frozen=True)
class GovernmentProgram:
    """A public support program and the ministry running it."""
    key: str
    name: str
    description: str
    department: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "department": self.department
        }


@dataclass(frozen=True)
class SolutionSet:
    """Matched interventions, one ordered tuple per audience."""
    business: Tuple[Solution, ...]
    hr: Tuple[Solution, ...]
    government: Tuple[GovernmentProgram, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "business": [s.to_dict() for s in self.business],
            "hr": [s.to_dict() for s in self.hr],
            "government": [p.to_dict() for p in self.government]
        }


# =============================================================================
# Catalog
# =============================================================================

BUSINESS_REORGANIZATION = Solution(
    key="business_reorganization",
    title="Business reorganization for carbon neutrality",
    description=(
        "Diagnose carbon-intensive products and processes, then plan the conversion "
        "of business lines toward low-carbon products and energy-efficient production."
    ),
    keywords=("business conversion", "carbon reduction", "energy efficiency")
)

SMART_FACTORY = Solution(
    key="smart_factory",
    title="Smart factory and digital upgrade",
    description=(
        "Introduce process automation, production data collection and smart factory "
        "systems step by step, starting with the most manual bottlenecks."
    ),
    keywords=("smart factory", "automation", "data-driven production")
)

JOB_REDESIGN = Solution(
    key="job_redesign",
    title="Job transition redesign",
    description=(
        "Map jobs affected by the transition, redesign roles and set up internal "
        "transfer paths so affected employees move into new positions."
    ),
    keywords=("job analysis", "role redesign", "internal transfer")
)

RESKILLING = Solution(
    key="reskilling",
    title="Reskilling and upskilling program",
    description=(
        "Build a training curriculum for digital equipment and systems, combining "
        "in-house coaching with external vocational training."
    ),
    keywords=("reskilling", "upskilling", "digital training")
)

LABOR_RELATIONS = Solution(
    key="labor_relations",
    title="Labor-relations communication",
    description=(
        "Share the transition plan with employees early through labor-management "
        "councils and regular briefings, and agree on employment security measures."
    ),
    keywords=("labor-management council", "communication", "employment security")
)

TRANSITION_WAGE_SUBSIDY = GovernmentProgram(
    key="transition_wage_subsidy",
    name="Job transition training wage subsidy",
    description="Covers wages of employees attending transition training during working hours.",
    department=LABOR_MINISTRY
)

SPECIALIZED_RETRAINING = GovernmentProgram(
    key="specialized_retraining",
    name="Specialized retraining program for industry transition",
    description="Funds tailored retraining courses for workers in transitioning industries.",
    department=LABOR_MINISTRY
)

CARBON_NEUTRAL_RND = GovernmentProgram(
    key="carbon_neutral_rnd",
    name="Carbon-neutrality R&D subsidy",
    description="Supports R&D for low-carbon processes and products in manufacturing SMEs.",
    department=INDUSTRY_MINISTRY
)

BASELINE_PROGRAMS: Tuple[GovernmentProgram, ...] = (TRANSITION_WAGE_SUBSIDY, SPECIALIZED_RETRAINING)

# Issue key -> HR solution, in output order. The recruitment issue has no entry.
HR_SOLUTIONS: Tuple[Tuple[str, Solution], ...] = (
    (JOB_TRANSITION, JOB_REDESIGN),
    (DIGITAL_SKILL_GAP, RESKILLING),
    (ANXIETY, LABOR_RELATIONS),
)


class SolutionMatcher:
    """
    Matches diagnosis results against the solution catalog.

    Example:
    ```python
    matcher = SolutionMatcher()
    solutions = matcher.match(100.0, 20.0, issues=[])
    print([s.title for s in solutions.business])
    ```
    """

    def __init__(self, threshold: float = AXIS_THRESHOLD):
        self.threshold = threshold

    def match(
        self,
        climate_risk_percent: float,
        digital_urgency_percent: float,
        issues: Iterable[EmploymentIssue]
    ) -> SolutionSet:
        """Assemble business, HR and government recommendations."""
        climate_high = climate_risk_percent >= self.threshold
        digital_high = digital_urgency_percent >= self.threshold
        flagged = {issue.key for issue in issues}

        business: List[Solution] = []
        if climate_high:
            business.append(BUSINESS_REORGANIZATION)
        if digital_high:
            business.append(SMART_FACTORY)

        hr = [solution for key, solution in HR_SOLUTIONS if key in flagged]

        government = list(BASELINE_PROGRAMS)
        if climate_high:
            government.append(CARBON_NEUTRAL_RND)

        logger.debug(
            f"Matched {len(business)} business, {len(hr)} HR, {len(government)} government entries"
        )
        return SolutionSet(
            business=tuple(business),
            hr=tuple(hr),
            government=tuple(government)
        )


_matcher = SolutionMatcher()


def match_solutions(
    climate_risk_percent: float,
    digital_urgency_percent: float,
    issues: Iterable[EmploymentIssue]
) -> SolutionSet:
    """Match solutions with the standard threshold."""
    return _matcher.match(climate_risk_percent, digital_urgency_percent, issues)
