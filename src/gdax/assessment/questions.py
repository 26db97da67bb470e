"""
G-DAX Diagnosis Survey Items

Self-assessment questionnaire organized by dimension:
1. Climate Risk (carbon neutrality pressure)
2. Digital Urgency (digital / AI transformation pressure)
3. Employment Status (workforce and job quality)
4. Transition Readiness

Each item has:
- Field name (the key used in survey records)
- Dimension assignment
- Question text
- Answers on the 1-5 agreement scale
"""

from typing import Dict, List, Any, Tuple

LIKERT_MIN = 1
LIKERT_MAX = 5

# Dimension definitions
DIMENSIONS = {
    "climate": {
        "id": "climate",
        "name": "Carbon Neutrality / Climate Risk",
        "description": "How strongly is the business exposed to carbon regulation and climate transition?",
        "color": "#16a34a",
        "fields": ("climate_risk_1", "climate_risk_2", "climate_risk_3"),
    },
    "digital": {
        "id": "digital",
        "name": "Digital / AI Innovation Urgency",
        "description": "How urgently does the business need to digitalize its processes and products?",
        "color": "#2563eb",
        "fields": ("digital_urgency_1", "digital_urgency_2", "digital_urgency_3"),
    },
    "employment": {
        "id": "employment",
        "name": "Employment Status / Job Quality",
        "description": "How much pressure does the transition put on the current workforce?",
        "color": "#7c3aed",
        "fields": (
            "employment_status_1",
            "employment_status_2",
            "employment_status_3",
            "employment_status_4",
        ),
    },
    "readiness": {
        "id": "readiness",
        "name": "Transition Readiness",
        "description": "How committed is management to the industry and job transition?",
        "color": "#ea580c",
        "fields": ("readiness_level",),
    },
}

# Standard answer options for agreement questions
AGREEMENT_OPTIONS = (
    {"value": 1, "label": "Strongly Disagree", "description": "Not at all accurate"},
    {"value": 2, "label": "Disagree", "description": "Mostly inaccurate"},
    {"value": 3, "label": "Neutral", "description": "Neither accurate nor inaccurate"},
    {"value": 4, "label": "Agree", "description": "Mostly accurate"},
    {"value": 5, "label": "Strongly Agree", "description": "Completely accurate"},
)

SURVEY_ITEMS: List[Dict[str, Any]] = [
    # =========================================================================
    # DIMENSION 1: CLIMATE RISK
    # =========================================================================
    {
        "field": "climate_risk_1",
        "dimension": "climate",
        "question": "Carbon emission regulations directly affect our main products or processes.",
        "options": AGREEMENT_OPTIONS,
    },
    {
        "field": "climate_risk_2",
        "dimension": "climate",
        "question": "Our key customers are demanding carbon reduction or RE100 compliance.",
        "options": AGREEMENT_OPTIONS,
    },
    {
        "field": "climate_risk_3",
        "dimension": "climate",
        "question": "Energy and raw material cost increases are threatening our profitability.",
        "options": AGREEMENT_OPTIONS,
    },
    # =========================================================================
    # DIMENSION 2: DIGITAL URGENCY
    # =========================================================================
    {
        "field": "digital_urgency_1",
        "dimension": "digital",
        "question": "Competitors are rapidly adopting automation, smart factory or AI technology.",
        "options": AGREEMENT_OPTIONS,
    },
    {
        "field": "digital_urgency_2",
        "dimension": "digital",
        "question": "Our production and management processes still rely heavily on manual work.",
        "options": AGREEMENT_OPTIONS,
    },
    {
        "field": "digital_urgency_3",
        "dimension": "digital",
        "question": "Without digital transformation we expect to lose competitiveness within 3 years.",
        "options": AGREEMENT_OPTIONS,
    },
    # =========================================================================
    # DIMENSION 3: EMPLOYMENT STATUS
    # =========================================================================
    {
        "field": "employment_status_1",
        "dimension": "employment",
        "question": "We struggle to recruit young workers and to pass on the skills of retiring staff.",
        "options": AGREEMENT_OPTIONS,
    },
    {
        "field": "employment_status_2",
        "dimension": "employment",
        "question": "Some existing jobs will disappear or change significantly in the transition.",
        "options": AGREEMENT_OPTIONS,
    },
    {
        "field": "employment_status_3",
        "dimension": "employment",
        "question": "Employees are anxious about job security because of the changes.",
        "options": AGREEMENT_OPTIONS,
    },
    {
        "field": "employment_status_4",
        "dimension": "employment",
        "question": "Our workforce lacks the digital skills that new equipment and systems require.",
        "options": AGREEMENT_OPTIONS,
    },
    # =========================================================================
    # DIMENSION 4: READINESS
    # =========================================================================
    {
        "field": "readiness_level",
        "dimension": "readiness",
        "question": "Management is committed to investing in the industry and job transition.",
        "options": AGREEMENT_OPTIONS,
    },
]

LIKERT_FIELDS: Tuple[str, ...] = tuple(item["field"] for item in SURVEY_ITEMS)


def get_dimension_fields(dimension_id: str) -> Tuple[str, ...]:
    """Survey field names belonging to a dimension, in answer order"""
    return DIMENSIONS[dimension_id]["fields"]
