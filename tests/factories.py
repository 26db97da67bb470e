"""Survey builders shared by the tests."""
from datetime import date, datetime

from gdax.assessment.survey import SurveyResponse

FIXED_TODAY = date(2026, 3, 2)


def survey_record(climate=(3, 3, 3), digital=(3, 3, 3), employment=(3, 3, 3, 3), readiness=3, **overrides):
    """Raw survey record as it would be read back from storage."""
    record = {
        "id": 42,
        "company_name": "Hanbit Precision",
        "ceo_name": "Kim Minsu",
        "location": "Changwon",
        "main_product": "Automotive castings",
        "employee_count": "50-99",
        "annual_revenue": 120,
        "contact_name": "Lee Jiyoung",
        "contact_position": "HR Manager",
        "contact_email": "jiyoung.lee@hanbit.example",
        "contact_phone": "010-1234-5678",
        "support_areas": '["Reskilling", "Smart factory"]',
        "consulting_application": 1,
        "created_at": "2026-01-15T09:30:00",
        "report_generated": 0,
        "report_sent": 0,
    }
    for i, value in enumerate(climate, start=1):
        record[f"climate_risk_{i}"] = value
    for i, value in enumerate(digital, start=1):
        record[f"digital_urgency_{i}"] = value
    for i, value in enumerate(employment, start=1):
        record[f"employment_status_{i}"] = value
    record["readiness_level"] = readiness
    record.update(overrides)
    return record


def make_survey(climate=(3, 3, 3), digital=(3, 3, 3), employment=(3, 3, 3, 3), readiness=3, **overrides):
    """Build a SurveyResponse directly."""
    fields = dict(
        id=42,
        company_name="Hanbit Precision",
        ceo_name="Kim Minsu",
        contact_name="Lee Jiyoung",
        contact_email="jiyoung.lee@hanbit.example",
        support_areas=("Reskilling", "Smart factory"),
        consulting_application=True,
        created_at=datetime(2026, 1, 15, 9, 30),
    )
    for i, value in enumerate(climate, start=1):
        fields[f"climate_risk_{i}"] = value
    for i, value in enumerate(digital, start=1):
        fields[f"digital_urgency_{i}"] = value
    for i, value in enumerate(employment, start=1):
        fields[f"employment_status_{i}"] = value
    fields["readiness_level"] = readiness
    fields.update(overrides)
    return SurveyResponse(**fields)
