"""
Tests for report generation end to end.
"""
import json
from datetime import date

import pytest

from gdax.assessment import report_engine as report_engine_module
from gdax.assessment.report_engine import ReportEngine, generate_report, get_report_engine
from gdax.assessment.survey import SurveyValidationError
from gdax.config.settings import ProductionConfig, TestingConfig
from gdax.patterns.issues import IssueSeverity
from gdax.patterns.quadrant import DiagnosisType

from tests.factories import FIXED_TODAY, make_survey, survey_record


class TestScenarios:
    """Reference surveys and their expected diagnoses."""

    def test_green_transition(self, engine):
        report = engine.generate_report(make_survey(
            climate=(5, 5, 5), digital=(1, 1, 1), employment=(1, 1, 1, 1), readiness=3
        ))

        assert report.scores.climate_total == 15
        assert report.scores.digital_total == 3
        assert report.climate_risk_percent == "100.0"
        assert report.digital_urgency_percent == "20.0"
        assert report.diagnosis_type is DiagnosisType.GREEN_TRANSITION
        assert report.employment_messages == ()
        assert [s.key for s in report.solutions.business] == ["business_reorganization"]
        assert report.solutions.hr == ()
        assert len(report.solutions.government) == 3

    def test_stable_operation_with_all_issues(self, engine):
        report = engine.generate_report(make_survey(
            climate=(1, 1, 1), digital=(1, 1, 1), employment=(5, 5, 5, 5), readiness=1
        ))

        assert report.diagnosis_type is DiagnosisType.STABLE_OPERATION
        assert [(i.key, i.severity) for i in report.employment_messages] == [
            ("recruitment", IssueSeverity.CRITICAL),
            ("job_transition", IssueSeverity.HIGH),
            ("anxiety", IssueSeverity.HIGH),
            ("digital_skill_gap", IssueSeverity.MEDIUM),
        ]
        assert report.solutions.business == ()
        assert [s.key for s in report.solutions.hr] == [
            "job_redesign", "reskilling", "labor_relations"
        ]
        assert len(report.solutions.government) == 2

    def test_boundary_is_structural_transformation(self, engine):
        report = engine.generate_report(make_survey(climate=(3, 3, 3), digital=(2, 3, 4)))

        assert report.scores.climate_total == 9
        assert report.scores.digital_total == 9
        assert report.climate_risk_percent == "60.0"
        assert report.diagnosis_type is DiagnosisType.STRUCTURAL_TRANSFORMATION


def test_report_is_deterministic(engine):
    survey = make_survey(climate=(4, 2, 5), digital=(3, 1, 4), employment=(2, 4, 5, 3))
    first = engine.generate_report(survey)
    second = engine.generate_report(survey)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_pass_through_fields(engine):
    survey = make_survey(support_areas=("Reskilling",), consulting_application=True)
    report = engine.generate_report(survey)

    assert report.survey_id == 42
    assert report.company_name == "Hanbit Precision"
    assert report.contact_email == "jiyoung.lee@hanbit.example"
    assert report.support_areas == ("Reskilling",)
    assert report.consulting_application is True


def test_first_send_is_dated_today(engine):
    report = engine.generate_report(make_survey())
    assert report.diagnosis_date == FIXED_TODAY
    assert report.to_dict()["diagnosis_date"] == "2026-03-02"


def test_resend_is_dated_at_submission(engine):
    report = engine.regenerate_report(make_survey())
    assert report.diagnosis_date == date(2026, 1, 15)


def test_resend_without_timestamp_falls_back_to_today(engine, caplog):
    report = engine.regenerate_report(make_survey(created_at=None))

    assert report.diagnosis_date == FIXED_TODAY
    assert "no creation timestamp" in caplog.text


def test_on_generated_called_once_with_survey_id(engine):
    calls = []
    engine.generate_report(make_survey(id=7), on_generated=calls.append)
    assert calls == [7]


def test_on_generated_not_called_for_invalid_record(engine):
    calls = []
    with pytest.raises(SurveyValidationError):
        engine.generate_report(survey_record(climate_risk_2=None), on_generated=calls.append)
    assert calls == []


def test_accepts_raw_record(engine):
    report = engine.generate_report(survey_record(climate=(5, 5, 5), digital=(5, 5, 5)))

    assert report.diagnosis_type is DiagnosisType.STRUCTURAL_TRANSFORMATION
    assert report.support_areas == ("Reskilling", "Smart factory")
    assert report.consulting_application is True


def test_to_dict_is_json_serializable(engine):
    report = engine.generate_report(make_survey(employment=(4, 4, 4, 4)))
    data = json.loads(json.dumps(report.to_dict()))

    assert data["diagnosis_type"]["type"] == report.diagnosis_type.value
    assert data["scores"]["climate"] == 3.0
    assert len(data["employment_messages"]) == 4
    assert data["support_areas"] == ["Reskilling", "Smart factory"]


def test_notification_context(engine):
    report = engine.generate_report(make_survey(climate=(5, 5, 5), digital=(1, 1, 1)))
    context = report.notification_context(engine.report_url(report.survey_id))

    assert context == {
        "company_name": "Hanbit Precision",
        "ceo_name": "Kim Minsu",
        "contact_name": "Lee Jiyoung",
        "report_url": "https://diagnosis.example.org/report/42",
        "diagnosis_type": DiagnosisType.GREEN_TRANSITION.label,
        "diagnosis_date": "2026-03-02",
    }


def test_date_format_from_config():
    config_class = type("DottedDates", (TestingConfig,), {"DIAGNOSIS_DATE_FORMAT": "%Y.%m.%d"})
    engine = ReportEngine(config_class, today=lambda: FIXED_TODAY)

    assert engine.generate_report(make_survey()).formatted_date == "2026.03.02"


def test_module_level_generate_report_uses_singleton():
    assert get_report_engine() is get_report_engine()
    report = generate_report(make_survey(climate=(1, 1, 1), digital=(5, 5, 5)))
    assert report.diagnosis_type is DiagnosisType.DIGITAL_LEADER


def test_production_report_without_base_url(monkeypatch):
    monkeypatch.setenv("GDAX_ENV", "production")
    monkeypatch.setattr(ProductionConfig, "REPORT_BASE_URL", None)
    monkeypatch.setattr(report_engine_module, "_engine", None)

    report = generate_report(make_survey(climate=(1, 1, 1), digital=(5, 5, 5)))
    assert report.diagnosis_type is DiagnosisType.DIGITAL_LEADER

    with pytest.raises(ValueError, match="REPORT_BASE_URL"):
        get_report_engine().report_url(report.survey_id)
