"""
G-DAX Industry & Job Transition Diagnosis

Scores a company's self-assessment survey, places it on the climate-risk /
digital-urgency matrix and recommends business, HR and government support.
"""

from .assessment import (
    DiagnosisReport,
    ReportEngine,
    SurveyResponse,
    SurveyValidationError,
    generate_report,
    parse_record,
    parse_submission,
    summarize_surveys
)
from .patterns import DiagnosisType, IssueSeverity

__version__ = "0.1.0"

__all__ = [
    'DiagnosisReport',
    'DiagnosisType',
    'IssueSeverity',
    'ReportEngine',
    'SurveyResponse',
    'SurveyValidationError',
    'generate_report',
    'parse_record',
    'parse_submission',
    'summarize_surveys',
]
