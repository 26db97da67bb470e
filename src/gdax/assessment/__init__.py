"""
G-DAX Assessment Module

Industry and job transition diagnosis survey with:
- Survey item catalog and validation
- Score aggregation
- Report generation and admin statistics
"""

from .questions import SURVEY_ITEMS, DIMENSIONS, LIKERT_FIELDS
from .survey import SurveyResponse, SurveyValidationError
from .schemas import SurveySubmission, parse_submission, parse_record
from .scoring import ScoreSet, aggregate
from .report_engine import (
    DiagnosisReport,
    ReportEngine,
    assemble,
    generate_report,
    get_report_engine
)
from .statistics import SurveyStatistics, summarize_surveys

__all__ = [
    'SURVEY_ITEMS',
    'DIMENSIONS',
    'LIKERT_FIELDS',
    'SurveyResponse',
    'SurveyValidationError',
    'SurveySubmission',
    'parse_submission',
    'parse_record',
    'ScoreSet',
    'aggregate',
    'DiagnosisReport',
    'ReportEngine',
    'assemble',
    'generate_report',
    'get_report_engine',
    'SurveyStatistics',
    'summarize_surveys',
]
