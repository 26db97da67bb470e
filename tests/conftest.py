"""Shared fixtures for the diagnosis engine tests."""
import pytest

from gdax.assessment.report_engine import ReportEngine
from gdax.config.settings import TestingConfig

from tests.factories import FIXED_TODAY


@pytest.fixture
def engine():
    """Report engine with a fixed clock and test configuration."""
    return ReportEngine(TestingConfig, today=lambda: FIXED_TODAY)
