"""
Unit tests for score aggregation.

Covers dimension means, axis totals and the percentage scaling that feeds
quadrant placement.
"""
import itertools

import pytest

from gdax.assessment.scoring import AXIS_CEILING, aggregate, axis_percent

from tests.factories import make_survey


def test_axis_ceiling_is_three_items_at_five():
    assert AXIS_CEILING == 15


def test_means_and_totals():
    scores = aggregate(make_survey(
        climate=(5, 4, 3), digital=(1, 2, 2), employment=(1, 2, 3, 4), readiness=2
    ))

    assert scores.climate_total == 12
    assert scores.digital_total == 5
    assert scores.climate == pytest.approx(4.0)
    assert scores.digital == pytest.approx(5 / 3)
    assert scores.employment == pytest.approx(2.5)
    assert scores.readiness == 2


def test_means_are_not_rounded():
    scores = aggregate(make_survey(digital=(1, 1, 2)))
    assert scores.digital == 4 / 3


def test_percent_axes_use_totals():
    scores = aggregate(make_survey(climate=(5, 5, 5), digital=(1, 1, 1)))
    assert scores.climate_risk_percent == 100.0
    assert scores.digital_urgency_percent == 20.0


def test_nine_of_fifteen_is_exactly_sixty():
    assert axis_percent(9) == 60.0


def test_employment_and_readiness_do_not_move_axes():
    low = aggregate(make_survey(employment=(1, 1, 1, 1), readiness=1))
    high = aggregate(make_survey(employment=(5, 5, 5, 5), readiness=5))

    assert low.climate_risk_percent == high.climate_risk_percent
    assert low.digital_urgency_percent == high.digital_urgency_percent


@pytest.mark.parametrize("answers", list(itertools.product(range(1, 6), repeat=3)))
def test_axis_bounds(answers):
    scores = aggregate(make_survey(climate=answers, digital=answers))
    assert 20.0 <= scores.climate_risk_percent <= 100.0
    assert 20.0 <= scores.digital_urgency_percent <= 100.0
