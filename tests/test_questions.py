"""
Tests for the survey item catalog.
"""
from gdax.assessment.questions import AGREEMENT_OPTIONS, DIMENSIONS, LIKERT_FIELDS, SURVEY_ITEMS, get_dimension_fields


def test_eleven_scored_items():
    assert len(LIKERT_FIELDS) == 11
    assert len(set(LIKERT_FIELDS)) == 11


def test_dimension_fields_match_items():
    for dimension_id in DIMENSIONS:
        expected = tuple(i["field"] for i in SURVEY_ITEMS if i["dimension"] == dimension_id)
        assert get_dimension_fields(dimension_id) == expected


def test_items_use_five_point_scale():
    for item in SURVEY_ITEMS:
        assert [o["value"] for o in item["options"]] == [1, 2, 3, 4, 5]


def test_agreement_options_are_immutable():
    assert isinstance(AGREEMENT_OPTIONS, tuple)
    for item in SURVEY_ITEMS:
        assert item["options"] is AGREEMENT_OPTIONS
