"""Unit tests for ScoreReport, composite weighting and rounding."""

import pytest

from resumeforge.contexts.scoring.score_report import (
    SUB_SCORE_WEIGHTS,
    ScoreReport,
    clamp_score,
    composite_score,
    rating_for,
    round_half_up,
)

EXAMPLE_SUB_SCORES = {
    "keywordMatch": 75,
    "formatting": 90,
    "readability": 80,
    "completeness": 85,
    "actionVerbs": 70,
}


@pytest.mark.unit
class TestComposite:
    def test_weights_sum_to_one(self):
        assert sum(SUB_SCORE_WEIGHTS.values()) == pytest.approx(1.0)

    def test_weighted_composite_rounds_79_75_up(self):
        assert composite_score(EXAMPLE_SUB_SCORES) == 80

    def test_missing_dimensions_count_as_zero(self):
        assert composite_score({"keywordMatch": 100}) == 40

    def test_composite_is_clamped(self):
        assert composite_score({name: 500 for name in SUB_SCORE_WEIGHTS}) == 100
        assert composite_score({name: -50 for name in SUB_SCORE_WEIGHTS}) == 0


@pytest.mark.unit
class TestRounding:
    @pytest.mark.parametrize(
        "value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (79.75, 80), (79.49, 79)]
    )
    def test_half_rounds_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        "value, expected", [(-3, 0), (101.2, 100), (float("nan"), 0), (None, 0), (42.5, 43)]
    )
    def test_clamp_score(self, value, expected):
        assert clamp_score(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, rating", [(100, "Excellent"), (80, "Excellent"), (79, "Good"), (60, "Good"),
                      (59, "Needs Improvement"), (0, "Needs Improvement")]
)
def test_rating_for(score, rating):
    assert rating_for(score) == rating


@pytest.mark.unit
class TestScoreReport:
    def test_from_sub_scores_clamps_and_derives_composite(self):
        report = ScoreReport.from_sub_scores({**EXAMPLE_SUB_SCORES, "formatting": 140})

        assert report.sub_scores["formatting"] == 100
        assert report.composite_score == composite_score(report.sub_scores)
        assert set(report.sub_scores) == set(SUB_SCORE_WEIGHTS)

    def test_to_dict_uses_camel_case_and_sorted_skills(self):
        report = ScoreReport.from_sub_scores(
            EXAMPLE_SUB_SCORES, matched_skills={"SQL", "AWS"}, missing_skills={"Go"}
        )
        data = report.to_dict()

        assert data["compositeScore"] == 80
        assert data["scores"] == EXAMPLE_SUB_SCORES
        assert data["matchedSkills"] == ["AWS", "SQL"]
        assert data["missingSkills"] == ["Go"]
        assert data["source"] == "heuristic"

    def test_from_dict_recomputes_composite_from_sub_scores(self):
        perfect = {name: 100 for name in SUB_SCORE_WEIGHTS}
        report = ScoreReport.from_dict(
            {"compositeScore": 5, "scores": perfect}, source="fake/model"
        )

        assert report.composite_score == 100
        assert report.composite_score == composite_score(report.sub_scores)
        assert report.reported_composite == 5
        assert report.to_dict()["compositeScore"] == 100
        assert report.source == "fake/model"

    def test_from_dict_clamps_and_tolerates_bad_values(self):
        report = ScoreReport.from_dict(
            {
                "compositeScore": "250",
                "scores": {"keywordMatch": "n/a", "formatting": -20, "readability": 77.5},
                "matchedSkills": "Python",
                "recommendations": ["Add metrics"],
            }
        )
        # Only readability survives: 0.15 * 78 = 11.7
        assert report.composite_score == 12
        assert report.reported_composite == 100
        assert report.sub_scores["keywordMatch"] == 0
        assert report.sub_scores["formatting"] == 0
        assert report.sub_scores["readability"] == 78
        assert report.matched_skills == frozenset()
        assert report.recommendations == ("Add metrics",)

    def test_from_dict_derives_missing_composite(self):
        report = ScoreReport.from_dict({"scores": EXAMPLE_SUB_SCORES})
        assert report.composite_score == 80
        assert report.reported_composite is None

    @pytest.mark.parametrize("data", [[1, 2], "report", {"scores": [75, 90]}])
    def test_from_dict_rejects_wrong_shapes(self, data):
        with pytest.raises(ValueError):
            ScoreReport.from_dict(data)
