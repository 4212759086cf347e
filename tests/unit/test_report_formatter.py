"""Unit tests for text table formatting and score report summaries."""

import pytest

from resumeforge.contexts.scoring.report_summary import format_score_report
from resumeforge.contexts.scoring.score_report import ScoreReport
from resumeforge.utils.report_formatter import Column, TableFormatter, format_score_bar


@pytest.mark.unit
class TestTableFormatter:
    def test_table_layout(self):
        formatter = TableFormatter([Column("Name", 6), Column("Score", 5, ">")], total_width=12)
        formatter.add_section_header("TITLE")
        formatter.add_table_header()
        formatter.add_separator()
        formatter.add_row(["ab", 7])

        assert formatter.render().split("\n") == [
            "=" * 12,
            "TITLE",
            "=" * 12,
            "Name   Score",
            "-" * 12,
            "ab         7",
        ]

    def test_rows_are_right_trimmed(self):
        formatter = TableFormatter([Column("A", 4), Column("B", 4)])
        formatter.add_row(["x", "y"])
        assert formatter.render() == "x    y"

    def test_row_length_mismatch(self):
        formatter = TableFormatter([Column("A", 4), Column("B", 4)])
        with pytest.raises(ValueError, match="Expected 2 values, got 1"):
            formatter.add_row(["only one"])

    def test_bullets(self):
        formatter = TableFormatter([])
        formatter.add_bullets("Skills", ["Python", "SQL"])
        formatter.add_bullets("Issues", [])
        assert formatter.render() == "\nSkills:\n  - Python\n  - SQL\n\nIssues:\n  none"

    def test_chaining(self):
        text = TableFormatter([]).add_text("a").add_blank_line().add_text("b").render()
        assert text == "a\n\nb"


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, bar", [(0, "........"), (100, "########"), (75, "######.."), (150, "########"),
                   (-5, "........")]
)
def test_format_score_bar(score, bar):
    assert format_score_bar(score, width=8) == bar


@pytest.mark.unit
def test_format_score_report():
    report = ScoreReport.from_sub_scores(
        {
            "keywordMatch": 75,
            "formatting": 90,
            "readability": 80,
            "completeness": 85,
            "actionVerbs": 70,
        },
        matched_skills={"Python"},
        missing_skills={"Kubernetes", "AWS"},
        recommendations=["Add specific metrics to achievements"],
    )
    text = format_score_report(report)

    assert "Composite: 80/100 (Excellent)  [source: heuristic]" in text
    assert "Keyword Match      40%     75     ###############....." in text
    assert "Action Verbs       10%     70     ##############......" in text
    assert "Missing skills:\n  - AWS\n  - Kubernetes" in text
    assert "Formatting issues:\n  none" in text
    assert "  - Add specific metrics to achievements" in text
