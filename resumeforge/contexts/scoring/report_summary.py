"""Human-readable text rendering of a ScoreReport."""

from resumeforge.contexts.scoring.score_report import SUB_SCORE_WEIGHTS, ScoreReport
from resumeforge.utils.report_formatter import Column, TableFormatter, format_score_bar

# Display labels for the wire-format dimension keys
DIMENSION_LABELS = {
    "keywordMatch": "Keyword Match",
    "formatting": "Formatting",
    "readability": "Readability",
    "completeness": "Completeness",
    "actionVerbs": "Action Verbs",
}


def format_score_report(report: ScoreReport, title: str = "ATS SCORE REPORT") -> str:
    """
    Render a report as an aligned text table followed by skill and advice lists.

    Example output:
        ========================================================================
        ATS SCORE REPORT
        ========================================================================
        Composite: 80/100 (Excellent)  [source: heuristic]

        Dimension          Weight  Score  Bar
        ------------------------------------------------------------------------
        Keyword Match      40%     75     ###############.....
        ...
    """
    formatter = TableFormatter(
        columns=[
            Column("Dimension", 18),
            Column("Weight", 7),
            Column("Score", 6),
            Column("Bar", 20),
        ]
    )
    formatter.add_section_header(title)
    formatter.add_text(
        f"Composite: {report.composite_score}/100 ({report.rating})  [source: {report.source}]"
    )
    formatter.add_blank_line()
    formatter.add_table_header()
    formatter.add_separator()

    for name, weight in SUB_SCORE_WEIGHTS.items():
        value = report.sub_scores.get(name, 0)
        formatter.add_row(
            [
                DIMENSION_LABELS.get(name, name),
                f"{int(weight * 100)}%",
                value,
                format_score_bar(value),
            ]
        )

    formatter.add_bullets("Matched skills", sorted(report.matched_skills))
    formatter.add_bullets("Missing skills", sorted(report.missing_skills))
    formatter.add_bullets("Suggested skills", sorted(report.suggested_skills))
    formatter.add_bullets("Formatting issues", report.formatting_issues)
    formatter.add_bullets("Recommendations", report.recommendations)

    return formatter.render()
