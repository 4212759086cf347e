"""
Score report data structure for the Scoring context.

ScoreReport is produced both by the local heuristic scorer and by the
AI-backed analyzer, so it owns the shared rules: the fixed sub-score weights,
the rounding rule, score clamping, and the camelCase wire format exchanged with
the AI service.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

# Sub-score dimension names (wire format keys)
KEYWORD_MATCH = "keywordMatch"
FORMATTING = "formatting"
READABILITY = "readability"
COMPLETENESS = "completeness"
ACTION_VERBS = "actionVerbs"

SUB_SCORE_WEIGHTS = MappingProxyType(
    {
        KEYWORD_MATCH: 0.40,
        FORMATTING: 0.20,
        READABILITY: 0.15,
        COMPLETENESS: 0.15,
        ACTION_VERBS: 0.10,
    }
)

SCORE_MIN = 0
SCORE_MAX = 100

# Composite thresholds for the human-readable rating
RATING_THRESHOLDS = ((80, "Excellent"), (60, "Good"))
LOWEST_RATING = "Needs Improvement"


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 always rounding up.

    Python's round() uses banker's rounding (round(0.5) == 0); scores use
    the conventional rule instead.

    Example:
        >>> round_half_up(79.75)
        80
        >>> round_half_up(82.5)
        83
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round half-up and clamp into [SCORE_MIN, SCORE_MAX]."""
    if value is None or math.isnan(value):
        return SCORE_MIN
    return round_half_up(max(SCORE_MIN, min(SCORE_MAX, value)))


def composite_score(sub_scores: Mapping[str, float]) -> int:
    """
    Weighted combination of sub-scores, rounded half-up and clamped.

    Missing dimensions count as zero.

    Example:
        >>> composite_score({"keywordMatch": 75, "formatting": 90, "readability": 80,
        ...                  "completeness": 85, "actionVerbs": 70})
        80
    """
    total = sum(weight * sub_scores.get(name, 0) for name, weight in SUB_SCORE_WEIGHTS.items())
    return clamp_score(total)


def rating_for(score: int) -> str:
    """Map a composite score to "Excellent", "Good" or "Needs Improvement"."""
    for threshold, label in RATING_THRESHOLDS:
        if score >= threshold:
            return label
    return LOWEST_RATING


@dataclass(frozen=True)
class ScoreReport:
    """
    Compatibility assessment of a resume against a job description.

    Attributes:
        composite_score: Weighted summary of sub_scores (0-100)
        sub_scores: Dimension name -> score (0-100)
        matched_skills: Job description skills found in the resume
        missing_skills: Job description skills absent from the resume
        suggested_skills: Related skills worth adding
        formatting_issues: Detected problems, in check order
        recommendations: Actionable advice, most important first
        source: Which analyzer produced the report ("heuristic" or a provider name)
        reported_composite: Composite claimed by the AI service (clamped), kept
            for comparison only; composite_score is always derived from sub_scores
    """

    composite_score: int
    sub_scores: Mapping[str, int]
    matched_skills: FrozenSet[str] = frozenset()
    missing_skills: FrozenSet[str] = frozenset()
    suggested_skills: FrozenSet[str] = frozenset()
    formatting_issues: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    source: str = "heuristic"
    reported_composite: Optional[int] = None

    @classmethod
    def from_sub_scores(
        cls,
        sub_scores: Mapping[str, float],
        matched_skills: Iterable[str] = (),
        missing_skills: Iterable[str] = (),
        suggested_skills: Iterable[str] = (),
        formatting_issues: Iterable[str] = (),
        recommendations: Iterable[str] = (),
        source: str = "heuristic",
    ) -> "ScoreReport":
        """Build a report whose composite is derived from the clamped sub-scores."""
        clamped = MappingProxyType(
            {name: clamp_score(sub_scores.get(name, 0)) for name in SUB_SCORE_WEIGHTS}
        )
        return cls(
            composite_score=composite_score(clamped),
            sub_scores=clamped,
            matched_skills=frozenset(matched_skills),
            missing_skills=frozenset(missing_skills),
            suggested_skills=frozenset(suggested_skills),
            formatting_issues=tuple(formatting_issues),
            recommendations=tuple(recommendations),
            source=source,
        )

    @property
    def rating(self) -> str:
        return rating_for(self.composite_score)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the camelCase shape exchanged with the AI service.

        Skill sets are emitted sorted so the output is stable.
        """
        return {
            "compositeScore": self.composite_score,
            "scores": dict(self.sub_scores),
            "matchedSkills": sorted(self.matched_skills),
            "missingSkills": sorted(self.missing_skills),
            "suggestedSkills": sorted(self.suggested_skills),
            "formattingIssues": list(self.formatting_issues),
            "recommendations": list(self.recommendations),
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: str = None) -> "ScoreReport":
        """
        Parse the camelCase wire shape, clamping every score into [0, 100].

        composite_score is recomputed from the clamped sub-scores so it always
        agrees with the weights. A reported compositeScore is kept, clamped, as
        reported_composite.

        Raises:
            ValueError: If data is not a mapping or "scores" is not a mapping
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")

        raw_scores = data.get("scores", {})
        if not isinstance(raw_scores, Mapping):
            raise ValueError("'scores' must be a mapping of dimension -> score")

        sub_scores = MappingProxyType(
            {name: clamp_score(_as_number(raw_scores.get(name, 0))) for name in SUB_SCORE_WEIGHTS}
        )
        reported = None
        if "compositeScore" in data:
            reported = clamp_score(_as_number(data["compositeScore"]))

        return cls(
            composite_score=composite_score(sub_scores),
            sub_scores=sub_scores,
            matched_skills=frozenset(_as_strings(data.get("matchedSkills"))),
            missing_skills=frozenset(_as_strings(data.get("missingSkills"))),
            suggested_skills=frozenset(_as_strings(data.get("suggestedSkills"))),
            formatting_issues=tuple(_as_strings(data.get("formattingIssues"))),
            recommendations=tuple(_as_strings(data.get("recommendations"))),
            source=source or str(data.get("source", "unknown")),
            reported_composite=reported,
        )


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _as_strings(value: Any) -> Tuple[str, ...]:
    if not value or isinstance(value, str):
        return ()
    return tuple(str(item) for item in value)
