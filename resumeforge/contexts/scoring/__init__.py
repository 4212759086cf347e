"""
Scoring Context

Responsibilities:
- Scores a resume against a job description (keyword match, formatting,
  readability, completeness, action verbs)
- Combines sub-scores into the weighted composite and a rating
- Routes analysis and improvement to an LLM provider with local fallbacks
- Owns the keyword tables (skills by category, strong and weak verbs)

Owns: ScoreReport construction, scoring heuristics, AI analysis adapters
Never: Lays out or renders documents
"""

from resumeforge.contexts.scoring.analyzers import (
    FallbackAnalyzer,
    HeuristicAnalyzer,
    LLMAnalyzer,
    ResumeAnalyzer,
)
from resumeforge.contexts.scoring.exceptions import AnalysisServiceError
from resumeforge.contexts.scoring.heuristic_scorer import composite_report
from resumeforge.contexts.scoring.improver import (
    FallbackImprover,
    LLMImprover,
    ResumeImprover,
    RuleBasedImprover,
)
from resumeforge.contexts.scoring.score_report import ScoreReport, composite_score

__all__ = [
    "AnalysisServiceError",
    "FallbackAnalyzer",
    "FallbackImprover",
    "HeuristicAnalyzer",
    "LLMAnalyzer",
    "LLMImprover",
    "ResumeAnalyzer",
    "ResumeImprover",
    "RuleBasedImprover",
    "ScoreReport",
    "composite_report",
    "composite_score",
]
