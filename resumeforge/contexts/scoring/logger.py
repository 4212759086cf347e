"""
Scoring context logger: [score]-prefixed wrappers over loguru, plus analysis
summaries.

Scoring modules log through this module rather than loguru directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from resumeforge.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[score]"


def setup_scoring_logger(log_dir: Path = None) -> Path:
    """
    Start a "score" session log.

    Args:
        log_dir: Session directory (default: a new folder under LOGS_PATH)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="score",
        log_dir=log_dir,
        extra_provenance={"LLM provider": os.getenv("LLM_PROVIDER", "openai")},
    )


def _log_info(message: str) -> None:
    logger.opt(depth=1).info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.opt(depth=1).success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.opt(depth=1).warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.opt(depth=1).debug(f"{CONTEXT_PREFIX} {message}")


def log_analysis_start(analyzer_name: str, resume_chars: int, jd_chars: int) -> None:
    _log_info(f"Analyzing resume with {analyzer_name}")
    _log_debug(f"  Resume: {resume_chars} chars, job description: {jd_chars} chars")


def log_analysis_result(report, elapsed_time: float) -> None:  # report: ScoreReport
    """
    Log a finished analysis: composite at SUCCESS, sub-scores at DEBUG and
    missing skills at INFO.
    """
    _log_success(
        f"Composite score {report.composite_score} ({report.rating}) "
        f"from {report.source} ({elapsed_time:.2f}s)"
    )
    for name, value in report.sub_scores.items():
        _log_debug(f"  {name}: {value}")
    if report.missing_skills:
        _log_info(f"  Missing skills: {', '.join(sorted(report.missing_skills))}")


def log_fallback(primary_name: str, error: Exception) -> None:
    _log_warning(f"{primary_name} failed, falling back to heuristic analysis")
    _log_debug(f"  Cause: {error}")
