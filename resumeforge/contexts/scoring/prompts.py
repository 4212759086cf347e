"""
Prompt templates for the AI-backed analyzer and improver.

The analysis prompt asks for the same camelCase shape that ScoreReport.to_dict()
emits, so responses parse with ScoreReport.from_dict().
"""

import json

from resumeforge.contexts.scoring.score_report import SUB_SCORE_WEIGHTS

# Inputs are truncated so a pasted book does not blow the context window
MAX_PROMPT_INPUT_CHARS = 12000

# =============================================================================
# ANALYSIS
# =============================================================================

ANALYSIS_SYSTEM_PROMPT = """\
You are an ATS (Applicant Tracking System) expert. Analyze resumes against job
descriptions and respond with ONLY a valid JSON object, no prose and no code fences."""

_ANALYSIS_USER_TEMPLATE = """\
Analyze this resume against the job description and provide a detailed breakdown.

RESUME:
{resume}

JOB DESCRIPTION:
{job_description}

Respond in exactly this JSON format:
{example_json}

Calculate scores (0-100 each) based on:
{weight_lines}

Provide specific, actionable recommendations."""

_DIMENSION_DESCRIPTIONS = {
    "keywordMatch": "How many job requirements are mentioned",
    "formatting": "Professional structure, consistency, ATS-friendly",
    "readability": "Clear language, proper grammar",
    "completeness": "All relevant sections present",
    "actionVerbs": "Strong, impactful language",
}

_EXAMPLE_REPORT = {
    "compositeScore": 80,
    "scores": {
        "keywordMatch": 75,
        "formatting": 90,
        "readability": 80,
        "completeness": 85,
        "actionVerbs": 70,
    },
    "matchedSkills": ["JavaScript", "React"],
    "missingSkills": ["Python", "AWS"],
    "suggestedSkills": ["TypeScript", "GraphQL"],
    "formattingIssues": ["Use consistent bullet points"],
    "recommendations": ["Add specific metrics to achievements"],
}


def build_analysis_prompt(resume_text: str, job_description_text: str) -> str:
    """Build the user prompt for a resume analysis request."""
    weight_lines = "\n".join(
        f"- {name} ({int(weight * 100)}%): {_DIMENSION_DESCRIPTIONS[name]}"
        for name, weight in SUB_SCORE_WEIGHTS.items()
    )
    return _ANALYSIS_USER_TEMPLATE.format(
        resume=resume_text[:MAX_PROMPT_INPUT_CHARS],
        job_description=job_description_text[:MAX_PROMPT_INPUT_CHARS],
        example_json=json.dumps(_EXAMPLE_REPORT, indent=2),
        weight_lines=weight_lines,
    )


# =============================================================================
# IMPROVEMENT
# =============================================================================

IMPROVEMENT_SYSTEM_PROMPT = """\
You are a professional resume writer. Rewrite resumes to be more ATS-friendly and
compelling. Respond with the improved resume text only."""

_IMPROVEMENT_USER_TEMPLATE = """\
Improve this resume based on the analysis results.

ORIGINAL RESUME:
{resume}

JOB DESCRIPTION:
{job_description}

ANALYSIS RESULTS:
Missing Skills: {missing_skills}
Formatting Issues: {formatting_issues}
Recommendations: {recommendations}

Provide an improved version that:
1. Uses stronger action verbs
2. Incorporates relevant missing skills naturally
3. Adds quantifiable achievements where possible
4. Improves ATS keyword density
5. Maintains professional formatting
6. Keeps the same overall structure but enhances content

Keep the original section headers so the document structure is preserved."""


def build_improvement_prompt(resume_text: str, job_description_text: str, report) -> str:
    """
    Build the user prompt for a resume improvement request.

    Args:
        resume_text: Resume to rewrite
        job_description_text: Target job description
        report: ScoreReport whose findings steer the rewrite
    """
    return _IMPROVEMENT_USER_TEMPLATE.format(
        resume=resume_text[:MAX_PROMPT_INPUT_CHARS],
        job_description=job_description_text[:MAX_PROMPT_INPUT_CHARS],
        missing_skills=", ".join(sorted(report.missing_skills)) or "none",
        formatting_issues=", ".join(report.formatting_issues) or "none",
        recommendations=", ".join(report.recommendations) or "none",
    )
