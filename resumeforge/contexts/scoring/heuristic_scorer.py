"""
Heuristic resume scoring.

Computes the five sub-scores of a ScoreReport from resume text, job description
text and the parsed resume document, using only keyword tables and line-level
regexes. Every function here is pure: the same inputs always produce the same
outputs, and no input string makes them raise.

Sub-scores:
- keywordMatch: share of job description skills found in the resume
- formatting: 100 minus fixed penalties for detected formatting problems
- readability: Flesch Reading Ease of the resume text
- completeness: contact details plus the four core resume sections
- actionVerbs: strong verbs rewarded, weak phrases penalized
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from resumeforge.contexts.intake.document_data_structure import ParsedDocument
from resumeforge.contexts.intake.document_parser import parse_document
from resumeforge.contexts.scoring.keyword_catalog import DEFAULT_CATALOG, KeywordCatalog
from resumeforge.contexts.scoring.logger import _log_debug
from resumeforge.contexts.scoring.score_report import (
    ACTION_VERBS,
    COMPLETENESS,
    FORMATTING,
    KEYWORD_MATCH,
    READABILITY,
    ScoreReport,
)
from resumeforge.contexts.scoring.text_metrics import readability

# =============================================================================
# PATTERNS AND PENALTIES
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """Regex patterns for contact details."""

    # Parts are length-bounded (64 local, 63 per label, at most 10 labels) so a
    # long run of "a.a.a." keeps the search linear
    EMAIL: str = (
        r"\b[A-Za-z0-9._%+-]{1,64}@"
        r"[A-Za-z0-9-]{1,63}(?:\.[A-Za-z0-9-]{1,63}){0,8}\.[A-Za-z]{2,63}\b"
    )

    # 5551234567, 555-123-4567, 555.123.4567, (555) 123-4567, +1 555 123 4567
    PHONE: str = r"(?<!\d)(?:\+?\d{1,3}[\s.-]?)?(?:\(\d{3}\)|\d{3})[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)"


@dataclass(frozen=True)
class BulletPatterns:
    """Bullet styles recognized at the start of a line."""

    STYLES: tuple = (
        r"^[^\S\n]*•",
        r"^[^\S\n]*\*\s",
        r"^[^\S\n]*-\s",
        r"^[^\S\n]*\d+\.\s",
    )


# Quantified achievements: "40%", "$2M", "3x", "10k+ users"
METRIC_PATTERN = r"(?<!\d)\d+(?:\.\d+)?\s*(?:%|percent\b|x\b|k\b|m\b|\+)|\$\s?\d"

ESSENTIAL_SECTION_KEYWORDS = ("experience", "education", "skills", "summary", "objective")
MIN_ESSENTIAL_SECTIONS = 3


class FormattingPenalties:
    """Deductions applied by formatting_compliance(), in check order."""

    INCONSISTENT_BULLETS = 15
    MISSING_SECTIONS = 20
    MISSING_EMAIL = 10
    MISSING_PHONE = 10
    NO_ACTION_VERBS = 15


class FormattingIssues:
    """Issue strings reported by formatting_compliance()."""

    INCONSISTENT_BULLETS = "Inconsistent bullet point usage"
    MISSING_SECTIONS = "Missing essential resume sections"
    MISSING_EMAIL = "Missing email address"
    MISSING_PHONE = "Missing phone number"
    NO_ACTION_VERBS = "Lacks strong action verbs"


# Completeness groups: label -> section title fragments that satisfy it
SECTION_GROUPS = {
    "Professional summary": ("SUMMARY", "OBJECTIVE", "PROFILE", "ABOUT"),
    "Experience": ("EXPERIENCE", "EMPLOYMENT", "WORK HISTORY"),
    "Education": ("EDUCATION", "ACADEMIC"),
    "Skills": ("SKILLS", "TECHNOLOGIES", "COMPETENCIES"),
}
CONTACT_GROUP = "Contact information"

ACTION_VERB_POINTS = 20
WEAK_PHRASE_PENALTY = 10

MAX_LISTED_SKILLS = 5
READABILITY_RECOMMENDATION_THRESHOLD = 50

# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class FormattingResult:
    score: int
    issues: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SkillMatch:
    matched: FrozenSet[str] = frozenset()
    missing: FrozenSet[str] = frozenset()

    @property
    def total(self) -> int:
        return len(self.matched) + len(self.missing)


@dataclass(frozen=True)
class CompletenessResult:
    score: int
    missing: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ActionVerbResult:
    score: int
    strong: FrozenSet[str] = frozenset()
    weak: FrozenSet[str] = frozenset()


# =============================================================================
# SUB-SCORES
# =============================================================================


def extract_keywords(text: str, catalog: KeywordCatalog = DEFAULT_CATALOG) -> FrozenSet[str]:
    """
    Skills from the catalog mentioned in text, in canonical spelling.

    Example:
        >>> sorted(extract_keywords("Python, python and AWS"))
        ['AWS', 'Python']
    """
    return catalog.find_skills(text)


def has_email(text: str) -> bool:
    return bool(re.search(ContactPatterns.EMAIL, text or ""))


def has_phone(text: str) -> bool:
    return bool(re.search(ContactPatterns.PHONE, text or ""))


def bullet_styles_used(text: str) -> Tuple[str, ...]:
    """Bullet style patterns that start at least one line of text."""
    return tuple(
        style
        for style in BulletPatterns.STYLES
        if re.search(style, text or "", flags=re.MULTILINE)
    )


def formatting_compliance(
    text: str, catalog: KeywordCatalog = DEFAULT_CATALOG
) -> FormattingResult:
    """
    Score formatting by deducting fixed penalties from 100.

    Checks, in order: consistent bullet style, at least three essential
    section keywords, an email address, a phone number, and at least one
    strong action verb. Each failed check appends its issue string.

    Args:
        text: Resume text
        catalog: Keyword tables (for strong verbs)

    Returns:
        FormattingResult with score floored at 0 and issues in check order
    """
    text = text or ""
    lowered = text.lower()
    score = 100
    issues: List[str] = []

    if len(bullet_styles_used(text)) > 1:
        issues.append(FormattingIssues.INCONSISTENT_BULLETS)
        score -= FormattingPenalties.INCONSISTENT_BULLETS

    found_sections = [kw for kw in ESSENTIAL_SECTION_KEYWORDS if kw in lowered]
    if len(found_sections) < MIN_ESSENTIAL_SECTIONS:
        issues.append(FormattingIssues.MISSING_SECTIONS)
        score -= FormattingPenalties.MISSING_SECTIONS

    if not has_email(text):
        issues.append(FormattingIssues.MISSING_EMAIL)
        score -= FormattingPenalties.MISSING_EMAIL

    if not has_phone(text):
        issues.append(FormattingIssues.MISSING_PHONE)
        score -= FormattingPenalties.MISSING_PHONE

    if not catalog.find_strong_verbs(text):
        issues.append(FormattingIssues.NO_ACTION_VERBS)
        score -= FormattingPenalties.NO_ACTION_VERBS

    return FormattingResult(score=max(0, score), issues=tuple(issues))


def _literal_in_resume(literal: str, resume_words: List[str], resume_normalized: str) -> bool:
    needle = literal.lower()
    if " " in needle:
        return needle in resume_normalized
    return any(needle in word for word in resume_words)


def match_against_job_description(
    resume_text: str, job_description_text: str, catalog: KeywordCatalog = DEFAULT_CATALOG
) -> SkillMatch:
    """
    Partition job description skills into matched and missing.

    A skill is matched when its lower-cased literal is a substring of some
    resume word; multi-word skills ("Problem Solving") are looked up in the
    whitespace-normalized resume text instead.

    Example:
        >>> m = match_against_job_description("Built React apps", "React and Docker")
        >>> sorted(m.matched), sorted(m.missing)
        (['React'], ['Docker'])
    """
    jd_skills = extract_keywords(job_description_text, catalog)
    resume_words = (resume_text or "").lower().split()
    resume_normalized = " ".join(resume_words)

    matched = frozenset(
        skill
        for skill in jd_skills
        if _literal_in_resume(skill, resume_words, resume_normalized)
    )
    return SkillMatch(matched=matched, missing=jd_skills - matched)


def keyword_match_score(match: SkillMatch) -> float:
    """Percentage of job description skills matched; 0 when the JD names none."""
    if match.total == 0:
        return 0.0
    return 100.0 * len(match.matched) / match.total


def completeness(document: ParsedDocument) -> CompletenessResult:
    """
    Score presence of contact details and the four core sections.

    Each group is worth an equal share of 100. A document with no sections
    at all is missing every section group.

    Returns:
        CompletenessResult with score and missing group labels in fixed order
    """
    missing: List[str] = []

    full_text = document.to_text()
    if not (has_email(full_text) or has_phone(full_text)):
        missing.append(CONTACT_GROUP)

    titles = document.section_titles
    for label, fragments in SECTION_GROUPS.items():
        if not any(fragment in title for title in titles for fragment in fragments):
            missing.append(label)

    groups = len(SECTION_GROUPS) + 1
    score = (groups - len(missing)) * 100 // groups
    return CompletenessResult(score=score, missing=tuple(missing))


def action_verb_strength(
    text: str, catalog: KeywordCatalog = DEFAULT_CATALOG
) -> ActionVerbResult:
    """
    Reward distinct strong verbs and penalize distinct weak phrases.

    ACTION_VERB_POINTS per strong verb (capped at 100), minus
    WEAK_PHRASE_PENALTY per weak phrase, floored at 0.
    """
    strong = catalog.find_strong_verbs(text)
    weak = catalog.find_weak_phrases(text)
    score = min(100, ACTION_VERB_POINTS * len(strong)) - WEAK_PHRASE_PENALTY * len(weak)
    return ActionVerbResult(score=max(0, score), strong=strong, weak=weak)


def suggest_skills(
    job_skills: FrozenSet[str],
    resume_skills: FrozenSet[str],
    catalog: KeywordCatalog = DEFAULT_CATALOG,
    limit: int = MAX_LISTED_SKILLS,
) -> FrozenSet[str]:
    """
    Suggest related catalog skills the resume does not mention.

    Candidates come from the categories of the job description's skills, in
    catalog order, skipping anything already in the job description or the
    resume. Without job skills, soft skills missing from the resume are
    suggested instead.
    """
    known = {s.lower() for s in job_skills | resume_skills}
    categories = [catalog.category_of(skill) for skill in sorted(job_skills)]
    categories = [c for c in dict.fromkeys(categories) if c]
    if not categories and "soft_skills" in catalog.categories:
        categories = ["soft_skills"]

    suggestions: List[str] = []
    for category in categories:
        for skill in catalog.categories.get(category, ()):
            if skill.lower() not in known and skill not in suggestions:
                suggestions.append(skill)
    return frozenset(suggestions[:limit])


# =============================================================================
# RECOMMENDATIONS
# =============================================================================

ISSUE_RECOMMENDATIONS = {
    FormattingIssues.INCONSISTENT_BULLETS: "Use one bullet style consistently throughout",
    FormattingIssues.MISSING_EMAIL: "Add an email address and phone number to the header",
    FormattingIssues.MISSING_PHONE: "Add an email address and phone number to the header",
    FormattingIssues.NO_ACTION_VERBS: (
        "Start bullet points with strong action verbs such as Led, Developed or Optimized"
    ),
}


def build_recommendations(
    skill_match: SkillMatch,
    formatting: FormattingResult,
    completeness_result: CompletenessResult,
    verbs: ActionVerbResult,
    readability_score: float,
    resume_text: str,
    catalog: KeywordCatalog = DEFAULT_CATALOG,
) -> Tuple[str, ...]:
    """Assemble actionable recommendations, most important first, without duplicates."""
    recommendations: List[str] = []

    if skill_match.missing:
        listed = ", ".join(sorted(skill_match.missing)[:MAX_LISTED_SKILLS])
        recommendations.append(f"Include missing skills from the job description: {listed}")
    elif skill_match.total == 0:
        recommendations.append(
            "Job description names no recognizable skills; compare requirements manually"
        )

    for label in completeness_result.missing:
        if label != CONTACT_GROUP:
            recommendations.append(f"Add a {label} section")

    for issue in formatting.issues:
        recommendation = ISSUE_RECOMMENDATIONS.get(issue)
        if recommendation:
            recommendations.append(recommendation)

    for phrase in sorted(verbs.weak):
        recommendations.append(
            f"Replace '{phrase}' with '{catalog.weak_verb_replacements[phrase]}'"
        )

    if readability_score < READABILITY_RECOMMENDATION_THRESHOLD:
        recommendations.append("Shorten sentences and prefer simpler words to improve readability")

    if not re.search(METRIC_PATTERN, resume_text or "", flags=re.IGNORECASE):
        recommendations.append("Add specific metrics to achievements")

    return tuple(dict.fromkeys(recommendations))


# =============================================================================
# COMPOSITE REPORT
# =============================================================================


def composite_report(
    resume_text: str,
    job_description_text: str,
    document: Optional[ParsedDocument] = None,
    catalog: KeywordCatalog = DEFAULT_CATALOG,
) -> ScoreReport:
    """
    Build the full local ScoreReport.

    Always available and never touches the network; the AI-backed analyzer
    falls back to this report.

    Args:
        resume_text: Resume text (any string)
        job_description_text: Job description text (any string)
        document: Pre-parsed resume (parsed from resume_text if omitted)
        catalog: Keyword tables

    Returns:
        ScoreReport whose composite is the fixed weighting of its sub-scores
    """
    resume_text = resume_text or ""
    job_description_text = job_description_text or ""
    if document is None:
        document = parse_document(resume_text)

    skill_match = match_against_job_description(resume_text, job_description_text, catalog)
    formatting = formatting_compliance(resume_text, catalog)
    readability_score = readability(resume_text)
    completeness_result = completeness(document)
    verbs = action_verb_strength(resume_text, catalog)

    sub_scores = {
        KEYWORD_MATCH: keyword_match_score(skill_match),
        FORMATTING: formatting.score,
        READABILITY: readability_score,
        COMPLETENESS: completeness_result.score,
        ACTION_VERBS: verbs.score,
    }

    resume_skills = extract_keywords(resume_text, catalog)
    report = ScoreReport.from_sub_scores(
        sub_scores,
        matched_skills=skill_match.matched,
        missing_skills=skill_match.missing,
        suggested_skills=suggest_skills(
            skill_match.matched | skill_match.missing, resume_skills, catalog
        ),
        formatting_issues=formatting.issues,
        recommendations=build_recommendations(
            skill_match,
            formatting,
            completeness_result,
            verbs,
            readability_score,
            resume_text,
            catalog,
        ),
        source="heuristic",
    )

    _log_debug(f"Heuristic sub-scores: {dict(report.sub_scores)} -> {report.composite_score}")
    return report
