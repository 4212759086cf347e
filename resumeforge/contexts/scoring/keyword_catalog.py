"""
Keyword catalog for skill extraction and action-verb analysis.

Static tables of known skills (grouped by category) and of strong/weak action
verbs, plus case-insensitive matchers over them. An empty catalog is valid and
simply matches nothing.

Pattern classes follow the intake convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for tables
- Helper functions that use these tables
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

# =============================================================================
# SKILL TABLES
# =============================================================================


@dataclass(frozen=True)
class SkillCategories:
    """
    Known skills by category, in canonical spelling.

    These aren't meant to be exhaustive; they cover the skills most often
    named in software job descriptions.
    """

    LANGUAGES: tuple = (
        "JavaScript",
        "TypeScript",
        "Python",
        "Java",
        "C++",
        "C#",
        "PHP",
        "Ruby",
        "Go",
        "Rust",
        "Swift",
        "Kotlin",
        "SQL",
    )

    FRAMEWORKS: tuple = (
        "React",
        "Angular",
        "Vue.js",
        "Node.js",
        "Express",
        "Django",
        "Flask",
        "Spring",
        "Laravel",
        "Ruby on Rails",
    )

    DATABASES: tuple = (
        "MySQL",
        "PostgreSQL",
        "MongoDB",
        "Redis",
        "SQLite",
        "Oracle",
        "SQL Server",
    )

    CLOUD_DEVOPS: tuple = (
        "AWS",
        "Azure",
        "Google Cloud",
        "Docker",
        "Kubernetes",
        "Jenkins",
        "CI/CD",
        "DevOps",
    )

    TOOLS: tuple = (
        "Git",
        "GitHub",
        "GitLab",
        "Jira",
        "Slack",
        "Figma",
        "Adobe",
        "Photoshop",
    )

    SOFT_SKILLS: tuple = (
        "Leadership",
        "Communication",
        "Problem Solving",
        "Teamwork",
        "Project Management",
    )


DEFAULT_SKILL_CATEGORIES = MappingProxyType(
    {
        "languages": SkillCategories.LANGUAGES,
        "frameworks": SkillCategories.FRAMEWORKS,
        "databases": SkillCategories.DATABASES,
        "cloud_devops": SkillCategories.CLOUD_DEVOPS,
        "tools": SkillCategories.TOOLS,
        "soft_skills": SkillCategories.SOFT_SKILLS,
    }
)

# =============================================================================
# ACTION VERB TABLES
# =============================================================================

STRONG_ACTION_VERBS = (
    "managed",
    "led",
    "developed",
    "created",
    "implemented",
    "designed",
    "optimized",
    "achieved",
)

# Weak phrase -> stronger replacement (case-insensitive, whole words)
WEAK_VERB_REPLACEMENTS = MappingProxyType(
    {
        "responsible for": "managed",
        "worked on": "developed",
        "helped with": "assisted in",
        "did": "executed",
        "made": "created",
        "handled": "managed",
    }
)


# =============================================================================
# CATALOG
# =============================================================================


@dataclass(frozen=True)
class KeywordCatalog:
    """
    Immutable keyword tables consulted by the scorer and the improver.

    Attributes:
        categories: Category name -> canonical skill literals
        strong_verbs: Verbs whose presence signals impactful language
        weak_verb_replacements: Weak phrase -> suggested stronger phrase
    """

    categories: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    strong_verbs: Tuple[str, ...] = ()
    weak_verb_replacements: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not any(self.categories.values())

    @property
    def all_skills(self) -> Tuple[str, ...]:
        """Every skill literal, in category then table order, deduplicated."""
        seen = {}
        for skills in self.categories.values():
            for skill in skills:
                seen.setdefault(skill.lower(), skill)
        return tuple(seen.values())

    def category_of(self, skill: str) -> str:
        """Return the first category listing skill (case-insensitive), or ""."""
        needle = skill.lower()
        for category, skills in self.categories.items():
            if any(s.lower() == needle for s in skills):
                return category
        return ""

    def find_skills(self, text: str) -> FrozenSet[str]:
        """
        Find every catalog skill mentioned in text.

        Matching is case-insensitive and bounded by non-word characters, so
        "Java" does not match inside "JavaScript" while "C++" and "CI/CD"
        still match.

        Returns:
            Canonical spellings of all matched skills
        """
        if not text:
            return frozenset()
        matched = set()
        for skills in self.categories.values():
            for skill, pattern in zip(skills, _compile_skill_patterns(tuple(skills))):
                if pattern.search(text):
                    matched.add(skill)
        return frozenset(matched)

    def find_strong_verbs(self, text: str) -> FrozenSet[str]:
        """Strong verbs present in text (whole words, case-insensitive)."""
        return frozenset(v for v in self.strong_verbs if _phrase_pattern(v).search(text or ""))

    def find_weak_phrases(self, text: str) -> FrozenSet[str]:
        """Weak phrases present in text (whole words, case-insensitive)."""
        return frozenset(
            p for p in self.weak_verb_replacements if _phrase_pattern(p).search(text or "")
        )


# Compiled-pattern cache bounds; custom catalogs are evicted least-recently-used
SKILL_PATTERN_CACHE_SIZE = 32
PHRASE_PATTERN_CACHE_SIZE = 1024


@lru_cache(maxsize=SKILL_PATTERN_CACHE_SIZE)
def _compile_skill_patterns(skills: Tuple[str, ...]) -> List[re.Pattern]:
    return [
        re.compile(rf"(?<!\w){re.escape(skill)}(?!\w)", re.IGNORECASE) for skill in skills
    ]


@lru_cache(maxsize=PHRASE_PATTERN_CACHE_SIZE)
def _phrase_pattern(phrase: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


DEFAULT_CATALOG = KeywordCatalog(
    categories=DEFAULT_SKILL_CATEGORIES,
    strong_verbs=STRONG_ACTION_VERBS,
    weak_verb_replacements=WEAK_VERB_REPLACEMENTS,
)

EMPTY_CATALOG = KeywordCatalog()


def build_catalog(
    categories: Dict[str, Iterable[str]] = None,
    strong_verbs: Iterable[str] = None,
    weak_verb_replacements: Dict[str, str] = None,
) -> KeywordCatalog:
    """
    Build a catalog, taking defaults for any table not provided.

    Example:
        >>> catalog = build_catalog(categories={"data": ["Pandas", "NumPy"]})
        >>> sorted(catalog.find_skills("pandas and numpy pipelines"))
        ['NumPy', 'Pandas']
    """
    return KeywordCatalog(
        categories=(
            {name: tuple(skills) for name, skills in categories.items()}
            if categories is not None
            else DEFAULT_SKILL_CATEGORIES
        ),
        strong_verbs=tuple(strong_verbs) if strong_verbs is not None else STRONG_ACTION_VERBS,
        weak_verb_replacements=(
            dict(weak_verb_replacements)
            if weak_verb_replacements is not None
            else WEAK_VERB_REPLACEMENTS
        ),
    )
