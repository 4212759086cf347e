"""Unit tests for the keyword catalog."""

import pytest

from resumeforge.contexts.scoring.keyword_catalog import (
    DEFAULT_CATALOG,
    EMPTY_CATALOG,
    PHRASE_PATTERN_CACHE_SIZE,
    SKILL_PATTERN_CACHE_SIZE,
    _compile_skill_patterns,
    _phrase_pattern,
    build_catalog,
)


@pytest.mark.unit
class TestFindSkills:
    def test_case_insensitive_canonical_spelling(self):
        assert DEFAULT_CATALOG.find_skills("python and POSTGRESQL") == {"Python", "PostgreSQL"}

    def test_word_boundaries(self):
        # "Java" is not found inside "JavaScript"
        assert DEFAULT_CATALOG.find_skills("JavaScript") == {"JavaScript"}

    def test_symbol_skills(self):
        assert {"C++", "CI/CD", "Node.js"} <= DEFAULT_CATALOG.find_skills(
            "C++ services, CI/CD pipelines, Node.js tooling"
        )

    def test_multi_word_skills(self):
        assert "Problem Solving" in DEFAULT_CATALOG.find_skills("strong problem solving")

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_text(self, text):
        assert DEFAULT_CATALOG.find_skills(text) == frozenset()

    def test_empty_catalog_matches_nothing(self):
        assert EMPTY_CATALOG.is_empty
        assert EMPTY_CATALOG.find_skills("Python, AWS, Docker") == frozenset()


@pytest.mark.unit
class TestVerbs:
    def test_strong_verbs_whole_words(self):
        found = DEFAULT_CATALOG.find_strong_verbs("Led the team. Misled nobody. Developed APIs.")
        assert found == {"led", "developed"}

    def test_weak_phrases(self):
        found = DEFAULT_CATALOG.find_weak_phrases("Responsible for billing; worked on search")
        assert found == {"responsible for", "worked on"}


@pytest.mark.unit
class TestCatalogHelpers:
    def test_all_skills_deduplicated(self):
        catalog = build_catalog(categories={"a": ["Python", "SQL"], "b": ["python", "Go"]})
        assert catalog.all_skills == ("Python", "SQL", "Go")

    def test_category_of(self):
        assert DEFAULT_CATALOG.category_of("docker") == "cloud_devops"
        assert DEFAULT_CATALOG.category_of("COBOL") == ""

    def test_build_catalog_keeps_default_tables(self):
        catalog = build_catalog(categories={"data": ["Pandas"]})
        assert catalog.find_skills("pandas, python") == {"Pandas"}
        assert catalog.strong_verbs == DEFAULT_CATALOG.strong_verbs
        assert dict(catalog.weak_verb_replacements) == dict(DEFAULT_CATALOG.weak_verb_replacements)


@pytest.mark.unit
def test_pattern_caches_stay_bounded():
    for index in range(SKILL_PATTERN_CACHE_SIZE * 2):
        catalog = build_catalog(
            categories={"custom": [f"Tool{index}"]}, strong_verbs=[f"shipped{index}"]
        )
        assert catalog.find_skills(f"used tool{index} daily") == {f"Tool{index}"}
        assert catalog.find_strong_verbs(f"Shipped{index} a release") == {f"shipped{index}"}

    assert _compile_skill_patterns.cache_info().maxsize == SKILL_PATTERN_CACHE_SIZE
    assert _compile_skill_patterns.cache_info().currsize <= SKILL_PATTERN_CACHE_SIZE
    assert _phrase_pattern.cache_info().maxsize == PHRASE_PATTERN_CACHE_SIZE
    assert _phrase_pattern.cache_info().currsize <= PHRASE_PATTERN_CACHE_SIZE
