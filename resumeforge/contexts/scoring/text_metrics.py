"""
Text statistics for readability scoring.

Tokenization is deliberately simple (punctuation and whitespace splits) so
scores are deterministic and cheap to compute for any input.
"""

import re
from typing import List

VOWELS = "aeiouy"

# Flesch Reading Ease coefficients
FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6


def split_sentences(text: str) -> List[str]:
    """Split on runs of `.`/`!`/`?`, discarding blank fragments."""
    return [s for s in re.split(r"[.!?]+", text or "") if s.strip()]


def split_words(text: str) -> List[str]:
    """Split on whitespace, discarding empty tokens."""
    return (text or "").split()


def count_syllables(word: str) -> int:
    """
    Estimate syllables with a vowel-group heuristic.

    Words of three letters or fewer count as one syllable. Otherwise each run
    of consecutive vowels counts once and a trailing silent "e" deducts one.
    Every word has at least one syllable.

    Example:
        >>> count_syllables("leadership")
        3
        >>> count_syllables("optimization")
        5
        >>> count_syllables("the")
        1
    """
    word = word.lower()
    if len(word) <= 3:
        return 1

    count = 0
    previous_was_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1

    return max(1, count)


def flesch_reading_ease(text: str) -> float:
    """
    Raw Flesch Reading Ease score (unclamped).

    Returns 0.0 for text with no sentences or no words.
    """
    sentences = split_sentences(text)
    words = split_words(text)
    if not sentences or not words:
        return 0.0

    syllables = sum(count_syllables(word) for word in words)
    words_per_sentence = len(words) / len(sentences)
    syllables_per_word = syllables / len(words)

    return (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * words_per_sentence
        - FLESCH_SYLLABLE_WEIGHT * syllables_per_word
    )


def readability(text: str) -> float:
    """Flesch Reading Ease clamped to [0, 100]; degenerate text scores 0."""
    return max(0.0, min(100.0, flesch_reading_ease(text)))
