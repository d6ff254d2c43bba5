"""
Trait Engine: Pure Deterministic Functions

All functions are pure: same inputs => same outputs.
No I/O, no randomness, no clock. Every function accepts any string,
including the empty string, and never raises.

Passes (they share only their input):
1. Passion score from enthusiasm/detail/story markers
2. Big Five estimate from trait keyword counts
3. Archetype from category keyword counts plus Big Five bonuses
4. Tags from word/phrase frequency
5. Deep hooks from tags, niche and story triggers
"""

import math
import re
from typing import Iterable

from passion.features.traits import keywords
from passion.models.traits import Archetype, Big5, TraitAnalysis


_EXPERIENCE_RE = re.compile(
    "|".join(re.escape(trigger) for trigger in keywords.EXPERIENCE_TRIGGERS),
    re.IGNORECASE,
)


def _clamp(value: float, low: int = 0, high: int = 100) -> float:
    return min(high, max(low, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _count(text_lower: str, terms: Iterable[str]) -> int:
    return sum(text_lower.count(term) for term in terms)


def count_occurrences(text: str, terms: Iterable[str]) -> int:
    """Total case-insensitive, non-overlapping substring hits of every term."""
    return _count(text.lower(), terms)


def calculate_passion_score(transcript: str) -> int:
    """
    Score how passionate a transcript sounds (0..100).

    Algorithm:
    1. Baseline 50
    2. +3 per enthusiasm marker, +2 per detail marker, +4 per story marker
    3. +2 per exclamation mark, at most 15 from this source
    4. +min(word_count / 20, 15) as an engagement proxy
    5. Clamp 0..100, round half-up
    """
    text_lower = transcript.lower()
    score = 50.0

    score += _count(text_lower, keywords.ENTHUSIASM_MARKERS) * 3
    score += min(transcript.count("!") * 2, 15)
    score += _count(text_lower, keywords.DETAIL_MARKERS) * 2
    score += _count(text_lower, keywords.STORY_MARKERS) * 4

    word_count = len(transcript.split())
    score += min(word_count / 20, 15)

    return _round_half_up(_clamp(score))


def estimate_big5(transcript: str) -> Big5:
    """
    Estimate Big Five traits from keyword frequency.

    Openness, conscientiousness, extraversion and agreeableness start at 50
    and gain 5 per hit. Neuroticism starts at 30 and gains 8 per hit of
    negative-affect words, so more anxiety language means higher neuroticism.
    """
    text_lower = transcript.lower()

    def trait(words: Iterable[str], base: int = 50, weight: int = 5) -> int:
        return int(_clamp(base + _count(text_lower, words) * weight))

    return Big5(
        openness=trait(keywords.OPENNESS_WORDS),
        conscientiousness=trait(keywords.CONSCIENTIOUSNESS_WORDS),
        extraversion=trait(keywords.EXTRAVERSION_WORDS),
        agreeableness=trait(keywords.AGREEABLENESS_WORDS),
        neuroticism=trait(keywords.NEUROTICISM_WORDS, base=30, weight=8),
    )


def archetype_scores(transcript: str, big5: Big5) -> dict[Archetype, int]:
    """
    Composite score per archetype, in tie-break order.

    Each category keyword hit counts double; Big Five thresholds add fixed
    bonuses on top.
    """
    text_lower = transcript.lower()
    raw = {
        archetype: _count(text_lower, words)
        for archetype, words in keywords.ARCHETYPE_CATEGORY_WORDS.items()
    }

    return {
        Archetype.STORYTELLER: (
            raw[Archetype.STORYTELLER] * 2
            + (5 if big5.extraversion > 60 else 0)
        ),
        Archetype.QUIET_BUILDER: (
            raw[Archetype.QUIET_BUILDER] * 2
            + (5 if big5.conscientiousness > 60 else 0)
            + (3 if big5.extraversion < 50 else 0)
        ),
        Archetype.CURIOUS_EXPLORER: (
            raw[Archetype.CURIOUS_EXPLORER] * 2
            + (5 if big5.openness > 60 else 0)
        ),
        Archetype.WARM_CONNECTOR: (
            raw[Archetype.WARM_CONNECTOR] * 2
            + (5 if big5.agreeableness > 60 else 0)
            + (3 if big5.extraversion > 50 else 0)
        ),
        Archetype.CALM_ANALYST: (
            raw[Archetype.CALM_ANALYST] * 2
            + (3 if big5.conscientiousness > 50 else 0)
            + (3 if big5.neuroticism < 40 else 0)
        ),
    }


def classify_archetype(transcript: str, big5: Big5) -> Archetype:
    """
    Pick the archetype with the highest composite score.

    Ties go to whichever archetype is declared first in Archetype.
    """
    scores = archetype_scores(transcript, big5)
    # sorted() is stable, including with reverse=True
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return ranked[0][0]


def _title_words(phrase: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in phrase.split(" "))


def extract_tags(transcript: str, niche: str) -> list[str]:
    """
    Extract 3..5 micro-culture tags that go beyond the declared niche.

    Algorithm:
    1. Lowercase whitespace tokens; punctuation stays attached
    2. For each position with a following token:
       - the word itself, weight 1, if not a niche word, not a stop word
         and longer than 3 characters
       - the adjacent pair, weight 2, if neither word is a stop word
       - the adjacent triple, weight 3, if its first and last words are
         not stop words
    3. Top 5 by weight (first seen wins ties), first letter of each word
       uppercased
    4. Pad with niche, "Enthusiast", "Deep Diver" until there are 3
    """
    words = transcript.lower().split()
    niche_words = set(niche.lower().split())
    stop_words = keywords.STOP_WORDS

    weights: dict[str, int] = {}
    # The final token only ever appears inside a pair or triple
    for i in range(len(words) - 1):
        word = words[i]
        following = words[i + 1]

        if word not in niche_words and word not in stop_words and len(word) > 3:
            weights[word] = weights.get(word, 0) + 1

        if word not in stop_words and following not in stop_words:
            pair = f"{word} {following}"
            weights[pair] = weights.get(pair, 0) + 2

        if i < len(words) - 2 and word not in stop_words and words[i + 2] not in stop_words:
            triple = f"{word} {following} {words[i + 2]}"
            weights[triple] = weights.get(triple, 0) + 3

    ranked = sorted(weights.items(), key=lambda item: item[1], reverse=True)[:5]
    tags = [_title_words(candidate) for candidate, _ in ranked]

    for filler in (niche, *keywords.FALLBACK_TAGS):
        if len(tags) >= 3:
            break
        tags.append(filler)

    return tags[:5]


def generate_deep_hooks(transcript: str, tags: list[str], niche: str) -> list[str]:
    """Build up to 3 conversation starters, in generation order."""
    hooks = []

    if len(tags) > 0:
        hooks.append(f"What's the story behind your interest in {tags[0].lower()}?")

    if len(tags) > 1:
        hooks.append(f"How did you first discover {tags[1].lower()}?")

    hooks.append(f"If you could spend an entire day pursuing {niche}, what would you do?")

    if _EXPERIENCE_RE.search(transcript):
        hooks.append(f"Tell me more about your favorite {niche} experience!")

    return hooks[:3]


def analyze_transcript(transcript: str, niche: str) -> TraitAnalysis:
    """Run every pass over one transcript and assemble the result."""
    passion_score = calculate_passion_score(transcript)
    big5 = estimate_big5(transcript)
    archetype = classify_archetype(transcript, big5)
    tags = extract_tags(transcript, niche)
    deep_hooks = generate_deep_hooks(transcript, tags, niche)

    return TraitAnalysis(
        big5=big5,
        passion_score=passion_score,
        archetype=archetype,
        tags=tags,
        deep_hooks=deep_hooks,
    )
