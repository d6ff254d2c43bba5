"""
Keyword lists used by the trait engine.

All entries are lowercase and matched as case-insensitive substrings
("loved" counts for "love").
"""

from passion.models.traits import Archetype


# Passion score markers
ENTHUSIASM_MARKERS = (
    "love", "obsessed", "fascinating", "amazing", "incredible", "awesome",
    "passionate", "exciting",
)
DETAIL_MARKERS = (
    "specific", "exactly", "precisely", "particular", "actually", "technically",
)
STORY_MARKERS = (
    "remember when", "this one time", "story", "happened", "experience",
)

# Big Five indicators
OPENNESS_WORDS = (
    "curious", "creative", "imagine", "explore", "discover", "new", "different", "unique",
)
CONSCIENTIOUSNESS_WORDS = (
    "careful", "organized", "detail", "plan", "practice", "learn", "study", "research",
)
EXTRAVERSION_WORDS = (
    "people", "friends", "community", "share", "together", "social", "group", "meet",
)
AGREEABLENESS_WORDS = (
    "help", "care", "kind", "support", "understand", "appreciate", "grateful", "love",
)
NEUROTICISM_WORDS = (
    "worry", "stress", "anxious", "nervous", "afraid", "scared",
)

# Archetype categories
STORYTELLING_WORDS = ("story", "tell", "narrative", "remember", "once", "happened")
BUILDING_WORDS = ("build", "create", "make", "craft", "design", "construct")
EXPLORING_WORDS = ("discover", "explore", "wonder", "curious", "question", "find")
CONNECTING_WORDS = ("share", "together", "community", "friends", "people", "connect")
ANALYZING_WORDS = ("analyze", "think", "consider", "understand", "research", "study")

ARCHETYPE_CATEGORY_WORDS = {
    Archetype.STORYTELLER: STORYTELLING_WORDS,
    Archetype.QUIET_BUILDER: BUILDING_WORDS,
    Archetype.CURIOUS_EXPLORER: EXPLORING_WORDS,
    Archetype.WARM_CONNECTOR: CONNECTING_WORDS,
    Archetype.CALM_ANALYST: ANALYZING_WORDS,
}

# Tag extraction
STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "is", "are", "was", "were",
    "have", "has", "had", "do", "does", "did", "i", "you", "we", "they",
    "it", "this", "that", "really", "just", "very", "about", "like",
    "when", "what", "how", "why", "where", "who",
})
FALLBACK_TAGS = ("Enthusiast", "Deep Diver")

# Deep hooks
EXPERIENCE_TRIGGERS = ("remember when", "this one time", "experience")
