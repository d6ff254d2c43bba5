"""
Room Engine: Pure Deterministic Functions

Maps a trait analysis to the two rooms a user belongs in:
- interest hub, keyed by the primary tag (or the niche)
- vibe lounge, keyed by the archetype
"""

import re

from passion.models.room import RoomPlan
from passion.models.traits import Archetype, TraitAnalysis


_NON_SLUG_RE = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")

ARCHETYPE_DESCRIPTIONS = {
    Archetype.QUIET_BUILDER: "Creators who find joy in the craft, building with patience and precision.",
    Archetype.CURIOUS_EXPLORER: 'Seekers who delight in discovery, always asking "what if?"',
    Archetype.WARM_CONNECTOR: "Sharers who bring people together through their passions.",
    Archetype.STORYTELLER: "Narrators who weave experiences into captivating tales.",
    Archetype.CALM_ANALYST: "Thinkers who find beauty in understanding the details.",
}


def slugify(text: str) -> str:
    """Lowercase, drop punctuation, hyphenate whitespace runs."""
    slug = _NON_SLUG_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub("-", slug).strip()


def archetype_description(archetype: Archetype) -> str:
    return ARCHETYPE_DESCRIPTIONS[archetype]


def plan_interest_room(analysis: TraitAnalysis, niche: str) -> RoomPlan:
    topic = analysis.tags[0] if analysis.tags and analysis.tags[0] else niche
    return RoomPlan(
        name=f"{topic} Enthusiasts",
        slug=f"interest-{slugify(topic)}",
        type="interest",
        description=f"A community for people passionate about {topic}",
    )


def plan_vibe_room(analysis: TraitAnalysis) -> RoomPlan:
    label = analysis.archetype.value
    return RoomPlan(
        name=f"The {label}s",
        slug=f"vibe-{slugify(label)}",
        type="vibe",
        description=archetype_description(analysis.archetype),
    )
