"""
Trait Service: In-Memory Profile Store

Provides:
- analyze_for_user(user_id, transcript, niche) -> TraitProfile
- get_profile(user_id) -> TraitProfile
- reset_store()

Storage: in-memory dict keyed by user_id (upsert, like the traits table).
The engine stays pure; timestamps and versions live here.
"""

from datetime import datetime, timezone
from typing import Any

from passion.core.errors import NotFoundError, ValidationError
from passion.core.logging import log_event
from passion.features.traits import engine
from passion.features.traits.transcript import normalize_transcript
from passion.models.traits import TraitProfile


_profiles: dict[str, TraitProfile] = {}


def analyze_for_user(user_id: str, transcript: Any, niche: str) -> TraitProfile:
    """
    Analyze a transcript and upsert the user's trait profile.

    transcript may be a plain string or a list of {role, content} turns.
    Re-analysis replaces the stored analysis and bumps the version.
    """
    if not user_id or not user_id.strip():
        raise ValidationError("user_id is required")

    text = normalize_transcript(transcript) or ""
    analysis = engine.analyze_transcript(text, niche)

    previous = _profiles.get(user_id)
    profile = TraitProfile(
        user_id=user_id,
        niche=niche,
        analysis=analysis,
        updated_at=datetime.now(timezone.utc).isoformat(),
        version=previous.version + 1 if previous else 1,
    )
    _profiles[user_id] = profile

    log_event(
        "info",
        "traits.analyzed",
        user_id=user_id,
        event_type="traits.analyzed",
        extra={
            "archetype": analysis.archetype.value,
            "passion_score": analysis.passion_score,
            "tag_count": len(analysis.tags),
            "version": profile.version,
        },
    )
    return profile


def get_profile(user_id: str) -> TraitProfile:
    """Return the stored profile or raise NotFoundError."""
    profile = _profiles.get(user_id)
    if profile is None:
        raise NotFoundError(f"No trait profile for user {user_id}")
    return profile


def reset_store() -> None:
    _profiles.clear()
