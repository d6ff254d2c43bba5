"""
Trait Models

Value objects produced by the transcript analyzer:
- Big5: five independent 0..100 personality estimates
- Archetype: one of five fixed persona labels
- TraitAnalysis: the aggregate result of one analyzer call
- TraitProfile: a stored analysis for a user
"""

from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class Archetype(str, Enum):
    """Five persona archetypes. Declaration order is the tie-break order."""
    STORYTELLER = "Storyteller"
    QUIET_BUILDER = "Quiet Builder"
    CURIOUS_EXPLORER = "Curious Explorer"
    WARM_CONNECTOR = "Warm Connector"
    CALM_ANALYST = "Calm Analyst"


class Big5(BaseModel):
    """Big Five estimate. Fields are computed independently; no sum constraint."""
    model_config = ConfigDict(frozen=True)

    openness: int = Field(..., ge=0, le=100)
    conscientiousness: int = Field(..., ge=0, le=100)
    extraversion: int = Field(..., ge=0, le=100)
    agreeableness: int = Field(..., ge=0, le=100)
    neuroticism: int = Field(..., ge=0, le=100)


class TraitAnalysis(BaseModel):
    """
    Aggregate output of analyze_transcript.

    Produced fresh on every call; the caller owns persistence.
    """
    model_config = ConfigDict(frozen=True)

    big5: Big5
    passion_score: int = Field(..., ge=0, le=100)
    archetype: Archetype
    tags: list[str] = Field(..., min_length=3, max_length=5)
    deep_hooks: list[str] = Field(default_factory=list, max_length=3)

    def to_public_dict(self) -> dict:
        """Client-facing shape (camelCase keys)."""
        return {
            "big5": self.big5.model_dump(),
            "passionScore": self.passion_score,
            "archetype": self.archetype.value,
            "tags": list(self.tags),
            "deepHooks": list(self.deep_hooks),
        }


class TraitProfile(BaseModel):
    """Latest analysis stored for a user."""
    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    niche: str
    analysis: TraitAnalysis
    updated_at: str = Field(..., description="ISO 8601 UTC timestamp")
    version: int = Field(default=1, ge=1)

    def to_record(self) -> dict:
        """Row shape used by the traits table (user_id, big5, passion_score, ...)."""
        return {
            "user_id": self.user_id,
            "big5": self.analysis.big5.model_dump(),
            "passion_score": self.analysis.passion_score,
            "archetype": self.analysis.archetype.value,
            "tags": list(self.analysis.tags),
            "deep_hooks": list(self.analysis.deep_hooks),
            "updated_at": self.updated_at,
        }
