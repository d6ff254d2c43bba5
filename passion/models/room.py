from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

RoomType = Literal["interest", "vibe"]


@dataclass(frozen=True)
class RoomPlan:
    """Room a user should land in, before it exists in the store."""

    name: str
    slug: str
    type: RoomType
    description: str


@dataclass
class Room:
    id: str
    name: str
    slug: str
    type: RoomType
    description: str
    created_at: str
    member_ids: set[str] = field(default_factory=set)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "type": self.type,
            "description": self.description,
            "created_at": self.created_at,
            "member_count": len(self.member_ids),
        }
