"""
Room Service: In-Memory Store

Provides:
- get_room_by_slug(slug) -> Room | None
- create_room(plan) -> Room (reuses an existing room with the same slug)
- join_room(room_id, user_id) -> Room
- list_rooms() / list_user_rooms(user_id)
- assign_user_to_clusters(user_id, analysis, niche) -> (interest_room, vibe_room)

Joining is idempotent: membership is a set.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from passion.core.errors import NotFoundError, ValidationError
from passion.core.logging import log_event
from passion.features.rooms import engine
from passion.models.room import Room, RoomPlan
from passion.models.traits import TraitAnalysis


_rooms_by_id: dict[str, Room] = {}
_room_ids_by_slug: dict[str, str] = {}


def get_room_by_slug(slug: str) -> Optional[Room]:
    room_id = _room_ids_by_slug.get(slug)
    return _rooms_by_id.get(room_id) if room_id else None


def create_room(plan: RoomPlan) -> Room:
    """Create a room from a plan; an existing room with the same slug wins."""
    existing = get_room_by_slug(plan.slug)
    if existing:
        return existing

    room = Room(
        id=str(uuid4()),
        name=plan.name,
        slug=plan.slug,
        type=plan.type,
        description=plan.description,
        created_at=datetime.now(timezone.utc).isoformat(),
    )
    _rooms_by_id[room.id] = room
    _room_ids_by_slug[room.slug] = room.id

    log_event("info", "rooms.created", event_type="rooms.created", extra={"slug": room.slug, "type": room.type})
    return room


def join_room(room_id: str, user_id: str) -> Room:
    if not user_id:
        raise ValidationError("user_id is required")
    room = _rooms_by_id.get(room_id)
    if room is None:
        raise NotFoundError(f"Room {room_id} not found")
    room.member_ids.add(user_id)
    return room


def list_rooms() -> list[Room]:
    """All rooms, newest first."""
    return sorted(_rooms_by_id.values(), key=lambda r: r.created_at, reverse=True)


def list_user_rooms(user_id: str) -> list[Room]:
    return [room for room in list_rooms() if user_id in room.member_ids]


def assign_user_to_clusters(user_id: str, analysis: TraitAnalysis, niche: str) -> tuple[Room, Room]:
    """
    Put a user into their interest hub and vibe lounge.

    Rooms are created on first use and reused afterwards, so users with the
    same primary tag or archetype end up together.
    """
    interest_room = create_room(engine.plan_interest_room(analysis, niche))
    vibe_room = create_room(engine.plan_vibe_room(analysis))

    join_room(interest_room.id, user_id)
    join_room(vibe_room.id, user_id)

    log_event(
        "info",
        "rooms.assigned",
        user_id=user_id,
        event_type="rooms.assigned",
        extra={"interest_slug": interest_room.slug, "vibe_slug": vibe_room.slug},
    )
    return interest_room, vibe_room


def reset_store() -> None:
    _rooms_by_id.clear()
    _room_ids_by_slug.clear()
