"""
Room API Routes

Endpoints:
1. POST /v1/rooms/assign - Place a user in their interest hub and vibe lounge
2. GET /v1/rooms?user_id=... - Rooms a user belongs to
"""

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from passion.features.rooms import service as room_service
from passion.features.traits import service as trait_service


router = APIRouter(prefix="/v1/rooms")


class AssignRequest(BaseModel):
    user_id: str = Field(..., min_length=1)


@router.post("/assign")
async def assign_rooms(body: AssignRequest) -> dict:
    """
    Assign rooms from the user's stored trait profile.

    Response:
        { success: true, data: { interest_room, vibe_room } }
    """
    profile = trait_service.get_profile(body.user_id)
    interest_room, vibe_room = room_service.assign_user_to_clusters(
        body.user_id, profile.analysis, profile.niche
    )
    return {
        "success": True,
        "data": {
            "interest_room": interest_room.to_dict(),
            "vibe_room": vibe_room.to_dict(),
        },
    }


@router.get("")
async def list_user_rooms(
    user_id: str = Query(..., min_length=1, description="User ID")
) -> dict:
    rooms = room_service.list_user_rooms(user_id)
    return {"success": True, "data": [room.to_dict() for room in rooms]}
