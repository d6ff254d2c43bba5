"""
Trait API Routes

Endpoints:
1. POST /v1/traits/analyze - Stateless transcript analysis
2. POST /v1/traits/profile - Analyze and store a user's trait profile
3. GET /v1/traits/profile?user_id=... - Stored profile
"""

from typing import Any, Union

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, Field

from passion.core.config import settings
from passion.core.errors import PayloadTooLargeError
from passion.core.logging import get_request_id
from passion.features.traits import engine, service
from passion.features.traits.transcript import normalize_transcript


router = APIRouter(prefix="/v1/traits")

TranscriptPayload = Union[str, list[dict[str, Any]], None]


# Request models
class AnalyzeRequest(BaseModel):
    transcript: TranscriptPayload = ""
    niche: str = ""


class ProfileRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    transcript: TranscriptPayload = ""
    niche: str = ""


def _flatten(transcript: TranscriptPayload, request: Request) -> str:
    text = normalize_transcript(transcript) or ""
    limit = settings.MAX_TRANSCRIPT_CHARS
    if limit and len(text) > limit:
        rid = getattr(request.state, "request_id", None) or get_request_id()
        raise PayloadTooLargeError(f"transcript exceeds {limit} characters", request_id=rid)
    return text


# Endpoints

@router.post("/analyze")
async def analyze(body: AnalyzeRequest, request: Request) -> dict:
    """
    Analyze a transcript without storing anything.

    Response:
        { success: true, data: TraitAnalysis }
    """
    text = _flatten(body.transcript, request)
    analysis = engine.analyze_transcript(text, body.niche)
    return {"success": True, "data": analysis.to_public_dict()}


@router.post("/profile")
async def upsert_profile(body: ProfileRequest, request: Request) -> dict:
    text = _flatten(body.transcript, request)
    profile = service.analyze_for_user(body.user_id, text, body.niche)
    return {"success": True, "data": profile.to_record()}


@router.get("/profile")
async def get_profile(
    user_id: str = Query(..., min_length=1, description="User ID")
) -> dict:
    profile = service.get_profile(user_id)
    return {"success": True, "data": profile.to_record()}
