"""Flatten interview transcripts into the plain text the engine expects."""

import json
from typing import Any, Optional


def normalize_transcript(raw: Any) -> Optional[str]:
    """
    Convert a vendor transcript payload to a single string.

    - empty/None => None
    - str => unchanged
    - list of {role, content} turns => "role: content" lines; turns missing
      either field are dropped
    - anything else => its JSON encoding
    """
    if not raw:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        lines = []
        for turn in raw:
            if not isinstance(turn, dict):
                continue
            role = turn.get("role")
            content = turn.get("content")
            if role and content:
                lines.append(f"{role}: {content}")
        return "\n".join(lines)
    return json.dumps(raw, default=str)
