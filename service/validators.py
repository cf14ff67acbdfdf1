"""
Input validators for the /api/generate boundary.

Responsibilities:
- Required-field checks (faq, brandVoice, question)
- brandVoice decoding (object or JSON string) + JSON schema validation
- Generic text sanitation (strip control chars)

Connects:
- routes/generate_routes.py (request validation)
- cli/main.py (brand voice files)
"""

from __future__ import annotations
import json
import re
from typing import Any, Dict, List, Mapping

import jsonschema

REQUIRED_FIELDS = ("brandVoice", "faq", "question")

BRAND_VOICE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "style_rules": {
            "type": ["array", "null"],
            "items": {"type": "string"},
        },
        "signoff": {"type": ["string", "null"]},
    },
}

# keeps \t \n \r; FAQ text is line based
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")


class BrandVoiceError(ValueError):
    pass


def sanitize_text(s: str) -> str:
    return _CONTROL_CHARS.sub(" ", (s or "").replace("\x00", ""))


def missing_fields(payload: Mapping[str, Any]) -> List[str]:
    """Names of required fields that are absent, empty or whitespace-only."""
    out = []
    for name in REQUIRED_FIELDS:
        v = payload.get(name)
        if v is None or (isinstance(v, str) and not v.strip()):
            out.append(name)
    return out


def parse_brand_voice(raw: Any) -> Dict[str, Any]:
    """
    Accepts the decoded JSON object or its string form.
    Raises BrandVoiceError on bad JSON or schema mismatch.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise BrandVoiceError(f"Brand voice must be valid JSON: {e.msg}") from e
    try:
        jsonschema.validate(instance=raw, schema=BRAND_VOICE_SCHEMA)
    except jsonschema.ValidationError as e:
        raise BrandVoiceError(e.message) from e
    return raw
