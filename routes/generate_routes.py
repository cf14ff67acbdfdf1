from __future__ import annotations
import logging
import time

from flask import Blueprint, request, jsonify
from routes import get_container
from service.answer_service import InputTooLarge
from service.validators import BrandVoiceError, missing_fields, parse_brand_voice, sanitize_text

bp = Blueprint("generate", __name__, url_prefix="/api")
log = logging.getLogger("Runtime")

MISSING_FIELDS_ERROR = "Missing required fields: brandVoice, faq, and question are required"


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)


@bp.post("/generate")
def generate():
    """
    Contract:
    { "brandVoice": {...} | str, "faq": str, "question": str }
    Returns:
    { "answer": str, "sources": [str], "latencyMs": int }
    """
    t0 = time.perf_counter()
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    missing = missing_fields(data)
    if missing:
        log.warning("generate rejected, missing: %s", ",".join(missing))
        return jsonify({"error": MISSING_FIELDS_ERROR}), 400

    try:
        voice = parse_brand_voice(data["brandVoice"])
    except BrandVoiceError as e:
        return jsonify({"error": f"Invalid brandVoice: {e}"}), 400

    faq_text, question = data["faq"], data["question"]
    if not isinstance(faq_text, str) or not isinstance(question, str):
        return jsonify({"error": "faq and question must be strings"}), 400

    c = get_container()
    try:
        result = c.answers.generate(sanitize_text(faq_text), voice, sanitize_text(question))
    except InputTooLarge as e:
        log.warning("generate rejected: %s", e)
        return jsonify({"error": "payload_too_large", "field": e.field_name, "limit": e.limit}), 413
    except Exception:
        log.exception("Error generating answer")
        return jsonify({"error": "Failed to generate answer", "latencyMs": _elapsed_ms(t0)}), 500

    body = result.to_dict()
    body["latencyMs"] = _elapsed_ms(t0)
    return jsonify(body)


@bp.get("/seed")
def seed():
    from scripts.seed_example_data import SEED_DATA

    return jsonify(SEED_DATA)
