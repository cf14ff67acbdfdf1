from __future__ import annotations
from flask import Blueprint, current_app, jsonify
from app.config import Settings

bp = Blueprint("health", __name__)

@bp.get("/health")
def health():
    # lightweight liveness
    return "ok", 200, {"Content-Type": "text/plain; charset=utf-8"}

@bp.get("/version")
def version():
    from app import APP_NAME, __version__

    s: Settings = current_app.config.get("SETTINGS") or getattr(current_app, "container").settings
    return jsonify({"name": APP_NAME, "version": __version__, "env": s.APP_ENV})
