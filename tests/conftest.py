"""
Global test fixtures for the FAQ voice service.

Creates an isolated Flask app (file logging off) and exposes the demo
seed FAQ / brand voice for pipeline tests.
"""

from __future__ import annotations
import copy
import os
from pathlib import Path
from typing import Any, Dict
import pytest

# ---------------------------------------------------------------------------
# Import target app
# ---------------------------------------------------------------------------
import sys
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import create_app  # type: ignore
from retrieval.faq_parser import parse_faq  # type: ignore
from scripts.seed_example_data import BRAND_VOICE, FAQ_TEXT, QUESTION  # type: ignore

# ---------------------------------------------------------------------------
# Pytest Hooks
# ---------------------------------------------------------------------------

def pytest_configure(config):
    """Called once per test run."""
    os.environ.setdefault("APP_ENV", "test")
    os.environ.setdefault("LOG_DIR", "")

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def app():
    """Flask app fixture (testing mode ON, no file logs)."""
    flask_app = create_app({"APP_ENV": "test", "LOG_DIR": "", "SECRET_KEY": "test-secret"})
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture()
def faq_text() -> str:
    return FAQ_TEXT


@pytest.fixture()
def brand_voice() -> Dict[str, Any]:
    return copy.deepcopy(BRAND_VOICE)


@pytest.fixture()
def seed_question() -> str:
    return QUESTION


@pytest.fixture()
def faq_items(faq_text):
    return parse_faq(faq_text)


@pytest.fixture()
def plain_voice() -> Dict[str, Any]:
    """No style rules, no signoff: composed text comes back untouched."""
    return {"style_rules": []}


@pytest.fixture()
def json_headers():
    return {"Content-Type": "application/json"}
