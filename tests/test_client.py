"""
SDK client tests with a stub requests.Session (no network).
"""

from __future__ import annotations
from typing import Any, Dict, List

import pytest
import requests

from sdk.python.client import AnswerClient


class StubResponse:
    def __init__(self, status: int, body: Dict[str, Any]):
        self.status_code = status
        self._body = body

    def json(self) -> Dict[str, Any]:
        return dict(self._body)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class StubSession:
    def __init__(self, response: StubResponse):
        self.response = response
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, **kw):
        self.calls.append({"method": "POST", "url": url, **kw})
        return self.response

    def get(self, url, **kw):
        self.calls.append({"method": "GET", "url": url, **kw})
        return self.response


def test_generate_posts_payload():
    sess = StubSession(StubResponse(200, {"answer": "hi", "sources": ["a"], "latencyMs": 1}))
    c = AnswerClient("http://svc/", timeout=3, session=sess)  # type: ignore[arg-type]
    out = c.generate("Q: a?\nA: b.", {"signoff": "x"}, "a?")
    call = sess.calls[0]
    assert call["url"] == "http://svc/api/generate"
    assert call["json"] == {"faq": "Q: a?\nA: b.", "brandVoice": {"signoff": "x"}, "question": "a?"}
    assert call["timeout"] == 3
    assert out["answer"] == "hi"
    assert out["_latency_ms"] >= 0


def test_generate_raises_on_error_status():
    sess = StubSession(StubResponse(400, {"error": "bad"}))
    c = AnswerClient("http://svc", session=sess)  # type: ignore[arg-type]
    with pytest.raises(requests.HTTPError):
        c.generate("", {}, "")


def test_seed_hits_seed_endpoint():
    sess = StubSession(StubResponse(200, {"faq": "", "brandVoice": {}, "question": ""}))
    c = AnswerClient("http://svc", session=sess)  # type: ignore[arg-type]
    assert set(c.seed()) == {"faq", "brandVoice", "question"}
    assert sess.calls[0]["url"] == "http://svc/api/seed"
