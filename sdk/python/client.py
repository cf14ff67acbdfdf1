"""
FAQ Voice — Python Client

Purpose:
- Simple wrapper around POST /api/generate and GET /api/seed.
- Stateless; every call sends the full FAQ text and brand voice.

Dependencies:
- requests

Typical usage:
    from sdk.python.client import AnswerClient
    c = AnswerClient(base_url="http://localhost:10000")
    seed = c.seed()
    r = c.generate(seed["faq"], seed["brandVoice"], "How can I book?")
    print(r["answer"], r["sources"])
"""

from __future__ import annotations
import time
from typing import Any, Dict, Optional
import requests


class AnswerClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        :param base_url: Server root (e.g., http://localhost:10000)
        :param timeout: Request timeout in seconds
        :param session: Optional preconfigured requests.Session
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def generate(self, faq: str, brand_voice: Dict[str, Any], question: str) -> Dict[str, Any]:
        """
        Server responds with: { answer: str, sources: [str], latencyMs: int }
        Raises requests.HTTPError on 4xx/5xx.
        """
        url = f"{self.base_url}/api/generate"
        payload = {"faq": faq, "brandVoice": brand_voice, "question": question}
        t0 = time.time()
        resp = self._session.post(url, json=payload, headers=self._headers(), timeout=self.timeout)
        resp.raise_for_status()
        out = resp.json()
        out["_latency_ms"] = round((time.time() - t0) * 1000, 2)
        return out

    def seed(self) -> Dict[str, Any]:
        url = f"{self.base_url}/api/seed"
        resp = self._session.get(url, headers=self._headers(), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}
