"""
Service package exports.

Exposes:
- pipeline: answer_question(...), AnswerService
- composer/rewriter types: AnswerResult, BrandVoice, Stylist
- protocol types for DI hints
"""

from __future__ import annotations
from typing import Any, Mapping, Protocol

from .answer_service import AnswerService, InputTooLarge, answer_question
from .composer import FALLBACK_ANSWER, AnswerResult, generate_answer
from .rewriter import BrandVoice, Stylist, apply_brand_voice

# ---- Protocols (for type-hints / DI) ----


class StylistLike(Protocol):
    def style(self, text: str, voice: BrandVoice) -> str: ...


class AnswerServiceLike(Protocol):
    def generate(self, faq_text: str, brand_voice: Mapping[str, Any], question: str) -> AnswerResult: ...


__all__ = [
    "AnswerService",
    "AnswerServiceLike",
    "AnswerResult",
    "BrandVoice",
    "FALLBACK_ANSWER",
    "InputTooLarge",
    "Stylist",
    "StylistLike",
    "answer_question",
    "apply_brand_voice",
    "generate_answer",
]
