"""
Answer pipeline: FAQ text + brand voice + question -> AnswerResult.

    parse_faq -> find_relevant -> compose -> brand voice

Every stage is pure; nothing is cached between calls. Runtime faults
(e.g. a non-string style rule) propagate to the caller, which is expected
to report a generic failure.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from retrieval.faq_parser import parse_faq
from retrieval.matcher import find_relevant
from service.composer import AnswerResult, generate_answer
from service.rewriter import BrandVoice, Stylist

if TYPE_CHECKING:  # app imports service via the container
    from app.config import Settings

log = logging.getLogger("Runtime")

VoiceLike = Union[BrandVoice, Mapping[str, Any]]


class InputTooLarge(ValueError):
    def __init__(self, field_name: str, limit: int):
        super().__init__(f"{field_name} exceeds {limit} characters")
        self.field_name = field_name
        self.limit = limit


def _as_voice(voice: VoiceLike) -> BrandVoice:
    if isinstance(voice, BrandVoice):
        return voice
    return BrandVoice.from_dict(voice)


def answer_question(faq_text: str, brand_voice: VoiceLike, question: str) -> AnswerResult:
    items = parse_faq(faq_text)
    ranked = find_relevant(items, question)
    return generate_answer(ranked, _as_voice(brand_voice), question)


@dataclass
class AnswerService:
    settings: Optional[Settings] = None
    stylist: Stylist = field(default_factory=Stylist)

    def _check_size(self, faq_text: str, question: str) -> None:
        if self.settings is None:
            return
        if len(faq_text) > self.settings.MAX_FAQ_CHARS:
            raise InputTooLarge("faq", self.settings.MAX_FAQ_CHARS)
        if len(question) > self.settings.MAX_QUESTION_CHARS:
            raise InputTooLarge("question", self.settings.MAX_QUESTION_CHARS)

    def generate(self, faq_text: str, brand_voice: VoiceLike, question: str) -> AnswerResult:
        self._check_size(faq_text, question)

        items = parse_faq(faq_text)
        ranked = find_relevant(items, question)
        log.info(
            "parsed %d faq items, %d relevant (top=%s)",
            len(items), len(ranked), ranked[0].id if ranked else "-",
        )

        result = generate_answer(ranked, _as_voice(brand_voice), question, stylist=self.stylist)
        if not result.sources:
            log.info("no relevant faq entry; fallback answer used")
        return result
