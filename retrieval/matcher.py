"""
Relevance matcher
- Scores parsed FAQ items against a user question via a fixed keyword table
- +1 per (category, keyword) present in BOTH the question and the item text
- Presence only: repeated occurrences of a keyword do not add points
- Zero-score items dropped; ranking is a stable sort, best first

The keyword table is static config tuned to the demo FAQ content.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from retrieval.faq_parser import FAQItem

KEYWORD_CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "saturday": ("saturday", "sat", "weekend"),
    "hours": ("hours", "open", "time", "when"),
    "walk-ins": ("walk-in", "walk in", "appointment", "without appointment"),
    "services": ("service", "offer", "do", "what"),
    "booking": ("book", "schedule", "appointment", "reserve"),
    "cancellation": ("cancel", "reschedule", "change", "policy"),
})


@dataclass(frozen=True)
class ScoredFAQItem:
    item: FAQItem
    relevance_score: int
    matched_keywords: Tuple[str, ...]

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def question(self) -> str:
        return self.item.question

    @property
    def answer(self) -> str:
        return self.item.answer

    def to_dict(self) -> Dict[str, Any]:
        out = self.item.to_dict()
        out["relevanceScore"] = self.relevance_score
        out["matchedKeywords"] = list(self.matched_keywords)
        return out


def score_item(
    item: FAQItem,
    question: str,
    categories: Mapping[str, Tuple[str, ...]] = KEYWORD_CATEGORIES,
) -> ScoredFAQItem:
    q = (question or "").lower()
    item_q = item.question.lower()
    item_a = item.answer.lower()

    score = 0
    matched: List[str] = []
    for category, keywords in categories.items():
        for kw in keywords:
            if kw in q and (kw in item_q or kw in item_a):
                score += 1
                if category not in matched:
                    matched.append(category)
    return ScoredFAQItem(item=item, relevance_score=score, matched_keywords=tuple(matched))


def find_relevant(
    items: Iterable[FAQItem],
    question: str,
    categories: Mapping[str, Tuple[str, ...]] = KEYWORD_CATEGORIES,
) -> List[ScoredFAQItem]:
    scored = [score_item(it, question, categories) for it in items]
    relevant = [s for s in scored if s.relevance_score > 0]
    # list.sort is stable: equal scores keep parse order
    relevant.sort(key=lambda s: s.relevance_score, reverse=True)
    return relevant
