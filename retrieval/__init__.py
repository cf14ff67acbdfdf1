"""
Retrieval package convenience exports.

Provides:
- FAQ parsing (Q:/A: text -> FAQItem)
- Keyword-category relevance matching (FAQItem -> ScoredFAQItem)
"""

from __future__ import annotations

from .faq_parser import FAQItem, format_faq, make_question_id, parse_faq
from .matcher import KEYWORD_CATEGORIES, ScoredFAQItem, find_relevant, score_item

__all__ = [
    "FAQItem",
    "ScoredFAQItem",
    "KEYWORD_CATEGORIES",
    "parse_faq",
    "format_faq",
    "make_question_id",
    "find_relevant",
    "score_item",
]
