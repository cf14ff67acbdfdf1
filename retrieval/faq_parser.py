"""
FAQ parser
- Turns loosely formatted FAQ text into ordered FAQItem records
- One "Q:" line + one "A:" line per entry; blank lines are ignored
- IDs are short slugs derived from the question (not unique)

Example input:
    Q: What are your hours?
    A: Mon–Fri 9am–6pm, Sat 10am–4pm, closed Sunday.

    Q: How can I book?
    A: Use our website or call 555-0148.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

QUESTION_MARKER = "Q:"
ANSWER_MARKER = "A:"
FALLBACK_ID = "question"

_NON_WORD_RE = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class FAQItem:
    id: str
    question: str
    answer: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "question": self.question, "answer": self.answer}


def make_question_id(question: str) -> str:
    """
    Slug from the first two words longer than 2 chars.
    "What are your hours?" -> "what-are"
    """
    cleaned = _NON_WORD_RE.sub("", (question or "").lower())
    words = [w for w in cleaned.split() if len(w) > 2]
    return "-".join(words[:2]) or FALLBACK_ID


def _emit(items: List[FAQItem], question: Optional[str], answer: Optional[str]) -> None:
    if question and answer:
        items.append(FAQItem(id=make_question_id(question), question=question, answer=answer))


def parse_faq(text: str) -> List[FAQItem]:
    items: List[FAQItem] = []
    question: Optional[str] = None
    answer: Optional[str] = None

    for raw in (text or "").split("\n"):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(QUESTION_MARKER):
            _emit(items, question, answer)
            question = line[len(QUESTION_MARKER):].strip()
            answer = None
        elif line.startswith(ANSWER_MARKER):
            # single-line answers only; a later A: replaces the earlier one
            answer = line[len(ANSWER_MARKER):].strip()

    # dangling question without an answer is dropped here
    _emit(items, question, answer)
    return items


def format_faq(items: Iterable[FAQItem]) -> str:
    blocks = [f"{QUESTION_MARKER} {it.question}\n{ANSWER_MARKER} {it.answer}" for it in items]
    return "\n\n".join(blocks)
