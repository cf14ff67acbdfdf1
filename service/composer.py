"""
Answer composer: turns ranked FAQ matches into one reply.

Composition is an ordered decision list (COMPOSE_RULES). The first rule whose
trigger matches the lower-cased question fires; no other rule is tried.
A rule may still produce no text when the answer parts lack what it looks
for (e.g. a booking question but no part mentions "website" or "call").
In that case the top-ranked answer is used as-is.

The composed text then goes through the brand-voice rewriter.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from retrieval.matcher import ScoredFAQItem
from service.rewriter import BrandVoice, Stylist

log = logging.getLogger("Runtime")

FALLBACK_ANSWER = "I don't have specific information about that. Please call us for details."
DEFAULT_SATURDAY_HOURS = "10am–4pm"

_SATURDAY_HOURS_RE = re.compile(r"sat\s+(\d+am[–-]\d+pm)", re.I)


@dataclass(frozen=True)
class AnswerResult:
    answer: str
    sources: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"answer": self.answer, "sources": list(self.sources)}


@dataclass(frozen=True)
class ComposeRule:
    name: str
    triggers: Callable[[str], bool]
    build: Callable[[Sequence[str]], Optional[str]]


@dataclass(frozen=True)
class Composition:
    rule: str
    text: Optional[str]


# ---- search helpers ----

def find_part(parts: Sequence[str], needles: Sequence[str]) -> Optional[str]:
    """First part whose lower-cased text contains any needle, else None."""
    for part in parts:
        low = part.lower()
        if any(n in low for n in needles):
            return part
    return None


def extract_saturday_hours(text: str) -> Optional[str]:
    m = _SATURDAY_HOURS_RE.search(text or "")
    return m.group(1) if m else None


def _mentions_all(*words: str) -> Callable[[str], bool]:
    return lambda q: all(w in q for w in words)


def _mentions_any(*words: str) -> Callable[[str], bool]:
    return lambda q: any(w in q for w in words)


# ---- builders ----

def _saturday_walk_in(parts: Sequence[str]) -> Optional[str]:
    hours_part = find_part(parts, ("sat", "10am"))
    policy_part = find_part(parts, ("walk-in", "appointment"))
    if hours_part is None or policy_part is None:
        return None
    hours = extract_saturday_hours(hours_part) or DEFAULT_SATURDAY_HOURS
    return f"Yes, we're open Saturdays {hours}. {policy_part} Booking is recommended."


def _booking(parts: Sequence[str]) -> Optional[str]:
    return find_part(parts, ("website", "call"))


def _services(parts: Sequence[str]) -> Optional[str]:
    part = find_part(parts, ("haircut", "coloring"))
    return f"We offer {part.lower()}." if part is not None else None


def _hours(parts: Sequence[str]) -> Optional[str]:
    part = find_part(parts, ("mon", "9am"))
    return f"Our hours are {part.lower()}." if part is not None else None


def _first_part(parts: Sequence[str]) -> Optional[str]:
    return parts[0] if parts else None


COMPOSE_RULES: Tuple[ComposeRule, ...] = (
    ComposeRule("saturday-walk-in", _mentions_all("saturday", "appointment"), _saturday_walk_in),
    ComposeRule("booking", _mentions_any("book", "appointment"), _booking),
    ComposeRule("services", _mentions_any("service", "offer"), _services),
    ComposeRule("hours", _mentions_any("hours", "open"), _hours),
    ComposeRule("default", lambda q: True, _first_part),
)


# ---- composition ----

def compose_text(
    parts: Sequence[str],
    question: str,
    rules: Sequence[ComposeRule] = COMPOSE_RULES,
) -> Composition:
    q = (question or "").lower()
    for rule in rules:
        if rule.triggers(q):
            return Composition(rule=rule.name, text=rule.build(parts))
    return Composition(rule="none", text=None)


def resolve_text(parts: Sequence[str], question: str) -> str:
    comp = compose_text(parts, question)
    if comp.text:
        return comp.text
    log.info("compose rule %s produced no text; using top answer", comp.rule)
    return parts[0] if parts else FALLBACK_ANSWER


def generate_answer(
    ranked: Sequence[ScoredFAQItem],
    voice: BrandVoice,
    question: str,
    stylist: Optional[Stylist] = None,
) -> AnswerResult:
    stylist = stylist or Stylist()
    if not ranked:
        return AnswerResult(answer=stylist.style(FALLBACK_ANSWER, voice), sources=())

    parts = [r.answer for r in ranked]
    sources = tuple(r.id for r in ranked)
    text = resolve_text(parts, question)
    return AnswerResult(answer=stylist.style(text, voice), sources=sources)
