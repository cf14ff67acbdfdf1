"""
Brand-voice rewriter.

Design:
- Never invents facts. Input is already grounded in the FAQ answers.
- Deterministic cleanups only, driven by the brand voice config:
    style_rules containing "short sentences" -> split long sentences
    style_rules containing "avoid jargon"    -> plain-word substitutions
    signoff                                  -> appended last

API:
    apply_brand_voice("draft text", BrandVoice.from_dict({...}))
    Stylist().style("draft text", voice)

Rule strings are matched as substrings, ignoring case ("Avoid jargon." counts);
anything else in style_rules (e.g. "End with a friendly nudge") is ignored.
Rules are walked once front to back, so a rule list holding both triggers
shortens sentences before swapping jargon.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

SHORT_SENTENCES_RULE = "short sentences"
AVOID_JARGON_RULE = "avoid jargon"

JARGON: Mapping[str, str] = MappingProxyType({
    "utilize": "use",
    "facilitate": "help",
    "implement": "do",
    "optimize": "improve",
})

_SPLITTERS = (
    re.compile(r",\s+and\s+"),
    re.compile(r",\s+but\s+"),
    re.compile(r";\s+"),
)
_DOUBLE_PERIOD = re.compile(r"(?<!\.)\.\s*\.(?!\.)")  # leaves ellipses alone


@dataclass(frozen=True)
class BrandVoice:
    style_rules: Tuple[str, ...] = ()
    signoff: Optional[str] = None
    extras: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BrandVoice":
        rules = data.get("style_rules") or ()
        extras = {k: v for k, v in data.items() if k not in ("style_rules", "signoff")}
        return cls(style_rules=tuple(rules), signoff=data.get("signoff"), extras=extras)


def make_short_sentences(text: str) -> str:
    for rx in _SPLITTERS:
        text = rx.sub(". ", text)
    return _DOUBLE_PERIOD.sub(".", text).strip()


def remove_jargon(text: str, jargon: Mapping[str, str] = JARGON) -> str:
    for word, plain in jargon.items():
        text = re.sub(rf"\b{re.escape(word)}\b", plain, text, flags=re.I)
    return text


def apply_brand_voice(text: str, voice: BrandVoice) -> str:
    return Stylist().style(text, voice)


@dataclass
class Stylist:
    jargon: Mapping[str, str] = field(default_factory=lambda: JARGON)

    def style(self, text: str, voice: BrandVoice) -> str:
        styled = text
        for rule in voice.style_rules:
            rule = rule.lower()
            if SHORT_SENTENCES_RULE in rule:
                styled = make_short_sentences(styled)
            if AVOID_JARGON_RULE in rule:
                styled = remove_jargon(styled, self.jargon)
        if voice.signoff:
            styled = f"{styled} {voice.signoff}"
        return styled
