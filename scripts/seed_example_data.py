#!/usr/bin/env python3
"""
Demo seed: the salon FAQ, brand voice and sample question (idempotent).

Usage:
  python scripts/seed_example_data.py [--output seed]

Writes:
  <output>/{faq.txt,brand_voice.json,question.txt}

The same data is served by GET /api/seed for the demo form.
"""

from __future__ import annotations
import argparse
import json
from pathlib import Path
from typing import Dict

FAQ_TEXT = """Q: What services do you offer?
A: Haircuts, coloring, styling, and keratin treatments.

Q: What are your hours?
A: Mon–Fri 9am–6pm, Sat 10am–4pm, closed Sunday.

Q: Do you accept walk-ins?
A: We prefer appointments, but walk-ins are welcome if a stylist is free.

Q: How can I book?
A: Use our website or call 555-0148. We require a credit card to hold your slot.

Q: Cancellation policy?
A: Cancel or reschedule at least 12 hours in advance to avoid a $20 fee."""

BRAND_VOICE = {
    "tone": "Warm, concise, reassuring",
    "style_rules": [
        "Use short sentences.",
        "Avoid jargon.",
        "End with a friendly nudge if suitable.",
    ],
    "signoff": "— Salon Nova",
}

QUESTION = "Are you open on Saturdays, and can I come without an appointment?"

SEED_DATA = {"faq": FAQ_TEXT, "brandVoice": BRAND_VOICE, "question": QUESTION}


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def main(out_dir: str = "seed") -> Dict[str, str]:
    base = Path(out_dir)
    paths = {
        "faq": base / "faq.txt",
        "brandVoice": base / "brand_voice.json",
        "question": base / "question.txt",
    }
    write_text(paths["faq"], FAQ_TEXT + "\n")
    write_text(paths["brandVoice"], json.dumps(BRAND_VOICE, ensure_ascii=False, indent=2))
    write_text(paths["question"], QUESTION + "\n")
    return {k: str(v) for k, v in paths.items()}


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Write the demo seed files")
    ap.add_argument("--output", default="seed")
    written = main(ap.parse_args().output)
    print(f"[OK] Seed written under {Path(written['faq']).parent}")
