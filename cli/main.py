"""
CLI for the FAQ brand-voice answerer.

Commands:
  generate --faq PATH --brand-voice PATH --question TEXT [--json]
                       Answer a question offline (same pipeline as /api/generate).
  parse    --faq PATH  Print parsed FAQ items as JSON.
  seed     [--output DIR]
                       Write the demo FAQ, brand voice and question files.

Usage:
  python -m cli.main generate --faq seed/faq.txt --brand-voice seed/brand_voice.json \
      --question "How can I book?"
"""

from __future__ import annotations
import argparse
import json
import sys
import time
from pathlib import Path


# Lazy imports so CLI loads fast
def _m_import(mod: str):
    return __import__(mod, fromlist=["*"])


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def cmd_generate(args: argparse.Namespace) -> int:
    validators = _m_import("service.validators")
    pipeline = _m_import("service.answer_service")

    voice = validators.parse_brand_voice(_read(args.brand_voice))
    t0 = time.perf_counter()
    result = pipeline.answer_question(_read(args.faq), voice, args.question)
    latency_ms = int((time.perf_counter() - t0) * 1000)

    if args.json:
        out = result.to_dict()
        out["latencyMs"] = latency_ms
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        print(result.answer)
        print(f"sources: {', '.join(result.sources) or '-'}")
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    parser = _m_import("retrieval.faq_parser")
    items = parser.parse_faq(_read(args.faq))
    print(json.dumps([it.to_dict() for it in items], ensure_ascii=False, indent=2))
    return 0


def cmd_seed(args: argparse.Namespace) -> int:
    scripts = _m_import("scripts.seed_example_data")
    written = scripts.main(out_dir=args.output)
    for path in written.values():
        print(path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="faq-voice",
        description="Answer questions from a Q:/A: FAQ in a brand voice"
    )
    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("generate", help="Answer a question from an FAQ file")
    sp.add_argument("--faq", required=True, help="Path to Q:/A: FAQ text")
    sp.add_argument("--brand-voice", required=True, help="Path to brand voice JSON")
    sp.add_argument("--question", required=True)
    sp.add_argument("--json", action="store_true", help="Print the full result as JSON")
    sp.set_defaults(func=cmd_generate)

    sp = sub.add_parser("parse", help="Show how an FAQ file is parsed")
    sp.add_argument("--faq", required=True)
    sp.set_defaults(func=cmd_parse)

    sp = sub.add_parser("seed", help="Write demo seed files")
    sp.add_argument("--output", default=str(Path("seed")))
    sp.set_defaults(func=cmd_seed)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
