"""
Parser tests: Q:/A: scanning, dangling questions, id slugs, round-trip.
"""

from __future__ import annotations
import pytest

from retrieval.faq_parser import FAQItem, format_faq, make_question_id, parse_faq


def test_seed_faq_parses_in_order(faq_items):
    assert [it.id for it in faq_items] == [
        "what-services",
        "what-are",
        "you-accept",
        "how-can",
        "cancellation-policy",
    ]
    hours = faq_items[1]
    assert hours.question == "What are your hours?"
    assert hours.answer == "Mon–Fri 9am–6pm, Sat 10am–4pm, closed Sunday."


def test_text_without_markers_yields_nothing():
    assert parse_faq("Just some notes\nabout the salon.") == []
    assert parse_faq("") == []


def test_dangling_question_is_dropped():
    items = parse_faq("Q: Do you park?\nA: Yes, out back.\nQ: Any discounts?")
    assert [it.question for it in items] == ["Do you park?"]


def test_question_followed_by_question_drops_first():
    items = parse_faq("Q: First question here?\nQ: Second question here?\nA: Second answer.")
    assert len(items) == 1
    assert items[0].question == "Second question here?"
    assert items[0].answer == "Second answer."


def test_later_answer_overwrites_earlier():
    items = parse_faq("Q: Prices?\nA: From $20.\nA: From $25.")
    assert items[0].answer == "From $25."


def test_continuation_lines_are_ignored():
    items = parse_faq("Q: Parking?\nA: Street parking.\nAlso a garage nearby.")
    assert items[0].answer == "Street parking."


def test_markers_are_trimmed_and_blank_lines_skipped():
    items = parse_faq("\n\n   Q:   Do you sell gift cards?  \n\n   A:  Yes, in store.   \n\n")
    assert items == [FAQItem(id="you-sell", question="Do you sell gift cards?", answer="Yes, in store.")]


@pytest.mark.parametrize("sep", ["\u2028", "\u2029", "\x85"])
def test_only_newline_breaks_lines(sep):
    items = parse_faq(f"Q: What are your hours?\nA: Open late{sep}on Fridays.")
    assert items[0].answer == f"Open late{sep}on Fridays."


def test_crlf_line_endings():
    items = parse_faq("Q: Parking?\r\nA: Street parking.\r\n")
    assert items == [FAQItem(id="parking", question="Parking?", answer="Street parking.")]


def test_empty_answer_is_not_emitted():
    assert parse_faq("Q: Anything?\nA:   ") == []


@pytest.mark.parametrize(
    "question,expected",
    [
        ("What are your hours?", "what-are"),
        ("Do you accept walk-ins?", "you-accept"),
        ("Cancellation policy?", "cancellation-policy"),
        ("Is it ok?", "question"),
        ("", "question"),
    ],
)
def test_make_question_id(question, expected):
    assert make_question_id(question) == expected


def test_duplicate_ids_coexist():
    items = parse_faq("Q: What are the fees?\nA: Ten.\nQ: What are the hours?\nA: Nine to five.")
    assert [it.id for it in items] == ["what-are", "what-are"]


def test_every_item_has_question_and_answer(faq_items):
    assert all(it.question and it.answer for it in faq_items)


def test_reparse_of_formatted_items_is_stable(faq_items):
    assert parse_faq(format_faq(faq_items)) == faq_items
