"""
tests/test_keyword_detector.py
Risk scan: category matching, weights, shape heuristics, clamping.
"""

import pytest

from relove.detectors.keyword_detector import (
    CATEGORIES,
    CATEGORY_WEIGHTS,
    MAX_SCORE,
    analyze_text,
    category_tags,
)
from relove.errors import InvalidInput

NEEDY_TEXT     = "I miss you so much, please reply to me, I can't live without you."
ULTIMATUM_TEXT = "If you don't call me back, it's over between us"
CLEAN_TEXT     = "Hope you're having a good week"


# ── 1. test_category_order_is_fixed ──────────────────────────

def test_category_order_is_fixed():
    assert CATEGORIES == (
        'neediness', 'pressure', 'ultimatums', 'jealousy', 'begging', 'manipulation',
    )
    assert set(CATEGORY_WEIGHTS) == set(CATEGORIES)


# ── 2. test_clean_text_scores_zero ───────────────────────────

def test_clean_text_scores_zero():
    a = analyze_text(CLEAN_TEXT)
    assert a.score == 0
    assert a.issues == ()
    assert not any(getattr(a, c) for c in CATEGORIES)


# ── 3. test_each_category_adds_its_weight ────────────────────

@pytest.mark.parametrize("text, category, weight", [
    ("Honestly I'm desperate at this point",  'neediness',    3),
    ("You have to see this movie",            'pressure',     2),
    ("This is your last chance",              'ultimatums',   4),
    ("Are you seeing anyone these days",      'jealousy',     2),
    ("Just one chance, that's all",           'begging',      2),
    ("How could you say that",                'manipulation', 4),
])
def test_each_category_adds_its_weight(text, category, weight):
    a = analyze_text(text)
    assert getattr(a, category) is True
    assert a.issues == (category,)
    assert a.score == weight


# ── 4. test_needy_message_flags_three_categories ─────────────

def test_needy_message_flags_three_categories():
    a = analyze_text(NEEDY_TEXT)
    assert a.neediness and a.pressure and a.manipulation
    assert not (a.ultimatums or a.jealousy or a.begging)
    assert a.issues == ('neediness', 'pressure', 'manipulation')
    assert a.score == 3 + 2 + 4


# ── 5. test_conditional_threat_is_ultimatum_and_manipulation ─

def test_conditional_threat_is_ultimatum_and_manipulation():
    a = analyze_text(ULTIMATUM_TEXT)
    assert a.ultimatums and a.manipulation and a.pressure
    assert a.score == 10


# ── 6. test_category_counted_once ────────────────────────────

def test_category_counted_once():
    a = analyze_text("please reply, please reply, I need you, I'm desperate")
    assert a.issues == ('neediness',)
    assert a.score == 3


# ── 7. test_matching_is_case_insensitive ─────────────────────

def test_matching_is_case_insensitive():
    a = analyze_text("PLEASE REPLY")
    assert a.neediness
    assert a.score == 3          # two shouted words do not trip the caps rule


def test_curly_apostrophes_match():
    a = analyze_text("If you don’t text me back")
    assert a.ultimatums
    assert a.score == 4


@pytest.mark.parametrize("text, category", [
    ("I'm desperately waiting for you",  'neediness'),
    ("I need your attention right now",  'neediness'),
    ("Are you with another guy now",     'jealousy'),
])
def test_phrases_match_inside_longer_words(text, category):
    a = analyze_text(text)
    assert getattr(a, category) is True
    assert category in a.issues


# ── 8. test_length_heuristic ─────────────────────────────────

def test_length_heuristic():
    assert analyze_text("a" * 300).score == 0
    a = analyze_text("a" * 301)
    assert a.issues == ('excessive_length',)
    assert a.score == 2
    assert not any(getattr(a, c) for c in CATEGORIES)


# ── 9. test_question_heuristic ───────────────────────────────

def test_question_heuristic():
    assert analyze_text("Free later? Coffee?").score == 0
    a = analyze_text("How are you? What's new? Free later?")
    assert a.issues == ('excessive_questions',)
    assert a.score == 1


# ── 10. test_caps_heuristic ──────────────────────────────────

def test_caps_heuristic():
    assert analyze_text("WHY ARE you like this").score == 0
    a = analyze_text("WHY ARE YOU LIKE THIS")
    assert a.issues == ('excessive_caps',)
    assert a.score == 1


# ── 11. test_score_clamped_to_ten ────────────────────────────

def test_score_clamped_to_ten():
    text = (
        "please reply, I'm begging you, if you don't answer me it's over, "
        "who are you with, you owe me. WHY WHY WHY??? " + "x" * 300
    )
    a = analyze_text(text)
    assert a.score == MAX_SCORE
    assert set(CATEGORIES) <= set(a.issues)
    assert a.issues[-3:] == ('excessive_length', 'excessive_questions', 'excessive_caps')


# ── 12. test_analysis_is_idempotent ──────────────────────────

@pytest.mark.parametrize("text", [NEEDY_TEXT, ULTIMATUM_TEXT, CLEAN_TEXT, "", "WHO ARE YOU WITH???"])
def test_analysis_is_idempotent(text):
    assert analyze_text(text) == analyze_text(text)


# ── 13. test_category_tags_excludes_heuristics ───────────────

def test_category_tags_excludes_heuristics():
    a = analyze_text("WHO ARE YOU WITH??? " + "x" * 300)
    assert category_tags(a) == ['jealousy']
    assert 'excessive_caps' in a.issues


# ── 14. test_non_string_rejected ─────────────────────────────

@pytest.mark.parametrize("value", [None, 42, b"please reply"])
def test_non_string_rejected(value):
    with pytest.raises(InvalidInput):
        analyze_text(value)
