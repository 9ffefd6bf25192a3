from __future__ import annotations

from i18n_keysort.collation import collation_key, compare_text


def test_alphabetical_order():
    assert compare_text("apple", "banana") < 0
    assert compare_text("banana", "apple") > 0
    assert compare_text("apple", "apple") == 0


def test_prefix_sorts_first():
    assert compare_text("apple", "applesauce") < 0


def test_case_is_a_tiebreak_only():
    assert compare_text("banana", "Banana") < 0
    assert compare_text("Banana", "cherry") < 0
    assert compare_text("Apple", "banana") < 0


def test_accents_are_a_secondary_difference():
    assert compare_text("resume", "résumé") < 0
    assert compare_text("résumé", "rhythm") < 0
    assert compare_text("été", "ete") > 0


def test_character_groups():
    assert compare_text(" a", "_a") < 0
    assert compare_text("a_b", "ab") < 0
    assert compare_text("9", "a") < 0
    assert compare_text("item10", "item2") < 0


def test_distinct_strings_never_compare_equal():
    composed = "\u00e9"
    decomposed = "e\u0301"
    assert compare_text(composed, decomposed) != 0


def test_collation_key_sorts_like_compare_text():
    words = ["b", "B", "á", "a", "A", "_", "1"]
    assert sorted(words, key=collation_key) == ["_", "1", "a", "A", "á", "b", "B"]


def test_underscore_sorts_before_hyphen():
    assert compare_text("a_b", "a-b") < 0
    assert compare_text("a-b", "a_b") > 0


def test_ascii_punctuation_follows_root_order():
    marks = list("$~.-_:,;!?'\"()@/&#")
    assert sorted(marks, key=collation_key) == list("_-,;:!?.'\"()@/&#~$")
