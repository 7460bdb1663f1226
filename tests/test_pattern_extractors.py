"""
Tests for the heuristic passes and the shared acceptance predicate.
"""

from pattern_extractors import (
    EXTRACTORS,
    analyze_frequency,
    extract_capitalized_words,
    extract_character_introductions,
    extract_direct_address,
    extract_from_dialogue,
    extract_named_entities,
    extract_possessive_forms,
    is_likely_character_name,
    record_mention,
)


def _counts(mention_map):
    return {name: record.mentions for name, record in mention_map.items()}


def test_predicate_accepts_plain_names():
    assert is_likely_character_name("John")
    assert is_likely_character_name("Mary Smith")
    assert is_likely_character_name("Mary-Jane")


def test_predicate_rejects_noise():
    """Short, lowercase, all-caps, digits, punctuation and sentence starters."""
    assert not is_likely_character_name("Al")
    assert not is_likely_character_name("john")
    assert not is_likely_character_name("NASA")
    assert not is_likely_character_name("Agent7")
    assert not is_likely_character_name("O'Brien")
    assert not is_likely_character_name("The")
    assert not is_likely_character_name("")
    assert not is_likely_character_name(None)


def test_record_mention_collapses_whitespace():
    mention_map = {}
    assert record_mention(mention_map, "Mary\n  Smith")
    assert record_mention(mention_map, "Mary Smith")
    assert _counts(mention_map) == {"Mary Smith": 2}


def test_record_mention_skips_rejected_names():
    mention_map = {}
    assert not record_mention(mention_map, "Al")
    assert mention_map == {}


def test_dialogue_attribution_both_orientations():
    mention_map = {}
    text = 'John said hello. Mary whispered back. "Go," replied Robert Smith.'

    accepted = extract_from_dialogue(text, mention_map)

    assert accepted == 3
    assert _counts(mention_map) == {"John": 1, "Mary": 1, "Robert Smith": 1}


def test_dialogue_verbs_are_case_insensitive_names_are_not():
    mention_map = {}
    extract_from_dialogue("John SAID it. john said it.", mention_map)
    assert _counts(mention_map) == {"John": 1}


def test_named_entities_after_sentence_end_and_line_break():
    mention_map = {}
    text = "It rained. Mary Smith left.\nJohn stayed."

    extract_named_entities(text, mention_map)

    assert _counts(mention_map) == {"Mary Smith": 1, "John": 1}


def test_capitalized_words_take_whole_phrases():
    mention_map = {}
    assert extract_capitalized_words("Mary Smith met John.", mention_map) == 2
    assert _counts(mention_map) == {"Mary Smith": 1, "John": 1}


def test_frequency_analysis_threshold():
    mention_map = {}
    text = "Anna ran. Anna hid. Anna won. Peter came."

    frequent = analyze_frequency(text, mention_map)

    assert frequent == 1
    assert _counts(mention_map) == {"Anna": 3}


def test_frequency_analysis_boosts_existing_entry():
    mention_map = {}
    record_mention(mention_map, "Anna", 2)
    analyze_frequency("Anna ran. Anna hid. Anna won.", mention_map)
    assert mention_map["Anna"].mentions == 5


def test_direct_address_quoted_and_cue_forms():
    mention_map = {}
    text = '"Come here, John." Mary, please sit.'

    accepted = extract_direct_address(text, mention_map)

    assert accepted == 2
    assert _counts(mention_map) == {"John": 1, "Mary": 1}


def test_direct_address_curly_quotes():
    mention_map = {}
    extract_direct_address("“Thank you, Robert Smith!”", mention_map)
    assert _counts(mention_map) == {"Robert Smith": 1}


def test_possessive_forms_straight_and_curly():
    mention_map = {}
    extract_possessive_forms("Mary's hat and John Smith’s coat", mention_map)
    assert _counts(mention_map) == {"Mary": 1, "John Smith": 1}


def test_character_introductions():
    mention_map = {}
    text = (
        "Once, a man named Ishmael arrived. "
        "Robert Smith was a gentleman. "
        "She introduced herself as Mary Jones. "
        "He called himself Bob."
    )

    accepted = extract_character_introductions(text, mention_map)

    assert accepted == 4
    assert _counts(mention_map) == {
        "Ishmael": 1,
        "Robert Smith": 1,
        "Mary Jones": 1,
        "Bob": 1,
    }


def test_extractor_table_order():
    names = [name for name, _ in EXTRACTORS]
    assert names == [
        "dialogue_attribution",
        "named_entity_recognition",
        "capitalized_word_analysis",
        "frequency_analysis",
        "direct_address_pattern",
        "possessive_form_detection",
        "character_introduction",
    ]
