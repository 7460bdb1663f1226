"""
Tests for the extraction pipeline entry point, options handling and ranking.
"""

from dataclasses import dataclass, replace
from types import SimpleNamespace

import pytest

from dictionaries.common_word_dictionary import COMMON_WORDS
from name_extraction import (
    CharacterCandidate,
    ExtractionOptions,
    build_mention_map,
    extract_characters_from_text,
    rank_candidates,
)
from pattern_extractors import EXTRACTORS, is_likely_character_name


SAMPLE_TEXT = (
    "Harry Potter walked into the hall. Harry smiled at Hermione.\n"
    '"Sit down, Harry," said Hermione Granger.\n'
    "Robert Smith arrived late. Bob laughed. Mary's owl hooted.\n"
    "Will you come? Mary said yes. Harry nodded.\n"
)

DETECTION_OPTIONS = (
    "dialogueAttribution",
    "namedEntityRecognition",
    "capitalizedWordAnalysis",
    "frequencyAnalysis",
    "directAddressPattern",
    "possessiveFormDetection",
    "characterIntroduction",
)


def _names(candidates):
    return [c.full_name for c in candidates]


def _by_name(candidates):
    return {c.full_name: c for c in candidates}


# --------------------------------------------------
# Input handling
# --------------------------------------------------

@pytest.mark.parametrize("text", ["", "   \n", None, 42])
def test_empty_or_invalid_text_returns_empty_list(text):
    assert extract_characters_from_text(text) == []


def test_no_detection_method_returns_empty_list():
    options = {name: False for name in DETECTION_OPTIONS}
    assert extract_characters_from_text(SAMPLE_TEXT, options) == []


# --------------------------------------------------
# Options
# --------------------------------------------------

def test_options_default_to_true():
    options = ExtractionOptions.from_value(None)
    assert all(options.to_dict().values())
    assert len(options.to_dict()) == 10


def test_options_accept_camel_and_snake_case():
    options = ExtractionOptions.from_value({
        "dialogueAttribution": False,
        "frequency_analysis": "no",
    })
    assert options.dialogue_attribution is False
    assert options.frequency_analysis is False
    assert options.title_detection is True


def test_malformed_option_values_use_defaults():
    options = ExtractionOptions.from_value({
        "titleDetection": "maybe",
        "filterCommonWords": [],
        "unknownOption": False,
    })
    assert options == ExtractionOptions()
    assert ExtractionOptions.from_value("not a mapping") == ExtractionOptions()


def test_options_read_from_attribute_objects():
    @dataclass
    class UiSettings:
        frequency_analysis: bool = False
        theme: str = "dark"

    options = ExtractionOptions.from_value(UiSettings())
    assert options.frequency_analysis is False
    assert options.dialogue_attribution is True

    options = ExtractionOptions.from_value(SimpleNamespace(dialogueAttribution=False))
    assert options.dialogue_attribution is False
    assert options.frequency_analysis is True


def test_attribute_objects_respect_extraction_toggle():
    flags = {name: False for name in DETECTION_OPTIONS}
    flags["possessiveFormDetection"] = True
    settings = SimpleNamespace(**flags)
    candidates = extract_characters_from_text("Mary's owl and John left.", settings)
    assert _names(candidates) == ["Mary"]


def test_active_methods_and_detection_check():
    options = ExtractionOptions.from_value({name: False for name in DETECTION_OPTIONS})
    assert not options.has_detection_method()
    assert options.active_methods() == [
        "Title Detection",
        "Name Variants Combined",
        "Common Words Filtered",
    ]


# --------------------------------------------------
# Output contract
# --------------------------------------------------

def test_candidate_to_dict_uses_contract_keys():
    candidate = CharacterCandidate("Lady Mary", "Lady", "Mary", "", 3, ("Mary",))
    assert candidate.to_dict() == {
        "fullName": "Lady Mary",
        "title": "Lady",
        "firstName": "Mary",
        "lastName": "",
        "mentions": 3,
        "variants": ["Mary"],
    }


def test_rank_is_stable_for_ties():
    a = CharacterCandidate("Anna", "", "Anna", "", 2)
    b = CharacterCandidate("Peter", "", "Peter", "", 5)
    c = CharacterCandidate("John", "", "John", "", 2)
    assert rank_candidates([a, b, c]) == [b, a, c]


def test_results_sorted_by_mentions_descending():
    candidates = extract_characters_from_text(SAMPLE_TEXT)
    mentions = [c.mentions for c in candidates]
    assert mentions == sorted(mentions, reverse=True)


def test_results_are_deterministic():
    first = extract_characters_from_text(SAMPLE_TEXT)
    second = extract_characters_from_text(SAMPLE_TEXT)
    assert first == second


def test_every_candidate_satisfies_contract():
    for candidate in extract_characters_from_text(SAMPLE_TEXT):
        assert is_likely_character_name(candidate.full_name), candidate.full_name
        assert candidate.mentions >= 1
        assert candidate.full_name.lower() not in {w.lower() for w in COMMON_WORDS}
        assert isinstance(candidate.variants, tuple)


# --------------------------------------------------
# Stage toggles
# --------------------------------------------------

def test_variant_combination_merges_first_name():
    candidates = _by_name(extract_characters_from_text(SAMPLE_TEXT))
    assert "Harry" not in candidates
    assert "Harry" in candidates["Harry Potter"].variants


def test_variant_combination_disabled_keeps_first_name():
    candidates = _by_name(extract_characters_from_text(
        SAMPLE_TEXT, {"combineNameVariants": False}
    ))
    assert "Harry" in candidates
    assert candidates["Harry Potter"].variants == ()


def test_nickname_merged_into_canonical_name():
    candidates = extract_characters_from_text("Robert Smith arrived. Bob laughed.")
    assert len(candidates) == 1
    robert = candidates[0]
    assert robert.full_name == "Robert Smith"
    assert robert.mentions == 4
    assert robert.variants == ("Bob",)
    assert (robert.first_name, robert.last_name) == ("Robert", "Smith")


def test_common_word_filter_toggle():
    text = "Will you come? Mary said yes."
    assert "Will" not in _names(extract_characters_from_text(text))
    unfiltered = extract_characters_from_text(text, {"filterCommonWords": False})
    assert "Will" in _names(unfiltered)
    assert "Mary" in _names(unfiltered)


def test_title_detection_toggle():
    text = "Captain John Smith arrived. Captain John Smith left."

    with_titles = extract_characters_from_text(text)
    assert len(with_titles) == 1
    captain = with_titles[0]
    assert (captain.title, captain.first_name, captain.last_name) == ("Captain", "John", "Smith")
    assert captain.mentions == 3

    without_titles = extract_characters_from_text(text, {"titleDetection": False})
    plain = without_titles[0]
    assert (plain.title, plain.first_name, plain.last_name) == ("", "Captain John", "Smith")


def test_single_method_only_finds_its_pattern():
    options = {name: False for name in DETECTION_OPTIONS}
    options["possessiveFormDetection"] = True

    candidates = extract_characters_from_text("Mary's owl and John left.", options)

    assert _names(candidates) == ["Mary"]


def test_verbose_prints_progress(capsys):
    extract_characters_from_text("Mary said hello.", verbose=True)
    assert "[Name Extractor]" in capsys.readouterr().out


STAGE_TEXT = SAMPLE_TEXT + "Once, a man named Ishmael arrived.\n"

# Filter and combiner off so every count is a raw stage count
RAW_OPTIONS = ExtractionOptions(combine_name_variants=False, filter_common_words=False)


@pytest.mark.parametrize("option_name,extractor", EXTRACTORS, ids=[n for n, _ in EXTRACTORS])
def test_disabling_a_method_removes_only_its_mentions(option_name, extractor):
    alone = {}
    extractor(STAGE_TEXT, alone)
    assert alone, f"{option_name} found nothing in the sample"

    full = build_mention_map(STAGE_TEXT, RAW_OPTIONS)
    without = build_mention_map(STAGE_TEXT, replace(RAW_OPTIONS, **{option_name: False}))

    for name in set(full) | set(without) | set(alone):
        expected = (
            (without[name].mentions if name in without else 0)
            + (alone[name].mentions if name in alone else 0)
        )
        assert (full[name].mentions if name in full else 0) == expected, name

    disabled = extract_characters_from_text(
        STAGE_TEXT, replace(RAW_OPTIONS, **{option_name: False})
    )
    assert {c.full_name: c.mentions for c in disabled} == {
        name: record.mentions for name, record in without.items()
    }
