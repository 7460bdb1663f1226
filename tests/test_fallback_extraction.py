"""
Tests for the reduced-capability fallback extractor.
"""

from fallback_extraction import fallback_name_extraction


TEXT = 'John said hello. "Wait, Mary." John smiled.'


def test_fallback_counts_and_order():
    candidates = fallback_name_extraction(TEXT)

    assert [(c.full_name, c.mentions) for c in candidates] == [
        ("John", 3),
        ("Mary", 2),
        ("Wait", 1),
    ]


def test_fallback_candidates_have_no_title_last_name_or_variants():
    for candidate in fallback_name_extraction(TEXT):
        assert candidate.title == ""
        assert candidate.last_name == ""
        assert candidate.variants == ()
        assert candidate.first_name == candidate.full_name


def test_fallback_honours_options():
    candidates = fallback_name_extraction(TEXT, {"capitalizedWordAnalysis": False})
    assert [(c.full_name, c.mentions) for c in candidates] == [("John", 1), ("Mary", 1)]


def test_fallback_skips_pronouns_in_capitalized_pass():
    candidates = fallback_name_extraction("She went home. They followed.", {
        "namedEntityRecognition": False,
    })
    assert candidates == []


def test_fallback_applies_acceptance_predicate():
    assert fallback_name_extraction("Al said so. Ed said so.") == []


def test_fallback_empty_text():
    assert fallback_name_extraction("") == []
    assert fallback_name_extraction(None) == []
