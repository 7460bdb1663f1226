"""
Tests for title lookup and full-name decomposition.
"""

from name_parsing import NameParts, decompose_name, find_title_category, split_standard_name


def test_title_category_lookup():
    assert find_title_category("Captain") == "last_name"
    assert find_title_category("mrs") == "formal"
    assert find_title_category("Lady") == "first_name"
    assert find_title_category("Professor") == "ambiguous"
    assert find_title_category("John") is None
    assert find_title_category("") is None


def test_title_lookup_ignores_trailing_period():
    assert find_title_category("Dr.") == "ambiguous"
    assert find_title_category("Mr.") == "formal"


def test_standard_split_keeps_middle_names_with_first():
    assert split_standard_name(["John", "Alan", "Smith"]) == ("John Alan", "Smith")
    assert split_standard_name(["Mary"]) == ("Mary", "")
    assert split_standard_name([]) == ("", "")


def test_last_name_title_with_single_name():
    assert decompose_name("Captain Smith") == NameParts("Captain", "", "Smith")


def test_last_name_title_with_first_and_last():
    assert decompose_name("Captain John Smith") == NameParts("Captain", "John", "Smith")


def test_first_name_title_binds_single_name_to_first():
    assert decompose_name("Lady Mary") == NameParts("Lady", "Mary", "")
    assert decompose_name("Lady Mary Smith") == NameParts("Lady", "Mary", "Smith")


def test_formal_and_ambiguous_titles_bind_to_last():
    assert decompose_name("Mr Darcy") == NameParts("Mr", "", "Darcy")
    assert decompose_name("Dr. Watson") == NameParts("Dr.", "", "Watson")
    assert decompose_name("Professor Ann Smith") == NameParts("Professor", "Ann", "Smith")


def test_title_followed_by_several_names():
    """Everything after the first name following the title is the last name."""
    assert decompose_name("Sir John Alan Smith") == NameParts("Sir", "John", "Alan Smith")


def test_no_title_standard_parse():
    assert decompose_name("John Alan Smith") == NameParts("", "John Alan", "Smith")
    assert decompose_name("Mary") == NameParts("", "Mary", "")


def test_single_title_word_is_a_first_name():
    assert decompose_name("Captain") == NameParts("", "Captain", "")


def test_title_detection_disabled():
    parts = decompose_name("Captain John Smith", detect_titles=False)
    assert parts == NameParts("", "Captain John", "Smith")
