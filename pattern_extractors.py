"""
Pattern Extractors for Character Name Extraction

PURPOSE:
This module holds the SEVEN INDEPENDENT HEURISTIC PASSES that propose
character names from raw book text, plus the single acceptance predicate
every proposal must pass before it is counted.

============================================================
HOW THE PASSES COOPERATE
============================================================

Every pass receives the full text and a shared MENTION MAP and increments
the count of each accepted name in place. No pass knows about the others.

Overlap is INTENTIONAL:
- "John said" is counted by dialogue attribution AND by capitalized
  word analysis. Confidence accumulates through the mention count.
- Deduplication happens ONLY through the map key (the literal,
  whitespace-collapsed name string).

============================================================
PATTERN SHAPE
============================================================

A name is 1-4 capitalized tokens separated by single whitespace
characters. The 4-token cap keeps the regexes free of catastrophic
backtracking. Surrounding vocabulary (dialogue verbs, role nouns, address
cues) is matched case-insensitively; the name itself must be capitalized.

============================================================
WHAT THIS IS NOT
============================================================

This is regex pattern matching, NOT named entity recognition.
False positives are expected here and are cleaned up downstream by the
common-word filter.
"""

import re
from dataclasses import dataclass, field

from dictionaries.common_word_dictionary import SENTENCE_STARTERS
from dictionaries.pattern_dictionary import (
    DIALOGUE_VERBS,
    ROLE_NOUNS,
    DIRECT_ADDRESS_CUES,
)


# --------------------------------------------------
# Configuration
# --------------------------------------------------

# Shortest string accepted as a name ("Al" and "Ed" are rejected)
MIN_NAME_LENGTH = 3

# A single capitalized word must appear at least this often to be
# picked up by frequency analysis
FREQUENCY_THRESHOLD = 3

# 1-4 capitalized tokens
NAME_PATTERN = r"[A-Z][a-zA-Z]*(?:\s[A-Z][a-zA-Z]*){0,3}"

# Digits, or any character that is not a letter, whitespace or hyphen
_INVALID_NAME_CHARS = re.compile(r"[\d_]|[^\w\s-]")


# --------------------------------------------------
# Data structures
# --------------------------------------------------

@dataclass
class MentionRecord:
    """
    Accumulated evidence for one candidate name.

    variants lists the names merged into this one by the variant
    combiner, in merge order.
    """
    mentions: int = 0
    variants: list[str] = field(default_factory=list)


# Candidate name string -> accumulated record
MentionMap = dict[str, MentionRecord]


# --------------------------------------------------
# Acceptance predicate
# --------------------------------------------------

def is_likely_character_name(name: str) -> bool:
    """
    Check whether a candidate string could be a character name.

    This is the SINGLE GATE shared by every extractor. It rejects:
    1. Strings shorter than MIN_NAME_LENGTH characters
    2. Strings not starting with an uppercase letter
    3. All-uppercase strings (abbreviations, shouting)
    4. Strings with digits or punctuation other than spaces and hyphens
    5. Common sentence starters ("The", "And", ...)
    """
    if not isinstance(name, str) or len(name) < MIN_NAME_LENGTH:
        return False

    if not ("A" <= name[0] <= "Z"):
        return False

    if name == name.upper() and len(name) > 1:
        return False

    if _INVALID_NAME_CHARS.search(name):
        return False

    if name in SENTENCE_STARTERS:
        return False

    return True


def _collapse_whitespace(name: str) -> str:
    return " ".join(name.split())


def record_mention(mention_map: MentionMap, name: str, count: int = 1) -> bool:
    """
    Count a candidate name if it passes the acceptance predicate.

    Returns:
        True if the name was accepted and counted
    """
    name = _collapse_whitespace(name)
    if not is_likely_character_name(name):
        return False

    record = mention_map.get(name)
    if record is None:
        record = MentionRecord()
        mention_map[name] = record
    record.mentions += count
    return True


def _record_group(
    pattern: re.Pattern,
    text: str,
    mention_map: MentionMap,
    group: int = 1,
) -> int:
    """Record capture `group` of every non-overlapping match of `pattern`."""
    accepted = 0
    for match in pattern.finditer(text):
        if record_mention(mention_map, match.group(group)):
            accepted += 1
    return accepted


def _alternation(words: tuple) -> str:
    return "|".join(r"\s+".join(re.escape(part) for part in w.split()) for w in words)


# --------------------------------------------------
# Compiled patterns
# --------------------------------------------------

_VERBS = _alternation(DIALOGUE_VERBS)
_ROLES = _alternation(ROLE_NOUNS)
_CUES = _alternation(DIRECT_ADDRESS_CUES)

# "Mary Smith whispered"
DIALOGUE_BEFORE_REGEX = re.compile(rf"\b({NAME_PATTERN})\s(?i:{_VERBS})\b")

# "whispered Mary Smith"
DIALOGUE_AFTER_REGEX = re.compile(rf"\b(?i:{_VERBS})\s({NAME_PATTERN})\b")

# Capitalized phrase after ". " / "! " / "? " or at the start of a line
NAMED_ENTITY_REGEX = re.compile(
    rf"(?:(?<=[.!?])\s+|(?<=\n)[ \t]*)({NAME_PATTERN})\b"
)

CAPITALIZED_REGEX = re.compile(rf"\b({NAME_PATTERN})\b")

SINGLE_CAPITALIZED_REGEX = re.compile(r"\b[A-Z][a-zA-Z]*\b")

DIRECT_ADDRESS_REGEXES = (
    # "Come here, John."  /  'Thank you, Mary'
    re.compile(
        rf"[\"'“‘][^,\"'“”‘’]+,\s+({NAME_PATTERN})"
        r"[.,!?]?[\"'”’]"
    ),
    # "John, please sit down"
    re.compile(rf"\b({NAME_PATTERN}),\s+(?i:{_CUES})\b"),
)

POSSESSIVE_REGEX = re.compile(rf"\b({NAME_PATTERN})['’]s\b")

INTRODUCTION_REGEXES = (
    # "a man named John Smith"
    re.compile(rf"\b(?i:a|the)\s+(?i:{_ROLES})\s+(?i:named)\s+({NAME_PATTERN})\b"),
    # "John Smith was a gentleman"
    re.compile(rf"\b({NAME_PATTERN})\s+(?i:was)\s+(?i:an|a|the)\s+(?i:{_ROLES})\b"),
    # "introduced herself as Mary" / "introduced as Mary" / "introduced herself Mary"
    re.compile(
        rf"\b(?i:introduced)\s+(?i:(?:him|her)self\s+as|(?:him|her)self|as)\s+({NAME_PATTERN})\b"
    ),
    # "called himself Ishmael"
    re.compile(rf"\b(?i:called)\s+(?i:(?:him|her)self)\s+({NAME_PATTERN})\b"),
)


# --------------------------------------------------
# Extractors
# --------------------------------------------------

def extract_from_dialogue(text: str, mention_map: MentionMap) -> int:
    """
    Dialogue attribution: names next to a speech verb.

    Both orientations are scanned independently. A name found in both
    is counted twice.
    """
    before = _record_group(DIALOGUE_BEFORE_REGEX, text, mention_map)
    after = _record_group(DIALOGUE_AFTER_REGEX, text, mention_map)
    return before + after


def extract_named_entities(text: str, mention_map: MentionMap) -> int:
    """Capitalized phrases following sentence-ending punctuation or a line break."""
    return _record_group(NAMED_ENTITY_REGEX, text, mention_map)


def extract_capitalized_words(text: str, mention_map: MentionMap) -> int:
    """Every capitalized phrase of 1-4 tokens. The broadest and noisiest pass."""
    return _record_group(CAPITALIZED_REGEX, text, mention_map)


def analyze_frequency(
    text: str,
    mention_map: MentionMap,
    threshold: int = FREQUENCY_THRESHOLD,
) -> int:
    """
    Frequency analysis over single capitalized words.

    Words passing the acceptance predicate are counted text-wide. Those
    seen at least `threshold` times are added to the map with their full
    count, creating new entries or boosting existing ones.

    Returns:
        Number of frequent words added or boosted
    """
    word_counts: dict[str, int] = {}
    for match in SINGLE_CAPITALIZED_REGEX.finditer(text):
        word = match.group(0)
        if is_likely_character_name(word):
            word_counts[word] = word_counts.get(word, 0) + 1

    frequent = sorted(
        ((w, c) for w, c in word_counts.items() if c >= threshold),
        key=lambda item: -item[1],
    )
    for word, count in frequent:
        record_mention(mention_map, word, count)
    return len(frequent)


def extract_direct_address(text: str, mention_map: MentionMap) -> int:
    """Names addressed directly: quoted "..., Name." and "Name, please"."""
    return sum(
        _record_group(pattern, text, mention_map)
        for pattern in DIRECT_ADDRESS_REGEXES
    )


def extract_possessive_forms(text: str, mention_map: MentionMap) -> int:
    """Possessives with straight or curly apostrophes: "Mary's", "John Smith’s"."""
    return _record_group(POSSESSIVE_REGEX, text, mention_map)


def extract_character_introductions(text: str, mention_map: MentionMap) -> int:
    """
    Introduction phrasings:
    - "a/the <role> named X"
    - "X was a/an/the <role>"
    - "introduced (him|her)self as X"
    - "called (him|her)self X"
    """
    return sum(
        _record_group(pattern, text, mention_map)
        for pattern in INTRODUCTION_REGEXES
    )


# Option name -> extractor, in pipeline order
EXTRACTORS = (
    ("dialogue_attribution", extract_from_dialogue),
    ("named_entity_recognition", extract_named_entities),
    ("capitalized_word_analysis", extract_capitalized_words),
    ("frequency_analysis", analyze_frequency),
    ("direct_address_pattern", extract_direct_address),
    ("possessive_form_detection", extract_possessive_forms),
    ("character_introduction", extract_character_introductions),
)

