"""
Fallback Name Extraction

A reduced-capability extractor for callers that cannot use the full
pipeline in name_extraction.py. It runs only four passes, each over
SINGLE capitalized words:

- dialogue attribution (six speech verbs)
- capitalized word analysis
- named entity heuristic (word after sentence-ending punctuation)
- quoted direct address

Every candidate goes through the same acceptance predicate as the main
pipeline. There is no common-word filter, no variant combination and no
title detection: title and last_name are always empty, variants always
empty. Minimum-mentions thresholds are the caller's concern.
"""

import re
from typing import Any, Optional

from dictionaries.pattern_dictionary import FALLBACK_DIALOGUE_VERBS, FALLBACK_SKIP_WORDS
from name_extraction import VERBOSE, CharacterCandidate, ExtractionOptions, rank_candidates
from pattern_extractors import MentionMap, record_mention


_WORD = r"[A-Z][a-z]+"
_VERBS = "|".join(FALLBACK_DIALOGUE_VERBS)

FALLBACK_PATTERNS = {
    "dialogue_attribution": (
        re.compile(rf"\b({_WORD})\s+(?i:{_VERBS})\b"),
        re.compile(rf"\b(?i:{_VERBS})\s+({_WORD})\b"),
    ),
    "capitalized_word_analysis": (
        re.compile(rf"\b({_WORD})\b"),
    ),
    "named_entity_recognition": (
        re.compile(rf"(?<=[.!?])\s+({_WORD})\b"),
    ),
    "direct_address_pattern": (
        re.compile(rf"[\"'“‘][^\"'“”‘’]+,\s+({_WORD})[,.!?][\"'”’]"),
    ),
}


def _run_fallback_pass(option_name: str, text: str, mention_map: MentionMap) -> int:
    accepted = 0
    for pattern in FALLBACK_PATTERNS[option_name]:
        for match in pattern.finditer(text):
            word = match.group(1)
            if option_name == "capitalized_word_analysis" and word in FALLBACK_SKIP_WORDS:
                continue
            if record_mention(mention_map, word):
                accepted += 1
    return accepted


def fallback_name_extraction(
    text: Optional[str],
    options: Any = None,
    verbose: Optional[bool] = None,
) -> list[CharacterCandidate]:
    """
    Extract single-word candidate names with the reduced pass set.

    Args:
        text: Full book text. None or empty returns [].
        options: Same forms accepted by extract_characters_from_text.
                 Only the four fallback passes are consulted.
        verbose: Print per-pass match counts. Defaults to STORYGUARD_VERBOSE.

    Returns:
        CharacterCandidate list, mentions descending
    """
    if verbose is None:
        verbose = VERBOSE

    if not isinstance(text, str) or not text.strip():
        return []

    opts = ExtractionOptions.from_value(options)
    if verbose:
        print("[Name Extractor] Using fallback name extraction")

    mention_map: MentionMap = {}
    for option_name in FALLBACK_PATTERNS:
        if not getattr(opts, option_name):
            continue
        accepted = _run_fallback_pass(option_name, text, mention_map)
        if verbose:
            print(f"[Name Extractor] Fallback {option_name}: {accepted} matches")

    candidates = [
        CharacterCandidate(
            full_name=name,
            title="",
            first_name=name,
            last_name="",
            mentions=record.mentions,
            variants=(),
        )
        for name, record in mention_map.items()
    ]
    return rank_candidates(candidates)
