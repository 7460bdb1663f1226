"""
Character Name Extraction Pipeline

PURPOSE:
Given raw book text and a set of boolean options, propose the character
names it contains, ranked by how often they were detected.

============================================================
PIPELINE
============================================================

1. Pattern extractors (pattern_extractors.py), each toggled by an option:
   dialogue attribution, named entity heuristic, capitalized words,
   frequency analysis, direct address, possessive forms, introductions
2. Common-word filter (name_variants.py)
3. Name-variant combiner (name_variants.py)
4. Name decomposer (name_parsing.py)
5. Ranker: stable sort by mentions, descending

A disabled stage is SKIPPED, not run with an empty effect.

============================================================
OUTPUT CONTRACT
============================================================

A list of CharacterCandidate records, mentions descending. Callers that
need a minimum-mentions threshold apply it themselves (book_analysis.py
does). Same text + same options always gives the same list in the same
order.

Empty or missing text returns []. Malformed options fall back to their
defaults. Nothing in this pipeline raises for bad input.
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from pattern_extractors import EXTRACTORS, MentionMap
from name_variants import filter_common_words, combine_name_variants
from name_parsing import decompose_name

load_dotenv()


# --------------------------------------------------
# Configuration
# --------------------------------------------------

# Print per-stage progress when set to "1"
VERBOSE = os.getenv("STORYGUARD_VERBOSE", "0") == "1"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


# --------------------------------------------------
# Options
# --------------------------------------------------

@dataclass(frozen=True)
class ExtractionOptions:
    """
    Stage toggles for one extraction run. Every option defaults to True.

    The first seven select pattern extractors; title_detection controls
    the decomposer; the last two toggle the post-processing stages.
    """
    dialogue_attribution: bool = True
    named_entity_recognition: bool = True
    capitalized_word_analysis: bool = True
    frequency_analysis: bool = True
    title_detection: bool = True
    direct_address_pattern: bool = True
    possessive_form_detection: bool = True
    character_introduction: bool = True
    combine_name_variants: bool = True
    filter_common_words: bool = True

    @classmethod
    def from_value(cls, value: Any) -> "ExtractionOptions":
        """
        Normalise any options-like value.

        Accepts None, an ExtractionOptions, a mapping, or any object with
        option attributes (another dataclass, a Namespace). Keys and
        attributes may use the snake_case names or the camelCase names of
        the external contract ("dialogueAttribution"). Unknown keys are
        ignored; values that cannot be read as a boolean use the default.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()

        if isinstance(value, Mapping):
            def lookup(name, alias):
                return value.get(name, value.get(alias))
        else:
            def lookup(name, alias):
                return getattr(value, name, getattr(value, alias, None))

        resolved = {}
        for f in fields(cls):
            raw = lookup(f.name, OPTION_ALIASES[f.name])
            resolved[f.name] = _coerce_flag(raw, f.default)
        return cls(**resolved)

    def has_detection_method(self) -> bool:
        """True if at least one pattern extractor is enabled."""
        return any(getattr(self, name) for name, _ in EXTRACTORS)

    def active_methods(self) -> list[str]:
        """Human-readable labels of the enabled stages, in pipeline order."""
        return [
            label for name, label in OPTION_LABELS.items()
            if getattr(self, name)
        ]

    def to_dict(self) -> dict[str, bool]:
        """Options keyed by their camelCase contract names."""
        return {OPTION_ALIASES[f.name]: getattr(self, f.name) for f in fields(self)}


# Attribute name -> camelCase name of the external contract
OPTION_ALIASES = {
    "dialogue_attribution": "dialogueAttribution",
    "named_entity_recognition": "namedEntityRecognition",
    "capitalized_word_analysis": "capitalizedWordAnalysis",
    "frequency_analysis": "frequencyAnalysis",
    "title_detection": "titleDetection",
    "direct_address_pattern": "directAddressPattern",
    "possessive_form_detection": "possessiveFormDetection",
    "character_introduction": "characterIntroduction",
    "combine_name_variants": "combineNameVariants",
    "filter_common_words": "filterCommonWords",
}

OPTION_LABELS = {
    "dialogue_attribution": "Dialogue Attribution",
    "named_entity_recognition": "Named Entity Recognition",
    "capitalized_word_analysis": "Capitalized Word Analysis",
    "frequency_analysis": "Frequency Analysis",
    "title_detection": "Title Detection",
    "direct_address_pattern": "Direct Address",
    "possessive_form_detection": "Possessive Form",
    "character_introduction": "Character Introduction",
    "combine_name_variants": "Name Variants Combined",
    "filter_common_words": "Common Words Filtered",
}


def _coerce_flag(raw: Any, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default


# --------------------------------------------------
# Output record
# --------------------------------------------------

@dataclass(frozen=True)
class CharacterCandidate:
    """
    One detected character. Immutable; callers that need to adjust a
    candidate use dataclasses.replace() on a copy.
    """
    full_name: str
    title: str
    first_name: str
    last_name: str
    mentions: int
    variants: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Record keyed by the camelCase names of the external contract."""
        return {
            "fullName": self.full_name,
            "title": self.title,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "mentions": self.mentions,
            "variants": list(self.variants),
        }


# --------------------------------------------------
# Pipeline stages
# --------------------------------------------------

def _log(verbose: bool, message: str) -> None:
    if verbose:
        print(f"[Name Extractor] {message}")


def build_mention_map(
    text: str,
    options: ExtractionOptions,
    verbose: bool = False,
) -> MentionMap:
    """
    Run the enabled extractors, then the filter, then the combiner.

    Returns:
        The mention map ready for decomposition
    """
    mention_map: MentionMap = {}

    for option_name, extractor in EXTRACTORS:
        if not getattr(options, option_name):
            continue
        accepted = extractor(text, mention_map)
        _log(verbose, f"{OPTION_LABELS[option_name]}: {accepted} matches")

    if options.filter_common_words:
        removed = filter_common_words(mention_map)
        _log(verbose, f"Common-word filter removed {len(removed)} entries")

    if options.combine_name_variants:
        before = len(mention_map)
        combine_name_variants(mention_map)
        _log(verbose, f"Variant combiner merged {before - len(mention_map)} entries")

    return mention_map


def decompose_mentions(
    mention_map: MentionMap,
    detect_titles: bool = True,
) -> list[CharacterCandidate]:
    """Turn each mention map entry into a CharacterCandidate, in map order."""
    candidates = []
    for full_name, record in mention_map.items():
        parts = decompose_name(full_name, detect_titles=detect_titles)
        candidates.append(CharacterCandidate(
            full_name=full_name,
            title=parts.title,
            first_name=parts.first_name,
            last_name=parts.last_name,
            mentions=record.mentions,
            variants=tuple(record.variants),
        ))
    return candidates


def rank_candidates(candidates: list[CharacterCandidate]) -> list[CharacterCandidate]:
    """Stable sort by mentions, descending. Ties keep their input order."""
    return sorted(candidates, key=lambda c: -c.mentions)


# --------------------------------------------------
# Main entry point
# --------------------------------------------------

def extract_characters_from_text(
    text: Optional[str],
    options: Any = None,
    verbose: Optional[bool] = None,
) -> list[CharacterCandidate]:
    """
    Extract candidate character names from book text.

    Args:
        text: Full book text. None or empty returns [].
        options: ExtractionOptions, a mapping of option flags, or None
                 for all-defaults
        verbose: Print per-stage progress. Defaults to STORYGUARD_VERBOSE.

    Returns:
        CharacterCandidate list, mentions descending
    """
    if verbose is None:
        verbose = VERBOSE

    if not isinstance(text, str) or not text.strip():
        return []

    opts = ExtractionOptions.from_value(options)
    _log(verbose, f"Starting extraction on {len(text)} characters "
                  f"({', '.join(opts.active_methods()) or 'no methods'})")

    mention_map = build_mention_map(text, opts, verbose=verbose)
    candidates = decompose_mentions(mention_map, detect_titles=opts.title_detection)

    _log(verbose, f"Found {len(candidates)} potential characters")
    return rank_candidates(candidates)
