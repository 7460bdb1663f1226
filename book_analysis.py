"""
Book Analysis

PURPOSE:
The caller layer around the name extraction pipeline. Everything here
CONSUMES the CharacterCandidate contract of name_extraction.py; nothing
here changes how names are detected.

============================================================
WHAT A BOOK ANALYSIS PRODUCES
============================================================

1. FILE STATISTICS
   Word, character, line and sentence counts plus a reading-time estimate.

2. CHARACTER CANDIDATES
   The pipeline output (or the fallback output when requested), cut to
   candidates with at least `min_mentions` mentions, optionally passed
   through the display-title normalisation below.

3. ANALYSIS REPORT (optional)
   The above serialised as JSON and Markdown under REPORTS_DIR.
   Reports are timestamped and NEVER overwrite an earlier report.

============================================================
DISPLAY-TITLE NORMALISATION
============================================================

An opt-in post-pass for names the decomposer leaves awkward:

    "Mayor Thompson"  -> title "Mayor", first name "Thompson"
    "Old Tom"         -> title "Old",   first name "Tom"

Any candidate whose full name starts with a DISPLAY_TITLES entry and a
space gets that title and the REST of the name as first name; its last
name is cleared. Other candidates only lose a last name that merely
repeats their first name.
"""

import json
import math
import os
import re
from dataclasses import dataclass, field, asdict, replace
from datetime import datetime, timezone
from typing import Any, Optional

from dotenv import load_dotenv

from dictionaries.common_word_dictionary import COMMON_WORDS, CRITICAL_WORDS
from dictionaries.title_dictionary import DISPLAY_TITLES
from name_extraction import (
    CharacterCandidate,
    ExtractionOptions,
    extract_characters_from_text,
)
from fallback_extraction import fallback_name_extraction

load_dotenv()


# --------------------------------------------------
# Configuration
# --------------------------------------------------

REPORTS_DIR = os.getenv("STORYGUARD_REPORTS_DIR", "data/analysis_reports")

DEFAULT_MIN_MENTIONS = int(os.getenv("STORYGUARD_MIN_MENTIONS", "3"))

# Reading speed used for the reading-time estimate
WORDS_PER_MINUTE = 200

_LOWER_COMMON_WORDS = frozenset(word.lower() for word in COMMON_WORDS)


# --------------------------------------------------
# Data structures
# --------------------------------------------------

@dataclass
class FileStats:
    word_count: int = 0
    character_count: int = 0
    line_count: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: float = 0.0
    estimated_read_time: int = 0  # minutes


@dataclass
class BookAnalysis:
    """
    Result of analysing one book text.

    candidates holds only the candidates at or above min_mentions;
    total_detected counts everything the extractor proposed.
    """
    file_stats: FileStats
    options: ExtractionOptions
    min_mentions: int
    used_fallback: bool
    total_detected: int
    candidates: list[CharacterCandidate] = field(default_factory=list)


@dataclass
class AnalysisReport:
    report_generated_at: str
    source_name: str
    methods_used: list[str]
    min_mentions: int
    used_fallback: bool
    file_stats: FileStats
    total_detected: int
    character_count: int
    characters: list[dict[str, Any]] = field(default_factory=list)


# --------------------------------------------------
# File statistics
# --------------------------------------------------

def calculate_file_stats(text: Optional[str]) -> FileStats:
    """
    Basic statistics of a book text. Empty or missing text gives zeros.

    Sentences are the non-blank runs between ".", "!" and "?".
    Reading time assumes WORDS_PER_MINUTE and is rounded up.
    """
    if not text:
        return FileStats()

    word_count = len(text.split())
    line_count = len(re.split(r"\r\n|\r|\n", text))
    sentence_count = len([s for s in re.split(r"[.!?]+", text) if s.strip()])

    avg_words_per_sentence = (
        round(word_count / sentence_count, 1) if sentence_count else 0.0
    )

    return FileStats(
        word_count=word_count,
        character_count=len(text),
        line_count=line_count,
        sentence_count=sentence_count,
        avg_words_per_sentence=avg_words_per_sentence,
        estimated_read_time=math.ceil(word_count / WORDS_PER_MINUTE),
    )


# --------------------------------------------------
# Candidate post-processing
# --------------------------------------------------

def filter_by_min_mentions(
    candidates: list[CharacterCandidate],
    min_mentions: int = DEFAULT_MIN_MENTIONS,
) -> list[CharacterCandidate]:
    """Keep candidates with at least `min_mentions` mentions, order preserved."""
    return [c for c in candidates if c.mentions >= min_mentions]


def _display_title(full_name: str) -> Optional[str]:
    for title in DISPLAY_TITLES:
        if full_name.startswith(title + " "):
            return title
    return None


def normalize_title_names(candidates: list[CharacterCandidate]) -> list[CharacterCandidate]:
    """
    Apply display-title normalisation (see module docstring).

    Returns new candidates; the input records are not modified.
    """
    normalized = []
    for candidate in candidates:
        title = _display_title(candidate.full_name)
        if title is not None:
            candidate = replace(
                candidate,
                title=title,
                first_name=candidate.full_name[len(title) + 1:],
                last_name="",
            )
        elif candidate.first_name and candidate.last_name == candidate.first_name:
            candidate = replace(candidate, last_name="")
        normalized.append(candidate)
    return normalized


# --------------------------------------------------
# Main analysis
# --------------------------------------------------

def analyze_book_text(
    text: Optional[str],
    options: Any = None,
    min_mentions: Optional[int] = None,
    use_fallback: bool = False,
    normalize_titles: bool = False,
    verbose: Optional[bool] = None,
) -> BookAnalysis:
    """
    Analyse a book text end to end.

    Args:
        text: Full book text
        options: Extraction options (ExtractionOptions, mapping, options-like
                 object or None)
        min_mentions: Threshold for kept candidates. Defaults to
                      STORYGUARD_MIN_MENTIONS.
        use_fallback: Use the reduced-capability fallback extractor
        normalize_titles: Apply display-title normalisation
        verbose: Passed through to the extractor

    Returns:
        BookAnalysis
    """
    opts = ExtractionOptions.from_value(options)
    if min_mentions is None:
        min_mentions = DEFAULT_MIN_MENTIONS

    if use_fallback:
        detected = fallback_name_extraction(text, opts, verbose=verbose)
    else:
        detected = extract_characters_from_text(text, opts, verbose=verbose)

    kept = filter_by_min_mentions(detected, min_mentions)
    if normalize_titles:
        kept = normalize_title_names(kept)

    return BookAnalysis(
        file_stats=calculate_file_stats(text),
        options=opts,
        min_mentions=min_mentions,
        used_fallback=use_fallback,
        total_detected=len(detected),
        candidates=kept,
    )


# --------------------------------------------------
# First-name export
# --------------------------------------------------

def _is_exportable_first_name(name: str) -> bool:
    if not name or not name.strip():
        return False
    lowered = name.lower()
    if lowered in _LOWER_COMMON_WORDS or lowered in CRITICAL_WORDS:
        return False
    if len(name) <= 2:
        return False
    if name == name.upper():
        return False
    return True


def extract_first_names(candidates: list[CharacterCandidate]) -> list[str]:
    """
    Sorted, de-duplicated first names suitable for a name list.

    Drops common and critical words, names of two characters or fewer,
    and all-caps tokens.
    """
    names = {c.first_name for c in candidates if _is_exportable_first_name(c.first_name)}
    return sorted(names)


def save_first_names(names: list[str], path: str) -> str:
    """Write one name per line. Returns the path written."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(names))
    return path


# --------------------------------------------------
# Reports
# --------------------------------------------------

def build_analysis_report(analysis: BookAnalysis, source_name: str) -> AnalysisReport:
    return AnalysisReport(
        report_generated_at=datetime.now(timezone.utc).isoformat(),
        source_name=source_name,
        methods_used=analysis.options.active_methods(),
        min_mentions=analysis.min_mentions,
        used_fallback=analysis.used_fallback,
        file_stats=analysis.file_stats,
        total_detected=analysis.total_detected,
        character_count=len(analysis.candidates),
        characters=[c.to_dict() for c in analysis.candidates],
    )


def report_to_json(report: AnalysisReport) -> str:
    return json.dumps(asdict(report), indent=2, ensure_ascii=False, sort_keys=True)


def report_to_markdown(report: AnalysisReport) -> str:
    """
    Human-readable summary of an AnalysisReport.

    This is a DERIVED view of the same data as the JSON report.
    """
    stats = report.file_stats
    lines = []

    lines.append("# Book Analysis Report")
    lines.append("")
    lines.append(f"**Source:** {report.source_name}")
    lines.append(f"**Report Generated:** {report.report_generated_at}")
    lines.append(f"**Extractor:** {'fallback' if report.used_fallback else 'full pipeline'}")
    lines.append("")

    lines.append("## File Statistics")
    lines.append("")
    lines.append("| Metric | Value |")
    lines.append("|--------|-------|")
    lines.append(f"| Words | {stats.word_count:,} |")
    lines.append(f"| Characters | {stats.character_count:,} |")
    lines.append(f"| Lines | {stats.line_count:,} |")
    lines.append(f"| Avg. Words per Sentence | {stats.avg_words_per_sentence} |")
    lines.append(f"| Estimated Reading Time | {stats.estimated_read_time} min |")
    lines.append("")

    lines.append("## Detection Methods")
    lines.append("")
    for method in report.methods_used:
        lines.append(f"- {method}")
    if not report.methods_used:
        lines.append("- (none)")
    lines.append("")

    lines.append("## Characters")
    lines.append("")
    lines.append(
        f"{report.character_count} of {report.total_detected} detected names "
        f"have at least {report.min_mentions} mentions."
    )
    lines.append("")
    if report.characters:
        lines.append("| Name | Title | First | Last | Mentions | Variants |")
        lines.append("|------|-------|-------|------|----------|----------|")
        for character in report.characters:
            variants = ", ".join(character["variants"])
            lines.append(
                f"| {character['fullName']} | {character['title']} "
                f"| {character['firstName']} | {character['lastName']} "
                f"| {character['mentions']} | {variants} |"
            )
        lines.append("")

    return "\n".join(lines)


def _report_basename(source_name: str) -> str:
    stem = os.path.splitext(os.path.basename(source_name))[0] or "book"
    stem = re.sub(r"[^\w.-]+", "_", stem)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
    return f"{stem}_{timestamp}"


def _unused_base_path(directory: str, base_name: str) -> str:
    """Base path whose .json and .md files do not exist yet."""
    candidate = os.path.join(directory, base_name)
    suffix = 1
    while os.path.exists(candidate + ".json") or os.path.exists(candidate + ".md"):
        candidate = os.path.join(directory, f"{base_name}-{suffix}")
        suffix += 1
    return candidate


def save_analysis_report(
    report: AnalysisReport,
    reports_dir: Optional[str] = None,
) -> tuple[Optional[str], Optional[str]]:
    """
    Save an analysis report as both JSON and Markdown.

    Filenames are built from the source name and a UTC timestamp.
    Never overwrites existing reports.

    Returns:
        Tuple of (json_path, markdown_path), with None for any failures.

    This function NEVER raises exceptions - it logs errors and returns None.
    """
    json_path = None
    md_path = None
    directory = reports_dir or REPORTS_DIR

    try:
        os.makedirs(directory, exist_ok=True)
        base_path = _unused_base_path(directory, _report_basename(report.source_name))

        try:
            with open(base_path + ".json", "w", encoding="utf-8") as f:
                f.write(report_to_json(report))
            json_path = base_path + ".json"
        except Exception as e:
            print(f"  ⚠️ Failed to save JSON report: {e}")

        try:
            with open(base_path + ".md", "w", encoding="utf-8") as f:
                f.write(report_to_markdown(report))
            md_path = base_path + ".md"
        except Exception as e:
            print(f"  ⚠️ Failed to save Markdown report: {e}")

    except Exception as e:
        print(f"  ⚠️ Failed to create reports directory: {e}")

    return json_path, md_path
