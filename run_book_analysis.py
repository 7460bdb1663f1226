"""
StoryGuard Book Analysis CLI

Reads a book file, proposes its character names and prints a summary.

    python run_book_analysis.py "books/The Voyage.txt"
    python run_book_analysis.py book.docx --min-mentions 5 --no-frequency-analysis
    python run_book_analysis.py book.rtf --fallback --first-names names.txt

Every extraction option is ON by default; each has a --no-<option> flag.
At least one detection method must stay enabled.

Exit status is 1 when the book cannot be read. A report that fails to
save is reported and does not change the exit status.
"""

import argparse
import os
import sys
from typing import Optional

from book_analysis import (
    DEFAULT_MIN_MENTIONS,
    BookAnalysis,
    analyze_book_text,
    build_analysis_report,
    extract_first_names,
    save_analysis_report,
    save_first_names,
)
from document_reader import DocumentReadError, SUPPORTED_EXTENSIONS, read_book_file
from name_extraction import OPTION_ALIASES, OPTION_LABELS, ExtractionOptions


def _option_flag(option_name: str) -> str:
    return "--no-" + option_name.replace("_", "-")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="StoryGuard Book Analysis - propose character names from a book file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
SUPPORTED FILES:
  {", ".join(sorted(SUPPORTED_EXTENSIONS))}

Examples:
  %(prog)s book.txt                           # All detection methods
  %(prog)s book.txt --min-mentions 5          # Stricter threshold
  %(prog)s book.txt --no-capitalized-word-analysis --no-frequency-analysis
  %(prog)s book.txt --first-names names.txt   # Export first names
        """,
    )

    parser.add_argument("book", help="Path to the book file")

    parser.add_argument(
        "--min-mentions",
        type=int,
        default=DEFAULT_MIN_MENTIONS,
        help=f"Minimum mentions for a name to be kept (default: {DEFAULT_MIN_MENTIONS})",
    )

    options_group = parser.add_argument_group("Extraction Options (disable flags)")
    for option_name in OPTION_ALIASES:
        options_group.add_argument(
            _option_flag(option_name),
            dest=option_name,
            action="store_false",
            help=f"Disable {OPTION_LABELS[option_name]}",
        )

    parser.add_argument(
        "--fallback",
        action="store_true",
        help="Use the reduced-capability fallback extractor",
    )
    parser.add_argument(
        "--normalize-titles",
        action="store_true",
        help="Split display titles (Mayor, Old, Lady, ...) from first names",
    )
    parser.add_argument(
        "--first-names",
        metavar="PATH",
        help="Write the sorted first names of kept characters to PATH",
    )
    parser.add_argument(
        "--no-report",
        action="store_true",
        help="Do not save the JSON/Markdown analysis report",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=20,
        metavar="N",
        help="Number of characters to print (default: 20)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print per-stage extraction progress",
    )

    args = parser.parse_args(argv)

    if not options_from_args(args).has_detection_method():
        parser.error("select at least one detection method")
    if args.min_mentions < 1:
        parser.error("--min-mentions must be at least 1")

    return args


def options_from_args(args: argparse.Namespace) -> ExtractionOptions:
    return ExtractionOptions(**{name: getattr(args, name) for name in OPTION_ALIASES})


def print_summary(analysis: BookAnalysis, top: int) -> None:
    stats = analysis.file_stats

    print("\n" + "=" * 50)
    print("[Book Analysis] File Statistics")
    print("=" * 50)
    print(f"  Words: {stats.word_count:,}")
    print(f"  Characters: {stats.character_count:,}")
    print(f"  Lines: {stats.line_count:,}")
    print(f"  Avg. Words per Sentence: {stats.avg_words_per_sentence}")
    print(f"  Estimated Reading Time: {stats.estimated_read_time} min")

    print("\n" + "=" * 50)
    print("[Book Analysis] Detection Methods")
    print("=" * 50)
    for method in analysis.options.active_methods():
        print(f"  ✓ {method}")
    if analysis.used_fallback:
        print("  (fallback extractor)")

    print("\n" + "=" * 50)
    print(f"[Book Analysis] Characters ({len(analysis.candidates)} of "
          f"{analysis.total_detected} with >= {analysis.min_mentions} mentions)")
    print("=" * 50)
    for candidate in analysis.candidates[:top]:
        line = f"  {candidate.mentions:>5}  {candidate.full_name}"
        if candidate.variants:
            line += f"  (also: {', '.join(candidate.variants)})"
        print(line)
    if len(analysis.candidates) > top:
        print(f"  ... {len(analysis.candidates) - top} more")


def run_book_analysis(args: argparse.Namespace) -> int:
    """
    Run one analysis from parsed arguments.

    Returns:
        Process exit status
    """
    print(f"=== Starting book analysis: {args.book} ===")

    try:
        text = read_book_file(args.book)
    except DocumentReadError as e:
        print(f"  ❌ Could not read book: {e}")
        return 1

    analysis = analyze_book_text(
        text,
        options=options_from_args(args),
        min_mentions=args.min_mentions,
        use_fallback=args.fallback,
        normalize_titles=args.normalize_titles,
        verbose=args.verbose or None,
    )
    print_summary(analysis, args.top)

    if args.first_names:
        names = extract_first_names(analysis.candidates)
        try:
            path = save_first_names(names, args.first_names)
            print(f"\n  ✓ {len(names)} first names written to {path}")
        except OSError as e:
            print(f"\n  ⚠️ Failed to write first names: {e}")

    if not args.no_report:
        report = build_analysis_report(analysis, os.path.basename(args.book))
        json_path, md_path = save_analysis_report(report)
        if json_path:
            print(f"\n  ✓ JSON report: {json_path}")
        if md_path:
            print(f"  ✓ Markdown report: {md_path}")

    print("\n=== Book analysis complete ===")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    return run_book_analysis(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
