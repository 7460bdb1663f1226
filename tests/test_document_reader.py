"""
Tests for reading book files of each supported format.
"""

import pytest
from docx import Document

from document_reader import (
    DocumentReadError,
    UnsupportedFileTypeError,
    is_supported_file_type,
    read_book_file,
    rtf_to_text,
)
from name_extraction import extract_characters_from_text


def test_supported_file_types():
    assert is_supported_file_type("book.txt")
    assert is_supported_file_type("BOOK.DOCX")
    assert is_supported_file_type("chapter.htm")
    assert not is_supported_file_type("book.pdf")
    assert not is_supported_file_type("README")


def test_read_plain_text(tmp_path):
    path = tmp_path / "book.txt"
    path.write_text("Mary said hello.\nJohn replied.", encoding="utf-8")
    assert read_book_file(str(path)) == "Mary said hello.\nJohn replied."


def test_read_markdown_as_text(tmp_path):
    path = tmp_path / "book.md"
    path.write_text("# Chapter One\n\nMary said hello.", encoding="utf-8")
    assert "Mary said hello." in read_book_file(str(path))


def test_read_html_drops_markup_and_scripts(tmp_path):
    path = tmp_path / "book.html"
    path.write_text(
        "<html><head><style>p { color: red; }</style></head>"
        "<body><p>Mary said hello.</p><script>var x = 1;</script></body></html>",
        encoding="utf-8",
    )

    text = read_book_file(str(path))

    assert "Mary said hello." in text
    assert "<p>" not in text
    assert "var x" not in text
    assert "color" not in text


def test_read_docx_paragraphs(tmp_path):
    path = tmp_path / "book.docx"
    doc = Document()
    doc.add_paragraph("Mary said hello.")
    doc.add_paragraph("")
    doc.add_paragraph("John replied.")
    doc.save(str(path))

    assert read_book_file(str(path)) == "Mary said hello.\nJohn replied."


def test_read_rtf(tmp_path):
    path = tmp_path / "book.rtf"
    path.write_text(
        r"{\rtf1\ansi{\fonttbl{\f0 Times New Roman;}}\f0 Mary said hello.\par John replied.\par}",
        encoding="ascii",
    )
    assert read_book_file(str(path)) == "Mary said hello.\nJohn replied."


def test_rtf_escapes_and_ignorable_groups():
    rtf = r"{\rtf1{\*\generator Writer;}Caf\'e9 \{open\} back\\slash}"
    assert rtf_to_text(rtf) == "Café {open} back\\slash"


def test_rtf_typographic_quotes_and_dashes():
    rtf = r"{\rtf1\ansi John\rquote s hat. \ldblquote Hi, Mary.\rdblquote\emdash gone\endash now}"
    assert rtf_to_text(rtf) == "John’s hat. “Hi, Mary.”—gone–now"


def test_rtf_possessive_survives_extraction():
    text = rtf_to_text(r"{\rtf1\ansi John\rquote s hat. \ldblquote Hi, Mary.\rdblquote}")

    names = {c.full_name for c in extract_characters_from_text(text)}

    assert "John" in names
    assert "Mary" in names
    assert "Johns" not in names


def test_rtf_unicode_escape_skips_fallback_character():
    assert rtf_to_text(r"{\rtf1\ansi Zo\u235? said hello.}") == "Zoë said hello."
    assert rtf_to_text(r"{\rtf1\ansi Zo\u235\'eb said hello.}") == "Zoë said hello."
    # Code points above 32767 are stored as negative numbers
    assert rtf_to_text(r"{\rtf1\ansi \u-3913 ?}") == chr(61623)


def test_unsupported_extension():
    with pytest.raises(UnsupportedFileTypeError):
        read_book_file("book.pdf")


def test_extension_check_is_case_insensitive(tmp_path):
    path = tmp_path / "BOOK.TXT"
    path.write_text("Mary said hello.", encoding="utf-8")
    assert read_book_file(str(path)) == "Mary said hello."

    with pytest.raises(UnsupportedFileTypeError):
        read_book_file(str(tmp_path / "BOOK.PDF"))


def test_missing_file(tmp_path):
    with pytest.raises(DocumentReadError):
        read_book_file(str(tmp_path / "missing.txt"))


def test_corrupt_docx(tmp_path):
    path = tmp_path / "broken.docx"
    path.write_bytes(b"not a zip archive")
    with pytest.raises(DocumentReadError):
        read_book_file(str(path))
