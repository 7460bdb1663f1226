"""
Book file reader for .txt, .md, .html, .docx and .rtf files.

Every reader returns plain text ready for the name extraction pipeline.
Failures surface as DocumentReadError; unknown extensions raise
UnsupportedFileTypeError before any bytes are read.
"""

import os
import re

import chardet
from bs4 import BeautifulSoup
from docx import Document as DocxDocument


SUPPORTED_EXTENSIONS = {
    ".txt": "Plain Text",
    ".md": "Markdown",
    ".html": "HTML",
    ".htm": "HTML",
    ".docx": "Microsoft Word Document",
    ".rtf": "Rich Text Format",
}

# RTF groups whose content is metadata, never body text
_RTF_SKIPPED_DESTINATIONS = {
    "fonttbl", "colortbl", "stylesheet", "info", "pict", "header", "footer",
}

_RTF_GROUP_HEAD = re.compile(r"\{\s*\\(\*|[a-zA-Z]+)")

_RTF_TOKEN = re.compile(
    r"\\(?P<literal>[{}\\])"
    r"|\\'(?P<hex>[0-9a-fA-F]{2})"
    # \uN plus the one fallback character that follows it (\uc1)
    r"|\\u(?P<unicode>-?\d+) ?(?:\\'[0-9a-fA-F]{2}|[^\\{}])?"
    r"|\\(?P<word>[a-zA-Z]+)-?\d* ?"
    r"|\\(?P<symbol>.)"
    r"|[{}]"
)

# Control words that stand for text
_RTF_WORD_TEXT = {
    "par": "\n",
    "line": "\n",
    "tab": "\t",
    "lquote": "‘",
    "rquote": "’",
    "ldblquote": "“",
    "rdblquote": "”",
    "emdash": "—",
    "endash": "–",
    "bullet": "•",
}


class DocumentReadError(Exception):
    """Raised when a book file cannot be read."""
    pass


class UnsupportedFileTypeError(DocumentReadError):
    """Raised for files whose extension has no reader."""
    pass


def _extension(file_path: str) -> str:
    return os.path.splitext(file_path)[1].lower()


def is_supported_file_type(file_path: str) -> bool:
    return _extension(file_path) in SUPPORTED_EXTENSIONS


def detect_encoding(file_path: str) -> str:
    """
    Detect the text encoding of a file with chardet.

    Returns:
        Detected encoding, "utf-8" when chardet has no opinion
    """
    try:
        with open(file_path, "rb") as f:
            raw_data = f.read()
    except OSError as e:
        raise DocumentReadError(f"Error detecting encoding: {e}") from e

    result = chardet.detect(raw_data)
    return result["encoding"] or "utf-8"


def _read_text(file_path: str) -> str:
    encoding = detect_encoding(file_path)
    try:
        with open(file_path, "r", encoding=encoding, errors="replace") as f:
            return f.read()
    except (OSError, LookupError) as e:
        raise DocumentReadError(f"Error reading text file: {e}") from e


def _read_html(file_path: str) -> str:
    soup = BeautifulSoup(_read_text(file_path), "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text(separator="\n")


def _read_docx(file_path: str) -> str:
    try:
        doc = DocxDocument(file_path)
    except Exception as e:
        raise DocumentReadError(f"Error parsing .docx file: {e}") from e
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())


def _strip_rtf_destinations(rtf: str) -> str:
    """Drop metadata groups ({\\fonttbl ...}, {\\*\\...}) including nested braces."""
    out = []
    i = 0
    length = len(rtf)
    while i < length:
        if rtf[i] == "{":
            head = _RTF_GROUP_HEAD.match(rtf, i)
            if head and (head.group(1) == "*" or head.group(1) in _RTF_SKIPPED_DESTINATIONS):
                depth = 0
                while i < length:
                    ch = rtf[i]
                    if ch == "\\":
                        i += 2
                        continue
                    if ch == "{":
                        depth += 1
                    elif ch == "}":
                        depth -= 1
                        if depth == 0:
                            i += 1
                            break
                    i += 1
                continue
        out.append(rtf[i])
        i += 1
    return "".join(out)


def _rtf_token(match: re.Match) -> str:
    if match.group("literal"):
        return match.group("literal")
    if match.group("hex"):
        return bytes.fromhex(match.group("hex")).decode("cp1252", errors="replace")
    if match.group("unicode"):
        # Values above 32767 are written as negative numbers
        code = int(match.group("unicode"))
        return chr(code + 65536 if code < 0 else code)
    if match.group("word"):
        return _RTF_WORD_TEXT.get(match.group("word"), "")
    if match.group("symbol") == "~":
        return " "
    return ""


def rtf_to_text(rtf: str) -> str:
    """
    Convert RTF markup to plain text.

    Control words and braces are removed, paragraph breaks become
    newlines and runs of spaces collapse to one. Typographic control
    words (\\rquote, \\ldblquote, \\emdash, ...) and \\uN escapes become
    their characters.
    """
    # Raw line breaks carry no meaning in RTF source
    rtf = rtf.replace("\r", "").replace("\n", "")
    text = _RTF_TOKEN.sub(_rtf_token, _strip_rtf_destinations(rtf))
    lines = [re.sub(r"[ \t]+", " ", line).strip() for line in text.splitlines()]
    return "\n".join(lines).strip()


def read_book_file(file_path: str) -> str:
    """
    Read a book file as plain text.

    Args:
        file_path: Path to a file with one of SUPPORTED_EXTENSIONS

    Returns:
        Plain text content

    Raises:
        UnsupportedFileTypeError: Unknown extension
        DocumentReadError: Missing or unreadable file
    """
    ext = _extension(file_path)
    if not is_supported_file_type(file_path):
        raise UnsupportedFileTypeError(f"Unsupported file format: {ext or file_path}")

    if not os.path.isfile(file_path):
        raise DocumentReadError(f"File not found: {file_path}")

    if ext in (".html", ".htm"):
        return _read_html(file_path)
    if ext == ".docx":
        return _read_docx(file_path)
    if ext == ".rtf":
        return rtf_to_text(_read_text(file_path))
    return _read_text(file_path)
