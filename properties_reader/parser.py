"""Parsing of Java style .properties text into nested documents."""

import re
from pathlib import Path
from typing import Any

Document = dict[str, Any]

CONTINUATION_PATTERN = re.compile(r'\\\r?\n\s*')
LINE_SEPARATOR_PATTERN = re.compile(r'\r?\n')
INTEGER_PATTERN = re.compile(r'^[+-]?[0-9]+$')

COMMENT_PREFIXES = ("#", "!")


def coerce_value(value: str | None) -> int | bool | str:
    """
    Convert a raw property value to int, bool or str.

    Conversion rules:
    - Whole base-10 integer (optional sign) → int
    - "true"/"false" in any case → bool
    - Everything else → trimmed str (missing values become "")

    Examples:
        "42" → 42
        " -7 " → -7
        " True " → True
        "1.5" → "1.5"
    """
    if value is None:
        return ""

    stripped = value.strip()

    if INTEGER_PATTERN.match(stripped):
        return int(stripped, 10)

    lowered = stripped.lower()
    if lowered in ("true", "false"):
        return lowered == "true"

    return stripped


def join_continuations(text: str) -> str:
    """Join lines ending in a backslash with the following line, dropping its indentation."""
    return CONTINUATION_PATTERN.sub("", text)


def _split_assignment(line: str) -> tuple[str, str]:
    key, sep, value = line.partition("=")
    if not sep:
        return key.strip(), ""
    return key.strip(), value.strip()


def _assign(document: Document, key: str, value: int | bool | str) -> None:
    segments = key.split(".")

    node = document
    for segment in segments[:-1]:
        # A scalar sitting on the path is replaced by a new document
        if not isinstance(node.get(segment), dict):
            node[segment] = {}
        node = node[segment]

    node[segments[-1]] = value


class PropertiesParser:
    """Converts properties text into nested documents"""

    @staticmethod
    def parse(text: str | None) -> Document:
        """
        Parse properties text into a nested document.

        Dotted keys create nested documents, values are coerced with
        coerce_value. Malformed lines are parsed best-effort, never rejected.

        Example:
            parse("a=1\\nc.d=hello") -> {"a": 1, "c": {"d": "hello"}}
        """
        document: Document = {}
        if not text:
            return document

        for line in LINE_SEPARATOR_PATTERN.split(join_continuations(text)):
            line = line.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                continue

            key, value = _split_assignment(line)
            _assign(document, key, coerce_value(value))

        return document

    @staticmethod
    def parse_file(path: Path, encoding: str = "utf-8") -> Document:
        """Read and parse a properties file"""
        return PropertiesParser.parse(Path(path).read_text(encoding=encoding))
