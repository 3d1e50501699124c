"""Pylint report parser.

Reads the JSON written by ``pylint --output-format=json2``::

    {
      "messages": [
        {"type": "convention", "symbol": "missing-module-docstring",
         "message": "Missing module docstring", "path": "pkg/mod.py",
         "line": 1, "column": 0, "endLine": null, "endColumn": null, ...}
      ],
      "statistics": {...}
    }

Only ``messages`` is used; other top-level keys and unknown message keys are
ignored.
"""

import json
from pathlib import Path
from typing import Any

from pylint_annotate.models import IssueRecord


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ReportError(Exception):
    """Base exception for report loading errors."""


class ReadError(ReportError):
    """Raised when the report file cannot be read."""


class ParseError(ReportError):
    """Raised when the report is not valid JSON or not a pylint report."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_report(path: str) -> list[IssueRecord]:
    """Read *path* and return its messages as issue records.

    Raises:
        ReadError:  missing file, permission denied, not a text file
        ParseError: invalid JSON or unexpected structure
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Unable to read pylint report '{path}': {exc}") from exc
    return parse_report(text, source=path)


def parse_report(text: str, source: str = "<report>") -> list[IssueRecord]:
    """Parse the report content. *source* is only used in error messages."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON in pylint report '{source}': {exc}") from exc

    if not isinstance(data, dict):
        raise ParseError(f"Pylint report '{source}' must be a JSON object.")
    if "messages" not in data:
        raise ParseError(
            f"Pylint report '{source}' has no 'messages' field "
            "(was it generated with --output-format=json2?)"
        )

    messages = data["messages"]
    if not isinstance(messages, list):
        raise ParseError(f"'messages' in pylint report '{source}' must be a list.")

    return [_to_issue(raw, index, source) for index, raw in enumerate(messages)]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _to_issue(raw: Any, index: int, source: str) -> IssueRecord:
    where = f"message #{index} in '{source}'"
    if not isinstance(raw, dict):
        raise ParseError(f"{where} is not an object.")

    path = raw.get("path")
    if not isinstance(path, str) or not path:
        raise ParseError(f"{where} has no 'path'.")

    line = raw.get("line")
    if not _is_int(line) or line < 1:
        raise ParseError(f"{where} has an invalid 'line': {line!r}")

    for key in ("endLine", "column", "endColumn"):
        value = raw.get(key)
        if value is not None and not _is_int(value):
            raise ParseError(f"{where} has an invalid '{key}': {value!r}")

    return IssueRecord.from_message(raw)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
