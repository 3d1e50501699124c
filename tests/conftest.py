"""Shared fixtures.

The suite may itself run inside GitHub Actions, so runner variables are
cleared before every test.
"""

import json
from pathlib import Path

import pytest

from pylint_annotate.config import INPUT_NAMES, input_variable

_RUNNER_VARS = (
    "GITHUB_SHA",
    "GITHUB_REPOSITORY",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
    "GITHUB_OUTPUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _RUNNER_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in INPUT_NAMES:
        monkeypatch.delenv(input_variable(name), raising=False)


def make_message(i: int = 1, type_: str = "convention", **overrides) -> dict:
    """One message as written by pylint --output-format=json2."""
    message = {
        "type": type_,
        "symbol": "missing-function-docstring",
        "message": f"Missing function or method docstring ({i})",
        "messageId": "C0116",
        "confidence": "HIGH",
        "module": "pkg.mod",
        "obj": f"func_{i}",
        "line": i,
        "column": 4,
        "endLine": i,
        "endColumn": 12,
        "path": "pkg/mod.py",
        "absolutePath": "/work/pkg/mod.py",
    }
    message.update(overrides)
    return message


def write_report(tmp_path: Path, messages: list[dict], name: str = "pylint.json") -> Path:
    p = tmp_path / name
    p.write_text(json.dumps({"messages": messages, "statistics": {}}), encoding="utf-8")
    return p
