"""Tests for pylint_annotate/checks/annotations.py"""

import pytest

from pylint_annotate.checks.annotations import (
    MAX_ANNOTATIONS,
    classify,
    map_annotations,
    to_annotation,
    truncate,
)
from pylint_annotate.models import IssueRecord


def _issue(line=1, end_line=None, column=None, end_column=None, type_="convention") -> IssueRecord:
    return IssueRecord(
        path="pkg/mod.py", line=line, message="msg", type=type_,
        end_line=end_line, column=column, end_column=end_column,
    )


# ---------------------------------------------------------------------------
# classify()
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("message_type,level", [
    ("convention", "notice"),
    ("warning",    "warning"),
    ("error",      "failure"),
    ("refactor",   "notice"),
    ("fatal",      "notice"),
    ("info",       "notice"),
    ("bogus",      "notice"),
    (None,         "notice"),
])
def test_classify(message_type, level):
    assert classify(message_type) == level


# ---------------------------------------------------------------------------
# to_annotation() — lines
# ---------------------------------------------------------------------------

def test_end_line_defaults_to_line():
    a = to_annotation(_issue(line=7))
    assert a.start_line == 7
    assert a.end_line == 7


def test_end_line_kept_when_present():
    a = to_annotation(_issue(line=7, end_line=9))
    assert a.end_line == 9


def test_level_and_message_carried_over():
    a = to_annotation(_issue(type_="error"))
    assert a.annotation_level == "failure"
    assert a.message == "msg"
    assert a.path == "pkg/mod.py"


# ---------------------------------------------------------------------------
# to_annotation() — columns
# ---------------------------------------------------------------------------

def test_single_line_keeps_columns():
    a = to_annotation(_issue(line=3, end_line=3, column=4, end_column=10))
    assert a.start_column == 4
    assert a.end_column == 10


def test_end_column_defaults_to_column():
    a = to_annotation(_issue(line=3, column=4))
    assert a.start_column == 4
    assert a.end_column == 4


def test_column_zero_is_kept():
    a = to_annotation(_issue(line=3, column=0))
    assert a.start_column == 0
    assert a.to_dict()["start_column"] == 0


def test_multi_line_drops_columns():
    a = to_annotation(_issue(line=3, end_line=8, column=4, end_column=10))
    assert a.start_column is None
    assert a.end_column is None
    assert "start_column" not in a.to_dict()


def test_no_column_in_source_gives_no_column():
    d = to_annotation(_issue(line=3)).to_dict()
    assert "start_column" not in d
    assert "end_column" not in d


# ---------------------------------------------------------------------------
# map_annotations()
# ---------------------------------------------------------------------------

def test_map_preserves_order():
    issues = [_issue(line=n) for n in (5, 1, 3)]
    assert [a.start_line for a in map_annotations(issues)] == [5, 1, 3]


def test_map_empty():
    assert map_annotations([]) == []


# ---------------------------------------------------------------------------
# truncate()
# ---------------------------------------------------------------------------

def _annotations(n: int):
    return map_annotations(_issue(line=i) for i in range(1, n + 1))


@pytest.mark.parametrize("n", [0, 1, 12, MAX_ANNOTATIONS])
def test_truncate_keeps_up_to_limit(n):
    kept, truncated = truncate(_annotations(n))
    assert len(kept) == n
    assert truncated is False


@pytest.mark.parametrize("n", [MAX_ANNOTATIONS + 1, 100])
def test_truncate_keeps_first_fifty(n):
    kept, truncated = truncate(_annotations(n))
    assert truncated is True
    assert len(kept) == 50
    assert [a.start_line for a in kept] == list(range(1, 51))
