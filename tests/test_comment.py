"""Tests for pylint_annotate/checks/comment.py"""

from pylint_annotate.checks.comment import build_comment_body, format_annotation
from pylint_annotate.models import AnnotationRecord


def test_format_single_line_annotation():
    a = AnnotationRecord("pkg/mod.py", 12, 12, "warning", "Unused import os",
                         start_column=0, end_column=9)
    assert format_annotation(a) == ":warning: pkg/mod.py:12:0 Unused import os"


def test_format_without_column():
    a = AnnotationRecord("pkg/mod.py", 3, 8, "failure", "Undefined variable")
    assert format_annotation(a) == ":x: pkg/mod.py:3 Undefined variable"


def test_notice_and_unknown_levels_share_marker():
    notice = AnnotationRecord("a.py", 1, 1, "notice", "m")
    odd = AnnotationRecord("a.py", 1, 1, "bogus", "m")
    assert format_annotation(notice).startswith(":information_source: ")
    assert format_annotation(odd).startswith(":information_source: ")


def test_body_is_one_line_per_annotation():
    annotations = [AnnotationRecord("a.py", n, n, "notice", f"m{n}") for n in (1, 2, 3)]
    body = build_comment_body(annotations)
    assert body.split("\n") == [
        ":information_source: a.py:1 m1",
        ":information_source: a.py:2 m2",
        ":information_source: a.py:3 m3",
    ]


def test_empty_body():
    assert build_comment_body([]) == ""


def test_multi_line_message_stays_on_one_line():
    duplicate = AnnotationRecord(
        "a.py", 1, 1, "notice",
        "Similar lines in 2 files\n==a:[1:3]\n==b:[1:3]\nx = 1",
    )
    unused = AnnotationRecord("b.py", 2, 2, "warning", "unused")
    body = build_comment_body([duplicate, unused])
    assert body.split("\n") == [
        ":information_source: a.py:1 Similar lines in 2 files ==a:[1:3] ==b:[1:3] x = 1",
        ":warning: b.py:2 unused",
    ]
