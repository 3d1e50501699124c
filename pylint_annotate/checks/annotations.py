"""Pylint message -> check-run annotation mapping.

Functions:
    classify(message_type)        -> annotation level
    to_annotation(issue)          -> AnnotationRecord
    map_annotations(issues)       -> list[AnnotationRecord]
    truncate(annotations)         -> (list[AnnotationRecord], truncated)
"""

from collections.abc import Iterable

from pylint_annotate.models import AnnotationLevel, AnnotationRecord, IssueRecord

#: GitHub accepts at most this many annotations per check-run request
MAX_ANNOTATIONS = 50


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify(message_type: str | None) -> str:
    """Return the annotation level for a pylint message type.

    ``refactor``, ``info``, ``fatal`` and unknown types fall back to notice.
    """
    if message_type == "convention":
        return AnnotationLevel.NOTICE
    if message_type == "warning":
        return AnnotationLevel.WARNING
    if message_type == "error":
        return AnnotationLevel.FAILURE
    return AnnotationLevel.NOTICE


def to_annotation(issue: IssueRecord) -> AnnotationRecord:
    end_line = issue.end_line or issue.line
    start_column = end_column = None
    if end_line == issue.line:
        start_column = issue.column
        end_column = issue.end_column if issue.end_column is not None else issue.column

    return AnnotationRecord(
        path=issue.path,
        start_line=issue.line,
        end_line=end_line,
        annotation_level=classify(issue.type),
        message=issue.message,
        start_column=start_column,
        end_column=end_column,
    )


def map_annotations(issues: Iterable[IssueRecord]) -> list[AnnotationRecord]:
    return [to_annotation(issue) for issue in issues]


def truncate(annotations: list[AnnotationRecord]) -> tuple[list[AnnotationRecord], bool]:
    """Keep the first MAX_ANNOTATIONS entries; the flag tells whether any were dropped."""
    if len(annotations) > MAX_ANNOTATIONS:
        return annotations[:MAX_ANNOTATIONS], True
    return annotations, False
