"""Data models for pylint annotations.

Contains the dataclasses passed between the parser, the mapper and the
publisher:
    - IssueRecord       one pylint message
    - AnnotationRecord  one GitHub check-run annotation
    - PublishResult     outcome of a run ("Success" / "Failure")
"""

from dataclasses import dataclass
from typing import Any


class AnnotationLevel:
    """Annotation levels accepted by the GitHub Checks API."""

    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


@dataclass(frozen=True)
class IssueRecord:
    path: str
    line: int
    message: str
    type: str | None = None
    symbol: str | None = None
    end_line: int | None = None
    column: int | None = None
    end_column: int | None = None

    @classmethod
    def from_message(cls, raw: dict[str, Any]) -> "IssueRecord":
        """Build a record from one entry of the report's ``messages`` list.

        Keys pylint emits that we do not use (``obj``, ``module``,
        ``confidence``...) are ignored.
        """
        return cls(
            path=raw["path"],
            line=raw["line"],
            message=str(raw.get("message") or ""),
            type=raw.get("type"),
            symbol=raw.get("symbol"),
            end_line=raw.get("endLine"),
            column=raw.get("column"),
            end_column=raw.get("endColumn"),
        )


@dataclass(frozen=True)
class AnnotationRecord:
    path: str
    start_line: int
    end_line: int
    annotation_level: str
    message: str
    start_column: int | None = None
    end_column: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the annotation as sent to the Checks API.

        Column keys are left out when unset; GitHub rejects them on
        annotations spanning more than one line.
        """
        data: dict[str, Any] = {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level,
            "message": self.message,
        }
        if self.start_line == self.end_line:
            if self.start_column is not None:
                data["start_column"] = self.start_column
            if self.end_column is not None:
                data["end_column"] = self.end_column
        return data


@dataclass(frozen=True)
class PublishResult:
    success: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "PublishResult":
        return cls(success=True)

    @classmethod
    def failed(cls, reason: str) -> "PublishResult":
        return cls(success=False, reason=reason)

    def __str__(self) -> str:
        return "Success" if self.success else "Failure"
