"""Check-run payload builder.

Functions:
    conclusion_for(pylint_result_code)                    -> "success" | "failure"
    build_output(conclusion, annotations, truncated)      -> dict
    build_check_run(config, annotations, truncated, now)  -> dict

The conclusion follows pylint's exit status only. A zero exit status with
annotations still reports success, and a non-zero one without annotations
still reports failure.
"""

from datetime import datetime, timezone

from pylint_annotate.checks.annotations import MAX_ANNOTATIONS
from pylint_annotate.config import RunConfig
from pylint_annotate.models import AnnotationRecord

CHECK_NAME = "pylint"

SUCCESS = "success"
FAILURE = "failure"

SUCCESS_TEXT = "No issues have been found!"
FAILURE_TEXT = "Pylint has some suggestions!"
TRUNCATION_WARNING = (
    f"\n:warning: Pylint annotations have been limited to {MAX_ANNOTATIONS} "
    "due to api limitations."
)


def conclusion_for(pylint_result_code: int) -> str:
    return SUCCESS if pylint_result_code == 0 else FAILURE


def build_output(conclusion: str, annotations: list[AnnotationRecord], truncated: bool) -> dict:
    """Return the ``output`` object of the check run."""
    if conclusion == SUCCESS:
        title = summary = SUCCESS_TEXT
    else:
        title = FAILURE_TEXT
        summary = FAILURE_TEXT + (TRUNCATION_WARNING if truncated else "")

    return {
        "title": title,
        "summary": summary,
        "annotations": [a.to_dict() for a in annotations],
    }


def build_check_run(
    config: RunConfig,
    annotations: list[AnnotationRecord],
    truncated: bool,
    now: datetime | None = None,
) -> dict:
    """Return the body of ``POST /repos/{owner}/{repo}/check-runs``."""
    conclusion = conclusion_for(config.pylint_result_code)
    completed_at = (now or datetime.now(timezone.utc)).isoformat()
    return {
        "name": CHECK_NAME,
        "head_sha": config.head_sha,
        "completed_at": completed_at,
        "conclusion": conclusion,
        "status": "completed",
        "output": build_output(conclusion, annotations, truncated),
    }
