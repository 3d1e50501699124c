"""Fallback comment body, used when the check run cannot be created."""

from pylint_annotate.models import AnnotationLevel, AnnotationRecord

_MARKERS = {
    AnnotationLevel.NOTICE: ":information_source:",
    AnnotationLevel.WARNING: ":warning:",
    AnnotationLevel.FAILURE: ":x:",
}


def format_annotation(annotation: AnnotationRecord) -> str:
    """Render one annotation as ``<marker> <path>:<line>[:<column>] <message>``.

    Multi-line messages (pylint's duplicate-code report) are folded onto one line.
    """
    marker = _MARKERS.get(annotation.annotation_level, _MARKERS[AnnotationLevel.NOTICE])
    location = f"{annotation.path}:{annotation.start_line}"
    if annotation.start_column is not None:
        location += f":{annotation.start_column}"
    message = " ".join(annotation.message.splitlines())
    return f"{marker} {location} {message}"


def build_comment_body(annotations: list[AnnotationRecord]) -> str:
    return "\n".join(format_annotation(a) for a in annotations)
