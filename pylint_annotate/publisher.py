"""Publish a pylint report as a GitHub check run.

Usage:
    check_run, annotations = prepare(config)           # no network
    result = publish(config, RunContext(issue_number=7))

``publish`` makes at most two requests, one after the other: the check run
and, only if that fails, one comment on ``context.issue_number``.
"""

from datetime import datetime

from pylint_annotate import actions
from pylint_annotate.checks.annotations import MAX_ANNOTATIONS, map_annotations, truncate
from pylint_annotate.checks.check_run import build_check_run
from pylint_annotate.checks.comment import build_comment_body
from pylint_annotate.client import GitHubClient, GitHubClientError
from pylint_annotate.config import RunConfig, RunContext
from pylint_annotate.models import AnnotationRecord, PublishResult
from pylint_annotate.report import ReportError, load_report


def prepare(config: RunConfig, now: datetime | None = None) -> tuple[dict, list[AnnotationRecord]]:
    """Parse and map the report and build the check-run body.

    Returns the check-run body and the (possibly truncated) annotations.

    Raises:
        ReportError: the report cannot be read or parsed.
    """
    issues = load_report(config.lint_file)
    annotations = map_annotations(issues)

    actions.info(f"number of annotations: {len(annotations)}")
    annotations, truncated = truncate(annotations)
    if truncated:
        actions.warning(
            f"Number of annotations is greater than {MAX_ANNOTATIONS}, "
            f"only the first {MAX_ANNOTATIONS} will be displayed."
        )

    check_run = build_check_run(config, annotations, truncated, now)
    actions.info(f"conclusion of linting: {check_run['conclusion']}")
    return check_run, annotations


def publish(
    config: RunConfig,
    context: RunContext,
    client: GitHubClient | None = None,
    now: datetime | None = None,
) -> PublishResult:
    """Run the whole publication and return its outcome.

    A report that cannot be read or parsed fails the run. Once the report
    is mapped the run succeeds whatever happens to the check run or the
    fallback comment; delivery is best effort.
    """
    try:
        check_run, annotations = prepare(config, now)
    except ReportError as exc:
        return PublishResult.failed(str(exc))

    client = client or GitHubClient(token=config.token, url=config.api_url)

    try:
        status = client.create_check_run(config.repo_owner, config.repo_name, check_run)
        actions.debug(f"response from checks create: {status}")
    except GitHubClientError as exc:
        actions.warning(f"Unable to create the check run: {exc}")
        post_fallback_comment(client, config, context, annotations)

    return PublishResult.ok()


def post_fallback_comment(
    client: GitHubClient,
    config: RunConfig,
    context: RunContext,
    annotations: list[AnnotationRecord],
) -> None:
    """Post all annotations as one comment. Never raises a client error."""
    if context.issue_number is None:
        actions.info("No issue or pull request number in the event; skipping the fallback comment.")
        return

    body = build_comment_body(annotations)
    try:
        status = client.create_issue_comment(
            config.repo_owner, config.repo_name, context.issue_number, body
        )
        actions.debug(f"response from comment create: {status}")
    except GitHubClientError as exc:
        actions.warning(f"Unable to post the fallback comment on #{context.issue_number}: {exc}")
