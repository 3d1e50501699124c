"""CLI entry point — command definitions using Click.

Commands:
    init          Generate a template config file
    publish       Publish a pylint report as a check run (or a fallback comment)
"""

import json
import sys
from typing import Any

import click

from pylint_annotate import __version__, actions


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fail(message: str) -> None:
    """Report a fatal error the way the workflow expects, then exit 1."""
    actions.set_failed(message)
    actions.set_output("result", "Failure")
    sys.exit(1)


def _emit_json(data: Any, ctx: click.Context) -> None:
    """Write JSON to stdout or to the file specified by --output."""
    obj = ctx.obj
    indent = 2 if obj["pretty"] else None
    text = json.dumps(data, indent=indent, ensure_ascii=False)

    output_path: str | None = obj["output_path"]
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        click.echo(f"Payload written to '{output_path}'", err=True)
    else:
        click.echo(text)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--config", "config_path", default=None,
              help="Optional YAML file with input values.")
@click.option("--output", "output_path", default=None,
              help="With publish --dry-run: write the JSON payload to a file instead of stdout.")
@click.option("--pretty", is_flag=True, default=False,
              help="Pretty-print the JSON payload.")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="pylint-annotate")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, output_path: str | None,
        pretty: bool, verbose: bool) -> None:
    """Publish pylint findings as GitHub check-run annotations."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["output_path"] = output_path
    ctx.obj["pretty"] = pretty
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

@cli.command("init")
@click.option("--output", "output_path", default="pylint-annotate.yaml", show_default=True,
              help="Path where the template config file will be written.")
def init_command(output_path: str) -> None:
    """Generate a template pylint-annotate.yaml file."""
    from pylint_annotate.config import ConfigError, generate_template
    try:
        generate_template(output_path)
        click.echo(f"Template written to '{output_path}'.")
        click.echo("Edit it with your report path; leave the token to the workflow.")
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# publish
# ---------------------------------------------------------------------------

@cli.command("publish")
@click.option("--lint-file", default=None, help="Path to the pylint JSON report.")
@click.option("--pylint-result-code", default=None, help="Exit status of the pylint run.")
@click.option("--head-sha", default=None, help="Commit to attach the check run to.")
@click.option("--repo-token", default=None, help="GitHub token.")
@click.option("--repo-owner", default=None, help="Repository owner.")
@click.option("--repo-name", default=None, help="Repository name.")
@click.option("--api-url", default=None, help="GitHub API base URL.")
@click.option("--issue-number", type=int, default=None,
              help="Issue or pull request for the fallback comment "
                   "(default: read from GITHUB_EVENT_PATH).")
@click.option("--dry-run", is_flag=True, default=False,
              help="Print the check-run payload instead of calling GitHub.")
@click.pass_context
def publish_command(ctx: click.Context, issue_number: int | None, dry_run: bool,
                    **inputs: str | None) -> None:
    """Publish the pylint report as a check run on HEAD_SHA."""
    from pylint_annotate.checks.comment import build_comment_body
    from pylint_annotate.config import ConfigError, RunContext, load, load_context
    from pylint_annotate.publisher import prepare, publish
    from pylint_annotate.report import ReportError

    overrides = {name.replace("_", "-"): value for name, value in inputs.items()}
    try:
        config = load(ctx.obj["config_path"], overrides)
    except ConfigError as exc:
        _fail(str(exc))

    if issue_number is not None:
        context = RunContext(issue_number=issue_number)
    else:
        context = load_context()

    if ctx.obj["verbose"]:
        click.echo(f"[verbose] Report: {config.lint_file}", err=True)
        click.echo(f"[verbose] Check run on {config.repository}@{config.head_sha} "
                   f"via {config.api_url}", err=True)
        click.echo(f"[verbose] Fallback comment target: "
                   f"{context.issue_number if context.issue_number is not None else '(none)'}",
                   err=True)

    if dry_run:
        try:
            check_run, annotations = prepare(config)
        except ReportError as exc:
            _fail(str(exc))
        _emit_json({
            "owner": config.repo_owner,
            "repo": config.repo_name,
            "check_run": check_run,
            "fallback_comment": build_comment_body(annotations),
        }, ctx)
        actions.set_output("result", "Success")
        return

    result = publish(config, context)
    if not result.success:
        _fail(result.reason or "Publishing failed")
    actions.set_output("result", str(result))
