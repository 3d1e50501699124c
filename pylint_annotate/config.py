"""Configuration loading and validation.

Usage:
    config  = load("pylint-annotate.yaml")     # raises ConfigError on bad config
    context = load_context()                   # issue / PR number of the event
    generate_template("pylint-annotate.yaml")  # writes example file to disk

Every setting is resolved, highest precedence first, from an explicit
override (CLI option), the GitHub Actions input variable (``INPUT_LINT-FILE``
and friends), the optional YAML file, then the runner's default variables
(``GITHUB_SHA``, ``GITHUB_REPOSITORY``, ``GITHUB_TOKEN``, ``GITHUB_API_URL``).
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_API_URL = "https://api.github.com"

INPUT_NAMES = (
    "lint-file",
    "pylint-result-code",
    "head-sha",
    "repo-token",
    "repo-owner",
    "repo-name",
    "api-url",
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RunConfig:
    lint_file: str
    pylint_result_code: int
    head_sha: str
    repo_owner: str
    repo_name: str
    token: str | None = None
    api_url: str = DEFAULT_API_URL

    @property
    def repository(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"


@dataclass(frozen=True)
class RunContext:
    """Where the fallback comment goes, if anywhere."""

    issue_number: int | None = None


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def input_variable(name: str) -> str:
    """Return the environment variable the Actions runner sets for input *name*."""
    return "INPUT_" + name.replace(" ", "_").upper()


def load(config_path: str | None = None, overrides: dict[str, Any] | None = None) -> RunConfig:
    """Resolve and validate the run configuration.

    Args:
        config_path: Optional YAML file keyed by input name
                     (``lint-file: pylint.json``...).
        overrides:   Values given on the command line, keyed by input name.
                     ``None`` and empty strings are ignored.

    Raises:
        ConfigError: if the file is missing or malformed, or a required
                     input is absent or invalid.
    """
    values: dict[str, Any] = _read_file(config_path) if config_path else {}

    for name in INPUT_NAMES:
        env_value = os.environ.get(input_variable(name), "").strip()
        if env_value:
            values[name] = env_value

    for name, value in (overrides or {}).items():
        if value is not None and str(value).strip() != "":
            values[name] = value

    return _build(values)


def _read_file(config_path: str) -> dict[str, Any]:
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(
            f"Config file not found: '{config_path}'\n"
            "Run `python -m pylint_annotate init` to generate a template."
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse '{config_path}': {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read '{config_path}': {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'{config_path}' must be a YAML mapping at the top level.")

    unknown = sorted(set(raw) - set(INPUT_NAMES))
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in '{config_path}': {', '.join(map(str, unknown))}"
        )
    return {k: v for k, v in raw.items() if v is not None}


def _build(values: dict[str, Any]) -> RunConfig:
    """Apply runner defaults, validate, and return the frozen config."""
    errors: list[str] = []

    def text(name: str, fallback: str = "") -> str:
        value = values.get(name)
        if value is None or str(value).strip() == "":
            return fallback.strip()
        return str(value).strip()

    lint_file = text("lint-file")
    head_sha = text("head-sha", os.environ.get("GITHUB_SHA", ""))
    token = text("repo-token", os.environ.get("GITHUB_TOKEN", "")) or None
    api_url = text("api-url", os.environ.get("GITHUB_API_URL", "")) or DEFAULT_API_URL

    default_owner, _, default_name = os.environ.get("GITHUB_REPOSITORY", "").partition("/")
    repo_owner = text("repo-owner", default_owner)
    repo_name = text("repo-name", default_name)

    if not lint_file:
        errors.append(_missing("lint-file"))
    if not head_sha:
        errors.append(_missing("head-sha", "GITHUB_SHA"))
    if not repo_owner:
        errors.append(_missing("repo-owner", "GITHUB_REPOSITORY"))
    if not repo_name:
        errors.append(_missing("repo-name", "GITHUB_REPOSITORY"))

    result_code = 0
    raw_code = text("pylint-result-code")
    if not raw_code:
        errors.append(_missing("pylint-result-code"))
    else:
        try:
            result_code = int(raw_code)
        except ValueError:
            errors.append(f"  - 'pylint-result-code' must be an integer, got '{raw_code}'")

    if errors:
        raise ConfigError("Invalid configuration:\n" + "\n".join(errors))

    return RunConfig(
        lint_file=lint_file,
        pylint_result_code=result_code,
        head_sha=head_sha,
        repo_owner=repo_owner,
        repo_name=repo_name,
        token=token,
        api_url=api_url,
    )


def _missing(name: str, fallback_var: str | None = None) -> str:
    hint = f"set {input_variable(name)}"
    if fallback_var:
        hint += f" or {fallback_var}"
    return f"  - Input required and not supplied: '{name}' ({hint})"


# ---------------------------------------------------------------------------
# Event context
# ---------------------------------------------------------------------------

def load_context(event_path: str | None = None) -> RunContext:
    """Read the issue or pull-request number from the workflow event payload.

    Looks at ``issue.number``, then ``pull_request.number``, then the
    top-level ``number``. A missing or unreadable payload (push events run
    locally, for instance) simply yields no number.
    """
    path = event_path or os.environ.get("GITHUB_EVENT_PATH")
    if not path:
        return RunContext()

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return RunContext()
    if not isinstance(payload, dict):
        return RunContext()

    source = payload.get("issue") or payload.get("pull_request") or payload
    number = source.get("number") if isinstance(source, dict) else None
    if isinstance(number, int) and not isinstance(number, bool):
        return RunContext(issue_number=number)
    return RunContext()


# ---------------------------------------------------------------------------
# Template generator (used by `init` command)
# ---------------------------------------------------------------------------

TEMPLATE = """\
# Values here are overridden by INPUT_* variables and command-line options.
lint-file: "pylint.json"          # pylint --output-format=json2 > pylint.json
pylint-result-code: 0             # exit status of the pylint run
# head-sha: defaults to GITHUB_SHA
# repo-owner / repo-name: default to GITHUB_REPOSITORY
# repo-token: defaults to GITHUB_TOKEN; keep secrets out of this file
# api-url: "https://github.example.com/api/v3"
"""


def generate_template(output_path: str = "pylint-annotate.yaml") -> None:
    """Write a template pylint-annotate.yaml to *output_path*.

    Raises:
        ConfigError: if the file already exists.
    """
    path = Path(output_path)
    if path.exists():
        raise ConfigError(
            f"'{output_path}' already exists. Remove it first or choose a different path."
        )
    path.write_text(TEMPLATE, encoding="utf-8")
