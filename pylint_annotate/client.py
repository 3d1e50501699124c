"""GitHub REST API client.

Usage:
    client = GitHubClient(token="ghs_xxx")
    status = client.create_check_run("octo", "repo", payload)
    status = client.create_issue_comment("octo", "repo", 42, "body")
"""

from typing import Any

import requests

from pylint_annotate.config import DEFAULT_API_URL

API_VERSION = "2022-11-28"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class GitHubClientError(Exception):
    """Base exception for all client errors."""


class AuthenticationError(GitHubClientError):
    """Raised on HTTP 401/403 — missing, invalid or under-privileged token."""


class NotFoundError(GitHubClientError):
    """Raised on HTTP 404 — repository, commit or issue not found."""


class ValidationError(GitHubClientError):
    """Raised on HTTP 422 — GitHub rejected the payload."""


class NetworkError(GitHubClientError):
    """Raised on connection timeout or unreachable server."""


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class GitHubClient:
    """Thin wrapper around the two GitHub endpoints we write to."""

    def __init__(self, token: str | None, url: str = DEFAULT_API_URL, timeout: int = 30) -> None:
        self.base_url = url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        })
        # No token: requests go out anonymous and GitHub answers 401
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def create_check_run(self, owner: str, repo: str, check_run: dict[str, Any]) -> int:
        """Create a check run and return the HTTP status of the response."""
        response = self._request(f"/repos/{owner}/{repo}/check-runs", check_run)
        return response.status_code

    def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> int:
        """Comment on an issue or pull request and return the HTTP status."""
        response = self._request(
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments", {"body": body}
        )
        return response.status_code

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _request(self, endpoint: str, payload: dict[str, Any]) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self._session.post(url, json=payload, timeout=self._timeout)
        except requests.exceptions.Timeout as exc:
            raise NetworkError(
                f"Request timed out after {self._timeout}s while contacting '{url}'"
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise NetworkError(
                f"Unable to reach GitHub API at '{self.base_url}'"
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise NetworkError(f"Request to '{url}' failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"Authentication failed ({response.status_code}) — check that the token "
                "is set and has the required permissions."
            )
        if response.status_code == 404:
            raise NotFoundError(f"Resource not found: {url}")
        if response.status_code == 422:
            raise ValidationError(
                f"GitHub rejected the request to {url}: {_error_message(response)}"
            )
        if not response.ok:
            raise GitHubClientError(
                f"Unexpected response {response.status_code} from {url}: {response.text[:200]}"
            )

        return response


def _error_message(response: requests.Response) -> str:
    """Return GitHub's ``message`` field, or the start of the raw body."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text[:200]
