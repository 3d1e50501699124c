"""GitHub Actions workflow commands.

Log lines are written with ``click.echo`` in the ``::command::message`` form
the runner understands; outside a runner they read as plain text.
Step outputs go to the file named by ``GITHUB_OUTPUT``.
"""

import os
import uuid

import click


def _escape(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _command(name: str, message: str) -> None:
    click.echo(f"::{name}::{_escape(message)}")


def debug(message: str) -> None:
    _command("debug", message)


def info(message: str) -> None:
    click.echo(message)


def warning(message: str) -> None:
    _command("warning", message)


def error(message: str) -> None:
    _command("error", message)


def set_failed(message: str) -> None:
    """Report a failed step. The caller decides the exit status."""
    error(message)


def set_output(name: str, value: str) -> None:
    """Set a step output, or echo ``name=value`` when not running in Actions."""
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        click.echo(f"{name}={value}")
        return

    with open(output_path, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")
