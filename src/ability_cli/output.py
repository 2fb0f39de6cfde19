"""Output helpers separating human-facing messages from command data.

user_output() goes to stderr so that stdout carries only data that scripts can
parse (tables, JSON, YAML, ability results).
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a message meant for a person (errors, status, success notes) to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Print command data to stdout."""
    click.echo(message, nl=nl)
