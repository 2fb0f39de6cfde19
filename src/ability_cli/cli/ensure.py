"""CLI error handling for fatal conditions.

Ensure narrows optional lookups and host results, exiting with a single
`Error: <message>` line on stderr when the ideal state is not reached.
"""

from __future__ import annotations

from typing import NoReturn, TypeVar

import click

from ability_cli.gateway.registry.types import AbilityFailure
from ability_cli.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for fatal precondition and result checks."""

    @staticmethod
    def fail(message: str) -> NoReturn:
        """Print `Error: <message>` to stderr and exit with status 1."""
        user_output(click.style("Error: ", fg="red") + message)
        raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, message: str) -> T:
        """Ensure a lookup found something.

        Args:
            value: Result of a lookup that returns None when nothing matches
            message: Error message shown when value is None

        Returns:
            The value, narrowed to T

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            Ensure.fail(message)
        return value

    @staticmethod
    def ideal(result: T | AbilityFailure) -> T:
        """Ensure a host operation did not report a failure.

        The host's failure message is shown verbatim.
        """
        if isinstance(result, AbilityFailure):
            Ensure.fail(result.message)
        return result


def success(message: str) -> None:
    """Print `Success: <message>` to stderr."""
    user_output(click.style("Success: ", fg="green") + message)
