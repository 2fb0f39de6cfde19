"""Check whether an ability is registered."""

import click

from ability_cli.cli.core import require_registry
from ability_cli.core.context import AbilityContext


@click.command("exists")
@click.argument("name")
@click.pass_obj
def exists_cmd(ctx: AbilityContext, name: str) -> None:
    """Exit 0 if the ability NAME is registered, 1 otherwise.

    Prints nothing, so it can be used directly in shell conditionals.

    \b
    Example:
      ability exists core/get-site-info && echo registered
    """
    registry = require_registry(ctx)
    raise SystemExit(0 if registry.ability_exists(name) else 1)
