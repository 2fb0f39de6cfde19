"""Check whether an ability category is registered."""

import click

from ability_cli.cli.core import require_registry
from ability_cli.core.context import AbilityContext


@click.command("exists")
@click.argument("slug")
@click.pass_obj
def exists_cmd(ctx: AbilityContext, slug: str) -> None:
    """Exit 0 if the category SLUG is registered, 1 otherwise."""
    registry = require_registry(ctx)
    raise SystemExit(0 if registry.category_exists(slug) else 1)
