"""Check whether the current user may run an ability."""

import logging

import click

from ability_cli.cli.core import require_registry
from ability_cli.cli.ensure import Ensure
from ability_cli.cli.field_args import FIELD_ARGS_SETTINGS, parse_field_args
from ability_cli.core.ability_input import AbilityInputError, build_input
from ability_cli.core.context import AbilityContext
from ability_cli.gateway.registry.types import AbilityFailure

logger = logging.getLogger(__name__)


@click.command("can-run", context_settings=FIELD_ARGS_SETTINGS)
@click.argument("name")
@click.option("--input", "json_input", default=None, help="Input as a JSON object.")
@click.pass_context
def can_run_cmd(click_ctx: click.Context, name: str, *, json_input: str | None) -> None:
    """Exit 0 if the current user may run the ability NAME, 1 otherwise.

    Some permission checks depend on the input; pass it the same way as for
    `run`. A failed permission check also exits 1 (details with --debug).

    \b
    Example:
      ability can-run core/get-site-info && ability run core/get-site-info
    """
    ctx: AbilityContext = click_ctx.obj
    fields = parse_field_args(click_ctx.args)

    registry = require_registry(ctx)
    ability = Ensure.not_none(registry.get_ability(name), f"Ability '{name}' not found.")

    try:
        ability_input = build_input(json_input, fields)
    except AbilityInputError as e:
        Ensure.fail(str(e))

    permitted = registry.check_permission(ability, ability_input)
    if isinstance(permitted, AbilityFailure):
        logger.debug("Permission check for %s failed: %s", name, permitted.message)
        raise SystemExit(1)

    raise SystemExit(0 if permitted else 1)
