"""Validate input against an ability's input schema without running it."""

import click

from ability_cli.cli.core import require_registry
from ability_cli.cli.ensure import Ensure, success
from ability_cli.cli.field_args import FIELD_ARGS_SETTINGS, parse_field_args
from ability_cli.core.ability_input import AbilityInputError, build_input
from ability_cli.core.context import AbilityContext


@click.command("validate", context_settings=FIELD_ARGS_SETTINGS)
@click.argument("name")
@click.option("--input", "json_input", default=None, help="Input as a JSON object.")
@click.pass_context
def validate_cmd(click_ctx: click.Context, name: str, *, json_input: str | None) -> None:
    """Validate input for the ability NAME.

    Schema defaults are applied before validation, exactly as when the ability
    runs.

    \b
    Examples:
      ability validate core/get-site-info --input='{"fields":["name"]}'
      ability validate my-plugin/greet --name=World
    """
    ctx: AbilityContext = click_ctx.obj
    fields = parse_field_args(click_ctx.args)

    registry = require_registry(ctx)
    ability = Ensure.not_none(registry.get_ability(name), f"Ability '{name}' not found.")

    try:
        ability_input = build_input(json_input, fields)
    except AbilityInputError as e:
        Ensure.fail(str(e))

    normalized = Ensure.ideal(registry.normalize_input(ability, ability_input))
    failure = registry.validate_input(ability, normalized)
    if failure is not None:
        Ensure.fail(failure.message)

    success("Input is valid.")
