"""Show details of a single ability."""

import click

from ability_cli.cli.core import build_formatter, require_registry
from ability_cli.cli.ensure import Ensure
from ability_cli.core.abilities import GET_FIELDS, ability_get_record
from ability_cli.core.context import AbilityContext
from ability_cli.core.formatter import OutputFormat


@click.command("get")
@click.argument("name")
@click.option("--field", default=None, help="Print the value of a single field.")
@click.option("--fields", default=None, help="Comma-separated list of fields to show.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "csv", "json", "yaml"]),
    default="table",
    show_default=True,
)
@click.pass_obj
def get_cmd(
    ctx: AbilityContext,
    name: str,
    *,
    field: str | None,
    fields: str | None,
    output_format: OutputFormat,
) -> None:
    """Show details of the ability NAME.

    Schemas are printed as JSON strings; annotations print 1, 0, or nothing when
    the ability does not declare them.

    \b
    Examples:
      ability get core/get-site-info
      ability get core/get-site-info --field=input_schema
    """
    registry = require_registry(ctx)
    ability = Ensure.not_none(registry.get_ability(name), f"Ability '{name}' not found.")

    formatter = build_formatter(
        default_fields=GET_FIELDS,
        available_fields=GET_FIELDS,
        field=field,
        fields=fields,
        output_format=output_format,
        id_field="name",
    )
    formatter.display_item(ability_get_record(ability))
