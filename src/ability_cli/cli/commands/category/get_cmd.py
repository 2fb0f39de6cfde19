"""Show details of a single ability category."""

import click

from ability_cli.cli.core import build_formatter, require_registry
from ability_cli.cli.ensure import Ensure
from ability_cli.core.categories import GET_FIELDS, category_get_record
from ability_cli.core.context import AbilityContext
from ability_cli.core.formatter import OutputFormat


@click.command("get")
@click.argument("slug")
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
    slug: str,
    *,
    field: str | None,
    fields: str | None,
    output_format: OutputFormat,
) -> None:
    """Show details of the category SLUG, including its meta as JSON.

    \b
    Example:
      ability category get site --field=meta
    """
    registry = require_registry(ctx)
    category = Ensure.not_none(
        registry.get_category(slug), f"Ability category '{slug}' not found."
    )

    formatter = build_formatter(
        default_fields=GET_FIELDS,
        available_fields=GET_FIELDS,
        field=field,
        fields=fields,
        output_format=output_format,
        id_field="slug",
    )
    formatter.display_item(category_get_record(category))
