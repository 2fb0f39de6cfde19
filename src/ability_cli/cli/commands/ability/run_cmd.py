"""Execute an ability and print its result."""

import json
import pprint
from typing import Any, Literal

import click
import yaml

from ability_cli.cli.core import require_registry
from ability_cli.cli.ensure import Ensure
from ability_cli.cli.field_args import FIELD_ARGS_SETTINGS, parse_field_args
from ability_cli.core.ability_input import AbilityInputError, build_input_with_stdin
from ability_cli.core.context import AbilityContext
from ability_cli.core.formatter import dump_yaml
from ability_cli.output import machine_output

ResultFormat = Literal["json", "yaml", "var_export"]


def _read_stdin() -> str:
    return click.get_text_stream("stdin").read()


def render_result(result: Any, output_format: ResultFormat) -> str:
    """Serialize an ability result for printing.

    Raises:
        TypeError, ValueError, yaml.YAMLError: If the result holds values the format
            cannot represent
    """
    if output_format == "yaml":
        return dump_yaml(result).rstrip("\n")
    if output_format == "var_export":
        return pprint.pformat(result)
    return json.dumps(result, indent=4)


@click.command("run", context_settings=FIELD_ARGS_SETTINGS)
@click.argument("name")
@click.option(
    "--input",
    "json_input",
    default=None,
    help="Input as a JSON object, or '-' to read JSON from stdin.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "var_export"]),
    default="json",
    show_default=True,
)
@click.pass_context
def run_cmd(
    click_ctx: click.Context,
    name: str,
    *,
    json_input: str | None,
    output_format: ResultFormat,
) -> None:
    """Execute the ability NAME.

    Input comes from --input and from any --<field>=<value> flags, which are
    merged over the JSON document. Values given as flags are passed as strings.

    \b
    Examples:
      ability run core/get-site-info --input='{"fields":["name","version"]}'
      ability run my-plugin/greet --name=World
      echo '{"name":"World"}' | ability run my-plugin/greet --input=-
    """
    ctx: AbilityContext = click_ctx.obj
    fields = parse_field_args(click_ctx.args)

    registry = require_registry(ctx)
    ability = Ensure.not_none(registry.get_ability(name), f"Ability '{name}' not found.")

    try:
        ability_input = build_input_with_stdin(json_input, fields, read_stdin=_read_stdin)
    except AbilityInputError as e:
        Ensure.fail(str(e))

    result = Ensure.ideal(registry.execute_ability(ability, ability_input))
    try:
        rendered = render_result(result, output_format)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        Ensure.fail(f"Could not render the result of '{name}' as {output_format}: {e}")
    machine_output(rendered)
