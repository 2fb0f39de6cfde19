import logging

import click

from ability_cli.cli.commands.ability.can_run_cmd import can_run_cmd
from ability_cli.cli.commands.ability.exists_cmd import exists_cmd
from ability_cli.cli.commands.ability.get_cmd import get_cmd
from ability_cli.cli.commands.ability.list_cmd import list_cmd
from ability_cli.cli.commands.ability.run_cmd import run_cmd
from ability_cli.cli.commands.ability.validate_cmd import validate_cmd
from ability_cli.cli.commands.category import category_group
from ability_cli.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group("ability", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ability-cli")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """List, inspect, run and validate abilities registered with the host's Abilities API.

    The host is configured with ABILITY_HOST or [host] registry in
    ~/.ability/config.toml.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(list_cmd)
cli.add_command(get_cmd)
cli.add_command(run_cmd)
cli.add_command(exists_cmd)
cli.add_command(can_run_cmd)
cli.add_command(validate_cmd)
cli.add_command(category_group)


def main() -> None:
    """CLI entry point used by the `ability` console script."""
    cli()
