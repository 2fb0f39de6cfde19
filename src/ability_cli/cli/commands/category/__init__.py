"""Category command group for inspecting ability categories."""

import click

from ability_cli.cli.commands.category.exists_cmd import exists_cmd
from ability_cli.cli.commands.category.get_cmd import get_cmd
from ability_cli.cli.commands.category.list_cmd import list_cmd


@click.group("category")
def category_group() -> None:
    """List and inspect ability categories."""


category_group.add_command(list_cmd)
category_group.add_command(get_cmd)
category_group.add_command(exists_cmd)
