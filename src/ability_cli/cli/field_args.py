"""Free-form `--<field>=<value>` flags for commands that build ability input."""

from collections.abc import Sequence

import click

from ability_cli.core.ability_input import FieldValue

# Lets unknown --options through to ctx.args instead of failing the parse
FIELD_ARGS_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def parse_field_args(args: Sequence[str]) -> dict[str, FieldValue]:
    """Turn leftover command-line arguments into input fields.

    `--key=value` maps key to the string value, a bare `--key` maps it to True.
    Later occurrences of the same key win.

    Raises:
        click.UsageError: If an argument is not a `--key[=value]` flag
    """
    fields: dict[str, FieldValue] = {}
    for arg in args:
        key, sep, value = arg.removeprefix("--").partition("=")
        if not arg.startswith("--") or not key:
            msg = f"Unexpected argument '{arg}'. Pass input fields as --<field>=<value>."
            raise click.UsageError(msg)
        fields[key] = value if sep else True
    return fields
