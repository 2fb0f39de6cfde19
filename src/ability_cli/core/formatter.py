"""Structured output for ability and category records.

Renders uniform string records as a rich table, CSV, JSON, YAML, a count, or a
space-separated id list, honouring --field and --fields overrides.
"""

import csv
import io
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ability_cli.output import machine_output

OutputFormat = Literal["table", "csv", "json", "yaml", "count", "ids"]

Record = Mapping[str, Any]


class FieldSelectionError(Exception):
    """--field or --fields named a field the record does not have."""


def parse_fields(raw: str) -> tuple[str, ...]:
    """Split a --fields value ("name, label") into field names."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _print_table(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    table = Table(show_header=True, header_style="bold", box=None)
    for column in columns:
        table.add_column(column, no_wrap=False)
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    Console(highlight=False).print(table)


def _print_csv(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(columns)
    writer.writerows(rows)
    machine_output(buffer.getvalue(), nl=False)


@dataclass(frozen=True)
class Formatter:
    """Renders records with a chosen field set and output format.

    Attributes:
        fields: Columns to render, in order
        output_format: One of table, csv, json, yaml, count, ids
        field: Single field to print instead of full records (--field)
        id_field: Field listed by the ids format
    """

    fields: tuple[str, ...]
    output_format: OutputFormat
    field: str | None
    id_field: str

    @staticmethod
    def from_options(
        *,
        default_fields: Sequence[str],
        available_fields: Sequence[str],
        field: str | None,
        fields: str | None,
        output_format: OutputFormat,
        id_field: str,
    ) -> "Formatter":
        """Resolve --field/--fields against the fields a record can have.

        Raises:
            FieldSelectionError: If a requested field is not available
        """
        selected = parse_fields(fields) if fields is not None else tuple(default_fields)
        requested = (field,) if field is not None else selected
        for name in requested:
            if name not in available_fields:
                raise FieldSelectionError(f"Invalid field: {name}.")
        return Formatter(
            fields=selected,
            output_format=output_format,
            field=field,
            id_field=id_field,
        )

    def display_items(self, items: Sequence[Record]) -> None:
        """Render a list of records."""
        if self.output_format == "count":
            machine_output(str(len(items)))
            return
        if self.output_format == "ids":
            machine_output(" ".join(_cell(item.get(self.id_field)) for item in items))
            return

        if self.field is not None:
            values = [item.get(self.field) for item in items]
            if self.output_format == "json":
                machine_output(json.dumps(values, separators=(",", ":")))
            elif self.output_format == "yaml":
                machine_output(dump_yaml(values), nl=False)
            else:
                for value in values:
                    machine_output(_cell(value))
            return

        subsets = [{name: item.get(name) for name in self.fields} for item in items]
        if self.output_format == "json":
            machine_output(json.dumps(subsets, separators=(",", ":")))
        elif self.output_format == "yaml":
            machine_output(dump_yaml(subsets), nl=False)
        else:
            rows = [[_cell(subset[name]) for name in self.fields] for subset in subsets]
            if self.output_format == "csv":
                _print_csv(self.fields, rows)
            else:
                _print_table(self.fields, rows)

    def display_item(self, item: Record) -> None:
        """Render one record as field/value pairs."""
        if self.field is not None:
            value = item.get(self.field)
            if self.output_format == "json":
                machine_output(json.dumps(value, separators=(",", ":")))
            elif self.output_format == "yaml":
                machine_output(dump_yaml(value), nl=False)
            else:
                machine_output(_cell(value))
            return

        subset = {name: item.get(name) for name in self.fields}
        if self.output_format == "json":
            machine_output(json.dumps(subset, separators=(",", ":")))
        elif self.output_format == "yaml":
            machine_output(dump_yaml(subset), nl=False)
        else:
            rows = [[name, _cell(value)] for name, value in subset.items()]
            if self.output_format == "csv":
                _print_csv(("Field", "Value"), rows)
            else:
                _print_table(("Field", "Value"), rows)
