"""Tests for free-form --<field>=<value> parsing."""

import click
import pytest

from ability_cli.cli.field_args import parse_field_args


def test_key_value_pairs() -> None:
    assert parse_field_args(["--name=test", "--count=5"]) == {"name": "test", "count": "5"}


def test_value_may_contain_equals_sign() -> None:
    assert parse_field_args(["--query=a=b"]) == {"query": "a=b"}


def test_empty_value_is_kept() -> None:
    assert parse_field_args(["--name="]) == {"name": ""}


def test_bare_flag_is_true() -> None:
    assert parse_field_args(["--verbose"]) == {"verbose": True}


def test_later_flag_wins() -> None:
    assert parse_field_args(["--name=a", "--name=b"]) == {"name": "b"}


@pytest.mark.parametrize("arg", ["positional", "-n", "--", "--=x"])
def test_non_flag_arguments_are_usage_errors(arg: str) -> None:
    with pytest.raises(click.UsageError):
        parse_field_args([arg])
