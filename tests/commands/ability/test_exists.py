"""Tests for `ability exists`."""

from ability_cli.gateway.registry.fake import FakeAbilityRegistry
from tests.test_utils.builders import invoke, make_ability


def test_exists_registered() -> None:
    registry = FakeAbilityRegistry(abilities=[make_ability("core/get-site-info")])

    result = invoke(registry, ["exists", "core/get-site-info"])

    assert result.exit_code == 0
    assert result.output == ""


def test_exists_unregistered_is_silent() -> None:
    result = invoke(FakeAbilityRegistry(), ["exists", "core/missing"])

    assert result.exit_code == 1
    assert result.output == ""
