"""Tests for the host version gate."""

import pytest

from ability_cli.cli.config import LoadedConfig
from ability_cli.cli.core import is_version_at_least, require_registry, version_tuple
from ability_cli.core.context import HostUnavailable, context_for_test
from ability_cli.gateway.registry.fake import FakeAbilityRegistry


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("6.9", (6, 9)),
        ("6.9.1", (6, 9, 1)),
        ("6.9-RC1", (6, 9)),
        ("7.0-beta.2", (7, 0)),
        ("trunk", ()),
    ],
)
def test_version_tuple(version: str, expected: tuple[int, ...]) -> None:
    assert version_tuple(version) == expected


@pytest.mark.parametrize(
    ("version", "minimum", "expected"),
    [
        ("6.9", "6.9", True),
        ("6.9.0", "6.9", True),
        ("6.10", "6.9", True),
        ("7.0", "6.9", True),
        ("6.8.3", "6.9", False),
        ("6", "6.9", False),
    ],
)
def test_is_version_at_least(version: str, minimum: str, expected: bool) -> None:
    assert is_version_at_least(version, minimum) is expected


def test_require_registry_returns_registry() -> None:
    registry = FakeAbilityRegistry(version="6.9")

    assert require_registry(context_for_test(registry=registry)) is registry


def test_require_registry_rejects_old_host(capsys: pytest.CaptureFixture[str]) -> None:
    ctx = context_for_test(registry=FakeAbilityRegistry(version="6.8"))

    with pytest.raises(SystemExit) as exc_info:
        require_registry(ctx)

    assert exc_info.value.code == 1
    assert "Requires host version 6.9 or greater." in capsys.readouterr().err


def test_require_registry_honours_configured_minimum() -> None:
    ctx = context_for_test(
        registry=FakeAbilityRegistry(version="7.0"),
        config=LoadedConfig(host_registry=None, min_host_version="7.1"),
    )

    with pytest.raises(SystemExit):
        require_registry(ctx)


def test_require_registry_reports_unavailable_host(capsys: pytest.CaptureFixture[str]) -> None:
    ctx = context_for_test(registry=HostUnavailable("No ability host configured."))

    with pytest.raises(SystemExit) as exc_info:
        require_registry(ctx)

    assert exc_info.value.code == 1
    assert "Error: No ability host configured." in capsys.readouterr().err
