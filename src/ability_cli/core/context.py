"""Application context with dependency injection."""

import os
from dataclasses import dataclass

from ability_cli.cli.config import (
    DEFAULT_MIN_HOST_VERSION,
    LoadedConfig,
    default_config_dir,
    load_config,
)
from ability_cli.gateway.registry.abc import AbilityRegistry
from ability_cli.gateway.registry.real import HostLoadError, RealAbilityRegistry, load_host


@dataclass(frozen=True)
class HostUnavailable:
    """Sentinel for a host whose Abilities API could not be reached."""

    message: str


@dataclass(frozen=True)
class AbilityContext:
    """Immutable context holding all dependencies for ability commands.

    Created at CLI entry point and threaded through the application via click's
    `obj`. A missing host does not prevent construction, so `--help` keeps working;
    commands call require_registry() to turn it into a fatal error.
    """

    registry: AbilityRegistry | HostUnavailable
    config: LoadedConfig


def create_context() -> AbilityContext:
    """Build the production context from config.toml and the environment."""
    config = load_config(default_config_dir(), dict(os.environ))

    registry: AbilityRegistry | HostUnavailable
    if config.host_registry is None:
        registry = HostUnavailable(
            "No ability host configured. Set ABILITY_HOST or [host] registry in config.toml."
        )
    else:
        try:
            registry = RealAbilityRegistry(load_host(config.host_registry))
        except HostLoadError as e:
            registry = HostUnavailable(str(e))

    return AbilityContext(registry=registry, config=config)


def context_for_test(
    registry: AbilityRegistry | HostUnavailable | None = None,
    config: LoadedConfig | None = None,
) -> AbilityContext:
    """Create a context for tests, defaulting to an empty FakeAbilityRegistry."""
    from ability_cli.gateway.registry.fake import FakeAbilityRegistry

    if registry is None:
        registry = FakeAbilityRegistry()
    if config is None:
        config = LoadedConfig(host_registry=None, min_host_version=DEFAULT_MIN_HOST_VERSION)
    return AbilityContext(registry=registry, config=config)
