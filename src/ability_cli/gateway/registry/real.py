"""Production implementation of the ability registry backed by an in-process host."""

import importlib
import logging
from typing import Any

from ability_cli.gateway.registry.abc import AbilityRegistry
from ability_cli.gateway.registry.types import (
    Ability,
    AbilityCategory,
    AbilityFailure,
    AbilityHostError,
    AbilityInput,
    freeze_meta,
)

logger = logging.getLogger(__name__)


class HostLoadError(Exception):
    """The configured host object could not be imported."""


def load_host(import_path: str) -> Any:
    """Import the host object named by "package.module:attribute".

    Raises:
        HostLoadError: If the path is malformed, the module cannot be imported,
            or the attribute is missing
    """
    module_path, sep, attribute = import_path.partition(":")
    if not sep or not module_path or not attribute:
        msg = f"Could not load ability host '{import_path}': expected 'package.module:attribute'"
        raise HostLoadError(msg)

    logger.debug("Loading ability host %s", import_path)
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        msg = f"Could not load ability host '{import_path}': {e}"
        raise HostLoadError(msg) from e

    if not hasattr(module, attribute):
        msg = f"Could not load ability host '{import_path}': module has no attribute '{attribute}'"
        raise HostLoadError(msg)
    return getattr(module, attribute)


def _to_ability(host_ability: Any) -> Ability:
    category = host_ability.category
    return Ability(
        name=str(host_ability.name),
        label=str(host_ability.label),
        category=str(category) if category is not None else None,
        description=str(host_ability.description),
        input_schema=host_ability.input_schema,
        output_schema=host_ability.output_schema,
        meta=freeze_meta(host_ability.meta),
    )


def _to_category(host_category: Any) -> AbilityCategory:
    return AbilityCategory(
        slug=str(host_category.slug),
        label=str(host_category.label),
        description=str(host_category.description),
        meta=freeze_meta(host_category.meta),
    )


class RealAbilityRegistry(AbilityRegistry):
    """Production implementation forwarding to the host's Abilities API.

    The host object exposes `version`, `get_abilities()`, `get_ability(name)`,
    `has_ability(name)`, `get_ability_categories()`, `get_ability_category(slug)` and
    `has_ability_category(slug)`. Host abilities expose `execute`, `check_permissions`,
    `normalize_input` and `validate_input`, raising AbilityHostError on failure.
    """

    def __init__(self, host: Any) -> None:
        """Initialize RealAbilityRegistry.

        Args:
            host: The in-process host object, usually obtained from load_host()
        """
        self._host = host

    def host_version(self) -> str:
        return str(self._host.version)

    def list_abilities(self) -> list[Ability]:
        return [_to_ability(item) for item in self._host.get_abilities()]

    def get_ability(self, name: str) -> Ability | None:
        host_ability = self._host.get_ability(name)
        if host_ability is None:
            return None
        return _to_ability(host_ability)

    def ability_exists(self, name: str) -> bool:
        return bool(self._host.has_ability(name))

    def _host_ability(self, ability: Ability) -> Any:
        host_ability = self._host.get_ability(ability.name)
        if host_ability is None:
            raise AbilityHostError(f"Ability '{ability.name}' is no longer registered.")
        return host_ability

    def execute_ability(self, ability: Ability, ability_input: AbilityInput) -> Any:
        logger.debug("Executing ability %s", ability.name)
        try:
            return self._host_ability(ability).execute(ability_input)
        except AbilityHostError as e:
            return AbilityFailure(message=str(e))

    def check_permission(
        self, ability: Ability, ability_input: AbilityInput
    ) -> bool | AbilityFailure:
        logger.debug("Checking permissions for ability %s", ability.name)
        try:
            return bool(self._host_ability(ability).check_permissions(ability_input))
        except AbilityHostError as e:
            return AbilityFailure(message=str(e))

    def normalize_input(
        self, ability: Ability, ability_input: AbilityInput
    ) -> AbilityInput | AbilityFailure:
        try:
            return self._host_ability(ability).normalize_input(ability_input)
        except AbilityHostError as e:
            return AbilityFailure(message=str(e))

    def validate_input(
        self, ability: Ability, ability_input: AbilityInput
    ) -> AbilityFailure | None:
        logger.debug("Validating input for ability %s", ability.name)
        try:
            self._host_ability(ability).validate_input(ability_input)
        except AbilityHostError as e:
            return AbilityFailure(message=str(e))
        return None

    def list_categories(self) -> list[AbilityCategory]:
        return [_to_category(item) for item in self._host.get_ability_categories()]

    def get_category(self, slug: str) -> AbilityCategory | None:
        host_category = self._host.get_ability_category(slug)
        if host_category is None:
            return None
        return _to_category(host_category)

    def category_exists(self, slug: str) -> bool:
        return bool(self._host.has_ability_category(slug))
