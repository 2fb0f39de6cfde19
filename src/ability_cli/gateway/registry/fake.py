"""In-memory fake implementation of the ability registry for testing."""

import copy
from collections.abc import Mapping
from typing import Any

import jsonschema

from ability_cli.gateway.registry.abc import AbilityRegistry
from ability_cli.gateway.registry.types import (
    Ability,
    AbilityCategory,
    AbilityFailure,
    AbilityInput,
)


class FakeAbilityRegistry(AbilityRegistry):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments. Input validation
    uses jsonschema against each ability's input schema, so tests exercise the same
    pass/fail split a real host produces.
    """

    def __init__(
        self,
        *,
        abilities: list[Ability] | None = None,
        categories: list[AbilityCategory] | None = None,
        execution_results: dict[str, Any] | None = None,
        permissions: dict[str, bool | AbilityFailure] | None = None,
        version: str = "6.9",
    ) -> None:
        """Create FakeAbilityRegistry with pre-configured state.

        Args:
            abilities: Registered abilities, in registration order
            categories: Registered categories, in registration order
            execution_results: Result (or AbilityFailure) per ability name. Abilities
                without an entry echo their input back.
            permissions: Permission result per ability name. Defaults to allowed.
            version: Host version reported to the version gate
        """
        self._abilities = list(abilities) if abilities is not None else []
        self._categories = list(categories) if categories is not None else []
        self._execution_results = dict(execution_results) if execution_results else {}
        self._permissions = dict(permissions) if permissions else {}
        self._version = version
        self._executed: list[tuple[str, AbilityInput]] = []
        self._permission_checks: list[tuple[str, AbilityInput]] = []
        self._validated: list[tuple[str, AbilityInput]] = []

    @property
    def executed(self) -> list[tuple[str, AbilityInput]]:
        """(name, input) pairs passed to execute_ability, in call order."""
        return list(self._executed)

    @property
    def permission_checks(self) -> list[tuple[str, AbilityInput]]:
        return list(self._permission_checks)

    @property
    def validated(self) -> list[tuple[str, AbilityInput]]:
        """(name, normalized input) pairs passed to validate_input."""
        return list(self._validated)

    def host_version(self) -> str:
        return self._version

    def list_abilities(self) -> list[Ability]:
        return list(self._abilities)

    def get_ability(self, name: str) -> Ability | None:
        for ability in self._abilities:
            if ability.name == name:
                return ability
        return None

    def ability_exists(self, name: str) -> bool:
        return self.get_ability(name) is not None

    def execute_ability(self, ability: Ability, ability_input: AbilityInput) -> Any:
        self._executed.append((ability.name, ability_input))
        if ability.name in self._execution_results:
            return self._execution_results[ability.name]
        return ability_input

    def check_permission(
        self, ability: Ability, ability_input: AbilityInput
    ) -> bool | AbilityFailure:
        self._permission_checks.append((ability.name, ability_input))
        return self._permissions.get(ability.name, True)

    def normalize_input(
        self, ability: Ability, ability_input: AbilityInput
    ) -> AbilityInput | AbilityFailure:
        """Substitute the schema's top-level default when no input was given."""
        schema = ability.input_schema
        if ability_input is None and isinstance(schema, Mapping) and "default" in schema:
            return copy.deepcopy(schema["default"])
        return ability_input

    def validate_input(
        self, ability: Ability, ability_input: AbilityInput
    ) -> AbilityFailure | None:
        self._validated.append((ability.name, ability_input))
        schema = ability.input_schema
        if not schema:
            if ability_input is None:
                return None
            return AbilityFailure(
                message=(
                    f'Ability "{ability.name}" does not define an input schema '
                    "required to validate the provided input."
                )
            )

        try:
            jsonschema.validate(ability_input, schema)
        except jsonschema.ValidationError as exc:
            return AbilityFailure(
                message=f'Ability "{ability.name}" has invalid input. Reason: {exc.message}'
            )
        return None

    def list_categories(self) -> list[AbilityCategory]:
        return list(self._categories)

    def get_category(self, slug: str) -> AbilityCategory | None:
        for category in self._categories:
            if category.slug == slug:
                return category
        return None

    def category_exists(self, slug: str) -> bool:
        return self.get_category(slug) is not None
