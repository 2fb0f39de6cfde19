"""Abstract interface for the host's ability registry."""

from abc import ABC, abstractmethod
from typing import Any

from ability_cli.gateway.registry.types import (
    Ability,
    AbilityCategory,
    AbilityFailure,
    AbilityInput,
)


class AbilityRegistry(ABC):
    """Abstract interface for the host's Abilities API.

    All implementations (real, fake) must implement this interface.

    The registry is read-only from the CLI's perspective: abilities and categories are
    registered by the host. Operations the host can reject (execute, validate, permission
    checks) return AbilityFailure instead of raising.
    """

    @abstractmethod
    def host_version(self) -> str:
        """Version string of the host providing the Abilities API."""
        ...

    @abstractmethod
    def list_abilities(self) -> list[Ability]:
        """All registered abilities, in host registration order."""
        ...

    @abstractmethod
    def get_ability(self, name: str) -> Ability | None:
        """Look up an ability by its "namespace/slug" name.

        Returns:
            The ability, or None if no ability is registered under that name
        """
        ...

    @abstractmethod
    def ability_exists(self, name: str) -> bool:
        ...

    @abstractmethod
    def execute_ability(self, ability: Ability, ability_input: AbilityInput) -> Any:
        """Run the ability with the given input.

        Returns:
            The ability's result value, or AbilityFailure if the host rejected the call
        """
        ...

    @abstractmethod
    def check_permission(
        self, ability: Ability, ability_input: AbilityInput
    ) -> bool | AbilityFailure:
        """Ask the host whether the current user may run the ability with this input."""
        ...

    @abstractmethod
    def normalize_input(
        self, ability: Ability, ability_input: AbilityInput
    ) -> AbilityInput | AbilityFailure:
        """Apply input schema defaults to the input.

        Returns:
            The normalized input, or AbilityFailure if the host rejected the call
        """
        ...

    @abstractmethod
    def validate_input(
        self, ability: Ability, ability_input: AbilityInput
    ) -> AbilityFailure | None:
        """Validate (already normalized) input against the ability's input schema.

        Returns:
            None when the input is valid, AbilityFailure describing the problem otherwise
        """
        ...

    @abstractmethod
    def list_categories(self) -> list[AbilityCategory]:
        """All registered categories, in host registration order."""
        ...

    @abstractmethod
    def get_category(self, slug: str) -> AbilityCategory | None:
        ...

    @abstractmethod
    def category_exists(self, slug: str) -> bool:
        ...
