"""Ability registry gateway for the host's Abilities API.

This package provides an abstract interface and implementations for registry lookups
and the execute/validate/permission calls forwarded to the host.

Import from submodules:
- ability_cli.gateway.registry.abc: AbilityRegistry (ABC)
- ability_cli.gateway.registry.real: RealAbilityRegistry, load_host
- ability_cli.gateway.registry.fake: FakeAbilityRegistry
- ability_cli.gateway.registry.types: Ability, AbilityCategory, AbilityFailure, AbilityHostError
"""
