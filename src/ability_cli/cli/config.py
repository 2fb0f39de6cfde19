import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MIN_HOST_VERSION = "6.9"  # Abilities API first shipped in this host release

CONFIG_DIR_ENV_VAR = "ABILITY_CONFIG_DIR"
HOST_ENV_VAR = "ABILITY_HOST"


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of config.toml merged with environment overrides."""

    host_registry: str | None  # "package.module:attribute" of the in-process host
    min_host_version: str


def default_config_dir() -> Path:
    """Directory holding config.toml: $ABILITY_CONFIG_DIR, else ~/.ability."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".ability"


def load_config(config_dir: Path, env: dict[str, str]) -> LoadedConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    ABILITY_HOST in `env` takes precedence over the file's host registry.

    Example config:
      [host]
      registry = "mysite.abilities:host"
      min_version = "6.9"
    """
    data: dict[str, object] = {}
    cfg_path = config_dir / "config.toml"
    if cfg_path.exists():
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    host = data.get("host", {})
    if not isinstance(host, dict):
        host = {}

    registry = host.get("registry")
    if registry is not None:
        registry = str(registry)
    env_registry = env.get(HOST_ENV_VAR)
    if env_registry:
        registry = env_registry

    min_version = host.get("min_version", DEFAULT_MIN_HOST_VERSION)
    return LoadedConfig(host_registry=registry, min_host_version=str(min_version))
