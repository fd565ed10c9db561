"""
Configuration for rightsgate.

Settings come from RIGHTSGATE_* environment variables, then an optional YAML
file. Role definitions (role name -> list of right patterns) live in their own
YAML file and are only read when load_roles_config() is called.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rightsgate.pattern import is_pattern

CONFIG_PATH = "/etc/rightsgate/config.yaml"


def yaml_config_settings_source() -> dict[str, Any]:
    """Load settings from the YAML config file, if present."""
    config_path = Path(CONFIG_PATH)
    if config_path.exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    return {}


class RolesConfig(BaseModel):
    """Role definitions used to seed an AccessControl."""

    roles: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Role name -> rights in action:possession/resource form",
    )

    @field_validator("roles")
    @classmethod
    def _patterns_well_formed(cls, roles: dict[str, list[str]]) -> dict[str, list[str]]:
        for role, patterns in roles.items():
            for pattern in patterns:
                if not is_pattern(pattern):
                    raise ValueError(f"role {role!r}: malformed right pattern {pattern!r}")
        return roles


class Settings(BaseSettings):
    """Library settings."""

    model_config = SettingsConfigDict(
        env_prefix="RIGHTSGATE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=True, description="JSON logging in production")
    roles_file: str = Field(
        default="/etc/rightsgate/roles.yaml",
        description="Default path for load_roles_config()",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Env vars override the YAML config file."""
        return (
            init_settings,
            env_settings,
            yaml_config_settings_source,
            dotenv_settings,
            file_secret_settings,
        )


def load_roles_config(path: str | None = None) -> RolesConfig:
    """Load role definitions from YAML. A missing file yields no roles.

    Raises:
        pydantic.ValidationError: If a role lists a malformed pattern.
    """
    config_path = Path(path or get_settings().roles_file)
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return RolesConfig(**data)
    return RolesConfig()


# Loaded by get_settings()
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the library settings, loading them on first call.

    Raises:
        pydantic.ValidationError: If a RIGHTSGATE_* variable or the config file is invalid.
    """
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _settings  # noqa: PLW0603
    _settings = None
