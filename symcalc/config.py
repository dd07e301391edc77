"""Application configuration

Settings are read from SYMCALC_* environment variables and validated with
pydantic. They are cached after the first read; call reset_settings() (or
get_settings(reload=True)) after changing the environment.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from symcalc.exceptions import ConfigurationError

_ENV_PREFIX = "SYMCALC"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogSettings(BaseModel):
    """Logging settings"""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {_LOG_LEVELS}")
        return value


class RegistrySettings(BaseModel):
    """Function registry settings"""

    model_config = ConfigDict(frozen=True)

    # Probe every rule when the registry is built
    validate_rules: bool = True


class Settings(BaseModel):
    """All symcalc settings"""

    model_config = ConfigDict(frozen=True)

    log: LogSettings = LogSettings()
    registry: RegistrySettings = RegistrySettings()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from SYMCALC_* environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            value = env.get(f"{_ENV_PREFIX}_{name}")
            if value is None or value.strip() == "":
                return None
            return value.strip()

        log_fields = {}
        if read("LOG_LEVEL") is not None:
            log_fields["level"] = read("LOG_LEVEL")
        if read("LOG_FILE") is not None:
            log_fields["file"] = read("LOG_FILE")
        if read("LOG_JSON") is not None:
            log_fields["json_format"] = read("LOG_JSON")

        registry_fields = {}
        if read("VALIDATE_REGISTRY") is not None:
            registry_fields["validate_rules"] = read("VALIDATE_REGISTRY")

        try:
            return cls(
                log=LogSettings(**log_fields),
                registry=RegistrySettings(**registry_fields),
            )
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid {_ENV_PREFIX} configuration",
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """Get settings, reading the environment on first use"""
    global _settings
    if _settings is None or reload:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "LogSettings",
    "RegistrySettings",
    "get_settings",
    "reset_settings",
]
