"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required settings are absent or blank."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when a setting is present but cannot be used."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name}={value!r}: {reason}")
        self.name = name
        self.value = value
