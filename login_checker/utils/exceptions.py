"""
Custom Exception Types

Specific exceptions for configuration failures at startup.
"""


class LoginCheckerError(Exception):
    """Base exception for login checker."""
    pass


class ConfigurationError(LoginCheckerError):
    """Invalid configuration."""
    pass


class SettingsError(ConfigurationError):
    """
    Settings blob could not be resolved.

    Carries the underlying cause as ``detail``; the human-readable message
    is only assembled when the error is rendered.
    """

    prefix = 'Settings error'

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class SettingsEnvironmentError(SettingsError):
    """Settings environment variable is not set."""
    prefix = 'Error getting env variable'


class SettingsParseError(SettingsError):
    """Settings blob is not valid JSON or does not match the schema."""
    prefix = 'Could not deserialize settings blob'
