"""
Settings Resolver

Reads the settings blob from an environment lookup and deserializes it.
The lookup is injectable so callers (and tests) can supply values without
touching the process environment.
"""

import os
import logging
from typing import Mapping, Optional

from pydantic import ValidationError

from login_checker.config.database import to_database_config
from login_checker.config.email import to_email_recipients
from login_checker.config.settings import Settings
from login_checker.utils.exceptions import SettingsEnvironmentError, SettingsParseError

logger = logging.getLogger(__name__)

SECRET_BLOB_ENV = 'SecretBlob'
ENV_NOT_FOUND = 'environment variable not found'

__all__ = [
    'SECRET_BLOB_ENV',
    'SettingsResolver',
    'get_settings',
    'describe_validation_error',
    'to_database_config',
    'to_email_recipients',
]


def describe_validation_error(error: ValidationError) -> str:
    """
    Summarize a validation error without echoing the input.

    The raw pydantic message repeats the offending input, which here is
    the secret blob itself. Malformed JSON is reported with the bare parser
    message (``expected value at line 1 column 1``).
    """
    parts = []
    for item in error.errors(include_url=False, include_input=False):
        msg = item['msg']
        if item['type'] == 'json_invalid':
            msg = item.get('ctx', {}).get('error', msg)
        loc = '.'.join(str(p) for p in item['loc'])
        parts.append(f"{loc}: {msg}" if loc else msg)
    return '; '.join(parts)


class SettingsResolver:
    """
    Resolve Settings from a single environment variable.

    Holds no state between calls; every ``resolve()`` builds a new value.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, env_var: str = SECRET_BLOB_ENV):
        """
        Args:
            environ: Key-value lookup (default: ``os.environ`` at resolve time)
            env_var: Name of the variable holding the blob
        """
        self._environ = environ
        self.env_var = env_var

    def _lookup(self) -> str:
        environ = os.environ if self._environ is None else self._environ
        try:
            return environ[self.env_var]
        except KeyError as e:
            logger.error(
                f"Settings variable {self.env_var} is not set",
                extra={'error_type': 'environment', 'env_var': self.env_var}
            )
            raise SettingsEnvironmentError(ENV_NOT_FOUND) from e

    def resolve(self) -> Settings:
        """
        Read and deserialize the settings blob.

        Returns:
            Populated Settings object

        Raises:
            SettingsEnvironmentError: If the variable is unset
            SettingsParseError: If the blob is malformed or misses a field
        """
        blob = self._lookup()

        try:
            settings = Settings.from_blob(blob)
        except ValidationError as e:
            logger.error(
                f"Settings blob in {self.env_var} failed validation ({e.error_count()} errors)",
                extra={'error_type': 'parse', 'env_var': self.env_var}
            )
            raise SettingsParseError(describe_validation_error(e)) from e

        logger.info(
            f"Settings resolved from {self.env_var}",
            extra={'settings': settings.public_summary()}
        )
        return settings


def get_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Resolve settings from the given lookup or the process environment.

    Args:
        environ: Optional key-value lookup

    Returns:
        Settings instance
    """
    return SettingsResolver(environ).resolve()
