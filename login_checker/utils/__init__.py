"""
Utility Modules

Common utilities for the login checker.

Modules:
    - logger: Structured logging setup and secret redaction
    - exceptions: Custom exception types
"""

from login_checker.utils.logger import get_logger, setup_logging, register_secrets
from login_checker.utils.exceptions import *

__all__ = [
    'get_logger',
    'setup_logging',
    'register_secrets',
    'LoginCheckerError',
    'ConfigurationError',
    'SettingsError',
    'SettingsEnvironmentError',
    'SettingsParseError',
]
