"""
Configuration Module

Settings blob resolution plus YAML-based runtime configuration.
"""

from login_checker.config.settings import Settings
from login_checker.config.resolver import (
    SECRET_BLOB_ENV, SettingsResolver, get_settings,
    to_database_config, to_email_recipients
)
from login_checker.config.database import DatabaseConfig, EncryptionLevel
from login_checker.config.email import EmailRecipient, EmailSender
from login_checker.config.app_config import AppConfig, LoggingConfig, load_app_config

__all__ = [
    'Settings', 'SECRET_BLOB_ENV', 'SettingsResolver', 'get_settings',
    'to_database_config', 'to_email_recipients',
    'DatabaseConfig', 'EncryptionLevel', 'EmailRecipient', 'EmailSender',
    'AppConfig', 'LoggingConfig', 'load_app_config',
]
