"""
Startup Wiring

Load runtime configuration, set up logging and resolve the settings blob.
Any resolution error propagates so the hosting process fails at startup.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Union

from login_checker.config.app_config import AppConfig, load_app_config
from login_checker.config.database import DatabaseConfig, to_database_config
from login_checker.config.email import EmailRecipient, EmailSender, to_email_recipients
from login_checker.config.resolver import SettingsResolver
from login_checker.config.settings import Settings
from login_checker.utils.logger import setup_logging, get_logger, register_secrets


@dataclass(frozen=True)
class Runtime:
    config: AppConfig
    settings: Settings
    database: DatabaseConfig
    sender: EmailSender
    recipients: List[EmailRecipient]


def initialize(
    env: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_dir: Optional[Union[str, Path]] = None
) -> Runtime:
    """
    Initialize configuration for the login checker.

    Args:
        env: Environment ('dev' or 'prod')
        environ: Key-value lookup holding the settings blob
        config_dir: Directory holding the YAML files

    Returns:
        Runtime with settings and derived artifacts

    Raises:
        SettingsEnvironmentError: If the settings variable is unset
        SettingsParseError: If the settings blob is invalid
    """
    config = load_app_config(env, config_dir)

    setup_logging(
        level=config.logging.level,
        log_file=config.logging.file,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        format_type=config.logging.format,
        console=config.logging.console
    )

    logger = get_logger(__name__)

    settings = SettingsResolver(environ).resolve()
    register_secrets(settings.secret_values())

    runtime = Runtime(
        config=config,
        settings=settings,
        database=to_database_config(settings),
        sender=EmailSender.from_settings(settings),
        recipients=to_email_recipients(settings),
    )

    logger.info(
        f"Login checker initialized in {config.environment} environment: "
        f"database={runtime.database.address}, recipients={len(runtime.recipients)}"
    )
    return runtime
