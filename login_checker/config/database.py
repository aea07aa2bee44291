"""
SQL Server Connection Descriptor

Connection parameters derived from the settings blob. Nothing here opens
a connection; the descriptor is handed to whichever driver the host
application uses.
"""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from login_checker.config.settings import Settings

DEFAULT_SQL_PORT = 1433
APPLICATION_NAME = 'Login Checker'
DEFAULT_ODBC_DRIVER = 'ODBC Driver 18 for SQL Server'


class EncryptionLevel(str, Enum):
    """TLS negotiation level for the SQL Server connection."""
    OFF = 'off'
    ON = 'on'
    REQUIRED = 'required'


class DatabaseConfig(BaseModel):
    """SQL Server connection configuration."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(description="Server host name")
    port: int = Field(DEFAULT_SQL_PORT, ge=1, le=65535, description="TCP port")
    database: str = Field(description="Database name")
    username: str = Field(description="SQL authentication user")
    password: str = Field(repr=False, description="SQL authentication password")
    encryption: EncryptionLevel = Field(EncryptionLevel.OFF, description="Encryption level")
    trust_server_certificate: bool = Field(True, description="Accept self-signed server certificates")
    application_name: str = Field(APPLICATION_NAME, description="Application name reported to the server")

    def get_addr(self) -> str:
        """Return the ``host:port`` address."""
        return f"{self.host}:{self.port}"

    @property
    def address(self) -> str:
        return self.get_addr()

    def to_odbc_connection_string(self, driver: str = DEFAULT_ODBC_DRIVER) -> str:
        """
        Render an ODBC connection string for SQL authentication.

        Args:
            driver: Installed ODBC driver name

        Returns:
            Connection string accepted by ``pyodbc.connect``
        """
        encrypt = 'no' if self.encryption is EncryptionLevel.OFF else 'yes'
        trust = 'yes' if self.trust_server_certificate else 'no'
        return (
            "DRIVER={{{driver}}};"
            "SERVER={host},{port};"
            "DATABASE={database};"
            "UID={user};"
            "PWD={password};"
            "Encrypt={encrypt};"
            "TrustServerCertificate={trust};"
            "APP={app};"
        ).format(
            driver=driver,
            host=self.host,
            port=self.port,
            database=self.database,
            user=self.username,
            password=self.password,
            encrypt=encrypt,
            trust=trust,
            app=self.application_name,
        )


def to_database_config(settings: 'Settings') -> DatabaseConfig:
    """
    Build the SQL Server connection descriptor from settings.

    Field contents are not validated; empty strings pass through as-is.
    Encryption is off and the server certificate is trusted unconditionally.
    """
    return DatabaseConfig(
        host=settings.database_server,
        port=DEFAULT_SQL_PORT,
        database=settings.database_name,
        username=settings.database_username,
        password=settings.database_password,
        encryption=EncryptionLevel.OFF,
        trust_server_certificate=True,
        application_name=APPLICATION_NAME,
    )
