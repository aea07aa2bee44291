"""
Settings Data Model

Pydantic model for the application settings blob. JSON keys are the
PascalCase form of the field names (``database_server`` -> ``DatabaseServer``).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from login_checker.config.database import DatabaseConfig, to_database_config
from login_checker.config.email import EmailRecipient, to_email_recipients

SECRET_FIELDS = ('database_password', 'log_webhook_uri', 'sendgrid_api_key')


class Settings(BaseModel):
    """Application settings delivered through the secret blob."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        frozen=True,
        strict=True,  # No coercion of numbers/bools into strings
        extra='ignore',
    )

    database_server: str = Field(description="SQL Server host")
    database_name: str = Field(description="Database name")
    database_username: str = Field(description="SQL authentication user")
    database_password: str = Field(repr=False, description="SQL authentication password")
    log_webhook_uri: str = Field(repr=False, description="Webhook receiving log events")
    sendgrid_api_key: str = Field(repr=False, description="SendGrid API key")
    email_from_name: str = Field(description="Sender display name")
    email_from_address: str = Field(description="Sender address")
    email_to_addresses: str = Field(description="Comma-separated recipient addresses")

    @classmethod
    def from_blob(cls, blob: str) -> 'Settings':
        """
        Parse a settings blob.

        Args:
            blob: JSON object string with PascalCase keys

        Returns:
            Validated Settings object

        Raises:
            ValidationError: If the blob is not JSON or does not match the schema
        """
        return cls.model_validate_json(blob)

    @classmethod
    def from_fields(cls, **values: str) -> 'Settings':
        """
        Build Settings from snake_case field names.

        The model itself only accepts PascalCase keys, matching the blob.
        """
        return cls.model_validate({
            cls.model_fields[name].alias if name in cls.model_fields else name: value
            for name, value in values.items()
        })

    def to_blob(self) -> str:
        """Serialize back to the PascalCase JSON schema."""
        return self.model_dump_json(by_alias=True)

    def secret_values(self) -> List[str]:
        """Values that must be kept out of logs."""
        return [getattr(self, name) for name in SECRET_FIELDS]

    def public_summary(self) -> dict:
        """Non-secret fields, for logging."""
        return self.model_dump(exclude=set(SECRET_FIELDS))

    def get_sql_settings(self) -> DatabaseConfig:
        return to_database_config(self)

    def get_email_destinations(self) -> List[EmailRecipient]:
        return to_email_recipients(self)
