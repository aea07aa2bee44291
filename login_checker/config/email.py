"""Email sender and recipient addresses taken from settings."""

from typing import List, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from login_checker.config.settings import Settings

RECIPIENT_SEPARATOR = ','


class EmailRecipient(BaseModel):
    """A single destination address, kept exactly as configured."""

    model_config = ConfigDict(frozen=True)

    email: str
    name: Optional[str] = None


class EmailSender(BaseModel):
    """The From identity for outgoing mail."""

    model_config = ConfigDict(frozen=True)

    email: str
    name: str

    @classmethod
    def from_settings(cls, settings: 'Settings') -> 'EmailSender':
        return cls(email=settings.email_from_address, name=settings.email_from_name)


def to_email_recipients(settings: 'Settings') -> List[EmailRecipient]:
    """
    Split the configured recipient list on commas.

    Segments are neither trimmed nor validated, and empty segments (from a
    trailing or doubled comma) are kept. Order follows the source string.
    """
    return [
        EmailRecipient(email=address)
        for address in settings.email_to_addresses.split(RECIPIENT_SEPARATOR)
    ]
