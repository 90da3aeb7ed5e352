"""Email (SMTP) provider configuration."""

from typing import List, Optional

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ClientConfig, ProviderConfig, register_provider


class MissingFromOrToError(MissingRequiredFieldError):
    """Exception raised when the sender or recipients are missing."""

    def __init__(self, field: str):
        super().__init__(field, "from and to fields are required")


class InvalidPortError(MissingRequiredFieldError):
    """Exception raised when the SMTP port is out of range."""

    def __init__(self, field: str = 'port'):
        super().__init__(field, "port must be between 1 and 65535 inclusively")


class MissingHostError(MissingRequiredFieldError):
    """Exception raised when the SMTP host is missing."""

    def __init__(self, field: str = 'host'):
        super().__init__(field, "host is required")


class EmailConfig(ProviderConfig):
    """SMTP settings and message texts."""

    from_address: str = Field(default='', alias='from', description="Sender address")
    username: str = Field(default='', description="SMTP username (default: from)")
    password: str = Field(default='', description="SMTP password; unauthenticated if empty")
    host: str = Field(default='', description="SMTP host")
    port: int = Field(default=0, description="SMTP port")
    to: str = Field(default='', description="Comma-separated recipients")
    text_email_subject_triggered: str = Field(default='', description="Subject of triggered emails")
    text_email_subject_resolved: str = Field(default='', description="Subject of resolved emails")
    text_email_body_triggered: str = Field(default='', description="Body of triggered emails")
    text_email_body_resolved: str = Field(default='', description="Body of resolved emails")
    client: Optional[ClientConfig] = Field(default=None, description="SMTP client configuration")

    def validate_config(self) -> None:
        self._require('from_address', 'to', error=MissingFromOrToError)
        if not 1 <= self.port <= 65535:
            raise InvalidPortError()
        self._require('host', error=MissingHostError)

    def get_username(self) -> str:
        """Get the SMTP username, falling back to the sender address."""
        return self.username or self.from_address

    def get_recipients(self) -> List[str]:
        """Split the recipient list."""
        return [address.strip() for address in self.to.split(',') if address.strip()]


@register_provider(AlertType.EMAIL)
class EmailAlertProvider(AlertProvider):
    """Sends alerts by email."""

    config_class = EmailConfig
