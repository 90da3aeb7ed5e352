"""incident.io alert source provider configuration."""

from typing import Any, Dict

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ProviderConfig, register_provider


REST_API_URL = "https://api.incident.io/v2/alert_events/http/"


class URLNotSetError(MissingRequiredFieldError):
    """Exception raised when the alert source URL is missing or foreign."""
    pass


class AuthTokenNotSetError(MissingRequiredFieldError):
    """Exception raised when the auth token is missing."""
    pass


class IncidentIOConfig(ProviderConfig):
    """incident.io HTTP alert source settings."""

    url: str = Field(default='', description="Alert source URL")
    auth_token: str = Field(default='', description="Alert source bearer token")
    source_url: str = Field(default='', description="Link shown on the incident")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Extra metadata sent with every event")

    def validate_config(self) -> None:
        self._require('url', error=URLNotSetError)
        if not self.url.startswith(REST_API_URL):
            raise URLNotSetError('url', f"url must start with {REST_API_URL}")
        self._require('auth_token', error=AuthTokenNotSetError)


@register_provider(AlertType.INCIDENT_IO)
class IncidentIOAlertProvider(AlertProvider):
    """Fires and resolves incident.io alert events.

    Events are correlated by a deduplication key the caller supplies.
    """

    config_class = IncidentIOConfig
    requires_resolve_key = True
