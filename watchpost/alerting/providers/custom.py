"""Custom HTTP request provider configuration."""

from typing import Dict, Optional

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ClientConfig, ProviderConfig, register_provider


class URLNotSetError(MissingRequiredFieldError):
    """Exception raised when the custom provider has no URL."""
    pass


class CustomConfig(ProviderConfig):
    """Configuration for an arbitrary HTTP request."""

    url: str = Field(default='', description="Target URL; may contain placeholders")
    method: str = Field(default='', description="HTTP method (default: GET)")
    body: str = Field(default='', description="Request body template")
    headers: Dict[str, str] = Field(default_factory=dict, description="Request headers")
    placeholders: Dict[str, Dict[str, str]] = Field(
        default_factory=dict,
        description="Per-placeholder value substitutions, e.g. ALERT_TRIGGERED_OR_RESOLVED"
    )
    client: Optional[ClientConfig] = Field(default=None, description="HTTP client configuration")

    def validate_config(self) -> None:
        self._require('url', error=URLNotSetError)


@register_provider(AlertType.CUSTOM)
class CustomAlertProvider(AlertProvider):
    """Sends alerts through a user-defined HTTP request."""

    config_class = CustomConfig
