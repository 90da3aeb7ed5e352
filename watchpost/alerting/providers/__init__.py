"""Alert provider configurations.

Each provider module registers its ``AlertProvider`` subclass for its
``AlertType`` on import.
"""

from .base import (
    AlertProvider,
    ClientConfig,
    Override,
    ProviderConfig,
    get_provider_class,
    list_provider_types,
    register_provider,
)

# Import concrete providers to register them
from .alertmanager import AlertmanagerAlertProvider, AlertmanagerConfig
from .custom import CustomAlertProvider, CustomConfig
from .email import EmailAlertProvider, EmailConfig
from .gitlab import GitLabAlertProvider, GitLabConfig
from .incidentio import IncidentIOAlertProvider, IncidentIOConfig
from .pagerduty import PagerDutyAlertProvider, PagerDutyConfig
from .slack import SlackAlertProvider, SlackConfig
from .telegram import TelegramAlertProvider, TelegramConfig

__all__ = [
    # Base framework
    'AlertProvider',
    'ClientConfig',
    'Override',
    'ProviderConfig',
    'get_provider_class',
    'list_provider_types',
    'register_provider',

    # Providers
    'AlertmanagerAlertProvider',
    'AlertmanagerConfig',
    'CustomAlertProvider',
    'CustomConfig',
    'EmailAlertProvider',
    'EmailConfig',
    'GitLabAlertProvider',
    'GitLabConfig',
    'IncidentIOAlertProvider',
    'IncidentIOConfig',
    'PagerDutyAlertProvider',
    'PagerDutyConfig',
    'SlackAlertProvider',
    'SlackConfig',
    'TelegramAlertProvider',
    'TelegramConfig',
]
