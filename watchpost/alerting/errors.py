"""Exception hierarchy for the alerting core.

Configuration errors are raised at load/validate time and disable the
offending provider or alert. Resolution errors are raised per
``AlertProvider.get_config`` call. Dispatch errors are raised by senders.
"""

from typing import Optional


class AlertingError(Exception):
    """Base exception for all alerting errors."""
    pass


class ConfigurationError(AlertingError):
    """Exception raised when alerting configuration is invalid."""
    pass


class DuplicateGroupOverrideError(ConfigurationError):
    """Exception raised when two overrides share a group or a group is empty."""

    def __init__(self, group: str):
        self.group = group
        if group:
            super().__init__(f"duplicate group override: '{group}'")
        else:
            super().__init__("group override must have a non-empty group")


class InvalidAlertDescriptionError(ConfigurationError):
    """Exception raised when an alert description contains a forbidden character."""
    pass


class UnknownAlertTypeError(ConfigurationError):
    """Exception raised when no provider exists for an alert type."""
    pass


class MissingRequiredFieldError(ConfigurationError):
    """Exception raised when a resolved provider config lacks a required field."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"{field} not set")


class ProviderOverrideDecodeError(AlertingError):
    """Exception raised when an alert's provider override cannot be decoded."""
    pass


class DispatchError(AlertingError):
    """Exception raised by senders when a notification could not be delivered."""
    pass
