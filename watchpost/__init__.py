"""watchpost: alert lifecycle and provider configuration for health-check monitoring."""

__version__ = "0.1.0"
