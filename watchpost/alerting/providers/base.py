"""Base classes for alert providers and layered configuration resolution.

Every provider is configured the same way: a default configuration, a list of
group-keyed overrides, and an optional inline override on each alert. The
effective configuration for an endpoint/alert pair is resolved in that order
of precedence (later wins) by ``AlertProvider.get_config``.
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..alert import Alert
from ..errors import (
    ConfigurationError,
    DuplicateGroupOverrideError,
    MissingRequiredFieldError,
    ProviderOverrideDecodeError,
    UnknownAlertTypeError,
)
from ..types import AlertType
from ..utils import clone, is_empty_value, to_dash_case


logger = logging.getLogger(__name__)


class ProviderConfig(BaseModel):
    """Base class for provider-specific configuration.

    Subclasses declare their fields and implement ``validate_config`` for
    required-field checks on the fully resolved configuration.
    """

    # YAML decodes numeric scalars such as chat ids as numbers
    model_config = ConfigDict(
        alias_generator=to_dash_case,
        populate_by_name=True,
        extra='forbid',
        coerce_numbers_to_str=True,
    )

    def merge(self, override: "ProviderConfig") -> None:
        """Merge an override on top of this configuration in place.

        A field is taken from the override only when it was explicitly set
        there and is not empty. Maps are merged key by key, everything else
        (lists, nested models, scalars) is replaced wholesale. Values are
        copied so the override is never aliased.
        """
        for name in type(self).model_fields:
            if name not in override.model_fields_set:
                continue
            value = getattr(override, name)
            if is_empty_value(value):
                continue
            current = getattr(self, name)
            if isinstance(value, dict) and isinstance(current, dict):
                merged = clone(current)
                merged.update(clone(value))
                setattr(self, name, merged)
            else:
                setattr(self, name, clone(value))

    def validate_config(self) -> None:
        """Validate required fields of the resolved configuration.

        Raises:
            MissingRequiredFieldError: If a required field is missing
        """
        pass

    def _require(self, *field_names: str, error: Type[MissingRequiredFieldError] = MissingRequiredFieldError) -> None:
        """Raise ``error`` for the first of ``field_names`` that is empty."""
        for name in field_names:
            if is_empty_value(getattr(self, name)):
                raise error(type(self).model_fields[name].alias or to_dash_case(name))


class ClientConfig(BaseModel):
    """Configuration of the client used to reach a provider."""

    model_config = ConfigDict(
        alias_generator=to_dash_case,
        populate_by_name=True,
        extra='forbid',
        coerce_numbers_to_str=True,
    )

    insecure: bool = Field(
        default=False,
        description="Skip TLS certificate verification"
    )

    ignore_redirect: bool = Field(
        default=False,
        description="Do not follow redirects"
    )

    timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Request timeout in seconds"
    )

    dns_resolver: Optional[str] = Field(
        default=None,
        description="Custom DNS resolver, e.g. udp://8.8.8.8:53"
    )


@dataclass(frozen=True)
class Override:
    """Configuration that takes precedence over the default for one group."""

    group: str
    config: ProviderConfig


class AlertProvider:
    """Provider configuration with group and per-alert overrides.

    Subclasses set ``alert_type`` and ``config_class``. Providers whose
    remote API correlates trigger and resolve calls through a key the caller
    must supply set ``requires_resolve_key``.
    """

    alert_type: ClassVar[AlertType]
    config_class: ClassVar[Type[ProviderConfig]] = ProviderConfig
    requires_resolve_key: ClassVar[bool] = False

    def __init__(
        self,
        default_config: ProviderConfig,
        default_alert: Optional[Alert] = None,
        overrides: Optional[List[Override]] = None
    ):
        self.default_config = default_config
        self.default_alert = default_alert
        self.overrides: List[Override] = list(overrides or [])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlertProvider":
        """Build a provider from its configuration block.

        The block holds the default settings inline, next to the optional
        ``default-alert`` and ``overrides`` keys.

        Raises:
            ConfigurationError: If any part of the block is malformed
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"{cls.alert_type.value} configuration must be a mapping")

        settings = dict(data)
        default_alert_data = settings.pop('default-alert', None)
        overrides_data = settings.pop('overrides', None) or []

        try:
            default_config = cls.config_class.model_validate(settings)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {cls.alert_type.value} configuration: {e}")

        default_alert = None
        if default_alert_data is not None:
            if not isinstance(default_alert_data, dict):
                raise ConfigurationError(f"{cls.alert_type.value} default-alert must be a mapping")
            try:
                default_alert = Alert.model_validate({**default_alert_data, 'type': cls.alert_type})
            except ValidationError as e:
                raise ConfigurationError(f"Invalid {cls.alert_type.value} default-alert: {e}")

        if not isinstance(overrides_data, list):
            raise ConfigurationError(f"{cls.alert_type.value} overrides must be a list")

        overrides = []
        for index, override_data in enumerate(overrides_data):
            if not isinstance(override_data, dict):
                raise ConfigurationError(f"{cls.alert_type.value} override #{index} must be a mapping")
            override_settings = dict(override_data)
            group = override_settings.pop('group', '')
            try:
                override_config = cls.config_class.model_validate(override_settings)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid {cls.alert_type.value} override #{index}: {e}")
            overrides.append(Override(group=str(group or ''), config=override_config))

        return cls(default_config=default_config, default_alert=default_alert, overrides=overrides)

    def validate(self) -> None:
        """Validate the provider's configuration once, at load time.

        Raises:
            DuplicateGroupOverrideError: If an override group is empty or repeated
            MissingRequiredFieldError: If the default configuration is incomplete
        """
        registered_groups = set()
        for override in self.overrides:
            if not override.group or override.group in registered_groups:
                raise DuplicateGroupOverrideError(override.group)
            registered_groups.add(override.group)
        self.default_config.validate_config()

    def is_valid(self) -> bool:
        """Check whether the provider's configuration is valid."""
        try:
            self.validate()
        except ConfigurationError as e:
            logger.debug(f"Provider {self.alert_type.value} is invalid: {e}")
            return False
        return True

    def get_default_alert(self) -> Optional[Alert]:
        """Get the provider's default alert."""
        return self.default_alert

    def get_config(self, group: str, alert: Alert) -> ProviderConfig:
        """Resolve the effective configuration for an endpoint group and alert.

        Precedence, lowest to highest: default configuration, the override
        whose group matches ``group``, the alert's provider override. The
        stored configuration is never modified, so this is safe to call
        concurrently.

        Args:
            group: Group of the endpoint the alert belongs to
            alert: Alert being dispatched

        Returns:
            A fresh, independent configuration

        Raises:
            ProviderOverrideDecodeError: If the alert's provider override does not fit the config
            MissingRequiredFieldError: If the resolved configuration is incomplete
        """
        config = self.default_config.model_copy(deep=True)

        for override in self.overrides:
            if override.group == group:
                config.merge(override.config)
                break

        if alert.provider_override:
            config.merge(self.decode_provider_override(alert))

        config.validate_config()
        return config

    def decode_provider_override(self, alert: Alert) -> ProviderConfig:
        """Decode an alert's inline override into this provider's config model.

        Raises:
            ProviderOverrideDecodeError: If a value has an incompatible type or a key is unknown
        """
        try:
            return self.config_class.model_validate(alert.provider_override)
        except ValidationError as e:
            raise ProviderOverrideDecodeError(
                f"Invalid provider-override for {self.alert_type.value} alert: {e}"
            ) from e

    def validate_overrides(self, group: str, alert: Alert) -> None:
        """Validate the overrides that apply to an alert by resolving them."""
        self.get_config(group, alert)


_provider_classes: Dict[AlertType, Type[AlertProvider]] = {}


def register_provider(alert_type: AlertType):
    """Decorator registering an ``AlertProvider`` subclass for an alert type."""
    def decorator(provider_class: Type[AlertProvider]) -> Type[AlertProvider]:
        if not issubclass(provider_class, AlertProvider):
            raise ValueError(f"Provider class must inherit from AlertProvider: {provider_class}")
        provider_class.alert_type = alert_type
        _provider_classes[alert_type] = provider_class
        return provider_class
    return decorator


def get_provider_class(alert_type: AlertType) -> Type[AlertProvider]:
    """Get the provider class for an alert type.

    Raises:
        UnknownAlertTypeError: If no provider configuration exists for the type
    """
    provider_class = _provider_classes.get(alert_type)
    if provider_class is None:
        raise UnknownAlertTypeError(f"No configurable provider for alert type: {alert_type.value}")
    return provider_class


def list_provider_types() -> List[AlertType]:
    """List the alert types that have a configurable provider."""
    return list(_provider_classes.keys())
