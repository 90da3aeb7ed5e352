"""Alert lifecycle and provider configuration resolution.

This package decides when a monitored endpoint's alerts trigger or resolve
and computes the effective configuration of the provider that delivers them:

- Hysteresis thresholds over consecutive check outcomes
- Cron-based enablement windows
- Trigger/resolve state commits and resolve-key lifecycle
- Default, group and per-alert configuration overrides
"""

from .alert import Alert, DEFAULT_FAILURE_THRESHOLD, DEFAULT_SUCCESS_THRESHOLD
from .types import AlertType

from .errors import (
    AlertingError,
    ConfigurationError,
    DispatchError,
    DuplicateGroupOverrideError,
    InvalidAlertDescriptionError,
    MissingRequiredFieldError,
    ProviderOverrideDecodeError,
    UnknownAlertTypeError,
)

from .cron import (
    CronEvaluator,
    CronEvaluationError,
    CronValidationError,
    is_due,
    validate_cron_expression,
)

from .thresholds import (
    AlertAction,
    evaluate_thresholds,
    should_resolve,
    should_trigger,
)

from .state import (
    AlertState,
    commit_resolve,
    commit_trigger,
    generate_resolve_key,
    get_state,
    prepare_trigger,
)

from .providers import AlertProvider, Override, ProviderConfig
from .config import AlertingConfig, ValidationReport
from .handler import AlertingHandler, AlertOutcome, AlertSender

__all__ = [
    # Alert model
    'Alert',
    'AlertType',
    'DEFAULT_FAILURE_THRESHOLD',
    'DEFAULT_SUCCESS_THRESHOLD',

    # Errors
    'AlertingError',
    'ConfigurationError',
    'DispatchError',
    'DuplicateGroupOverrideError',
    'InvalidAlertDescriptionError',
    'MissingRequiredFieldError',
    'ProviderOverrideDecodeError',
    'UnknownAlertTypeError',

    # Cron evaluation
    'CronEvaluator',
    'CronEvaluationError',
    'CronValidationError',
    'is_due',
    'validate_cron_expression',

    # Thresholds
    'AlertAction',
    'evaluate_thresholds',
    'should_resolve',
    'should_trigger',

    # State
    'AlertState',
    'commit_resolve',
    'commit_trigger',
    'generate_resolve_key',
    'get_state',
    'prepare_trigger',

    # Providers and configuration
    'AlertProvider',
    'Override',
    'ProviderConfig',
    'AlertingConfig',
    'ValidationReport',

    # Handling
    'AlertingHandler',
    'AlertOutcome',
    'AlertSender',
]
