class BrefError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:bref_error'


class ClockError(BrefError):
    """Raised when the system clock reports a time before the Unix epoch.

    No sane time-based key can be produced from such a clock, so callers
    should treat this as fatal for the current operation.
    """

    error_code = 'app:clock_error'


class ConfigurationError(BrefError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
