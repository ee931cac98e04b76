"""Exception hierarchy for snapman."""


class SnapmanError(Exception):
    """Base exception for snapman errors."""


class SnapNotAvailableError(SnapmanError):
    """Raised when the snap CLI is not installed."""


class AuthenticationError(SnapmanError):
    """Raised when ``sudo -v`` does not succeed."""


class ConfigError(SnapmanError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""
