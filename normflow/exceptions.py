"""Project-wide exception types."""

class NormflowError(Exception):
    """Base exception for all normflow errors."""


class InvalidInput(NormflowError, ValueError):
    """Raised when a sequence cannot be normalized (too short, not numeric, not finite)."""


class DegenerateRange(NormflowError, ValueError):
    """Raised when every element of a sequence is equal, so max - min is zero."""


class NormalizationCheckError(NormflowError):
    """Raised when normalized output violates a postcondition."""


class MappingError(NormflowError):
    """Raised when a mapped function returns a result that cannot be collected."""


class ModelFitError(NormflowError):
    """Raised when a regression model cannot be fitted to a data split."""


class DataSourceError(NormflowError):
    """Raised when tabular input cannot be read."""


class SchemaError(NormflowError):
    """Raised when tabular input is missing columns or has the wrong dtypes."""


class ConfigError(NormflowError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class ConfigConflictError(ConfigError):
    """Raised when incompatible configuration options are provided."""
