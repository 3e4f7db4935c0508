"""profitchart.errors

Central error types to keep error handling consistent.
"""


class AppError(Exception):
    """Base application error."""


class ConfigError(AppError):
    """Raised when required configuration is missing or invalid."""


class ValidationError(AppError):
    """Raised when the input dataset is empty or malformed."""


class RenderError(AppError):
    """Raised when a chart renderer fails to produce an image buffer."""


class ChartIOError(AppError, OSError):
    """Raised when the rendered image cannot be written to disk."""
