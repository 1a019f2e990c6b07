class PipelineError(Exception):
    """Base exception for batch pipeline failures."""


class ConfigError(PipelineError):
    """Raised when configuration values are invalid."""


class InputFormatError(PipelineError):
    """Raised when an input file cannot be read as a list of names."""


class ExportError(PipelineError):
    """Raised when parsed rows cannot be written."""
