"""Exceptions."""


class ConfigurationError(Exception):
    """Ambiguous or incomplete set of parameters."""


class InvalidRotationParametersError(ConfigurationError):
    """Raised when rotation parameters groups are both or neither given."""


class InvalidGridError(ConfigurationError, ValueError):
    """Raised when grid sizes or extents are invalid."""


class FlatAxisError(Exception):
    """Raised when accessing spacings along a flat axis."""


class UnsupportedArchitectureError(ConfigurationError):
    """Raised when the architecture is not among the supported ones."""


class ArchitectureUnavailableError(Exception):
    """Raised when the architecture is supported but not available."""


class InvalidFieldDataError(Exception):
    """Raised when data can't be written into a field."""


class InvalidModelParameterError(ConfigurationError):
    """Raised when trying to pass incorrect Parameter to a model."""
