"""
Inspector Errors

Exception types raised by the registries and the default renderers.
Errors raised by inspected getters are never wrapped in these.
"""


class InspectorError(RuntimeError):
    """Base class for debugging inspector errors."""


class ConfigurationError(InspectorError):
    """Raised when a registry is configured inconsistently (duplicate keys)."""


class InspectionValueError(InspectorError, TypeError):
    """Raised when a registered renderer receives a value it cannot draw."""
