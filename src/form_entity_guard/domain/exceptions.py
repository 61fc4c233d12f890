"""Domain exceptions. The rule itself never raises; these cover the host."""


class FormEntityGuardError(Exception):
    """Base error for the form-entity-guard tool."""


class ConfigurationError(FormEntityGuardError):
    """Raised when [tool.form-entity-guard] holds a value of the wrong shape."""
