class ConfigurationError(ValueError):
    """Raised for settings that make rendering or coding impossible."""


class CapacityError(ConfigurationError):
    """Raised when a palette has more colours than the code table can index."""
