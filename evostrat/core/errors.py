class InvalidConfiguration(ValueError):
    """Raised when a strategy configuration cannot be used to build a state."""
