"""
Errors raised by the snake engine.
"""


class ConfigurationError(ValueError):
    """Raised when the engine is constructed with invalid parameters."""
