"""Error types raised by simbyte generators and their configuration layer."""

from typing import Any, Optional


class ConfigError(ValueError):
    """Fatal configuration error.

    Raised synchronously while a generator is being configured. The generator
    must not be used until it is configured again with valid settings.
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value
