class ConfigError(Exception):
    """Raised for missing, invalid or conflicting configuration."""


class FrozenError(TypeError):
    """Raised when a frozen snapshot is mutated."""
