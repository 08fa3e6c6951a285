"""Custom exceptions for physics validation."""


class PhysicsValidatorError(Exception):
    """Base exception for physics validator errors."""


class ConfigurationError(PhysicsValidatorError):
    """Raised when validation or analysis configuration is invalid."""
