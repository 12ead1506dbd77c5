"""
Custom exceptions for id generation.
"""


class IdGenerationException(Exception):
    """Base exception for the id generation provider."""
    pass


class ConfigurationException(IdGenerationException):
    """Exception raised for broken provider configuration (e.g. malformed exclusions)."""
    pass


class GeneratorInstantiationException(IdGenerationException):
    """Exception raised when a registered generator class cannot be constructed."""
    pass


class GeneratorExhaustedException(IdGenerationException):
    """Exception raised when a generator cannot produce another value."""
    pass


class NotAnEntityError(IdGenerationException, ValueError):
    """Exception raised when a class is not managed by the metamodel."""
    pass
