"""
Custom exceptions for phrasebook.
"""


class PhrasebookError(Exception):
    """Base exception for phrasebook errors."""
    pass


class InvalidArgumentError(PhrasebookError, TypeError):
    """Raised when a phrase or phrase dictionary value has the wrong type."""
    pass


class InvalidConfigurationError(PhrasebookError, ValueError):
    """Raised when delimiters or plural rules cannot be used."""
    pass
