"""Exception hierarchy for looks-alike."""


class LooksAlikeError(Exception):
    """Base exception for all looks-alike errors."""


class ConfigurationError(LooksAlikeError):
    """Raised when comparison options are invalid or conflicting."""


class InputError(LooksAlikeError):
    """Raised when an image source cannot be read or decoded."""


class OutputError(LooksAlikeError):
    """Raised when a diff image cannot be written."""
