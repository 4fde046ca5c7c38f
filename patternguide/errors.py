"""
Exception hierarchy for PatternGuide.

Library code raises these types; only the CLI turns them into messages and
exit codes.
"""


class PatternGuideError(Exception):
    """Base class for all PatternGuide errors."""

    pass


class InvalidArgumentError(PatternGuideError, ValueError):
    """Raised when a selector (family, theme, prototype name, demo key) is not recognized."""

    pass


class InvalidConfigurationError(PatternGuideError, ValueError):
    """Raised when a builder is finalized with missing or invalid attributes."""

    def __init__(self, message: str, fields=None):
        super().__init__(message)
        self.fields = list(fields or [])
