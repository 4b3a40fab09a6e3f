"""Exceptions raised by the word-list tool.

Every failure surfaces to the top-level invocation; stages never catch these.
"""


class WordlistError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(WordlistError):
    """Invalid or unreadable configuration."""


class OutputError(WordlistError):
    """The output destination could not be created or opened."""


class SourceError(WordlistError):
    """A dictionary or word-list input could not be read."""
