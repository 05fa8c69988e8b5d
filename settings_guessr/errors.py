# ==============================================
# Errors
# ==============================================
#
# Every failure the guesser reports is a SettingsGuessrError.
# Ingestion is all-or-nothing: a bad record aborts the whole batch.
#
# - EmptyInput          → no JSON value could be parsed at all
# - InvalidDocument     → a top-level element is not a JSON object
# - SourceUnavailable   → no file/URL argument and nothing piped, or unreadable
# - AccumulatorConsumed → push()/finish() after finish()
#
# ==============================================

from typing import Optional


class SettingsGuessrError(Exception):
    """Base class for all settings-guessr errors."""


class EmptyInput(SettingsGuessrError):
    """The input did not contain a single parseable JSON value."""

    def __init__(self, message: str = "found empty stream"):
        super().__init__(message)


class InvalidDocument(SettingsGuessrError):
    """A top-level array element or stream element is not a JSON object."""

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"document #{index}: {message}"
        super().__init__(message)
        self.index = index


class SourceUnavailable(SettingsGuessrError):
    """No input source was given, or the given one cannot be read."""


class AccumulatorConsumed(SettingsGuessrError):
    """The accumulator was already finished and cannot be reused."""

    def __init__(self, message: str = "accumulator already finished"):
        super().__init__(message)
