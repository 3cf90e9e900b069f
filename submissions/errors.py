"""Error taxonomy shared by every layer.

Adapters translate provider exceptions into these types so the application
layer only ever reasons about four outcomes: bad input, bad credentials,
failed write, failed send.
"""

from __future__ import annotations


class SubmissionError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(SubmissionError, ValueError):
    """Input is not actionable (bad email, missing contact)."""


class HoneypotTriggered(ValidationError):
    """The hidden anti-spam field was filled in; reject without telling the caller."""


class AuthError(SubmissionError):
    """Relayed event did not carry the configured shared secret."""


class PersistenceError(SubmissionError, RuntimeError):
    """Row insert into the backing store failed."""


class NotificationError(SubmissionError, RuntimeError):
    """One notification channel failed to deliver."""


class ConfigError(SubmissionError, RuntimeError):
    """Required configuration is missing or malformed."""
