"""
'firestore_decoder/exceptions.py': Error types raised while decoding Firestore values.
"""


class FirestoreDecoderError(Exception):
    """Base class for decoder-related errors."""

    def __init__(self, message: str, *, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        base = f"{type(self).__name__}: {self.message}"
        if self.cause:
            return f"{base} (caused by {repr(self.cause)})"
        return base


class InternalAssertionError(FirestoreDecoderError):
    """The backend sent data that breaks its own format contract. Not retryable."""


class InvalidArgumentError(FirestoreDecoderError):
    """A caller-supplied argument (path string, base64 payload) is malformed."""
