"""
Exception hierarchy for the paging encoder.

Every error is raised synchronously while a batch is being assembled,
before anything reaches the bit queue.
"""


class PagerEncodingError(Exception):
    """Base class for all encoder errors."""

    pass


class ConfigurationError(PagerEncodingError, ValueError):
    """Raised when encoder configuration values are invalid."""

    pass


class RangeError(PagerEncodingError, ValueError):
    """Raised when an address or field is outside its protocol bounds."""

    pass


class UnsupportedTypeError(PagerEncodingError, ValueError):
    """Raised when a message type is unknown or not supported by a protocol."""

    pass


class MessageEncodingError(PagerEncodingError, ValueError):
    """Raised when message text cannot be represented by the body encoder."""

    pass


class InternalConsistencyError(PagerEncodingError, RuntimeError):
    """Raised when an encoded word fails a self-check."""

    pass
