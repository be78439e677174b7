"""
Core module - Configuration, errors and the symbol queue.
"""

from .bit_queue import BitQueue, QueueStats
from .config import PRESETS, EncoderConfig, MessageType, Protocol, get_preset
from .errors import (
    ConfigurationError,
    InternalConsistencyError,
    MessageEncodingError,
    PagerEncodingError,
    RangeError,
    UnsupportedTypeError,
)

__all__ = [
    "BitQueue",
    "QueueStats",
    "EncoderConfig",
    "MessageType",
    "Protocol",
    "PRESETS",
    "get_preset",
    # Errors
    "PagerEncodingError",
    "ConfigurationError",
    "RangeError",
    "UnsupportedTypeError",
    "MessageEncodingError",
    "InternalConsistencyError",
]
