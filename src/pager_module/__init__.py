"""
Pager Module - FLEX and POCSAG paging encoder

Builds the exact air-interface bit stream of the FLEX and POCSAG paging
protocols from a capcode, a message type and message text. The output
is a stream of +1/-1 symbols at the configured symbol rate, ready for
an external FSK modulator.

Supported Protocols:
    - POCSAG: 512/1200/2400 baud, numeric and alphanumeric messages
    - FLEX: 1600 baud 2-level, numeric messages on short addresses

Usage:
    from pager_module import EncoderConfig, PagingEncoder

    encoder = PagingEncoder(EncoderConfig(capcode=425321, message="hello"))
    for chunk in encoder.stream(4096):
        ...
"""

__version__ = "0.1.0"
__author__ = "Pager Module Team"

from .core.config import EncoderConfig, MessageType, Protocol
from .core.errors import (
    ConfigurationError,
    InternalConsistencyError,
    MessageEncodingError,
    PagerEncodingError,
    RangeError,
    UnsupportedTypeError,
)
from .protocols.encoder import PagingEncoder, create_encoder

__all__ = [
    # Configuration
    "EncoderConfig",
    "MessageType",
    "Protocol",
    # Encoding
    "PagingEncoder",
    "create_encoder",
    # Errors
    "PagerEncodingError",
    "ConfigurationError",
    "RangeError",
    "UnsupportedTypeError",
    "MessageEncodingError",
    "InternalConsistencyError",
    # Version
    "__version__",
]
