"""
Paging protocol encoders - Codeword builders and FLEX/POCSAG batch assembly.
"""

from .base import BatchEncoder, ProtocolInfo
from .bits import (
    BitOrder,
    BitVector,
    add_checksum,
    encode_word,
    is_valid_codeword,
    reverse_bits32,
)
from .encoder import PagingEncoder, create_encoder
from .flex import FLEXBatchEncoder
from .message import BodyResult, encode_alpha, encode_body, encode_numeric
from .pocsag import IDLE_WORD, SYNC_WORD, POCSAGBatchEncoder
from .words import (
    make_biw1,
    make_fiw,
    make_flex_numeric_message,
    make_numeric_vector,
    make_pocsag_address,
    make_short_address,
)

__all__ = [
    "BatchEncoder",
    "ProtocolInfo",
    "PagingEncoder",
    "create_encoder",
    "FLEXBatchEncoder",
    "POCSAGBatchEncoder",
    "SYNC_WORD",
    "IDLE_WORD",
    # Bit primitives
    "BitOrder",
    "BitVector",
    "add_checksum",
    "encode_word",
    "is_valid_codeword",
    "reverse_bits32",
    # Word builders
    "make_fiw",
    "make_biw1",
    "make_short_address",
    "make_numeric_vector",
    "make_flex_numeric_message",
    "make_pocsag_address",
    # Message bodies
    "BodyResult",
    "encode_body",
    "encode_alpha",
    "encode_numeric",
]
