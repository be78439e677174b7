"""
POCSAG message body encoders.

Turn message text into the sequence of message codewords that follows
an address word. Each message codeword carries the message flag in its
first data bit and 20 bits of payload.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.config import MessageType
from ..core.errors import MessageEncodingError
from .bits import encode_word


# Function bits sent in the POCSAG address word
FUNCTION_BITS = {
    MessageType.NUMERIC: 0,
    MessageType.ALPHA: 3,
}

MESSAGE_FLAG = 0x100000
PAYLOAD_BITS = 20

TEXT_BITS_PER_CHAR = 7
NUMERIC_BITS_PER_DIGIT = 4

# POCSAG BCD table
NUMERIC_CODES = {
    "0": 0x0, "1": 0x1, "2": 0x2, "3": 0x3, "4": 0x4,
    "5": 0x5, "6": 0x6, "7": 0x7, "8": 0x8, "9": 0x9,
    "U": 0xB, " ": 0xC, "-": 0xD, ")": 0xE, "]": 0xE,
    "(": 0xF, "[": 0xF,
}
NUMERIC_FILL = 0xC  # Space


@dataclass
class BodyResult:
    """Outcome of encoding a message body; error is set on rejection."""
    words: List[int] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _pack_payload(bits: List[int]) -> List[int]:
    """Split a bit stream into 20-bit payloads and encode them."""
    words = []
    for start in range(0, len(bits), PAYLOAD_BITS):
        chunk = bits[start:start + PAYLOAD_BITS]
        payload = 0
        for bit in chunk:
            payload = (payload << 1) | bit
        # Pad the last chunk with zeroes
        payload <<= PAYLOAD_BITS - len(chunk)
        words.append(encode_word((MESSAGE_FLAG | payload) << 11))
    return words


def encode_alpha(text: str) -> List[int]:
    """
    Encode text as POCSAG alphanumeric message codewords.

    Characters are 7-bit ASCII sent least significant bit first, packed
    across word boundaries.

    Args:
        text: ASCII text

    Returns:
        List of 32-bit message codewords

    Raises:
        MessageEncodingError: If text contains non-ASCII characters
    """
    bits = []
    for char in text:
        code = ord(char)
        if code > 0x7F:
            raise MessageEncodingError(f"Character {char!r} is not 7-bit ASCII")
        for i in range(TEXT_BITS_PER_CHAR):
            bits.append((code >> i) & 1)
    return _pack_payload(bits)


def encode_numeric(text: str) -> List[int]:
    """
    Encode text as POCSAG numeric message codewords.

    Each character is a 4-bit BCD code sent least significant bit first.
    The final word is filled out with spaces.

    Raises:
        MessageEncodingError: If a character has no numeric code
    """
    codes = []
    for char in text.upper():
        if char not in NUMERIC_CODES:
            raise MessageEncodingError(f"Character {char!r} is not POCSAG numeric")
        codes.append(NUMERIC_CODES[char])

    digits_per_word = PAYLOAD_BITS // NUMERIC_BITS_PER_DIGIT
    remainder = len(codes) % digits_per_word
    if remainder:
        codes += [NUMERIC_FILL] * (digits_per_word - remainder)

    bits = []
    for code in codes:
        for i in range(NUMERIC_BITS_PER_DIGIT):
            bits.append((code >> i) & 1)
    return _pack_payload(bits)


def encode_body(message_type, text: str) -> BodyResult:
    """
    Encode a message body for the given type.

    Unknown message types are reported in the result instead of raised,
    so callers can reject the request before touching their queue.
    Character errors still raise MessageEncodingError.
    """
    if message_type == MessageType.NUMERIC:
        return BodyResult(words=encode_numeric(text))
    if message_type == MessageType.ALPHA:
        return BodyResult(words=encode_alpha(text))
    return BodyResult(error=f"Invalid message type specified: {message_type!r}")
