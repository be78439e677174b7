"""
Codeword builders for FLEX and POCSAG.

FLEX words are packed LSB-first in the data word (x0 at bit 0), get the
4-bit FLEX checksum, and are then bit-reversed so that x0 lands in bit
31 before BCH encoding. The MSB of every returned codeword is therefore
the first bit on air and the LSB is the parity bit.
"""

import logging
from typing import Tuple

from ..core.errors import InternalConsistencyError, MessageEncodingError, RangeError
from .bits import DATA_MASK, add_checksum, encode_word, reverse_bits32

logger = logging.getLogger(__name__)

# Short address range (FLEX)
SHORT_ADDRESS_MIN = 32769
SHORT_ADDRESS_MAX = 1966080

# POCSAG addresses are 21 bits
POCSAG_CAPCODE_MAX = 0x1FFFFF

# FLEX numeric characters (BCD)
FLEX_NUMERIC_CHARS = {
    "0": 0x0, "1": 0x1, "2": 0x2, "3": 0x3, "4": 0x4,
    "5": 0x5, "6": 0x6, "7": 0x7, "8": 0x8, "9": 0x9,
    "A": 0xA, "U": 0xB, " ": 0xC, "-": 0xD, "]": 0xE, "[": 0xF,
}
FLEX_NUMERIC_FILL = 0xC  # Space
FLEX_DIGITS_PER_WORD = 4


def _encode_flex(word: int) -> int:
    return encode_word(reverse_bits32(add_checksum(word)))


def make_fiw(cycle: int, frame: int, roaming: int, repeat: int, t: int) -> int:
    """
    Make an encoded Frame Information Word.

    Args:
        cycle: Cycle number (0-14)
        frame: Frame number within the cycle (0-127)
        roaming: Roaming flag
        repeat: Repeat paging flag
        t: 4-bit T field

    Returns:
        Reversed, checksummed, BCH-encoded 32-bit codeword
    """
    dw = 0
    dw |= (cycle & 0xF) << 4
    dw |= (frame & 0x7F) << 8
    dw |= (roaming & 0x1) << 15
    dw |= (repeat & 0x1) << 16
    dw |= (t & 0xF) << 17
    return _encode_flex(dw)


def make_biw1(
    priority: int,
    blockinfo: int,
    vector_start: int,
    carry_on: int,
    collapse: int,
) -> int:
    """
    Make an encoded Block Information Word 1.

    Note: blockinfo is the raw value of the 'a' field, not the number of
    address words (which is a+1).
    """
    dw = 0
    dw |= (priority & 0xF) << 4
    dw |= (blockinfo & 0x3) << 8
    dw |= (vector_start & 0x3F) << 10
    dw |= (carry_on & 0x3) << 16
    dw |= (collapse & 0x7) << 18
    return _encode_flex(dw)


def make_short_address(address: int) -> int:
    """
    Make an encoded FLEX short address word.

    Args:
        address: Capcode in the short address range

    Returns:
        Reversed, BCH-encoded 32-bit codeword

    Raises:
        RangeError: If address is outside 32769-1966080
    """
    if not (SHORT_ADDRESS_MIN <= address <= SHORT_ADDRESS_MAX):
        raise RangeError(
            f"Short address must be between {SHORT_ADDRESS_MIN} and "
            f"{SHORT_ADDRESS_MAX}, got {address}"
        )
    dw = address & 0x1FFFFF
    return encode_word(reverse_bits32(dw))


def make_numeric_vector(
    vector_type: int, message_start: int, n_words: int, cksum: int
) -> int:
    """
    Make an encoded numeric vector word.

    Note: n_words is the value written into the word; the message spans
    n_words+1 words.
    """
    dw = 0
    dw |= (vector_type & 0x7) << 4
    dw |= (message_start & 0x7F) << 7
    dw |= (n_words & 0x7) << 14
    dw |= (cksum & 0xF) << 17
    return _encode_flex(dw)


def flex_message_checksum(data: int) -> int:
    """6-bit checksum of a single-word FLEX numeric message."""
    binsum = (data & 0xFF) + ((data >> 8) & 0xFF) + ((data >> 16) & 0x1F)
    binsum &= 0xFF
    tempsum = (binsum & 0x1F) + ((binsum >> 6) & 0x3)
    return ~tempsum & 0x3F


def make_flex_numeric_message(text: str) -> Tuple[int, int]:
    """
    Make a single-word FLEX numeric message.

    Digits occupy bits 2, 6, 10 and 14; unused positions are filled with
    spaces. The high two bits of the message checksum go into bits 0-1,
    the low four belong in the numeric vector word.

    Args:
        text: Up to four FLEX numeric characters

    Returns:
        (encoded message codeword, 6-bit message checksum)

    Raises:
        RangeError: If text does not fit in one word
        MessageEncodingError: If text has non-numeric characters
    """
    if len(text) > FLEX_DIGITS_PER_WORD:
        raise RangeError(
            f"FLEX numeric message holds at most {FLEX_DIGITS_PER_WORD} "
            f"characters, got {len(text)}"
        )

    codes = []
    for char in text.upper():
        if char not in FLEX_NUMERIC_CHARS:
            raise MessageEncodingError(f"Character {char!r} is not FLEX numeric")
        codes.append(FLEX_NUMERIC_CHARS[char])
    codes += [FLEX_NUMERIC_FILL] * (FLEX_DIGITS_PER_WORD - len(codes))

    msg = 0
    for i, code in enumerate(codes):
        msg |= code << (2 + 4 * i)

    checksum = flex_message_checksum(msg)
    msg |= (checksum >> 4) & 0x3
    return encode_word(reverse_bits32(msg)), checksum


def make_pocsag_address(capcode: int, function_bits: int) -> int:
    """
    Make an encoded POCSAG address codeword.

    The low three capcode bits are not sent; they select the frame the
    address word is placed in.

    Raises:
        RangeError: If capcode does not fit in 21 bits
        InternalConsistencyError: If encoding altered the data bits
    """
    if not (0 <= capcode <= POCSAG_CAPCODE_MAX):
        raise RangeError(
            f"POCSAG capcode must be between 0 and {POCSAG_CAPCODE_MAX}, "
            f"got {capcode}"
        )
    addrtemp = ((capcode >> 3) << 13) | ((function_bits & 0x3) << 11)
    addrword = encode_word(addrtemp)
    if (addrword & DATA_MASK) != addrtemp:
        raise InternalConsistencyError(
            f"Address codeword {addrword:#010x} does not carry data {addrtemp:#010x}"
        )
    logger.debug(f"POCSAG address word {addrword:#010x} for capcode {capcode}")
    return addrword
