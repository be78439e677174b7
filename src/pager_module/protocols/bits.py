"""
Bit-level primitives shared by the FLEX and POCSAG encoders.

Both protocols carry 21 data bits per 32-bit codeword, protected by a
BCH(31,21) code with generator x^10 + x^9 + x^8 + x^6 + x^5 + x^3 + 1
and an overall even parity bit:

    bit 31 ......... bit 11 | bit 10 ... bit 1 | bit 0
         21 data bits       |  10 check bits   | parity
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

# BCH(31,21) generator polynomial
BCH_POLY = 0x769
BCH_CHECK_BITS = 10

WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF
DATA_MASK = 0xFFFFF800  # Bits 31..11


class BitOrder(Enum):
    """How the index of a bit sequence maps onto significance."""
    MSB_FIRST = "msb_first"  # bits[0] is the most significant bit
    LSB_FIRST = "lsb_first"  # bits[0] is the least significant bit


@dataclass(frozen=True)
class BitVector:
    """
    Immutable bit sequence tagged with its bit order.

    Everything on air is sent most-significant bit first, so an
    LSB-first vector is reversed by transmit_order() before queuing.
    """
    bits: Tuple[int, ...]
    order: BitOrder = BitOrder.MSB_FIRST

    def __post_init__(self) -> None:
        for bit in self.bits:
            if bit not in (0, 1):
                raise ValueError(f"BitVector values must be 0 or 1, got {bit!r}")

    @classmethod
    def from_string(
        cls, pattern: str, order: BitOrder = BitOrder.MSB_FIRST
    ) -> "BitVector":
        """
        Build a vector from a string of '0' and '1' characters.

        Args:
            pattern: Bit pattern, e.g. "1010"
            order: Bit order the pattern is written in

        Returns:
            BitVector
        """
        if any(ch not in "01" for ch in pattern):
            raise ValueError(f"Invalid bit pattern: {pattern!r}")
        return cls(tuple(int(ch) for ch in pattern), order)

    @classmethod
    def from_word(
        cls,
        value: int,
        width: int = WORD_BITS,
        order: BitOrder = BitOrder.MSB_FIRST,
    ) -> "BitVector":
        """Unpack the low `width` bits of an integer."""
        bits = tuple((value >> (width - 1 - i)) & 1 for i in range(width))
        if order == BitOrder.LSB_FIRST:
            bits = bits[::-1]
        return cls(bits, order)

    @classmethod
    def alternating(cls, length: int, first: int = 1) -> "BitVector":
        """Alternating 1010... (or 0101...) pattern of the given length."""
        return cls(tuple((first + i) % 2 for i in range(length)))

    def transmit_order(self) -> Tuple[int, ...]:
        """Bits in the order they go on air (MSB first)."""
        if self.order == BitOrder.LSB_FIRST:
            return self.bits[::-1]
        return self.bits

    def inverted(self) -> "BitVector":
        """Bitwise complement, same order."""
        return BitVector(tuple(1 - bit for bit in self.bits), self.order)

    def __len__(self) -> int:
        return len(self.bits)

    def __iter__(self):
        return iter(self.transmit_order())


def even_parity(value: int) -> int:
    """Return the bit that makes the 32-bit value's popcount even."""
    return bin(value & WORD_MASK).count("1") & 1


def reverse_bits32(value: int) -> int:
    """Reverse the bit order of a 32-bit value (bit 0 <-> bit 31)."""
    return int(format(value & WORD_MASK, "032b")[::-1], 2)


def flex_checksum(word: int) -> int:
    """
    FLEX 4-bit checksum over bits 4-20 of a data word.

    One's complement of the sum of the nibbles at bits 4, 8, 12 and 16
    plus bit 20, truncated to 4 bits.
    """
    total = (
        ((word >> 4) & 0xF)
        + ((word >> 8) & 0xF)
        + ((word >> 12) & 0xF)
        + ((word >> 16) & 0xF)
        + ((word >> 20) & 0x1)
    )
    return ~total & 0xF


def add_checksum(word: int) -> int:
    """Replace the low 4 bits of a FLEX data word with its checksum."""
    return (word & WORD_MASK & ~0xF) | flex_checksum(word)


def _bch_remainder(value: int) -> int:
    # value is a 31-bit codeword view: data in bits 30..10
    for bit in range(30, BCH_CHECK_BITS - 1, -1):
        if value & (1 << bit):
            value ^= BCH_POLY << (bit - BCH_CHECK_BITS)
    return value & 0x3FF


def encode_word(data: int) -> int:
    """
    Encode 21 data bits into a 32-bit BCH(31,21) + parity codeword.

    Args:
        data: Word with the data in bits 31..11; lower bits are ignored

    Returns:
        Codeword with check bits in 10..1 and even parity in bit 0
    """
    data &= DATA_MASK
    codeword = data | (_bch_remainder(data >> 1) << 1)
    return codeword | even_parity(codeword)


def bch_syndrome(codeword: int) -> int:
    """BCH remainder of a received codeword; zero for a clean word."""
    return _bch_remainder((codeword & WORD_MASK) >> 1)


def is_valid_codeword(codeword: int) -> bool:
    """Check BCH syndrome and overall parity of a codeword."""
    return bch_syndrome(codeword) == 0 and even_parity(codeword) == 0


def words_to_bits(words: Iterable[int]) -> Tuple[int, ...]:
    """Flatten 32-bit words into a tuple of bits, MSB first."""
    bits = []
    for word in words:
        bits.extend(BitVector.from_word(word).transmit_order())
    return tuple(bits)
