"""
Bit queue for encoded paging batches.

Holds the bits of one batch in transmission order. Each logical bit is
repeated symbol_rate / baud_rate times so the queue drains at the
physical symbol rate expected by the modulator.
"""

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .errors import ConfigurationError, InternalConsistencyError

WORD_BITS = 32


@dataclass
class QueueStats:
    """Queue statistics."""

    bits_queued: int = 0
    symbols_queued: int = 0
    symbols_drained: int = 0

    @property
    def remaining(self) -> int:
        """Symbols still waiting to be drained."""
        return self.symbols_queued - self.symbols_drained


class BitQueue:
    """
    FIFO of binary symbols with baud-to-symbol-rate replication.

    Filled once by a batch encoder, then drained front to back.
    """

    def __init__(self, baud_rate: int, symbol_rate: int):
        """
        Initialize bit queue.

        Args:
            baud_rate: Logical bit rate of the protocol
            symbol_rate: Output symbol rate, a multiple of baud_rate

        Raises:
            ConfigurationError: If the rates are not positive or the symbol
                rate is not evenly divisible by the baud rate
        """
        if baud_rate <= 0 or symbol_rate <= 0:
            raise ConfigurationError(
                f"Rates must be positive, got baud_rate={baud_rate}, "
                f"symbol_rate={symbol_rate}"
            )
        if symbol_rate % baud_rate != 0:
            raise ConfigurationError(
                f"Output symbol rate {symbol_rate} is not evenly divisible "
                f"by baud rate {baud_rate}"
            )
        self._baud_rate = baud_rate
        self._symbol_rate = symbol_rate
        self._interp = symbol_rate // baud_rate

        self._symbols: List[int] = []
        self._read_idx = 0

        self._stats = QueueStats()

    @property
    def baud_rate(self) -> int:
        return self._baud_rate

    @property
    def symbol_rate(self) -> int:
        return self._symbol_rate

    @property
    def samples_per_bit(self) -> int:
        """Number of symbols emitted per logical bit."""
        return self._interp

    @property
    def stats(self) -> QueueStats:
        """Get queue statistics."""
        return QueueStats(
            bits_queued=self._stats.bits_queued,
            symbols_queued=self._stats.symbols_queued,
            symbols_drained=self._stats.symbols_drained,
        )

    def __len__(self) -> int:
        return len(self._symbols) - self._read_idx

    def empty(self) -> bool:
        return len(self) == 0

    def queue_bit(self, bit: int) -> None:
        """Append one logical bit, replicated to the symbol rate."""
        if bit not in (0, 1):
            raise InternalConsistencyError(f"Invalid value in bit queue: {bit!r}")
        self._symbols.extend([int(bit)] * self._interp)
        self._stats.bits_queued += 1
        self._stats.symbols_queued += self._interp

    def queue_word(self, word: int) -> None:
        """Append a 32-bit word, most significant bit first."""
        for i in range(WORD_BITS - 1, -1, -1):
            self.queue_bit((word >> i) & 1)

    def queue_words(self, words: Iterable[int]) -> None:
        for word in words:
            self.queue_word(word)

    def queue_vector(self, vector) -> None:
        """Append a literal bit vector in transmission order."""
        for bit in vector.transmit_order():
            self.queue_bit(bit)

    def pop(self, n_symbols: int) -> np.ndarray:
        """
        Remove up to n_symbols from the front of the queue.

        Args:
            n_symbols: Maximum number of symbols to remove

        Returns:
            uint8 array of 0/1 symbols, shorter than requested (or empty)
            once the queue runs out
        """
        n_symbols = max(0, min(n_symbols, len(self)))
        end_idx = self._read_idx + n_symbols
        symbols = np.array(self._symbols[self._read_idx:end_idx], dtype=np.uint8)
        self._read_idx = end_idx
        self._stats.symbols_drained += n_symbols
        return symbols

    def peek(self, n_symbols: int) -> np.ndarray:
        """Look at up to n_symbols without removing them."""
        end_idx = self._read_idx + max(0, min(n_symbols, len(self)))
        return np.array(self._symbols[self._read_idx:end_idx], dtype=np.uint8)
