"""
Paging encoder front end.

Ties a configuration, a protocol batch encoder and a bit queue together.
Encoding is a two-phase operation: build() assembles the whole batch
once, then fetch() drains it as polar symbols for the modulator.
"""

import logging
from typing import Dict, Iterator, Optional, Type

import numpy as np

from ..core.bit_queue import BitQueue
from ..core.config import EncoderConfig, Protocol
from ..core.errors import ConfigurationError
from .base import BatchEncoder
from .flex import FLEXBatchEncoder
from .pocsag import POCSAGBatchEncoder

logger = logging.getLogger(__name__)

BATCH_ENCODERS: Dict[Protocol, Type[BatchEncoder]] = {
    Protocol.POCSAG: POCSAGBatchEncoder,
    Protocol.FLEX: FLEXBatchEncoder,
}

# Bit 0 -> +1, bit 1 -> -1
SYMBOL_MAP = np.array([1, -1], dtype=np.int8)


class PagingEncoder:
    """
    Encodes one paging message into a stream of +1/-1 symbols.

    The batch is built exactly once; the symbols are then pulled out in
    chunks of any size until fetch() reports end of stream.
    """

    def __init__(self, config: Optional[EncoderConfig] = None, auto_build: bool = True):
        """
        Initialize encoder.

        Args:
            config: Encoder configuration (defaults to EncoderConfig())
            auto_build: Build the batch immediately

        Raises:
            ConfigurationError: If the rates are inconsistent
            RangeError: If the capcode is out of range for the protocol
            UnsupportedTypeError: If the message type is not supported
        """
        self._config = config if config is not None else EncoderConfig()

        encoder_class = BATCH_ENCODERS.get(self._config.protocol)
        if encoder_class is None:
            raise ConfigurationError(f"Unsupported protocol: {self._config.protocol}")
        self._batch_encoder = encoder_class(
            self._config.capcode,
            self._config.message_type,
            self._config.message,
        )

        self._queue = BitQueue(self._config.baud_rate, self._config.symbol_rate)
        self._built = False

        if auto_build:
            self.build()

    @property
    def config(self) -> EncoderConfig:
        """Get encoder configuration."""
        return self._config

    @property
    def batch_encoder(self) -> BatchEncoder:
        return self._batch_encoder

    @property
    def built(self) -> bool:
        return self._built

    @property
    def remaining(self) -> int:
        """Symbols not yet fetched."""
        return len(self._queue)

    @property
    def queue(self) -> BitQueue:
        return self._queue

    def build(self) -> int:
        """
        Assemble the batch into the bit queue.

        The batch is written to a fresh queue that replaces the current
        one only when assembly succeeds, so a failure leaves nothing
        queued. Calling build() again does nothing.

        Returns:
            Number of symbols queued
        """
        if self._built:
            return len(self._queue)

        queue = BitQueue(self._config.baud_rate, self._config.symbol_rate)
        self._batch_encoder.queue_batch(queue)

        self._queue = queue
        self._built = True
        logger.debug(
            f"{self._config.protocol.value} batch built: "
            f"{queue.stats.bits_queued} bits, {len(queue)} symbols"
        )
        return len(queue)

    def fetch(self, max_count: int) -> Optional[np.ndarray]:
        """
        Pull up to max_count symbols from the queue.

        Args:
            max_count: Maximum number of symbols to return

        Returns:
            int8 array of +1/-1 symbols, or None once the queue is empty
        """
        if self._queue.empty():
            return None
        bits = self._queue.pop(max_count)
        return SYMBOL_MAP[bits]

    def stream(self, chunk_size: int = 4096) -> Iterator[np.ndarray]:
        """Yield symbol chunks until the queue is exhausted."""
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        while True:
            chunk = self.fetch(chunk_size)
            if chunk is None:
                return
            yield chunk

    def encode(self) -> np.ndarray:
        """Drain everything that is left as one symbol array."""
        symbols = self.fetch(self.remaining)
        if symbols is None:
            return np.array([], dtype=np.int8)
        return symbols


def create_encoder(protocol: Protocol, **kwargs) -> PagingEncoder:
    """
    Create a paging encoder.

    Args:
        protocol: Protocol type (or its name)
        **kwargs: Remaining EncoderConfig fields

    Returns:
        Built PagingEncoder instance

    Supported protocols:
        - POCSAG: 512/1200/2400 baud, numeric and alphanumeric
        - FLEX: 1600 baud, numeric on short addresses
    """
    config = EncoderConfig(protocol=protocol, **kwargs)
    return PagingEncoder(config)
