"""
FLEX batch encoder.

Builds one FLEX cycle worth of 1600 baud 2-level frames. Every frame
starts with the bit-sync pattern, the A1/B/A1-inverse frame sync and
the Frame Information Word, followed by the control block and eleven
data blocks that each page the same short address with a numeric
message.
"""

import logging
from typing import List

from ..core.bit_queue import BitQueue
from ..core.config import MessageType, Protocol
from ..core.errors import UnsupportedTypeError
from .base import BatchEncoder, ProtocolInfo
from .bits import BitVector
from .words import (
    make_biw1,
    make_fiw,
    make_flex_numeric_message,
    make_numeric_vector,
    make_short_address,
)

logger = logging.getLogger(__name__)

# Sync patterns
BIT_SYNC_1 = BitVector.from_string("10101010101010101010101010101010")
A1_SYNC = BitVector.from_string("01111000111100110101100100111001")
B_SYNC = BitVector.from_string("0101010101010101")
A1_SYNC_INV = A1_SYNC.inverted()
CONTROL_BLOCK = BitVector.from_string("1010111011011000010001010001001001111011")

# Vector types
VECTOR_TYPE_NUMERIC = 3


class FLEXBatchEncoder(BatchEncoder):
    """
    FLEX (Motorola Flexible Wide Area Paging) batch encoder.

    Frame layout:
    - Bit sync (32 bits), A1, B, A1 inverse
    - Frame Information Word
    - Control block (40 bits)
    - 11 blocks of BIW1, short address, numeric vector, message word,
      followed by 4 bit-sync words of filler
    """

    CYCLE = 0
    FRAMES_PER_BATCH = 10
    BLOCKS_PER_FRAME = 11
    FILLER_SYNCS = 4

    # Word offsets inside a block
    VECTOR_START = 2
    MESSAGE_START = 3

    @property
    def protocol_info(self) -> ProtocolInfo:
        return ProtocolInfo(
            name="FLEX",
            protocol=Protocol.FLEX,
            baud_rates=(1600, 3200, 6400),
            modulation="2FSK",
            description="Motorola FLEX paging, numeric messages on short addresses",
        )

    def block_words(self) -> List[int]:
        """
        Build the four codewords of a data block.

        Raises:
            UnsupportedTypeError: If the message is not numeric
            RangeError: If the capcode is not a valid short address
        """
        if self.message_type != MessageType.NUMERIC:
            raise UnsupportedTypeError(
                f"FLEX encoder only supports numeric messages, got {self.message_type!r}"
            )
        address = make_short_address(self.capcode)
        message_word, checksum = make_flex_numeric_message(self.message)
        biw1 = make_biw1(0, 0, self.VECTOR_START, 0, 0)
        vector = make_numeric_vector(
            VECTOR_TYPE_NUMERIC, self.MESSAGE_START, 0, checksum & 0xF
        )
        return [biw1, address, vector, message_word]

    def frame_info_words(self) -> List[int]:
        """Frame Information Words for every frame in the batch."""
        return [
            make_fiw(self.CYCLE, frame, 0, 0, 0)
            for frame in range(self.FRAMES_PER_BATCH)
        ]

    def queue_batch(self, queue: BitQueue) -> int:
        """Queue all frames of the batch."""
        block = self.block_words()
        fiws = self.frame_info_words()

        start = len(queue)
        for frame, fiw in enumerate(fiws):
            queue.queue_vector(BIT_SYNC_1)
            queue.queue_vector(A1_SYNC)
            queue.queue_vector(B_SYNC)
            queue.queue_vector(A1_SYNC_INV)
            queue.queue_word(fiw)
            queue.queue_vector(CONTROL_BLOCK)
            for _ in range(self.BLOCKS_PER_FRAME):
                queue.queue_words(block)
                for _ in range(self.FILLER_SYNCS):
                    queue.queue_vector(BIT_SYNC_1)
            logger.debug(f"FLEX frame {frame}: FIW {fiw:#010x}, queue size {len(queue)}")

        added = len(queue) - start
        logger.info(
            f"Queued FLEX batch for capcode {self.capcode}: "
            f"{self.FRAMES_PER_BATCH} frames, {added} symbols"
        )
        return added
