"""
POCSAG batch encoder.

A transmission is a 576-bit preamble followed by batches of one sync
word and 16 codewords (8 frames of 2 words). The address word has to
sit in the frame selected by the low three bits of the capcode; the
frames in front of it are filled with idle words.
"""

import logging
from collections import deque
from typing import List

from ..core.bit_queue import BitQueue
from ..core.config import Protocol
from ..core.errors import UnsupportedTypeError
from .base import BatchEncoder, ProtocolInfo
from .bits import BitVector
from .message import FUNCTION_BITS, encode_body
from .words import make_pocsag_address

logger = logging.getLogger(__name__)

SYNC_WORD = 0x7CD215D8
IDLE_WORD = 0x7A89C197

PREAMBLE_BITS = 576
PREAMBLE = BitVector.alternating(PREAMBLE_BITS)


class POCSAGBatchEncoder(BatchEncoder):
    """
    POCSAG (Post Office Code Standardisation Advisory Group) encoder.

    Numeric messages use function bits 0, alphanumeric messages 3.
    """

    WORDS_PER_BATCH = 16
    WORDS_PER_FRAME = 2

    @property
    def protocol_info(self) -> ProtocolInfo:
        return ProtocolInfo(
            name="POCSAG",
            protocol=Protocol.POCSAG,
            baud_rates=(512, 1200, 2400),
            modulation="2FSK",
            description="POCSAG paging, numeric and alphanumeric messages",
        )

    @property
    def frame_offset(self) -> int:
        """Frame (0-7) that carries the address word."""
        return self.capcode & 7

    def body_words(self) -> List[int]:
        """
        Message codewords followed by the terminating idle word.

        Raises:
            UnsupportedTypeError: If the message type is not recognized
        """
        result = encode_body(self.message_type, self.message)
        if not result.ok:
            raise UnsupportedTypeError(result.error)
        return result.words + [IDLE_WORD]

    def transmission_words(self) -> List[int]:
        """
        Every codeword after the preamble, sync words included.

        Returns:
            List whose length is a multiple of WORDS_PER_BATCH + 1
        """
        body = deque(self.body_words())
        address = make_pocsag_address(
            self.capcode, FUNCTION_BITS[self.message_type]
        )

        words = [SYNC_WORD]
        words += [IDLE_WORD] * (self.frame_offset * self.WORDS_PER_FRAME)
        words.append(address)
        for _ in range(self.frame_offset * self.WORDS_PER_FRAME + 1, self.WORDS_PER_BATCH):
            words.append(body.popleft() if body else IDLE_WORD)

        while body:
            words.append(SYNC_WORD)
            for _ in range(self.WORDS_PER_BATCH):
                words.append(body.popleft() if body else IDLE_WORD)

        return words

    def queue_batch(self, queue: BitQueue) -> int:
        """Queue the preamble and all batches."""
        words = self.transmission_words()

        start = len(queue)
        queue.queue_vector(PREAMBLE)
        queue.queue_words(words)

        added = len(queue) - start
        batches = len(words) // (self.WORDS_PER_BATCH + 1)
        logger.info(
            f"Queued POCSAG transmission for capcode {self.capcode} "
            f"(frame {self.frame_offset}): {batches} batch(es), {added} symbols"
        )
        return added
