"""Tests for the FLEX batch encoder."""

import numpy as np
import pytest

from pager_module.core.bit_queue import BitQueue
from pager_module.core.config import MessageType, Protocol
from pager_module.core.errors import RangeError, UnsupportedTypeError
from pager_module.protocols.bits import words_to_bits
from pager_module.protocols.flex import (
    A1_SYNC,
    A1_SYNC_INV,
    B_SYNC,
    BIT_SYNC_1,
    CONTROL_BLOCK,
    FLEXBatchEncoder,
)
from pager_module.protocols.words import (
    make_biw1,
    make_fiw,
    make_flex_numeric_message,
    make_short_address,
)

FRAME_BITS = 3000
FIW_OFFSET = 112
BLOCK_OFFSET = FIW_OFFSET + 32 + 40
BLOCK_BITS = 4 * 32 + 4 * 32


def to_int(bits) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | int(bit)
    return value


@pytest.fixture
def encoder():
    """Numeric page to a short address."""
    return FLEXBatchEncoder(1337331, MessageType.NUMERIC, "69")


@pytest.fixture
def batch_bits(encoder):
    """Whole batch at one symbol per bit."""
    queue = BitQueue(1600, 1600)
    encoder.queue_batch(queue)
    return queue.pop(len(queue))


class TestSyncPatterns:
    """Tests for the literal sync vectors."""

    def test_lengths(self):
        assert len(BIT_SYNC_1) == 32
        assert len(A1_SYNC) == 32
        assert len(B_SYNC) == 16
        assert len(CONTROL_BLOCK) == 40

    def test_a1_inverse(self):
        """Test the inverted A1 pattern."""
        expected = "10000111000011001010011011000110"
        assert "".join(str(b) for b in A1_SYNC_INV) == expected


class TestFlexBatch:
    """Tests for the batch layout."""

    def test_batch_length(self, batch_bits):
        """Test ten 3000-bit frames."""
        assert len(batch_bits) == 10 * FRAME_BITS

    def test_symbol_replication(self, encoder):
        """Test 6400 symbols/s gives four symbols per bit."""
        queue = BitQueue(1600, 6400)
        added = encoder.queue_batch(queue)
        assert added == 4 * 10 * FRAME_BITS

    def test_frame_prefix(self, batch_bits):
        """Test every frame starts with bit sync and frame sync."""
        prefix = (
            list(BIT_SYNC_1) + list(A1_SYNC) + list(B_SYNC) + list(A1_SYNC_INV)
        )
        for frame in range(10):
            start = frame * FRAME_BITS
            np.testing.assert_array_equal(
                batch_bits[start:start + FIW_OFFSET], prefix
            )

    def test_frame_info_words(self, batch_bits):
        """Test the FIW of each frame follows the sync."""
        first = batch_bits[FIW_OFFSET:FIW_OFFSET + 32]
        assert to_int(first) == 0xF0000283
        for frame in range(10):
            start = frame * FRAME_BITS + FIW_OFFSET
            assert to_int(batch_bits[start:start + 32]) == make_fiw(0, frame, 0, 0, 0)

    def test_control_block(self, batch_bits):
        """Test the control block follows the FIW."""
        start = FIW_OFFSET + 32
        np.testing.assert_array_equal(
            batch_bits[start:start + 40], list(CONTROL_BLOCK)
        )

    def test_blocks(self, encoder, batch_bits):
        """Test the eleven blocks repeat the page and bit-sync filler."""
        block = list(words_to_bits(encoder.block_words())) + list(BIT_SYNC_1) * 4
        for i in range(11):
            start = BLOCK_OFFSET + i * BLOCK_BITS
            np.testing.assert_array_equal(batch_bits[start:start + BLOCK_BITS], block)

    def test_block_words_order(self, encoder):
        """Test BIW1, address, vector, message order."""
        words = encoder.block_words()
        assert len(words) == 4
        assert words[0] == make_biw1(0, 0, 2, 0, 0)
        assert words[1] == make_short_address(1337331)
        assert words[3] == make_flex_numeric_message("69")[0]


class TestFlexErrors:
    """Tests for rejected pages."""

    def test_alpha_rejected(self):
        """Test alphanumeric pages are not supported."""
        encoder = FLEXBatchEncoder(1337331, MessageType.ALPHA, "hi")
        queue = BitQueue(1600, 1600)
        with pytest.raises(UnsupportedTypeError):
            encoder.queue_batch(queue)
        assert queue.empty()

    def test_long_address_rejected(self):
        """Test capcodes outside the short address range."""
        encoder = FLEXBatchEncoder(32768, MessageType.NUMERIC, "1")
        queue = BitQueue(1600, 1600)
        with pytest.raises(RangeError):
            encoder.queue_batch(queue)
        assert queue.empty()

    def test_protocol_info(self, encoder):
        assert encoder.protocol_info.protocol == Protocol.FLEX
