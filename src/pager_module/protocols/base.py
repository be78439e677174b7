"""
Base batch encoder framework.

Provides the abstract base class shared by the FLEX and POCSAG batch
encoders.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core.bit_queue import BitQueue
from ..core.config import MessageType, Protocol


@dataclass
class ProtocolInfo:
    """Protocol information and metadata."""

    name: str
    protocol: Protocol
    baud_rates: tuple
    modulation: str
    description: str = ""


class BatchEncoder(ABC):
    """
    Abstract base class for protocol batch encoders.

    A batch encoder validates its message, builds every codeword, and
    only then writes the complete batch into a bit queue.
    """

    def __init__(self, capcode: int, message_type: MessageType, message: str):
        """
        Initialize batch encoder.

        Args:
            capcode: Target pager address
            message_type: Message type
            message: Message text
        """
        self._capcode = capcode
        self._message_type = message_type
        self._message = message

    @property
    def capcode(self) -> int:
        return self._capcode

    @property
    def message_type(self) -> MessageType:
        return self._message_type

    @property
    def message(self) -> str:
        return self._message

    @property
    @abstractmethod
    def protocol_info(self) -> ProtocolInfo:
        """Get protocol information."""
        pass

    @abstractmethod
    def queue_batch(self, queue: BitQueue) -> int:
        """
        Write one complete batch into the queue.

        Args:
            queue: Destination bit queue

        Returns:
            Number of symbols added to the queue
        """
        pass
