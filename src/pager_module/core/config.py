"""
Configuration management for the paging encoder.

Handles encoder parameters, validation, and persistence.
"""

import json
import logging
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .errors import ConfigurationError, RangeError, UnsupportedTypeError

logger = logging.getLogger(__name__)

# Largest 21-bit capcode
CAPCODE_MAX = 0x1FFFFF


class Protocol(Enum):
    """Supported paging protocols."""
    POCSAG = "pocsag"
    FLEX = "flex"


class MessageType(Enum):
    """Message types understood by the encoders."""
    NUMERIC = "numeric"
    ALPHA = "alpha"


@dataclass
class EncoderConfig:
    """Parameters for one encoding run."""

    protocol: Protocol = Protocol.POCSAG
    baud_rate: int = 1600  # Logical bit rate
    symbol_rate: int = 6400  # Output symbols per second
    capcode: int = 425321
    message_type: MessageType = MessageType.ALPHA
    message: str = "hello"

    def __post_init__(self) -> None:
        """Coerce enum fields and validate after initialization."""
        if not isinstance(self.protocol, Protocol):
            try:
                self.protocol = Protocol(str(self.protocol).lower())
            except ValueError:
                raise ConfigurationError(
                    f"Invalid protocol: {self.protocol}. Must be 'pocsag' or 'flex'"
                )
        if not isinstance(self.message_type, MessageType):
            try:
                self.message_type = MessageType(str(self.message_type).lower())
            except ValueError:
                raise UnsupportedTypeError(
                    f"Invalid message type: {self.message_type}. "
                    "Must be 'numeric' or 'alpha'"
                )
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration fields."""
        if not isinstance(self.baud_rate, int) or self.baud_rate <= 0:
            raise ConfigurationError(
                f"baud_rate must be a positive integer, got {self.baud_rate}"
            )
        if not isinstance(self.symbol_rate, int) or self.symbol_rate <= 0:
            raise ConfigurationError(
                f"symbol_rate must be a positive integer, got {self.symbol_rate}"
            )
        if self.symbol_rate % self.baud_rate != 0:
            raise ConfigurationError(
                f"symbol_rate {self.symbol_rate} is not evenly divisible "
                f"by baud_rate {self.baud_rate}"
            )
        if not isinstance(self.capcode, int):
            raise ConfigurationError(f"capcode must be an integer, got {self.capcode!r}")
        if not (0 <= self.capcode <= CAPCODE_MAX):
            raise RangeError(
                f"capcode must be between 0 and {CAPCODE_MAX}, got {self.capcode}"
            )
        if not isinstance(self.message, str):
            raise ConfigurationError(
                f"message must be a string, got {type(self.message).__name__}"
            )

    @property
    def samples_per_bit(self) -> int:
        """Symbols emitted per logical bit."""
        return self.symbol_rate // self.baud_rate

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        data = asdict(self)
        data["protocol"] = self.protocol.value
        data["message_type"] = self.message_type.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EncoderConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def save(self, path: str) -> bool:
        """Save configuration to JSON file.

        Args:
            path: File path to save configuration to

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            with open(path, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Configuration saved to {path}")
            return True
        except (OSError, IOError) as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return False
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize configuration: {e}")
            return False

    @classmethod
    def load(cls, path: str) -> Optional["EncoderConfig"]:
        """Load configuration from JSON file.

        Args:
            path: File path to load configuration from

        Returns:
            EncoderConfig instance or None if loading failed
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
            config = cls.from_dict(data)
            logger.info(f"Configuration loaded from {path}")
            return config
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {path}")
            return None
        except (OSError, IOError) as e:
            logger.error(f"Failed to read configuration from {path}: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file {path}: {e}")
            return None
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Invalid configuration format in {path}: {e}")
            return None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get default configuration file path."""
        return Path.home() / ".config" / "pager_module" / "config.json"

    @classmethod
    def load_default(cls) -> "EncoderConfig":
        """Load from default configuration path, or create new if not found or invalid."""
        path = cls.get_default_config_path()
        if path.exists():
            config = cls.load(str(path))
            if config is not None:
                return config
            logger.warning("Using default configuration due to load failure")
        return cls()


def create_preset_pocsag_1200() -> EncoderConfig:
    """POCSAG at 1200 baud, the most common paging rate."""
    return EncoderConfig(
        protocol=Protocol.POCSAG,
        baud_rate=1200,
        symbol_rate=48000,
    )


def create_preset_pocsag_512() -> EncoderConfig:
    """POCSAG at 512 baud."""
    return EncoderConfig(
        protocol=Protocol.POCSAG,
        baud_rate=512,
        symbol_rate=48128,
    )


def create_preset_flex_1600() -> EncoderConfig:
    """FLEX 1600 baud 2-level numeric page."""
    return EncoderConfig(
        protocol=Protocol.FLEX,
        baud_rate=1600,
        symbol_rate=6400,
        capcode=1337331,
        message_type=MessageType.NUMERIC,
        message="69",
    )


PRESETS: Dict[str, Callable[[], EncoderConfig]] = {
    "pocsag_512": create_preset_pocsag_512,
    "pocsag_1200": create_preset_pocsag_1200,
    "flex_1600": create_preset_flex_1600,
}


def get_preset(name: str) -> EncoderConfig:
    """
    Get a preset configuration by name.

    Raises:
        ConfigurationError: If no preset has that name
    """
    if name not in PRESETS:
        raise ConfigurationError(
            f"Unknown preset: {name}. Available: {', '.join(PRESETS)}"
        )
    return PRESETS[name]()
