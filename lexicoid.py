"""Lexicoid - short & stable IDs based on timestamps."""

from config import load_config
from core.errors import ClockUnavailable, LexicoidError, TimestampOutOfRange
from internal.logging import LogLevel, StructuredLogger, get_logger
from utils.lexicoid import ALPHABET, MAX_TIMESTAMP, Identifier, encode
from utils.timestamp import now_seconds

__all__ = [
    "ALPHABET",
    "MAX_TIMESTAMP",
    "Identifier",
    "encode",
    "encode_now",
    "setup",
    "LexicoidError",
    "TimestampOutOfRange",
    "ClockUnavailable",
]


def encode_now(clock=None):
    """Identifier for the current unix time (seconds)."""
    logger = get_logger()
    try:
        timestamp = now_seconds(clock)
    except ClockUnavailable as e:
        logger.error("Clock unavailable", error=e, **e.context)
        raise
    
    lexicoid = encode(timestamp)
    logger.debug("Generated lexicoid", seconds=timestamp, id=str(lexicoid))
    return lexicoid


def setup(path=None, stream=None):
    """Load config and configure the process logger from it."""
    config = load_config(path)
    try:
        level = LogLevel[config.logging.level.upper()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown log level: {config.logging.level}") from None
    
    StructuredLogger.configure(level, stream)
    return config
