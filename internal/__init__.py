from internal.logging import LogLevel, StructuredLogger, get_logger
from core.errors import LexicoidError, TimestampOutOfRange, ClockUnavailable

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "LexicoidError",
    "TimestampOutOfRange",
    "ClockUnavailable",
]
