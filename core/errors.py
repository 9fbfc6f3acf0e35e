"""Custom errors with context for tracking."""


class LexicoidError(Exception):
    """Base error with context and optional cause."""
    
    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.context = context or {}
        self.cause = cause


class TimestampOutOfRange(LexicoidError, ValueError):
    """Timestamp outside the unsigned 64-bit range."""
    
    def __init__(self, timestamp, **kwargs):
        context = kwargs.pop("context", {})
        context["timestamp"] = timestamp
        super().__init__(f"Timestamp out of range: {timestamp}", context=context, **kwargs)
        self.timestamp = timestamp


class ClockUnavailable(LexicoidError):
    """System clock could not be read or is before the unix epoch."""
    
    def __init__(self, message, reading=None, **kwargs):
        context = kwargs.pop("context", {})
        if reading is not None:
            context["reading"] = reading
        super().__init__(message, context=context, **kwargs)
