"""Clock and timestamp utilities."""

import math
import time
from datetime import datetime, timezone

from core.errors import ClockUnavailable
from utils.lexicoid import MAX_TIMESTAMP


def now_seconds(clock=None):
    """Current unix time in whole seconds. Raises ClockUnavailable."""
    clock = clock or time.time
    try:
        reading = clock()
    except OSError as e:
        raise ClockUnavailable("System clock unreadable", cause=e) from e
    
    if not math.isfinite(reading):
        raise ClockUnavailable("System clock reading is not finite", reading=reading)
    if reading < 0:
        raise ClockUnavailable("System clock is before the unix epoch", reading=reading)
    if reading > MAX_TIMESTAMP:
        raise ClockUnavailable("System clock is past the 64-bit range", reading=reading)
    return int(reading)


def format_timestamp(epoch_s=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_s is None:
        epoch_s = time.time()
    
    dt = datetime.fromtimestamp(epoch_s, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
