"""
Lexicoid - lexicographically sortable IDs from unix timestamps.

Short & stable: the timestamp's minimal big-endian bytes, base32 encoded
with an alphabet whose symbols are in ascending code point order.
Format: 2 chars at zero, 7 chars for current timestamps, 13 chars max.
"""

import base64
import operator

from core.errors import TimestampOutOfRange

ALPHABET = "234567abcdefghijklmnopqrstuvwxyz"
MAX_TIMESTAMP = (1 << 64) - 1

# RFC 4648 symbols -> lexicoid symbols, same value order
_RFC4648 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_TRANSLATE = str.maketrans(_RFC4648, ALPHABET, "=")


class Identifier(str):
    """Encoded timestamp. Shorter sorts first, equal lengths sort lexicographically."""

    __slots__ = ()

    def sort_key(self):
        return len(self), str(self)

    def _other_key(self, other):
        if isinstance(other, str):
            return len(other), str(other)
        return None

    def __lt__(self, other):
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() < key

    def __le__(self, other):
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() <= key

    def __gt__(self, other):
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() > key

    def __ge__(self, other):
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() >= key

    def __repr__(self):
        return f"Identifier({str.__repr__(self)})"


def _to_bytes(timestamp):
    """Minimal big-endian bytes, one zero byte for zero."""
    length = max(1, (timestamp.bit_length() + 7) // 8)
    return timestamp.to_bytes(length, byteorder="big")


def encode(timestamp):
    """Encode a unix timestamp (unsigned 64-bit) as an Identifier."""
    if isinstance(timestamp, bool):
        raise TypeError("timestamp must be an integer, not bool")
    timestamp = operator.index(timestamp)
    if timestamp < 0 or timestamp > MAX_TIMESTAMP:
        raise TimestampOutOfRange(timestamp)

    encoded = base64.b32encode(_to_bytes(timestamp)).decode("ascii")
    return Identifier(encoded.translate(_TRANSLATE))
