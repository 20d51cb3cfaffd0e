"""
Runecode Encoder — bytes → runes
=================================

Turns any byte sequence into a string of alphabet symbols:

  1. Count the leading 0x00 bytes (they carry no magnitude).
  2. Read the rest as one big-endian base-256 integer.
  3. Re-express that integer in base N (N = alphabet size).
  4. Write one digit-0 symbol per leading zero byte, then the digits.

The magnitude's own leading digit is never 0, so every digit-0 symbol at
the front of the output stands for exactly one zero byte.
"""

import logging
from typing import Any, Optional

from runes_types import (
    Alphabet, FUTHARK,
    count_leading_zeros, int_to_digits, serialize_value,
)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════
# ENCODER
# ═══════════════════════════════════════════════════════════════

class RuneEncoder:
    """
    Runecode v1 Encoder.

    Usage:
        encoder = RuneEncoder()                  # Elder Futhark, base 24
        runes = encoder.encode(b"\\x00hello")
        ascii_encoder = RuneEncoder(ALPHA_NUM)   # A-Z1-6, base 32
    """

    def __init__(self, alphabet: Alphabet = FUTHARK):
        self.alphabet = alphabet

    def encode(self, data: bytes) -> str:
        """
        Encode bytes into runes. Total over every byte sequence.

        Args:
            data: bytes, bytearray or memoryview. Not modified.

        Returns:
            str of alphabet symbols ("" for empty input).
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"encode() needs a bytes-like object, not {type(data).__name__}")
        data = bytes(data)
        if not data:
            return ""

        alphabet = self.alphabet
        zeros = count_leading_zeros(data)
        magnitude = int.from_bytes(data[zeros:], 'big')

        # All-zero input: the zero run is the whole encoding
        digits = int_to_digits(magnitude, alphabet.radix)
        runes = alphabet.zero * zeros + ''.join(alphabet.digit_to_symbol(d) for d in digits)

        logger.debug("Encoded %d bytes (%d leading zero) into %d %s symbols",
                     len(data), zeros, zeros + len(digits), alphabet.name)
        return runes

    def encode_value(self, value: Any) -> str:
        """Serialize a JSON-able value and encode the resulting bytes."""
        return self.encode(serialize_value(value))


_default_encoder = RuneEncoder()

def encode(data: bytes, alphabet: Optional[Alphabet] = None) -> str:
    """Convenience: encode bytes with FUTHARK or the given alphabet."""
    if alphabet is None:
        return _default_encoder.encode(data)
    return RuneEncoder(alphabet).encode(data)

def encode_value(value: Any, alphabet: Optional[Alphabet] = None) -> str:
    """Convenience: encode a JSON-able value with FUTHARK or the given alphabet."""
    return encode(serialize_value(value), alphabet)
