"""
Runecode Decoder — runes → bytes
=================================

Inverse of the encoder. Every character is checked against the alphabet
before any arithmetic; the first unknown character fails the whole call
with InvalidSymbol, nothing partial is returned.

Any string made only of alphabet symbols decodes to some definite bytes.
There is no checksum or framing, so text that was never produced by the
encoder is still accepted.
"""

import logging
from typing import Any, Iterable, Optional

from runes_types import (
    Alphabet, FUTHARK, ALPHA_NUM,
    DecodeResult, InvalidSymbol, RuneDecodeError,
    digits_to_int, int_to_bytes, deserialize_value,
)

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\r\n\f\v\u00a0\u2028\u2029")


# ═══════════════════════════════════════════════════════════════
# DECODER
# ═══════════════════════════════════════════════════════════════

class RuneDecoder:
    """
    Runecode v1 Decoder.

    Usage:
        decoder = RuneDecoder()
        data = decoder.decode("ᚠᚢ")                # b"\\x00\\x01"
        result = decoder.try_decode("ᚠ?")          # DecodeResult(ok=False, ...)

    With ignore_whitespace=True, line-wrapped or spaced-out rune text is
    accepted; whitespace that is not itself a symbol is dropped.
    """

    def __init__(self, alphabet: Alphabet = FUTHARK, ignore_whitespace: bool = False):
        self.alphabet = alphabet
        self.ignore_whitespace = ignore_whitespace

    # ─── Main Entry Points ────────────────────────────────────

    def decode(self, text: str) -> bytes:
        """
        Decode runes back to the exact original bytes.

        Raises:
            InvalidSymbol: text contains a character outside the alphabet.
        """
        if not isinstance(text, str):
            raise TypeError(f"decode() needs a str, not {type(text).__name__}")
        if not text:
            return b""

        alphabet = self.alphabet
        skip = WHITESPACE if self.ignore_whitespace else ()
        digits = alphabet.tokenize(text, skip=skip)

        zeros = 0
        for digit in digits:
            if digit:
                break
            zeros += 1

        # All digit-0 (or nothing but skipped whitespace): only zero bytes
        magnitude = digits_to_int(digits[zeros:], alphabet.radix)
        data = b'\x00' * zeros + int_to_bytes(magnitude)

        logger.debug("Decoded %d %s symbols (%d leading zero) into %d bytes",
                     len(digits), alphabet.name, zeros, len(data))
        return data

    def try_decode(self, text: str) -> DecodeResult:
        """Decode without raising decode errors. See DecodeResult."""
        try:
            return DecodeResult(ok=True, data=self.decode(text))
        except RuneDecodeError as e:
            logger.warning("Rune decode failed: %s", e)
            return DecodeResult(ok=False, error=e)

    def decode_value(self, text: str) -> Any:
        """Decode runes produced by encode_value back into the value."""
        return deserialize_value(self.decode(text))


_default_decoder = RuneDecoder()

def _decoder_for(alphabet: Optional[Alphabet]) -> RuneDecoder:
    if alphabet is None:
        return _default_decoder
    return RuneDecoder(alphabet)

def decode(text: str, alphabet: Optional[Alphabet] = None) -> bytes:
    """Convenience: decode with FUTHARK or the given alphabet."""
    return _decoder_for(alphabet).decode(text)

def try_decode(text: str, alphabet: Optional[Alphabet] = None) -> DecodeResult:
    """Convenience: non-raising decode with FUTHARK or the given alphabet."""
    return _decoder_for(alphabet).try_decode(text)

def decode_value(text: str, alphabet: Optional[Alphabet] = None) -> Any:
    """Convenience: decode a value written by encode_value."""
    return _decoder_for(alphabet).decode_value(text)

def decode_text(text: str, alphabets: Iterable[Alphabet] = (FUTHARK, ALPHA_NUM),
                ignore_whitespace: bool = True) -> bytes:
    """
    Decode text whose alphabet is not known in advance.

    Tries each alphabet in order and returns the bytes from the first one
    that accepts every character. Empty or whitespace-only text gives b"".

    Raises:
        InvalidSymbol: from the last alphabet tried, if none accepts the text.
        ValueError: `alphabets` is empty.
    """
    last_error = None
    for alphabet in alphabets:
        decoder = RuneDecoder(alphabet, ignore_whitespace=ignore_whitespace)
        try:
            return decoder.decode(text)
        except InvalidSymbol as e:
            logger.debug("Alphabet %s rejected text: %s", alphabet.name, e)
            last_error = e
    if last_error is None:
        raise ValueError("decode_text() needs at least one alphabet")
    logger.warning("No alphabet accepted the text: %s", last_error)
    raise last_error
