"""
Runecode — Runic Numeral Encoding v1
=====================================

Reversible bytes <-> runes encoding. Bytes are read as one big integer and
rewritten in the base of a rune alphabet (Elder Futhark, base 24, by
default). Leading zero bytes are kept as leading digit-0 runes.

This is a novelty encoding: output is larger than the input and nothing
is hidden.
"""

from runes_types import (
    Alphabet, FUTHARK, ALPHA_NUM, ALPHABETS, get_alphabet, DecodeResult,
    RuneError, AlphabetError, DegenerateAlphabet, DuplicateSymbol, AmbiguousSymbol,
    UnknownAlphabet, RuneDecodeError, InvalidSymbol, RuneValueError,
)
from runes_encoder import RuneEncoder, encode, encode_value
from runes_decoder import RuneDecoder, decode, try_decode, decode_value, decode_text

__version__ = "1.0.0"
__all__ = [
    'RuneEncoder', 'RuneDecoder',
    'encode', 'decode', 'try_decode', 'decode_text',
    'encode_value', 'decode_value',
    'Alphabet', 'FUTHARK', 'ALPHA_NUM', 'ALPHABETS', 'get_alphabet', 'DecodeResult',
    'RuneError', 'AlphabetError', 'DegenerateAlphabet', 'DuplicateSymbol', 'AmbiguousSymbol',
    'UnknownAlphabet', 'RuneDecodeError', 'InvalidSymbol', 'RuneValueError',
]
