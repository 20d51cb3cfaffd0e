"""
Runecode Types & Constants — Runic Numeral Encoding v1
=======================================================

Foundational type definitions, alphabet tables, and error classes for the
Runecode system. This module has ZERO external dependencies beyond the
Python standard library.

Encoding model:
  - An Alphabet of N unique symbols defines a base-N numeral system.
  - Bytes are read as one big-endian base-256 integer (the magnitude).
  - The magnitude is re-expressed in base N, most significant digit first.
  - Leading 0x00 bytes carry no magnitude, so each one is written as a
    digit-0 symbol in front of the digits.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

# ═══════════════════════════════════════════════════════════════
# VERSION & TABLES
# ═══════════════════════════════════════════════════════════════

RUNECODE_VERSION = 1

# Elder Futhark, traditional aett order. Fehu is digit 0.
FUTHARK_SYMBOLS = (
    "\u16a0\u16a2\u16a6\u16a8\u16b1\u16b2\u16b7\u16b9"  # ᚠ ᚢ ᚦ ᚨ ᚱ ᚲ ᚷ ᚹ
    "\u16ba\u16be\u16c1\u16c3\u16c7\u16c8\u16c9\u16ca"  # ᚺ ᚾ ᛁ ᛃ ᛇ ᛈ ᛉ ᛊ
    "\u16cf\u16d2\u16d6\u16d7\u16da\u16dc\u16de\u16df"  # ᛏ ᛒ ᛖ ᛗ ᛚ ᛜ ᛞ ᛟ
)

# Plain ASCII fallback table (base 32).
ALPHA_NUM_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ123456"


# ═══════════════════════════════════════════════════════════════
# ERROR CLASSES
# ═══════════════════════════════════════════════════════════════

class RuneError(Exception):
    """Base error for all Runecode operations."""
    pass

class AlphabetError(RuneError):
    """Alphabet table could not be built or found."""
    pass

class DegenerateAlphabet(AlphabetError):
    """Fewer than two symbols, or an empty symbol."""
    pass

class DuplicateSymbol(AlphabetError):
    """The same symbol appears twice in one table."""

    def __init__(self, symbol: str, positions: Tuple[int, int]):
        self.symbol = symbol
        self.positions = positions
        super().__init__(
            f"Duplicate symbol {symbol!r} at positions {positions[0]} and {positions[1]}"
        )

class AmbiguousSymbol(AlphabetError):
    """A symbol is a prefix of a longer symbol, so text would not split uniquely."""
    pass

class UnknownAlphabet(AlphabetError):
    """No registered alphabet has the requested name."""
    pass

class RuneDecodeError(RuneError):
    """Encoded text could not be turned back into bytes."""
    pass

class InvalidSymbol(RuneDecodeError):
    """
    Text contains something that is not an alphabet symbol.

    position : index in the symbol sequence (symbols read before it)
    symbol   : the offending character
    offset   : character index in the original text
    """

    def __init__(self, position: int, symbol: str, offset: Optional[int] = None):
        self.position = position
        self.symbol = symbol
        self.offset = position if offset is None else offset
        super().__init__(
            f"Invalid symbol {symbol!r} at position {position} (offset {self.offset})"
        )

class RuneValueError(RuneDecodeError):
    """Decoded bytes are not a valid serialized value."""
    pass


# ═══════════════════════════════════════════════════════════════
# ALPHABET
# ═══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Alphabet:
    """
    Ordered, immutable symbol table. Position in `symbols` is the digit value.

    Usage:
        runes = Alphabet(("ᚠ", "ᚢ", "ᚦ"), name="tiny")
        runes.digit_to_symbol(2)    # "ᚦ"
        runes.symbol_to_digit("ᚢ")  # 1
    """
    symbols: Tuple[str, ...]
    name: str = "custom"
    version: int = RUNECODE_VERSION
    _digits: Dict[str, int] = field(init=False, repr=False, compare=False)
    _max_width: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        symbols = tuple(self.symbols)
        if len(symbols) < 2:
            raise DegenerateAlphabet(
                f"Alphabet {self.name!r} needs at least 2 symbols, got {len(symbols)}"
            )

        digits: Dict[str, int] = {}
        for pos, sym in enumerate(symbols):
            if not isinstance(sym, str) or not sym:
                raise DegenerateAlphabet(
                    f"Alphabet {self.name!r} has an empty or non-string symbol at position {pos}"
                )
            if sym in digits:
                raise DuplicateSymbol(sym, (digits[sym], pos))
            digits[sym] = pos

        for sym in symbols:
            for cut in range(1, len(sym)):
                if sym[:cut] in digits:
                    raise AmbiguousSymbol(
                        f"Symbol {sym[:cut]!r} is a prefix of {sym!r} in alphabet {self.name!r}"
                    )

        # Frozen dataclass: assign derived fields through object.__setattr__
        object.__setattr__(self, 'symbols', symbols)
        object.__setattr__(self, '_digits', digits)
        object.__setattr__(self, '_max_width', max(len(s) for s in symbols))

    @classmethod
    def from_string(cls, chars: str, name: str = "custom",
                    version: int = RUNECODE_VERSION) -> 'Alphabet':
        """Build a table where every character of `chars` is one symbol."""
        return cls(tuple(chars), name=name, version=version)

    # ─── Lookups ──────────────────────────────────────────────

    @property
    def radix(self) -> int:
        return len(self.symbols)

    @property
    def zero(self) -> str:
        """The digit-0 symbol, also used for each leading zero byte."""
        return self.symbols[0]

    def digit_to_symbol(self, digit: int) -> str:
        return self.symbols[digit]

    def symbol_to_digit(self, symbol: str) -> int:
        try:
            return self._digits[symbol]
        except KeyError:
            raise InvalidSymbol(0, symbol) from None

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._digits

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    # ─── Tokenization ─────────────────────────────────────────

    def tokenize(self, text: str, skip: Iterable[str] = ()) -> List[int]:
        """
        Split `text` into digits, longest symbol first.

        Characters in `skip` that do not start a symbol are dropped.
        Raises InvalidSymbol on the first character that starts no symbol.
        """
        skip = frozenset(skip)
        digits: List[int] = []
        pos = 0
        end = len(text)

        if self._max_width == 1:
            for pos, ch in enumerate(text):
                digit = self._digits.get(ch)
                if digit is not None:
                    digits.append(digit)
                elif ch not in skip:
                    raise InvalidSymbol(len(digits), ch, pos)
            return digits

        while pos < end:
            for width in range(min(self._max_width, end - pos), 0, -1):
                digit = self._digits.get(text[pos:pos + width])
                if digit is not None:
                    digits.append(digit)
                    pos += width
                    break
            else:
                if text[pos] not in skip:
                    raise InvalidSymbol(len(digits), text[pos], pos)
                pos += 1
        return digits


FUTHARK = Alphabet.from_string(FUTHARK_SYMBOLS, name="futhark")
ALPHA_NUM = Alphabet.from_string(ALPHA_NUM_SYMBOLS, name="alpha_num")

ALPHABETS: Dict[str, Alphabet] = {
    FUTHARK.name: FUTHARK,
    ALPHA_NUM.name: ALPHA_NUM,
}

def get_alphabet(name: str) -> Alphabet:
    """Look up a built-in alphabet by name."""
    try:
        return ALPHABETS[name]
    except KeyError:
        known = ', '.join(sorted(ALPHABETS))
        raise UnknownAlphabet(f"No alphabet named {name!r} (known: {known})") from None


# ═══════════════════════════════════════════════════════════════
# RESULT TYPE
# ═══════════════════════════════════════════════════════════════

@dataclass
class DecodeResult:
    """Outcome of a non-raising decode. `data` is None when `ok` is False."""
    ok: bool
    data: Optional[bytes] = None
    error: Optional[RuneDecodeError] = None

    def unwrap(self) -> bytes:
        """Return the bytes, or raise the stored error."""
        if not self.ok:
            raise self.error
        return self.data


# ═══════════════════════════════════════════════════════════════
# UTILITY FUNCTIONS
# ═══════════════════════════════════════════════════════════════

def count_leading_zeros(data: bytes) -> int:
    """Number of 0x00 bytes before the first nonzero byte."""
    return len(data) - len(bytes(data).lstrip(b'\x00'))

def int_to_digits(value: int, radix: int) -> List[int]:
    """Base-`radix` digits of a positive integer, most significant first."""
    digits: List[int] = []
    while value:
        value, rem = divmod(value, radix)
        digits.append(rem)
    digits.reverse()
    return digits

def digits_to_int(digits: Iterable[int], radix: int) -> int:
    value = 0
    for digit in digits:
        value = value * radix + digit
    return value

def int_to_bytes(value: int) -> bytes:
    """Minimal big-endian bytes. Zero gives b''."""
    return value.to_bytes((value.bit_length() + 7) // 8, 'big')

def serialize_value(value: Any) -> bytes:
    """Serialize a JSON-able value (str, int, list, dict, ...) to compact UTF-8 JSON."""
    try:
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot serialize {type(value).__name__} as a rune value: {e}") from e

def deserialize_value(data: bytes) -> Any:
    """Inverse of serialize_value."""
    try:
        return json.loads(data.decode('utf-8'))
    except UnicodeDecodeError as e:
        raise RuneValueError(f"Decoded payload is not UTF-8: {e}") from e
    except ValueError as e:
        raise RuneValueError(f"Decoded payload is not JSON: {e}") from e
