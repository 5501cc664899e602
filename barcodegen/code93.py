"""Code 93 barcodes."""

from __future__ import annotations

from typing import Dict, NamedTuple

from .core import (
    DEFAULT_COLOR_SCHEME,
    TYPE_CODE93,
    BitList,
    ColorScheme,
    EncodingError,
    OneDCode,
)

FNC1 = "\u00f1"
FNC2 = "\u00f2"
FNC3 = "\u00f3"
FNC4 = "\u00f4"


class _Symbol(NamedTuple):
    value: int
    pattern: int


_TABLE: Dict[str, _Symbol] = {
    "0": _Symbol(0, 0x114), "1": _Symbol(1, 0x148), "2": _Symbol(2, 0x144),
    "3": _Symbol(3, 0x142), "4": _Symbol(4, 0x128), "5": _Symbol(5, 0x124),
    "6": _Symbol(6, 0x122), "7": _Symbol(7, 0x150), "8": _Symbol(8, 0x112),
    "9": _Symbol(9, 0x10A), "A": _Symbol(10, 0x1A8), "B": _Symbol(11, 0x1A4),
    "C": _Symbol(12, 0x1A2), "D": _Symbol(13, 0x194), "E": _Symbol(14, 0x192),
    "F": _Symbol(15, 0x18A), "G": _Symbol(16, 0x168), "H": _Symbol(17, 0x164),
    "I": _Symbol(18, 0x162), "J": _Symbol(19, 0x134), "K": _Symbol(20, 0x11A),
    "L": _Symbol(21, 0x158), "M": _Symbol(22, 0x14C), "N": _Symbol(23, 0x146),
    "O": _Symbol(24, 0x12C), "P": _Symbol(25, 0x116), "Q": _Symbol(26, 0x1B4),
    "R": _Symbol(27, 0x1B2), "S": _Symbol(28, 0x1AC), "T": _Symbol(29, 0x1A6),
    "U": _Symbol(30, 0x196), "V": _Symbol(31, 0x19A), "W": _Symbol(32, 0x16C),
    "X": _Symbol(33, 0x166), "Y": _Symbol(34, 0x136), "Z": _Symbol(35, 0x13A),
    "-": _Symbol(36, 0x12E), ".": _Symbol(37, 0x1D4), " ": _Symbol(38, 0x1D2),
    "$": _Symbol(39, 0x1CA), "/": _Symbol(40, 0x16E), "+": _Symbol(41, 0x176),
    "%": _Symbol(42, 0x1AE), FNC1: _Symbol(43, 0x126), FNC2: _Symbol(44, 0x1DA),
    FNC3: _Symbol(45, 0x1D6), FNC4: _Symbol(46, 0x132), "*": _Symbol(47, 0x15E),
}

_BY_VALUE: Dict[int, str] = {sym.value: char for char, sym in _TABLE.items()}

_EXTENDED = (
    "\u00f2U", "\u00f1A", "\u00f1B", "\u00f1C", "\u00f1D", "\u00f1E", "\u00f1F", "\u00f1G",
    "\u00f1H", "\u00f1I", "\u00f1J", "\u00f1K", "\u00f1L", "\u00f1M", "\u00f1N", "\u00f1O",
    "\u00f1P", "\u00f1Q", "\u00f1R", "\u00f1S", "\u00f1T", "\u00f1U", "\u00f1V", "\u00f1W",
    "\u00f1X", "\u00f1Y", "\u00f1Z", "\u00f2A", "\u00f2B", "\u00f2C", "\u00f2D", "\u00f2E",
    " ", "\u00f3A", "\u00f3B", "\u00f3C", "\u00f3D", "\u00f3E", "\u00f3F", "\u00f3G",
    "\u00f3H", "\u00f3I", "\u00f3J", "\u00f3K", "\u00f3L", "-", ".", "\u00f3O",
    "0", "1", "2", "3", "4", "5", "6", "7",
    "8", "9", "\u00f3Z", "\u00f2F", "\u00f2G", "\u00f2H", "\u00f2I", "\u00f2J",
    "\u00f2V", "A", "B", "C", "D", "E", "F", "G",
    "H", "I", "J", "K", "L", "M", "N", "O",
    "P", "Q", "R", "S", "T", "U", "V", "W",
    "X", "Y", "Z", "\u00f2K", "\u00f2L", "\u00f2M", "\u00f2N", "\u00f2O",
    "\u00f2W", "\u00f4A", "\u00f4B", "\u00f4C", "\u00f4D", "\u00f4E", "\u00f4F", "\u00f4G",
    "\u00f4H", "\u00f4I", "\u00f4J", "\u00f4K", "\u00f4L", "\u00f4M", "\u00f4N", "\u00f4O",
    "\u00f4P", "\u00f4Q", "\u00f4R", "\u00f4S", "\u00f4T", "\u00f4U", "\u00f4V", "\u00f4W",
    "\u00f4X", "\u00f4Y", "\u00f4Z", "\u00f2P", "\u00f2Q", "\u00f2R", "\u00f2S", "\u00f2T",
)


def get_checksum(content: str, max_weight: int) -> str:
    """Return the modulo-47 check character with weights cycling up to ``max_weight``.

    Returns a space if ``content`` holds a character without a value.
    """
    weight = 1
    total = 0
    for char in reversed(content):
        symbol = _TABLE.get(char)
        if symbol is None:
            return " "
        total += symbol.value * weight
        weight = weight + 1 if weight < max_weight else 1
    return _BY_VALUE.get(total % 47, " ")


def _prepare(content: str) -> str:
    parts = []
    for char in content:
        code = ord(char)
        if code > 127:
            raise EncodingError("Only ASCII strings can be encoded")
        parts.append(_EXTENDED[code])
    return "".join(parts)


def encode(
    content: str,
    include_checksum: bool = False,
    full_ascii_mode: bool = False,
    color: ColorScheme = DEFAULT_COLOR_SCHEME,
) -> OneDCode:
    """Encode ``content`` as Code 93.

    The C check character is always added; ``include_checksum`` adds the K one too.
    """
    if full_ascii_mode:
        content = _prepare(content)
    elif "*" in content:
        raise EncodingError("invalid data! content may not contain '*'")

    data = content + get_checksum(content, 20)
    if include_checksum:
        data += get_checksum(data, 15)
    data = "*" + data + "*"

    bits = BitList()
    for char in data:
        symbol = _TABLE.get(char)
        if symbol is None:
            raise EncodingError("invalid data!")
        bits.add_bits(symbol.pattern, 9)
    bits.add_bit(True)
    return OneDCode(TYPE_CODE93, content, bits, color)