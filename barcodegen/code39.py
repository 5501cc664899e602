"""Code 39 barcodes."""

from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from .core import (
    DEFAULT_COLOR_SCHEME,
    TYPE_CODE39,
    BitList,
    ColorScheme,
    EncodingError,
    OneDCode,
)


class _Symbol(NamedTuple):
    value: int
    bars: Tuple[bool, ...]


def _symbol(value: int, pattern: str) -> _Symbol:
    return _Symbol(value, tuple(c == "1" for c in pattern))


_TABLE: Dict[str, _Symbol] = {
    "0": _symbol(0, "101001101101"),
    "1": _symbol(1, "110100101011"),
    "2": _symbol(2, "101100101011"),
    "3": _symbol(3, "110110010101"),
    "4": _symbol(4, "101001101011"),
    "5": _symbol(5, "110100110101"),
    "6": _symbol(6, "101100110101"),
    "7": _symbol(7, "101001011011"),
    "8": _symbol(8, "110100101101"),
    "9": _symbol(9, "101100101101"),
    "A": _symbol(10, "110101001011"),
    "B": _symbol(11, "101101001011"),
    "C": _symbol(12, "110110100101"),
    "D": _symbol(13, "101011001011"),
    "E": _symbol(14, "110101100101"),
    "F": _symbol(15, "101101100101"),
    "G": _symbol(16, "101010011011"),
    "H": _symbol(17, "110101001101"),
    "I": _symbol(18, "101101001101"),
    "J": _symbol(19, "101011001101"),
    "K": _symbol(20, "110101010011"),
    "L": _symbol(21, "101101010011"),
    "M": _symbol(22, "110110101001"),
    "N": _symbol(23, "101011010011"),
    "O": _symbol(24, "110101101001"),
    "P": _symbol(25, "101101101001"),
    "Q": _symbol(26, "101010110011"),
    "R": _symbol(27, "110101011001"),
    "S": _symbol(28, "101101011001"),
    "T": _symbol(29, "101011011001"),
    "U": _symbol(30, "110010101011"),
    "V": _symbol(31, "100110101011"),
    "W": _symbol(32, "110011010101"),
    "X": _symbol(33, "100101101011"),
    "Y": _symbol(34, "110010110101"),
    "Z": _symbol(35, "100110110101"),
    "-": _symbol(36, "100101011011"),
    ".": _symbol(37, "110010101101"),
    " ": _symbol(38, "100110101101"),
    "$": _symbol(39, "100100100101"),
    "/": _symbol(40, "100100101001"),
    "+": _symbol(41, "100101001001"),
    "%": _symbol(42, "101001001001"),
    "*": _symbol(-1, "100101101101"),
}

_BY_VALUE: Dict[int, str] = {sym.value: char for char, sym in _TABLE.items() if sym.value >= 0}


def _build_extended() -> Dict[int, str]:
    table: Dict[int, str] = {0: "%U", 47: "/O", 58: "/Z", 64: "%V", 96: "%W"}
    table.update({i: "$" + chr(ord("A") + i - 1) for i in range(1, 27)})
    table.update({27 + k: "%" + c for k, c in enumerate("ABCDE")})
    table.update({33 + k: "/" + chr(ord("A") + k) for k in range(12)})
    table.update({59 + k: "%" + c for k, c in enumerate("FGHIJ")})
    table.update({91 + k: "%" + c for k, c in enumerate("KLMNO")})
    table.update({97 + k: "+" + chr(ord("A") + k) for k in range(26)})
    table.update({123 + k: "%" + c for k, c in enumerate("PQRST")})
    return table


_EXTENDED = _build_extended()


def get_checksum(content: str) -> str:
    """Return the modulo-43 check character, or ``"#"`` if a character has no value."""
    total = 0
    for char in content:
        symbol = _TABLE.get(char)
        if symbol is None or symbol.value < 0:
            return "#"
        total += symbol.value
    return _BY_VALUE.get(total % 43, "#")


def _prepare(content: str) -> str:
    parts = []
    for char in content:
        code = ord(char)
        if code > 127:
            raise EncodingError("Only ASCII strings can be encoded")
        parts.append(_EXTENDED.get(code, char))
    return "".join(parts)


def encode(
    content: str,
    include_checksum: bool = False,
    full_ascii_mode: bool = False,
    color: ColorScheme = DEFAULT_COLOR_SCHEME,
) -> OneDCode:
    """Encode ``content`` as Code 39, optionally with a check character and full ASCII."""
    if full_ascii_mode:
        content = _prepare(content)
    elif "*" in content:
        raise EncodingError("invalid data! try full ascii mode")

    data = "*" + content
    if include_checksum:
        data += get_checksum(content)
    data += "*"

    bits = BitList()
    for index, char in enumerate(data):
        if index:
            bits.add_bit(False)
        symbol = _TABLE.get(char)
        if symbol is None:
            raise EncodingError("invalid data! try full ascii mode")
        bits.extend(symbol.bars)

    check = get_checksum(content)
    checksum = int(check) if check.isdigit() else 0
    return OneDCode(TYPE_CODE39, content, bits, color, checksum)