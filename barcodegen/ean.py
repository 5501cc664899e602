"""EAN-8 and EAN-13 barcodes."""

from __future__ import annotations

from typing import NamedTuple, Tuple

from .core import (
    DEFAULT_COLOR_SCHEME,
    TYPE_EAN8,
    TYPE_EAN13,
    BitList,
    ColorScheme,
    EncodingError,
    OneDCode,
)

Bits = Tuple[bool, ...]


def _bits(pattern: str) -> Bits:
    return tuple(c == "1" for c in pattern)


class _Digit(NamedTuple):
    left_odd: Bits
    left_even: Bits
    right: Bits
    parity: Bits


_TABLE = {
    digit: _Digit(*(_bits(p) for p in patterns))
    for digit, patterns in {
        "0": ("0001101", "0100111", "1110010", "000000"),
        "1": ("0011001", "0110011", "1100110", "001011"),
        "2": ("0010011", "0011011", "1101100", "001101"),
        "3": ("0111101", "0100001", "1000010", "001110"),
        "4": ("0100011", "0011101", "1011100", "010011"),
        "5": ("0110001", "0111001", "1001110", "011001"),
        "6": ("0101111", "0000101", "1010000", "011100"),
        "7": ("0111011", "0010001", "1000100", "010101"),
        "8": ("0110111", "0001001", "1001000", "010110"),
        "9": ("0001011", "0010111", "1110100", "011010"),
    }.items()
}

_GUARD = (True, False, True)
_CENTER = (False, True, False, True, False)


def _digit_value(char: str) -> int:
    return ord(char) - ord("0") if "0" <= char <= "9" else -1


def calc_check_num(code: str) -> str:
    """Return the check digit for ``code``, or ``"B"`` if it holds a non-digit."""
    triple = len(code) == 7
    total = 0
    for char in code:
        value = _digit_value(char)
        if value < 0:
            return "B"
        total += value * 3 if triple else value
        triple = not triple
    return str((10 - total % 10) % 10)


def _lookup(char: str) -> _Digit:
    try:
        return _TABLE[char]
    except KeyError:
        raise EncodingError("invalid ean code data") from None


def encode_ean8(code: str) -> BitList:
    """Return the bars for a complete eight-digit EAN-8 code."""
    result = BitList()
    result.add_bit(*_GUARD)
    for position, char in enumerate(code):
        digit = _lookup(char)
        if position == 4:
            result.add_bit(*_CENTER)
        result.add_bit(*(digit.left_odd if position < 4 else digit.right))
    result.add_bit(*_GUARD)
    return result


def encode_ean13(code: str) -> BitList:
    """Return the bars for a complete thirteen-digit EAN-13 code."""
    result = BitList()
    result.add_bit(*_GUARD)
    parity: Bits = ()
    for position, char in enumerate(code):
        digit = _lookup(char)
        if position == 0:
            parity = digit.parity
            continue
        if position < 7:
            data = digit.left_even if parity[position - 1] else digit.left_odd
        else:
            data = digit.right
        if position == 7:
            result.add_bit(*_CENTER)
        result.add_bit(*data)
    result.add_bit(*_GUARD)
    return result


def encode(code: str, color: ColorScheme = DEFAULT_COLOR_SCHEME) -> OneDCode:
    """Encode an EAN-8 or EAN-13 code, adding the check digit when it is missing."""
    checksum = 0
    if len(code) in (7, 12):
        code += calc_check_num(code)
        checksum = _digit_value(calc_check_num(code))
    elif len(code) in (8, 13):
        if code[:-1] + calc_check_num(code[:-1]) != code:
            raise EncodingError("checksum missmatch")
        checksum = _digit_value(code[-1])

    if len(code) == 8:
        return OneDCode(TYPE_EAN8, code, encode_ean8(code), color, checksum)
    if len(code) == 13:
        return OneDCode(TYPE_EAN13, code, encode_ean13(code), color, checksum)
    raise EncodingError("invalid ean code data")