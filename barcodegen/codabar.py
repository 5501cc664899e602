"""Codabar barcodes."""

from __future__ import annotations

import re

from .core import DEFAULT_COLOR_SCHEME, TYPE_CODABAR, BitList, ColorScheme, EncodingError, OneDCode

_PATTERNS = {
    "0": "101010011",
    "1": "101011001",
    "2": "101001011",
    "3": "110010101",
    "4": "101101001",
    "5": "110101001",
    "6": "100101011",
    "7": "100101101",
    "8": "100110101",
    "9": "110100101",
    "-": "101001101",
    "$": "101100101",
    ":": "1101011011",
    "/": "1101101011",
    ".": "1101101101",
    "+": "1011011011",
    "A": "1011001001",
    "B": "1001001011",
    "C": "1010010011",
    "D": "1010011001",
}

_VALID = re.compile(r"[ABCD][0-9\-$:/.+]*[ABCD]")


def encode(content: str, color: ColorScheme = DEFAULT_COLOR_SCHEME) -> OneDCode:
    """Encode ``content`` (with start and stop characters A-D) as Codabar."""
    if not _VALID.fullmatch(content):
        raise EncodingError(f'can not encode "{content}"')
    bits = BitList()
    for index, char in enumerate(content):
        if index > 0:
            bits.add_bit(False)
        bits.extend(c == "1" for c in _PATTERNS[char])
    return OneDCode(TYPE_CODABAR, content, bits, color)