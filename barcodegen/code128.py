"""Code 128 barcodes."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .core import (
    DEFAULT_COLOR_SCHEME,
    TYPE_CODE128,
    BitList,
    ColorScheme,
    EncodingError,
    OneDCode,
)

FNC1 = "\u00f1"
FNC2 = "\u00f2"
FNC3 = "\u00f3"
FNC4 = "\u00f4"

START_A = 103
START_B = 104
START_C = 105
CODE_A = 101
CODE_B = 100
CODE_C = 99
STOP = 106

_AB_TABLE = " !\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_"
_B_TABLE = _AB_TABLE + "`abcdefghijklmnopqrstuvwxyz{|}~\x7f"
_A_ONLY_TABLE = "".join(chr(c) for c in range(32))
_A_TABLE = _AB_TABLE + _A_ONLY_TABLE

_FUNCTION_CHARS = (FNC1, FNC2, FNC3, FNC4)
_A_FUNCTIONS = {FNC1: 102, FNC2: 97, FNC3: 96, FNC4: 101}
_B_FUNCTIONS = {FNC1: 102, FNC2: 97, FNC3: 96, FNC4: 100}

_PATTERNS = (
    "11011001100", "11001101100", "11001100110", "10010011000", "10010001100",
    "10001001100", "10011001000", "10011000100", "10001100100", "11001001000",
    "11001000100", "11000100100", "10110011100", "10011011100", "10011001110",
    "10111001100", "10011101100", "10011100110", "11001110010", "11001011100",
    "11001001110", "11011100100", "11001110100", "11101101110", "11101001100",
    "11100101100", "11100100110", "11101100100", "11100110100", "11100110010",
    "11011011000", "11011000110", "11000110110", "10100011000", "10001011000",
    "10001000110", "10110001000", "10001101000", "10001100010", "11010001000",
    "11000101000", "11000100010", "10110111000", "10110001110", "10001101110",
    "10111011000", "10111000110", "10001110110", "11101110110", "11010001110",
    "11000101110", "11011101000", "11011100010", "11011101110", "11101011000",
    "11101000110", "11100010110", "11101101000", "11101100010", "11100011010",
    "11101111010", "11001000010", "11110001010", "10100110000", "10100001100",
    "10010110000", "10010000110", "10000101100", "10000100110", "10110010000",
    "10110000100", "10011010000", "10011000010", "10000110100", "10000110010",
    "11000010010", "11001010000", "11110111010", "11000010100", "10001111010",
    "10100111100", "10010111100", "10010011110", "10111100100", "10011110100",
    "10011110010", "11110100100", "11110010100", "11110010010", "11011011110",
    "11011110110", "11110110110", "10101111000", "10100011110", "10001011110",
    "10111101000", "10111100010", "11110101000", "11110100010", "10111011110",
    "10111101110", "11101011110", "11110101110", "11010000100", "11010010000",
    "11010011100", "1100011101011",
)


def _table_contains(table: str, char: str) -> bool:
    return char in table or char in _FUNCTION_CHARS


def should_use_c_table(next_runes: Sequence[str], cur_encoding: int) -> bool:
    """Whether the upcoming characters are best encoded as digit pairs."""
    required = 2 if cur_encoding == START_C else 4
    if len(next_runes) < required:
        return False
    i = 0
    while i < required:
        char = next_runes[i]
        if i % 2 == 0 and char == FNC1:
            required += 1
            if len(next_runes) < required:
                return False
        elif not "0" <= char <= "9":
            return False
        i += 1
    return True


def should_use_a_table(next_runes: Sequence[str], cur_encoding: int) -> bool:
    """Whether the next character should be encoded with code set A."""
    first = next_runes[0]
    if not _table_contains(_B_TABLE, first) or cur_encoding == START_A:
        return _table_contains(_A_TABLE, first)
    if cur_encoding == 0:
        for char in next_runes:
            if _table_contains(_AB_TABLE, char):
                continue
            return char in _A_ONLY_TABLE
    return False


def _switch(result: List[int], current: int, start: int, code: int) -> int:
    if current != start:
        result.append(start if current == 0 else code)
    return start


def _code_indices(table: str, content: str) -> List[int]:
    result: List[int] = []
    current = 0
    i = 0
    while i < len(content):
        chosen = table
        if not table:
            rest = content[i:]
            if should_use_c_table(rest, current):
                chosen = "c"
            elif should_use_a_table(rest, current):
                chosen = "a"
            else:
                chosen = "b"
        char = content[i]
        if chosen == "c":
            current = _switch(result, current, START_C, CODE_C)
            if char == FNC1:
                result.append(102)
            else:
                pair = content[i:i + 2]
                if len(pair) != 2 or not pair.isascii() or not pair.isdigit():
                    raise EncodingError(f'"{content}" could not be encoded')
                result.append(int(pair))
                i += 1
        elif chosen == "a":
            current = _switch(result, current, START_A, CODE_A)
            index = _A_FUNCTIONS.get(char, _A_TABLE.find(char))
            if index < 0:
                raise EncodingError(f'"{content}" could not be encoded')
            result.append(index)
        else:
            current = _switch(result, current, START_B, CODE_B)
            index = _B_FUNCTIONS.get(char, _B_TABLE.find(char))
            if index < 0:
                raise EncodingError(f'"{content}" could not be encoded')
            result.append(index)
        i += 1
    return result


def _prepare(content: str, table: str) -> List[int]:
    if not 1 <= len(content) <= 80:
        raise EncodingError(
            f"content length should be between 1 and 80 runes but got {len(content)}"
        )
    return _code_indices(table, content)


def _bars(indices: Sequence[int]) -> BitList:
    bits = BitList()
    for index in indices:
        bits.extend(c == "1" for c in _PATTERNS[index])
    return bits


def encode(
    content: str, table: str = "", color: ColorScheme = DEFAULT_COLOR_SCHEME
) -> OneDCode:
    """Encode ``content`` as Code 128 with its check symbol.

    ``table`` forces code set "a", "b" or "c"; empty chooses automatically.
    """
    indices = _prepare(content, table)
    checksum = (indices[0] + sum(i * idx for i, idx in enumerate(indices) if i > 0)) % 103
    bits = _bars([*indices, checksum, STOP])
    return OneDCode(TYPE_CODE128, content, bits, color, checksum)


def encode_without_checksum(
    content: str, table: str = "", color: ColorScheme = DEFAULT_COLOR_SCHEME
) -> OneDCode:
    """Encode ``content`` as Code 128 without a check symbol."""
    indices = _prepare(content, table)
    return OneDCode(TYPE_CODE128, content, _bars([*indices, STOP]), color)


__all__: Optional[List[str]] = [
    "FNC1",
    "FNC2",
    "FNC3",
    "FNC4",
    "should_use_c_table",
    "should_use_a_table",
    "encode",
    "encode_without_checksum",
]