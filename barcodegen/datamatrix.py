"""Data Matrix (ECC 200) barcodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .core import (
    DEFAULT_COLOR_SCHEME,
    TYPE_DATAMATRIX,
    Barcode,
    BitList,
    Color,
    ColorScheme,
    EncodingError,
)
from .reedsolomon import GaloisField, ReedSolomonEncoder


@dataclass(frozen=True)
class CodeSize:
    """Dimensions and error-correction layout of one symbol size."""

    rows: int
    columns: int
    region_count_horizontal: int
    region_count_vertical: int
    ecc_count: int
    block_count: int

    @property
    def region_rows(self) -> int:
        return (self.rows - self.region_count_vertical * 2) // self.region_count_vertical

    @property
    def region_columns(self) -> int:
        return (self.columns - self.region_count_horizontal * 2) // self.region_count_horizontal

    @property
    def matrix_rows(self) -> int:
        return self.region_rows * self.region_count_vertical

    @property
    def matrix_columns(self) -> int:
        return self.region_columns * self.region_count_horizontal

    @property
    def data_codewords(self) -> int:
        return (self.matrix_columns * self.matrix_rows) // 8 - self.ecc_count

    @property
    def ecc_per_block(self) -> int:
        return self.ecc_count // self.block_count

    def data_codewords_for_block(self, index: int) -> int:
        """Number of data codewords carried by the block ``index``."""
        if self.rows == 144 and self.columns == 144:
            return 156 if index < 8 else 155
        return self.data_codewords // self.block_count


CODE_SIZES: Tuple[CodeSize, ...] = (
    CodeSize(10, 10, 1, 1, 5, 1),
    CodeSize(12, 12, 1, 1, 7, 1),
    CodeSize(14, 14, 1, 1, 10, 1),
    CodeSize(16, 16, 1, 1, 12, 1),
    CodeSize(18, 18, 1, 1, 14, 1),
    CodeSize(20, 20, 1, 1, 18, 1),
    CodeSize(22, 22, 1, 1, 20, 1),
    CodeSize(24, 24, 1, 1, 24, 1),
    CodeSize(26, 26, 1, 1, 28, 1),
    CodeSize(32, 32, 2, 2, 36, 1),
    CodeSize(36, 36, 2, 2, 42, 1),
    CodeSize(40, 40, 2, 2, 48, 1),
    CodeSize(44, 44, 2, 2, 56, 1),
    CodeSize(48, 48, 2, 2, 68, 1),
    CodeSize(52, 52, 2, 2, 84, 2),
    CodeSize(64, 64, 4, 4, 112, 2),
    CodeSize(72, 72, 4, 4, 144, 4),
    CodeSize(80, 80, 4, 4, 192, 4),
    CodeSize(88, 88, 4, 4, 224, 4),
    CodeSize(96, 96, 4, 4, 272, 4),
    CodeSize(104, 104, 4, 4, 336, 6),
    CodeSize(120, 120, 6, 6, 408, 6),
    CodeSize(132, 132, 6, 6, 496, 8),
    CodeSize(144, 144, 6, 6, 620, 10),
)


class DataMatrixCode(Barcode):
    """A rendered Data Matrix symbol including its finder and timing patterns."""

    kind = TYPE_DATAMATRIX
    dimensions = 2

    def __init__(self, size: CodeSize, color: ColorScheme = DEFAULT_COLOR_SCHEME) -> None:
        super().__init__("", color)
        self.size = size
        self._bits = BitList(size.rows * size.columns)

    @property
    def rows(self) -> int:
        return self.size.rows

    @property
    def columns(self) -> int:
        return self.size.columns

    @property
    def width(self) -> int:
        return self.size.columns

    @property
    def height(self) -> int:
        return self.size.rows

    def get(self, x: int, y: int) -> bool:
        return self._bits.get_bit(x * self.size.rows + y)

    def set(self, x: int, y: int, value: bool) -> None:
        self._bits.set_bit(x * self.size.rows + y, value)

    def at(self, x: int, y: int) -> Color:
        return self.color.foreground if self.get(x, y) else self.color.background


class CodeLayout:
    """Places codewords into the data region of a symbol."""

    def __init__(self, size: CodeSize, color: ColorScheme = DEFAULT_COLOR_SCHEME) -> None:
        self.size = size
        self.color = color
        cells = size.matrix_rows * size.matrix_columns
        self._matrix = [False] * cells
        self._occupy = [False] * cells

    def _index(self, row: int, col: int) -> int:
        return col + row * self.size.matrix_columns

    def occupied(self, row: int, col: int) -> bool:
        return self._occupy[self._index(row, col)]

    def _set(self, row: int, col: int, value: int, bit_num: int) -> None:
        rows = self.size.matrix_rows
        cols = self.size.matrix_columns
        bit = ((value >> (7 - bit_num)) & 1) == 1
        if row < 0:
            row += rows
            col += 4 - ((rows + 4) % 8)
        if col < 0:
            col += cols
            row += 4 - ((cols + 4) % 8)
        if self.occupied(row, col):
            raise RuntimeError(f"Field already occupied row: {row} col: {col}")
        index = self._index(row, col)
        self._occupy[index] = True
        self._matrix[index] = bit

    def _place(self, value: int, positions: Sequence[Tuple[int, int]]) -> None:
        for bit_num, (row, col) in enumerate(positions):
            self._set(row, col, value, bit_num)

    def _set_simple(self, row: int, col: int, value: int) -> None:
        self._place(value, (
            (row - 2, col - 2), (row - 2, col - 1),
            (row - 1, col - 2), (row - 1, col - 1), (row - 1, col),
            (row, col - 2), (row, col - 1), (row, col),
        ))

    def _corner1(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(value, (
            (r - 1, 0), (r - 1, 1), (r - 1, 2),
            (0, c - 2), (0, c - 1), (1, c - 1), (2, c - 1), (3, c - 1),
        ))

    def _corner2(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(value, (
            (r - 3, 0), (r - 2, 0), (r - 1, 0),
            (0, c - 4), (0, c - 3), (0, c - 2), (0, c - 1), (1, c - 1),
        ))

    def _corner3(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(value, (
            (r - 3, 0), (r - 2, 0), (r - 1, 0),
            (0, c - 2), (0, c - 1), (1, c - 1), (2, c - 1), (3, c - 1),
        ))

    def _corner4(self, value: int) -> None:
        r, c = self.size.matrix_rows, self.size.matrix_columns
        self._place(value, (
            (r - 1, 0), (r - 1, c - 1),
            (0, c - 3), (0, c - 2), (0, c - 1),
            (1, c - 3), (1, c - 2), (1, c - 1),
        ))

    def set_values(self, data: Sequence[int]) -> None:
        """Place all codewords following the diagonal ECC 200 placement."""
        rows = self.size.matrix_rows
        cols = self.size.matrix_columns
        words = iter(data)
        row, col = 4, 0

        while row < rows or col < cols:
            if row == rows and col == 0:
                self._corner1(next(words))
            if row == rows - 2 and col == 0 and cols % 4 != 0:
                self._corner2(next(words))
            if row == rows - 2 and col == 0 and cols % 8 == 4:
                self._corner3(next(words))
            if row == rows + 4 and col == 2 and cols % 8 == 0:
                self._corner4(next(words))

            while True:
                if row < rows and col >= 0 and not self.occupied(row, col):
                    self._set_simple(row, col, next(words))
                row -= 2
                col += 2
                if row < 0 or col >= cols:
                    break
            row += 1
            col += 3

            while True:
                if row >= 0 and col < cols and not self.occupied(row, col):
                    self._set_simple(row, col, next(words))
                row += 2
                col -= 2
                if row >= rows or col < 0:
                    break
            row += 3
            col += 1

        if not self.occupied(rows - 1, cols - 1):
            self._set(rows - 1, cols - 1, 255, 0)
            self._set(rows - 2, cols - 2, 255, 0)

    def merge(self) -> DataMatrixCode:
        """Build the final symbol: finder patterns plus the placed data regions."""
        size = self.size
        result = DataMatrixCode(size, self.color)
        region_rows = size.region_rows
        region_cols = size.region_columns

        for r in range(0, size.rows, region_rows + 2):
            for c in range(0, size.columns, 2):
                result.set(c, r, True)
        for r in range(region_rows + 1, size.rows, region_rows + 2):
            for c in range(size.columns):
                result.set(c, r, True)
        for c in range(region_cols + 1, size.columns, region_cols + 2):
            for r in range(1, size.rows, 2):
                result.set(c, r, True)
        for c in range(0, size.columns, region_cols + 2):
            for r in range(size.rows):
                result.set(c, r, True)

        for h_region in range(size.region_count_horizontal):
            for v_region in range(size.region_count_vertical):
                for x in range(region_cols):
                    col_matrix = region_cols * h_region + x
                    col_result = (2 + region_cols) * h_region + x + 1
                    for y in range(region_rows):
                        row_matrix = region_rows * v_region + y
                        row_result = (2 + region_rows) * v_region + y + 1
                        value = self._matrix[self._index(row_matrix, col_matrix)]
                        result.set(col_result, row_result, value)
        return result


_RS = ReedSolomonEncoder(GaloisField(301, 256, 1))


def size_for(data_length: int) -> CodeSize:
    """Return the smallest symbol size that holds ``data_length`` data codewords."""
    for size in CODE_SIZES:
        if size.data_codewords >= data_length:
            return size
    raise EncodingError("to much data to encode")


def encode_text(content: str) -> bytes:
    """Encode text as ASCII-mode codewords, packing digit pairs."""
    raw = content.encode("utf-8")
    result: List[int] = []
    i = 0
    while i < len(raw):
        c = raw[i]
        i += 1
        if 0x30 <= c <= 0x39 and i < len(raw) and 0x30 <= raw[i] <= 0x39:
            result.append((c - 0x30) * 10 + (raw[i] - 0x30) + 130)
            i += 1
        elif c > 127:
            result.extend((235, c - 127))
        else:
            result.append(c + 1)
    return bytes(result)


def add_padding(data: Sequence[int], to_count: int) -> bytes:
    """Pad the codewords up to ``to_count`` using the randomised pad sequence."""
    result = list(data)
    if len(result) < to_count:
        result.append(129)
    while len(result) < to_count:
        pseudo = (149 * (len(result) + 1)) % 253 + 1
        value = 129 + pseudo
        if value > 254:
            value -= 254
        result.append(value)
    return bytes(result)


def calc_ecc(data: Sequence[int], size: CodeSize) -> bytes:
    """Return the data followed by its interleaved error-correction codewords."""
    data_size = len(data)
    ecc_per_block = size.ecc_per_block
    result = list(data) + [0] * size.ecc_count
    for block in range(size.block_count):
        count = size.data_codewords_for_block(block)
        words = list(data[block:data_size:size.block_count])
        if len(words) > count:
            raise EncodingError("too many codewords for the symbol block")
        words.extend([0] * (count - len(words)))
        ecc = _RS.encode(words, ecc_per_block)
        positions = range(block, ecc_per_block * size.block_count, size.block_count)
        for position, word in zip(positions, ecc):
            result[data_size + position] = word
    return bytes(result)


def encode(content: str, color: ColorScheme = DEFAULT_COLOR_SCHEME) -> DataMatrixCode:
    """Encode ``content`` as a square Data Matrix symbol."""
    data = encode_text(content)
    size = size_for(len(data))
    data = calc_ecc(add_padding(data, size.data_codewords), size)
    layout = CodeLayout(size, color)
    layout.set_values(data)
    code = layout.merge()
    code.content = content
    return code