"""Shared building blocks: colours, metadata, bit lists and one-dimensional codes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

Color = Tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)

TYPE_AZTEC = "Aztec"
TYPE_CODABAR = "Codabar"
TYPE_CODE128 = "Code 128"
TYPE_CODE39 = "Code 39"
TYPE_CODE93 = "Code 93"
TYPE_DATAMATRIX = "DataMatrix"
TYPE_EAN8 = "EAN 8"
TYPE_EAN13 = "EAN 13"
TYPE_PDF = "PDF417"
TYPE_QR = "QR Code"
TYPE_2OF5 = "2 of 5"
TYPE_2OF5_INTERLEAVED = "2 of 5 (interleaved)"


class EncodingError(ValueError):
    """Raised when content cannot be encoded as the requested barcode."""


@dataclass(frozen=True)
class ColorScheme:
    """Colour model name plus the background and foreground colours (RGBA)."""

    model: str
    background: Color
    foreground: Color


COLOR_SCHEME_8 = ColorScheme(model="gray", background=WHITE, foreground=BLACK)
COLOR_SCHEME_16 = ColorScheme(model="gray16", background=WHITE, foreground=BLACK)
COLOR_SCHEME_24 = ColorScheme(model="rgba", background=WHITE, foreground=BLACK)
COLOR_SCHEME_32 = ColorScheme(model="rgba", background=WHITE, foreground=BLACK)
DEFAULT_COLOR_SCHEME = COLOR_SCHEME_16


@dataclass(frozen=True)
class Metadata:
    """The kind of a barcode and whether it is one- or two-dimensional."""

    kind: str
    dimensions: int


class BitList:
    """A growable sequence of bits."""

    def __init__(self, length: int = 0) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._bits = [False] * length

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitList):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return "BitList('" + "".join("1" if b else "0" for b in self._bits) + "')"

    def add_bit(self, *args: bool) -> None:
        """Append each given bit."""
        self._bits.extend(bool(b) for b in args)

    def extend(self, bits: Iterable[bool]) -> None:
        """Append all bits of an iterable."""
        self._bits.extend(bool(b) for b in bits)

    def add_bits(self, value: int, count: int) -> None:
        """Append the lowest ``count`` bits of ``value``, most significant first."""
        self._bits.extend(((value >> shift) & 1) == 1 for shift in range(count - 1, -1, -1))

    def add_byte(self, value: int) -> None:
        """Append the eight bits of ``value``."""
        self.add_bits(value, 8)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._bits):
            raise IndexError(f"bit index {index} out of range")

    def get_bit(self, index: int) -> bool:
        self._check(index)
        return self._bits[index]

    def set_bit(self, index: int, value: bool) -> None:
        self._check(index)
        self._bits[index] = bool(value)

    def get_bytes(self) -> bytes:
        """Pack the bits into bytes, most significant bit first, zero padded."""
        result = bytearray((len(self._bits) + 7) // 8)
        for index, bit in enumerate(self._bits):
            if bit:
                result[index // 8] |= 0x80 >> (index % 8)
        return bytes(result)


class Barcode(ABC):
    """A rendered barcode that can be sampled pixel by pixel."""

    kind: str = ""
    dimensions: int = 1

    def __init__(self, content, color: ColorScheme = DEFAULT_COLOR_SCHEME) -> None:
        self.content = content
        self.color = color

    @property
    def metadata(self) -> Metadata:
        return Metadata(self.kind, self.dimensions)

    @property
    def color_model(self) -> str:
        return self.color.model

    @property
    @abstractmethod
    def width(self) -> int:
        """Width of the symbol in modules."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height of the symbol in modules."""

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        return (0, 0, self.width, self.height)

    @abstractmethod
    def at(self, x: int, y: int) -> Color:
        """Colour of the module at column ``x`` and row ``y``."""


class OneDCode(Barcode):
    """A one-dimensional barcode made of a row of bars."""

    dimensions = 1

    def __init__(
        self,
        kind: str,
        content: str,
        bits: BitList,
        color: ColorScheme = DEFAULT_COLOR_SCHEME,
        checksum: Optional[int] = None,
    ) -> None:
        super().__init__(content, color)
        self.kind = kind
        self.bars = bits
        self.checksum = checksum

    @property
    def width(self) -> int:
        return len(self.bars)

    @property
    def height(self) -> int:
        return 1

    def at(self, x: int, y: int) -> Color:
        if self.bars.get_bit(x):
            return self.color.foreground
        return self.color.background