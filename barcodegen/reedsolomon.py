"""Galois field arithmetic and Reed-Solomon error-correction encoding."""

from __future__ import annotations

from typing import List, Sequence


class GaloisField:
    """The field GF(size) generated by a primitive polynomial."""

    def __init__(self, primitive: int, size: int, base: int) -> None:
        self.primitive = primitive
        self.size = size
        self.base = base
        self._exp = [0] * size
        self._log = [0] * size
        x = 1
        for i in range(size):
            self._exp[i] = x
            x <<= 1
            if x >= size:
                x = (x ^ primitive) & (size - 1)
        for i in range(size - 1):
            self._log[self._exp[i]] = i

    @staticmethod
    def add(a: int, b: int) -> int:
        return a ^ b

    def exp(self, power: int) -> int:
        return self._exp[power % (self.size - 1)]

    def log(self, value: int) -> int:
        if not 0 < value < self.size:
            raise ValueError(f"log of {value} is undefined in GF({self.size})")
        return self._log[value]

    def multiply(self, a: int, b: int) -> int:
        if a == 0 or b == 0:
            return 0
        return self._exp[(self._log[a] + self._log[b]) % (self.size - 1)]

    def inverse(self, value: int) -> int:
        if value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return self._exp[(self.size - 1 - self.log(value)) % (self.size - 1)]


class ReedSolomonEncoder:
    """Computes error-correction words over a Galois field."""

    def __init__(self, field: GaloisField) -> None:
        self.field = field
        self._generators: List[List[int]] = [[1]]

    def _multiply(self, a: Sequence[int], b: Sequence[int]) -> List[int]:
        result = [0] * (len(a) + len(b) - 1)
        for i, ca in enumerate(a):
            for j, cb in enumerate(b):
                result[i + j] ^= self.field.multiply(ca, cb)
        return result

    def _generator(self, degree: int) -> List[int]:
        while len(self._generators) <= degree:
            d = len(self._generators)
            root = self.field.exp(d - 1 + self.field.base)
            self._generators.append(self._multiply(self._generators[-1], [1, root]))
        return self._generators[degree]

    def encode(self, data: Sequence[int], ec_count: int) -> List[int]:
        """Return ``ec_count`` check words for the data words."""
        if ec_count < 0:
            raise ValueError("ec_count must not be negative")
        if ec_count == 0:
            return []
        generator = self._generator(ec_count)
        remainder = [0] * ec_count
        for word in data:
            factor = word ^ remainder[0]
            remainder = remainder[1:] + [0]
            if factor:
                for i in range(ec_count):
                    remainder[i] ^= self.field.multiply(generator[i + 1], factor)
        return remainder