import pytest

from barcodegen.core import (
    BLACK,
    COLOR_SCHEME_8,
    WHITE,
    BitList,
    Metadata,
    OneDCode,
    TYPE_EAN8,
)


def test_initial_length_is_all_false():
    bits = BitList(5)
    assert len(bits) == 5
    assert list(bits) == [False] * 5


def test_add_bits_most_significant_first():
    bits = BitList()
    bits.add_bits(0b1011, 4)
    assert list(bits) == [True, False, True, True]


def test_add_bit_multiple():
    bits = BitList()
    bits.add_bit(True, False, True)
    bits.add_bit(False)
    assert list(bits) == [True, False, True, False]


def test_add_byte_and_get_bytes_round_trip():
    bits = BitList()
    for value in b"\x00\xa5\xff\x10":
        bits.add_byte(value)
    assert len(bits) == 32
    assert bits.get_bytes() == b"\x00\xa5\xff\x10"


def test_get_bytes_pads_partial_byte():
    bits = BitList()
    bits.add_bit(True, True, True)
    assert bits.get_bytes() == bytes([0b11100000])


def test_set_and_get_bit():
    bits = BitList(10)
    bits.set_bit(3, True)
    bits.set_bit(9, True)
    assert [i for i, b in enumerate(bits) if b] == [3, 9]
    bits.set_bit(3, False)
    assert bits.get_bit(3) is False


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_out_of_range_raises(index):
    bits = BitList(4)
    with pytest.raises(IndexError):
        bits.get_bit(index)
    with pytest.raises(IndexError):
        bits.set_bit(index, True)


def test_bitlist_equality():
    a = BitList()
    a.add_bits(5, 3)
    b = BitList()
    b.add_bit(True, False, True)
    assert a == b


def test_one_d_code_pixels_and_bounds():
    bits = BitList()
    bits.add_bit(True, False, True, True)
    code = OneDCode(TYPE_EAN8, "1234", bits, checksum=4)
    assert code.width == 4
    assert code.bounds == (0, 0, 4, 1)
    assert [code.at(x, 0) for x in range(4)] == [BLACK, WHITE, BLACK, BLACK]
    assert code.metadata == Metadata("EAN 8", 1)
    assert code.content == "1234"
    assert code.checksum == 4


def test_one_d_code_uses_given_scheme():
    bits = BitList()
    bits.add_bit(True, False)
    code = OneDCode(TYPE_EAN8, "x", bits, COLOR_SCHEME_8)
    assert code.color_model == COLOR_SCHEME_8.model
    assert code.at(0, 0) == COLOR_SCHEME_8.foreground
    assert code.at(1, 0) == COLOR_SCHEME_8.background