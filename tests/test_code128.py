import pytest

from barcodegen.code128 import (
    FNC1,
    FNC2,
    FNC3,
    FNC4,
    START_B,
    START_C,
    encode,
    encode_without_checksum,
    should_use_a_table,
    should_use_c_table,
)
from barcodegen.core import BLACK, TYPE_CODE128, EncodingError

START_B_BITS = "11010010000"
STOP_BITS = "1100011101011"


def rendered(code):
    return "".join("1" if code.at(i, 0) == BLACK else "0" for i in range(code.width))


def check(content, expected):
    code = encode(content)
    assert code.width == len(expected)
    assert rendered(code) == expected


def test_function_chars():
    check(FNC1 + "A23", START_B_BITS + "11110101110" + "10100011000" + "11001110010"
          + "11001011100" + "10100011110" + STOP_BITS)
    check(FNC2 + "123", START_B_BITS + "11110101000" + "10011100110" + "11001110010"
          + "11001011100" + "11100010110" + STOP_BITS)
    check(FNC3 + "123", START_B_BITS + "10111100010" + "10011100110" + "11001110010"
          + "11001011100" + "11101000110" + STOP_BITS)
    check(FNC4 + "123", START_B_BITS + "10111101110" + "10011100110" + "11001110010"
          + "11001011100" + "11100011010" + STOP_BITS)


@pytest.mark.parametrize("content", ["", "ä", "x" * 81])
def test_unencodable(content):
    with pytest.raises(EncodingError):
        encode(content)


def test_c_table():
    check("HI345678H", "110100100001100010100011000100010101110111101000101100011100010110"
          "110000101001011110111011000101000111011000101100011101011")
    check("334455", "11010011100101000110001000110111011101000110100100111101100011101011")
    check(FNC1 + "1234", "11010011100" + "11110101110" + "10110011100" + "10001011000"
          + "11101001100" + STOP_BITS)


def test_checksum_and_metadata():
    code = encode(FNC1 + "1234")
    assert code.checksum == 24
    assert code.metadata.kind == TYPE_CODE128
    assert code.metadata.dimensions == 1
    assert code.content == FNC1 + "1234"
    assert encode("334455").checksum == 82


def test_should_use_c_table():
    assert should_use_c_table([FNC1, "1", "2"], START_C)
    assert not should_use_c_table([FNC1, "1"], START_C)
    assert not should_use_c_table(["0", FNC1, "1"], START_C)
    assert should_use_c_table(["0", "1", FNC1, "2", "3"], START_B)
    assert not should_use_c_table(["0", "1", FNC1], START_B)


def test_issue16():
    assert should_use_a_table(["\r", "A"], 0)
    assert should_use_a_table([FNC1, "\r"], 0)
    assert not should_use_a_table([FNC1, "1", "2", "3"], 0)
    check(FNC3 + "$P\rI", "110100001001011110001010010001100111011101101111011101011000100010110"
          "001010001100011101011")


def test_datalogic():
    check(FNC3 + "$P\r", "11010000100" + "10111100010" + "10010001100" + "11101110110"
          + "11110111010" + "11000100010" + STOP_BITS)
    check(FNC3 + "$P,Ae,P\r", "11010010000" + "10111100010" + "10010001100" + "11101110110"
          + "10110011100" + "10100011000" + "10110010000" + "10110011100" + "11101110110"
          + "11101011110" + "11110111010" + "10110001000" + STOP_BITS)


def test_without_checksum():
    code = encode_without_checksum("334455")
    assert rendered(code) == "11010011100" + "10100011000" + "10001101110" + "11101000110" + STOP_BITS
    assert code.checksum is None


def test_forced_table_b():
    code = encode("12", table="b")
    assert rendered(code) == START_B_BITS + "10011100110" + "11001110010" + rendered(code)[-24:]
    assert code.width == 11 * 4 + 13


def test_forced_tables_reject_invalid():
    with pytest.raises(EncodingError):
        encode("123", table="c")
    with pytest.raises(EncodingError):
        encode("abc", table="a")
    with pytest.raises(EncodingError):
        encode_without_checksum("\r", table="b")