import pytest

from barcodegen.code39 import encode, get_checksum
from barcodegen.core import BLACK, EncodingError


def _bars(code):
    return "".join("1" if code.at(i, 0) == BLACK else "0" for i in range(code.width))


def test_encode_alphanumeric():
    expected = (
        "1001011011010110101001011010110100101101101101001010101011001011011010110010101"
        "011011001010101010011011011010100110101011010011010101011001101011010101001101011010"
        "100110110110101001010101101001101101011010010101101101001010101011001101101010110010"
        "101101011001010101101100101100101010110100110101011011001101010101001011010110110010"
        "110101010011011010101010011011010110100101011010110010101101101100101010101001101011"
        "011010011010101011001101010101001011011011010010110101011001011010100101101101"
    )
    code = encode("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", False, False)
    assert code.width == len(expected)
    assert _bars(code) == expected


def test_metadata_and_content():
    code = encode("HELLO", False, False)
    assert code.metadata.kind == "Code 39"
    assert code.metadata.dimensions == 1
    assert code.content == "HELLO"


@pytest.mark.parametrize("content", ["A", "AB", "HELLO WORLD"])
def test_width_without_checksum(content):
    code = encode(content, False, False)
    n = len(content) + 2
    assert code.width == n * 12 + (n - 1)


@pytest.mark.parametrize("content", ["A", "AB", "HELLO WORLD"])
def test_checksum_adds_one_symbol(content):
    with_cs = encode(content, True, False)
    without = encode(content, False, False)
    assert with_cs.width == without.width + 13


def test_checksum_of_empty_is_zero():
    assert get_checksum("") == "0"


def test_checksum_of_star_is_invalid():
    assert get_checksum("*") == "#"
    assert get_checksum("a") == "#"


def test_numeric_checksum_value():
    assert get_checksum("1") == "1"
    assert encode("1", True, False).checksum == 1


def test_non_digit_checksum_value_is_zero():
    assert get_checksum("A") == "A"
    assert encode("A", True, False).checksum == 0


def test_star_rejected_without_full_ascii():
    with pytest.raises(EncodingError):
        encode("A*B", False, False)


def test_lowercase_rejected_without_full_ascii():
    with pytest.raises(EncodingError):
        encode("abc", False, False)


def test_full_ascii_mode_expands_content():
    code = encode("a", False, True)
    assert code.content == "+A"
    assert _bars(code) == _bars(encode("+A", False, False))


def test_full_ascii_star():
    assert encode("*", False, True).content == "/J"


def test_full_ascii_rejects_non_ascii():
    with pytest.raises(EncodingError):
        encode("ä", False, True)