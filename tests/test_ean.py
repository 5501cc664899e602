import pytest

from barcodegen import ean
from barcodegen.core import BLACK, EncodingError


def _rendered(code):
    return "".join("1" if code.at(i, 0) == BLACK else "0" for i in range(code.width))


@pytest.mark.parametrize(
    "content,expected,kind,check_metadata",
    [
        ("5901234123457",
         "10100010110100111011001100100110111101001110101010110011011011001000010101110010011101000100101",
         "EAN 13", True),
        ("55123457",
         "1010110001011000100110010010011010101000010101110010011101000100101",
         "EAN 8", True),
        ("5512345",
         "1010110001011000100110010010011010101000010101110010011101000100101",
         "EAN 8", False),
    ],
)
def test_encode(content, expected, kind, check_metadata):
    code = ean.encode(content)
    assert code.width == len(expected)
    assert _rendered(code) == expected
    assert code.metadata.kind == kind
    if check_metadata:
        assert code.metadata.dimensions == 1
        assert code.content == content


def test_missing_check_digit_is_appended():
    code = ean.encode("5512345")
    assert code.content == "55123457"


def test_checksum_of_full_code():
    code = ean.encode("5901234123457")
    assert code.checksum == 7


def test_calc_check_num():
    assert ean.calc_check_num("590123412345") == "7"
    assert ean.calc_check_num("5512345") == "7"
    assert ean.calc_check_num("12a") == "B"


def test_invalid_checksum():
    with pytest.raises(EncodingError):
        ean.encode("55123458")


@pytest.mark.parametrize("content", ["invalid", "123", ""])
def test_unencodable(content):
    with pytest.raises(EncodingError):
        ean.encode(content)


def test_encode_ean13_rejects_non_digits():
    with pytest.raises(EncodingError):
        ean.encode_ean13("invalid error")


def test_encode_ean8_length_invariant():
    bits = ean.encode_ean8("55123457")
    assert len(bits) == 67