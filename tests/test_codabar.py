import pytest

from barcodegen import codabar
from barcodegen.core import BLACK, EncodingError, Metadata


@pytest.mark.parametrize("content", ["FOOBAR", "!", "", "A", "a123b", "A12X3B"])
def test_unencodable(content):
    with pytest.raises(EncodingError):
        codabar.encode(content)


def test_encode_pattern():
    expected = "10110010010101101001010101001101010110010110101001010010101101001001011"
    code = codabar.encode("A40156B")
    assert code.width == len(expected)
    encoded = "".join("1" if code.at(i, 0) == BLACK else "0" for i in range(code.width))
    assert encoded == expected


def test_metadata_and_content():
    code = codabar.encode("A40156B")
    assert code.metadata == Metadata("Codabar", 1)
    assert code.content == "A40156B"