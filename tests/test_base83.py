import pytest

from blurhash_codec import InvalidCharacterError, decode83, encode83
from blurhash_codec.base83 import ALPHABET


def test_alphabet():
    assert len(ALPHABET) == 83
    assert len(set(ALPHABET)) == 83


def test_single_digits():
    assert decode83("0") == 0
    assert decode83("~") == 82
    assert decode83("A") == 10


def test_multi_digit():
    assert decode83("10") == 83
    assert decode83("~~") == 83 * 83 - 1
    assert decode83("") == 0


def test_encode():
    assert encode83(0, 4) == "0000"
    assert encode83(82, 1) == "~"
    assert encode83(83, 2) == "10"
    assert decode83(encode83(0x4A7F1C, 4)) == 0x4A7F1C


def test_encode_overflow():
    with pytest.raises(ValueError):
        encode83(83, 1)
    with pytest.raises(ValueError):
        encode83(-1, 2)


@pytest.mark.parametrize("value", ["!", "a!", "é", " "])
def test_invalid_character(value):
    with pytest.raises(InvalidCharacterError):
        decode83(value)
