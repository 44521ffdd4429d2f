from .errors import InvalidCharacterError

ALPHABET = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz#$%*+,-.:;=?@[]^_{|}~"
)
# Character -> digit lookup table
ALPHABET_VALUES = {char: index for index, char in enumerate(ALPHABET)}


def decode83(value: str) -> int:
    """
    Decode a base83 string into an integer.

    :param value: String made of characters from ALPHABET, most significant digit first.
    :return: The decoded integer.
    :raises InvalidCharacterError: If a character is not part of the alphabet.
    """
    result = 0
    for char in value:
        digit = ALPHABET_VALUES.get(char)
        if digit is None:
            raise InvalidCharacterError(char)
        result = result * 83 + digit
    return result


def encode83(value: int, length: int) -> str:
    """
    Encode a non-negative integer as a fixed width base83 string.

    :param value: Integer to encode.
    :param length: Number of digits in the output, zero padded on the left.
    :return: The encoded string.
    """
    value = int(value)
    if value < 0:
        raise ValueError("BlurHash.encode83: Cannot encode negative values")
    if value // (83**length) != 0:
        raise ValueError("BlurHash.encode83: Length is too short to encode value")

    digits = []
    for i in range(1, length + 1):
        digit = value // (83 ** (length - i)) % 83
        digits.append(ALPHABET[digit])
    return "".join(digits)
