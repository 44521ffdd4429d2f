from dataclasses import dataclass

from .base83 import decode83
from .color import signed_pow2, srgb_to_linear
from .errors import LengthMismatchError, TooShortError

MIN_LENGTH = 6


@dataclass(frozen=True)
class BlurHashHeader:
    """Structural parameters and still-quantized coefficients of a blurhash."""

    components_x: int
    components_y: int
    quantized_max_ac: int
    maximum_value: float
    quantized_dc: int
    quantized_ac: tuple

    @property
    def component_count(self) -> int:
        return self.components_x * self.components_y


def components(blurhash: str) -> tuple:
    """
    Read the component counts from the size flag of a blurhash.

    :param blurhash: The blurhash string.
    :return: Tuple (components_x, components_y), each in 1-9.
    """
    if len(blurhash) < MIN_LENGTH:
        raise TooShortError(
            f"BlurHash.decode: Hash must be at least {MIN_LENGTH} characters, got {len(blurhash)}"
        )

    # size flag = (components_y - 1) * 9 + (components_x - 1)
    size_flag = decode83(blurhash[0])
    components_y = size_flag // 9 + 1
    components_x = size_flag % 9 + 1
    return components_x, components_y


def parse_header(blurhash: str) -> BlurHashHeader:
    """
    Split a blurhash into its header fields and packed coefficients.

    Layout: size flag (1 char), quantized max AC (1 char), DC (4 chars),
    then 2 chars per AC component in row-major order.

    :param blurhash: The blurhash string.
    :return: BlurHashHeader
    """
    components_x, components_y = components(blurhash)

    expected_length = 4 + (components_x * components_y - 1) * 2 + 2
    if len(blurhash) != expected_length:
        raise LengthMismatchError(
            f"BlurHash.decode: {components_x}x{components_y} components require "
            f"{expected_length} characters, got {len(blurhash)}"
        )

    quantized_max_ac = decode83(blurhash[1])
    maximum_value = (quantized_max_ac + 1) / 166.0
    quantized_dc = decode83(blurhash[2:6])
    quantized_ac = tuple(
        decode83(blurhash[4 + component * 2 : 6 + component * 2])
        for component in range(1, components_x * components_y)
    )

    return BlurHashHeader(
        components_x=components_x,
        components_y=components_y,
        quantized_max_ac=quantized_max_ac,
        maximum_value=maximum_value,
        quantized_dc=quantized_dc,
        quantized_ac=quantized_ac,
    )


def decode_dc(value: int) -> tuple:
    """Unpack the 24 bit DC colour into linear light (r, g, b)."""
    return (
        srgb_to_linear((value >> 16) & 255),
        srgb_to_linear((value >> 8) & 255),
        srgb_to_linear(value & 255),
    )


def decode_ac(value: int, maximum_value: float) -> tuple:
    """
    Unpack an AC component stored as three base 19 digits.

    Each digit in 0-18 maps to a signed value with quadratic spacing
    around 9, scaled by maximum_value.
    """
    quant_r = value // (19 * 19)
    quant_g = (value // 19) % 19
    quant_b = value % 19
    return (
        signed_pow2((quant_r - 9) / 9.0) * maximum_value,
        signed_pow2((quant_g - 9) / 9.0) * maximum_value,
        signed_pow2((quant_b - 9) / 9.0) * maximum_value,
    )
