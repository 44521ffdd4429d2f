import logging
import math

from .color import linear_to_srgb
from .errors import BlurHashError, InvalidDimensionError, InvalidPunchError
from .header import MIN_LENGTH, decode_ac, decode_dc, parse_header
from .pixels import PixelBuffer

logger = logging.getLogger(__name__)


class BlurHashDecoder:
    """
    A class to decode blurhash strings into RGBA pixel buffers.
    """

    MIN_LENGTH = MIN_LENGTH
    DEFAULT_SIZE = 32

    @staticmethod
    def decode(
        blurhash: str,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
        punch: float = 1.0,
    ) -> PixelBuffer:
        """
        Decode a blurhash into a width x height image.

        :param blurhash: The blurhash string.
        :param width: Output width in pixels, must be > 0.
        :param height: Output height in pixels, must be > 0.
        :param punch: Contrast multiplier for the AC components, must be > 0.
        :return: PixelBuffer with RGBA data.
        """

        # --- Validation ---
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise InvalidDimensionError(
                f"BlurHash.decode: Width must be a positive integer, got {width!r}"
            )

        if isinstance(height, bool) or not isinstance(height, int) or height <= 0:
            raise InvalidDimensionError(
                f"BlurHash.decode: Height must be a positive integer, got {height!r}"
            )

        if (
            isinstance(punch, bool)
            or not isinstance(punch, (int, float))
            or not math.isfinite(punch)
            or punch <= 0
        ):
            raise InvalidPunchError(
                f"BlurHash.decode: Punch must be a positive number, got {punch!r}"
            )

        # --- Header Parsing ---
        header = parse_header(blurhash)
        components_x = header.components_x
        components_y = header.components_y
        logger.debug(
            "Decoding %dx%d component blurhash to %dx%d pixels",
            components_x,
            components_y,
            width,
            height,
        )

        # Linear light colours, index = j * components_x + i
        colors = [decode_dc(header.quantized_dc)]
        maximum_value = header.maximum_value * punch
        for value in header.quantized_ac:
            colors.append(decode_ac(value, maximum_value))

        # --- Cosine Tables ---
        # Same values as computing cos() inside the pixel loop
        cos_x = [
            [math.cos(math.pi * x * i / width) for i in range(components_x)]
            for x in range(width)
        ]
        cos_y = [
            [math.cos(math.pi * y * j / height) for j in range(components_y)]
            for y in range(height)
        ]

        # --- Pixel Loop ---
        result = bytearray(width * height * 4)
        write_pos = 0
        for y in range(height):
            row_basis = cos_y[y]
            for x in range(width):
                col_basis = cos_x[x]
                r = g = b = 0.0
                for j in range(components_y):
                    basis_y = row_basis[j]
                    offset = j * components_x
                    for i in range(components_x):
                        basis = col_basis[i] * basis_y
                        color = colors[offset + i]
                        r += color[0] * basis
                        g += color[1] * basis
                        b += color[2] * basis

                result[write_pos] = linear_to_srgb(r)
                result[write_pos + 1] = linear_to_srgb(g)
                result[write_pos + 2] = linear_to_srgb(b)
                result[write_pos + 3] = 255
                write_pos += 4

        return PixelBuffer(width=width, height=height, data=bytes(result))


def decode(
    blurhash: str,
    width: int = BlurHashDecoder.DEFAULT_SIZE,
    height: int = BlurHashDecoder.DEFAULT_SIZE,
    punch: float = 1.0,
) -> PixelBuffer:
    return BlurHashDecoder.decode(blurhash, width, height, punch)


def is_valid(blurhash: str) -> bool:
    """Check that a string parses as a blurhash, without decoding any pixels."""
    try:
        parse_header(blurhash)
    except BlurHashError:
        return False
    return True
