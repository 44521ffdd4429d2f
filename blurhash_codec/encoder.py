import logging
import math

import numpy as np
from PIL import Image

from .base83 import encode83
from .color import SRGB_TO_LINEAR_TABLE, linear_to_srgb, sign_pow
from .errors import InvalidComponentsError, InvalidDimensionError

logger = logging.getLogger(__name__)


class BlurHashEncoder:
    MAX_COMPONENTS = 9

    @staticmethod
    def encode(image, components_x: int = 4, components_y: int = 3) -> str:
        """
        Encode an image into a blurhash string.

        :param image: PIL image, or array-like of shape (height, width, 3 or 4)
                      holding sRGB bytes. Alpha is ignored.
        :param components_x: Horizontal component count (1-9).
        :param components_y: Vertical component count (1-9).
        :return: The blurhash string.
        """

        # --- Validation ---
        max_components = BlurHashEncoder.MAX_COMPONENTS
        if not (1 <= components_x <= max_components and 1 <= components_y <= max_components):
            raise InvalidComponentsError(
                "BlurHash.encode: Component counts must be between 1 and 9 inclusive"
            )

        if isinstance(image, Image.Image):
            image = image.convert("RGB")
        pixels = np.asarray(image)

        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(
                f"BlurHash.encode: Expected an (height, width, 3|4) image, got shape {pixels.shape}"
            )

        height, width = pixels.shape[0], pixels.shape[1]
        if width == 0 or height == 0:
            raise InvalidDimensionError("BlurHash.encode: Image must not be empty")

        logger.debug(
            "Encoding %dx%d image with %dx%d components",
            width,
            height,
            components_x,
            components_y,
        )

        # --- Forward DCT ---
        table = np.array(SRGB_TO_LINEAR_TABLE, dtype=np.float64)
        linear = table[pixels[:, :, :3].astype(np.intp)]

        cos_x = np.cos(np.pi * np.outer(np.arange(components_x), np.arange(width)) / width)
        cos_y = np.cos(np.pi * np.outer(np.arange(components_y), np.arange(height)) / height)

        factors = np.einsum("jy,ix,yxc->jic", cos_y, cos_x, linear) / (width * height)
        # DC is normalised by 1, every AC term by 2
        norm = np.full((components_y, components_x, 1), 2.0)
        norm[0, 0, 0] = 1.0
        factors = (factors * norm).reshape(components_x * components_y, 3)

        dc = factors[0]
        ac = factors[1:]

        # --- Quantization ---
        dc_value = (
            (linear_to_srgb(float(dc[0])) << 16)
            + (linear_to_srgb(float(dc[1])) << 8)
            + linear_to_srgb(float(dc[2]))
        )

        max_ac = float(np.abs(ac).max()) if len(ac) else 0.0
        quantized_max_ac = int(max(0, min(82, math.floor(max_ac * 166 - 0.5))))
        ac_norm = (quantized_max_ac + 1) / 166.0

        def quantize(value):
            q = math.floor(sign_pow(float(value) / ac_norm, 0.5) * 9.0 + 9.5)
            return int(max(0, min(18, q)))

        # --- Write Hash ---
        parts = [
            encode83((components_x - 1) + (components_y - 1) * 9, 1),
            encode83(quantized_max_ac, 1),
            encode83(dc_value, 4),
        ]
        for r, g, b in ac:
            parts.append(encode83(quantize(r) * 19 * 19 + quantize(g) * 19 + quantize(b), 2))

        return "".join(parts)


def encode(image, components_x: int = 4, components_y: int = 3) -> str:
    return BlurHashEncoder.encode(image, components_x, components_y)
