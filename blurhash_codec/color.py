import math


def srgb_to_linear(value: int) -> float:
    """sRGB byte (0-255) to a linear light float (0.0-1.0)."""
    v = value / 255.0
    if v <= 0.04045:
        return v / 12.92
    return math.pow((v + 0.055) / 1.055, 2.4)


def linear_to_srgb(value: float) -> int:
    """Linear light float to an sRGB byte, clamped to 0-255 and rounded half up."""
    v = max(0.0, min(1.0, value))
    if v <= 0.0031308:
        return int(v * 12.92 * 255 + 0.5)
    return int((1.055 * math.pow(v, 1 / 2.4) - 0.055) * 255 + 0.5)


def sign_pow(value: float, exp: float) -> float:
    """Raise |value| to exp, keeping the sign of value."""
    return math.copysign(math.pow(abs(value), exp), value)


def signed_pow2(value: float) -> float:
    return math.copysign(value * value, value)


# Precomputed sRGB byte -> linear table, used by the encoder on whole images
SRGB_TO_LINEAR_TABLE = tuple(srgb_to_linear(v) for v in range(256))
