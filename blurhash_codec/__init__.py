from .base83 import decode83, encode83
from .decoder import BlurHashDecoder, decode, is_valid
from .encoder import BlurHashEncoder, encode
from .errors import (
    BlurHashError,
    InvalidCharacterError,
    InvalidComponentsError,
    InvalidDimensionError,
    InvalidPunchError,
    LengthMismatchError,
    TooShortError,
)
from .header import BlurHashHeader, components, parse_header
from .pixels import PixelBuffer
from .service import DecodeRequest, DecodeService, DecodeSlot
from .utils import load_image

__all__ = [
    "BlurHashDecoder",
    "BlurHashEncoder",
    "BlurHashHeader",
    "PixelBuffer",
    "DecodeRequest",
    "DecodeService",
    "DecodeSlot",
    "BlurHashError",
    "TooShortError",
    "LengthMismatchError",
    "InvalidCharacterError",
    "InvalidDimensionError",
    "InvalidPunchError",
    "InvalidComponentsError",
    "decode",
    "encode",
    "is_valid",
    "components",
    "parse_header",
    "decode83",
    "encode83",
    "load_image",
]
