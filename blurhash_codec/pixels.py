from dataclasses import dataclass

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class PixelBuffer:
    """
    Decoded RGBA image, row-major from the top left corner.

    :param width: Width in pixels.
    :param height: Height in pixels.
    :param data: width * height * 4 bytes, alpha always 255.
    """

    width: int
    height: int
    data: bytes

    CHANNELS = 4

    def __post_init__(self):
        if len(self.data) != self.width * self.height * self.CHANNELS:
            raise ValueError("PixelBuffer: Data length does not match dimensions")

    def pixel(self, x: int, y: int) -> tuple:
        """Return the (r, g, b, a) tuple at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"PixelBuffer: ({x}, {y}) is outside {self.width}x{self.height}")
        pos = (y * self.width + x) * self.CHANNELS
        return tuple(self.data[pos : pos + self.CHANNELS])

    def to_bytes(self, channels: int = 4) -> bytes:
        """
        Return the raw pixels with 4 (RGBA) or 3 (RGB) channels per pixel.
        """
        if channels == 4:
            return self.data
        if channels == 3:
            return self.to_array()[:, :, :3].tobytes()
        raise ValueError("PixelBuffer.to_bytes: channels must be 3 or 4")

    def to_array(self) -> np.ndarray:
        """Read-only (height, width, 4) uint8 view of the pixels."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, self.CHANNELS
        )

    def to_image(self, mode: str = "RGBA") -> Image.Image:
        if mode not in ("RGBA", "RGB"):
            raise ValueError("PixelBuffer.to_image: mode must be 'RGBA' or 'RGB'")
        img = Image.frombytes("RGBA", (self.width, self.height), self.data)
        if mode == "RGB":
            img = img.convert("RGB")
        return img
