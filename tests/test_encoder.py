import numpy as np
import pytest
from PIL import Image

import blurhash as ReferenceBlurHash
from blurhash_codec import (
    InvalidComponentsError,
    InvalidDimensionError,
    components,
    decode,
    encode,
    encode83,
    is_valid,
)


def gradient_image(width, height):
    """Generate a gradient test image as an (height, width, 3) array."""
    image = np.zeros((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            image[y, x] = (int((x / width) * 255), int((y / height) * 255), 128)
    return image


def test_flat_image_single_component():
    image = np.full((8, 8, 3), (200, 100, 50), dtype=np.uint8)
    blurhash = encode(image, 1, 1)
    assert blurhash == "00" + encode83((200 << 16) + (100 << 8) + 50, 4)


def test_matches_reference_encoder():
    image = gradient_image(16, 12)
    ours = encode(image, 4, 3)
    reference = ReferenceBlurHash.encode(image.tolist(), components_x=4, components_y=3)
    assert ours == reference, "Encoded data mismatch!"


def test_encoded_hash_decodes():
    image = gradient_image(24, 24)
    blurhash = encode(image, 5, 4)
    assert is_valid(blurhash)
    assert components(blurhash) == (5, 4)
    assert len(blurhash) == 6 + 2 * (5 * 4 - 1)

    decoded = decode(blurhash, 24, 24).to_array()[:, :, :3].astype(int)
    # Left to right red gradient survives the blur
    assert decoded[12, 20, 0] > decoded[12, 3, 0]
    # Top to bottom green gradient survives too
    assert decoded[20, 12, 1] > decoded[3, 12, 1]


def test_pil_and_rgba_input():
    image = gradient_image(10, 10)
    rgba = np.dstack([image, np.full((10, 10), 255, dtype=np.uint8)])
    expected = encode(image)
    assert encode(Image.fromarray(image)) == expected
    assert encode(rgba) == expected


@pytest.mark.parametrize("components_x, components_y", [(0, 3), (4, 10), (10, 1)])
def test_invalid_components(components_x, components_y):
    with pytest.raises(InvalidComponentsError):
        encode(gradient_image(4, 4), components_x, components_y)


def test_invalid_image():
    with pytest.raises(InvalidDimensionError):
        encode(np.zeros((0, 4, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        encode(np.zeros((4, 4), dtype=np.uint8))
