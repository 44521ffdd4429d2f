import pytest

from blurhash_codec import PixelBuffer


def make_buffer():
    # 2x2: red, green / blue, white
    data = bytes([255, 0, 0, 255, 0, 255, 0, 255, 0, 0, 255, 255, 255, 255, 255, 255])
    return PixelBuffer(width=2, height=2, data=data)


def test_pixel_access():
    pixels = make_buffer()
    assert pixels.pixel(0, 0) == (255, 0, 0, 255)
    assert pixels.pixel(1, 0) == (0, 255, 0, 255)
    assert pixels.pixel(0, 1) == (0, 0, 255, 255)

    with pytest.raises(IndexError):
        pixels.pixel(2, 0)


def test_length_checked():
    with pytest.raises(ValueError):
        PixelBuffer(width=2, height=2, data=b"\x00" * 15)


def test_array_view():
    array = make_buffer().to_array()
    assert array.shape == (2, 2, 4)
    assert tuple(array[1, 1]) == (255, 255, 255, 255)
    assert not array.flags.writeable


def test_rgb_bytes():
    pixels = make_buffer()
    assert pixels.to_bytes() == pixels.data
    assert pixels.to_bytes(3) == bytes([255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255])
    with pytest.raises(ValueError):
        pixels.to_bytes(2)


def test_to_image():
    pixels = make_buffer()
    img = pixels.to_image()
    assert img.mode == "RGBA"
    assert img.size == (2, 2)
    assert img.getpixel((0, 1)) == (0, 0, 255, 255)

    rgb = pixels.to_image("RGB")
    assert rgb.mode == "RGB"
    assert rgb.tobytes() == pixels.to_bytes(3)
