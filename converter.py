from blurhash_codec import decode, encode, load_image

INPUT_IMAGE = "fruits.png"
OUTPUT_PNG = "fruits_placeholder.png"


def image_to_blurhash(image_path, components_x=4, components_y=3):
    pixel_data, _ = load_image(image_path, max_size=64)
    blurhash = encode(pixel_data, components_x, components_y)
    print(f"Encoded {image_path} to {blurhash}")
    return blurhash


def blurhash_to_png(blurhash, png_path, width=32, height=32, punch=1.0):
    pixels = decode(blurhash, width, height, punch)
    pixels.to_image().save(png_path)
    print(f"Decoded {blurhash} to {png_path} ({width}x{height})")


if __name__ == "__main__":
    blurhash = image_to_blurhash(INPUT_IMAGE)
    blurhash_to_png(blurhash, OUTPUT_PNG)
