from blurhash_codec import encode, load_image

INPUT_IMAGE = "fruits.png"
COMPONENTS_X = 4
COMPONENTS_Y = 3

if __name__ == "__main__":
    pixel_data, desc = load_image(INPUT_IMAGE, max_size=64)
    print(
        f"Loaded image {INPUT_IMAGE}: {desc['original_width']}x{desc['original_height']} "
        f"(encoding at {desc['width']}x{desc['height']})"
    )

    blurhash = encode(pixel_data, COMPONENTS_X, COMPONENTS_Y)
    print(f"BlurHash ({COMPONENTS_X}x{COMPONENTS_Y} components): {blurhash}")
