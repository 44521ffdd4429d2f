import numpy as np
from PIL import Image

RAW_EXTENSIONS = ("dng", "cr2", "nef", "arw", "raw")


def load_image(filepath: str, max_size: int = None) -> tuple[np.ndarray, dict]:
    """
    Load an image as an (height, width, 3) sRGB array for encoding.

    :param filepath: Path to a PNG/JPEG/... file, or a camera RAW file (needs rawpy).
    :param max_size: If given, downscale so neither side exceeds this many pixels.
                     The hash only keeps a few frequencies, so small inputs
                     encode much faster with the same result.
    :return: Tuple (pixels, description) with width, height and original size.
    """

    ext = filepath.lower().split(".")[-1]

    if ext in RAW_EXTENSIONS:
        import rawpy

        with rawpy.imread(filepath) as raw:
            rgb = raw.postprocess()
        img = Image.fromarray(rgb)
    else:
        img = Image.open(filepath)

    original_size = img.size
    img = img.convert("RGB")

    if max_size is not None and max(img.size) > max_size:
        img.thumbnail((max_size, max_size), Image.Resampling.BOX)

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "original_width": original_size[0],
        "original_height": original_size[1],
    }
