#! The reference package is also pure Python, so this compares like with like.
#! Expect both to be slow for large outputs; placeholders are usually decoded at 32x32.

import time

import numpy as np

import blurhash as ReferenceBlurHash
from blurhash_codec import decode

BLURHASH = "LEHV6nWB2yk0pyo0adR*.7kCMdnj"
SIZES = (32, 64, 128)


def time_compare(blurhash, size):
    start_time = time.perf_counter()
    ours = decode(blurhash, size, size)
    end_time = time.perf_counter()
    print(f"Decoded {size}x{size} in {end_time - start_time:.4f} seconds")

    start_time = time.perf_counter()
    reference = ReferenceBlurHash.decode(blurhash, size, size)
    end_time = time.perf_counter()
    print(f"Reference decoded {size}x{size} in {end_time - start_time:.4f} seconds")

    diff = np.abs(ours.to_array()[:, :, :3].astype(int) - np.array(reference, dtype=int))
    print(f"Max channel difference: {diff.max()}")


if __name__ == "__main__":
    for size in SIZES:
        time_compare(BLURHASH, size)
