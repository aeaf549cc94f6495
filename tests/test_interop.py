"""Cross-checks against Pillow's BMP reader and writer."""

import io

import numpy as np
import pytest

from bmp24.components.image import RgbImage
from bmp24.core.decoder import decode_bmp
from bmp24.core.encoder import encode_bmp

Image = pytest.importorskip("PIL.Image")


@pytest.mark.parametrize("shape", [(1, 1), (2, 2), (3, 7), (10, 13)])
def test_pillow_reads_encoded_file(shape: tuple[int, int]) -> None:
    """Test that files from encode_bmp open in Pillow with identical pixels."""
    arr = np.random.randint(0, 256, (*shape, 3), dtype=np.uint8)
    data = encode_bmp(RgbImage.from_array(arr))

    with Image.open(io.BytesIO(data)) as pil_img:
        assert pil_img.format == "BMP"
        assert pil_img.size == (shape[1], shape[0])
        decoded = np.array(pil_img.convert("RGB"))

    assert np.array_equal(decoded, arr)


@pytest.mark.parametrize("shape", [(1, 1), (4, 5), (9, 6)])
def test_decode_pillow_file(shape: tuple[int, int]) -> None:
    """Test that 24-bit files written by Pillow decode correctly."""
    arr = np.random.randint(0, 256, (*shape, 3), dtype=np.uint8)
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format="BMP")

    img = decode_bmp(buf.getvalue())

    assert img.width == shape[1]
    assert img.height == shape[0]
    assert np.array_equal(img.to_array(), arr)
