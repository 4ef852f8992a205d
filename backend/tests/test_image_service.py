"""Tests for image ingestion (size cap, resize, JPEG re-encode)."""

import io

import pytest
from PIL import Image

from lilian.services.errors import ImageTooLargeError, UnprocessableImageError
from lilian.services.image_service import MAX_IMAGE_BYTES, ImageIngestor, ImageSettings


def _open(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


@pytest.fixture
def ingestor():
    return ImageIngestor()


def test_limit_is_five_mebibytes():
    assert MAX_IMAGE_BYTES == 5 * 1024 * 1024
    assert ImageSettings().max_bytes == MAX_IMAGE_BYTES


def test_six_mebibyte_input_is_too_large(ingestor):
    with pytest.raises(ImageTooLargeError):
        ingestor.ingest(b"\x00" * (6 * 1024 * 1024))


def test_size_is_checked_before_decoding(ingestor):
    # Exactly at the limit passes the size check and then fails to decode
    with pytest.raises(UnprocessableImageError):
        ingestor.ingest(b"\x00" * MAX_IMAGE_BYTES)


def test_garbage_bytes_are_unprocessable(ingestor):
    with pytest.raises(UnprocessableImageError):
        ingestor.ingest(b"definitely not an image")


def test_truncated_image_is_unprocessable(ingestor, make_image):
    data = make_image(400, 300, fmt="PNG")
    with pytest.raises(UnprocessableImageError):
        ingestor.ingest(data[: len(data) // 2])


def test_one_mebibyte_image_fits_in_box(ingestor, make_image):
    # Uncompressed BMP, roughly 1 MiB
    data = make_image(640, 546, fmt="BMP")
    assert 1_000_000 < len(data) < 1_100_000

    out = _open(ingestor.ingest(data))
    assert out.format == "JPEG"
    assert out.width <= 800 and out.height <= 600
    assert out.width <= 640 and out.height <= 546


def test_large_image_is_scaled_preserving_aspect_ratio(ingestor, make_image):
    out = _open(ingestor.ingest(make_image(1600, 1200, fmt="PNG")))
    assert out.size == (800, 600)


def test_wide_image_is_bounded_by_width(ingestor, make_image):
    out = _open(ingestor.ingest(make_image(2000, 500, fmt="PNG")))
    assert out.width == 800
    assert out.height == 200


def test_tall_image_is_bounded_by_height(ingestor, make_image):
    out = _open(ingestor.ingest(make_image(300, 1200, fmt="PNG")))
    assert out.height == 600
    assert out.width == 150


def test_small_image_is_not_upscaled(ingestor, make_image):
    out = _open(ingestor.ingest(make_image(120, 80, fmt="PNG")))
    assert out.size == (120, 80)


def test_transparent_png_is_flattened_to_jpeg(ingestor, make_image):
    out = _open(ingestor.ingest(make_image(200, 200, fmt="PNG", mode="RGBA")))
    assert out.format == "JPEG"
    assert out.mode == "RGB"


def test_output_is_deterministic(ingestor, make_image):
    data = make_image(1024, 768, fmt="PNG")
    assert ingestor.ingest(data) == ingestor.ingest(data)


def test_custom_settings(make_image):
    ingestor = ImageIngestor(ImageSettings(max_bytes=1024 * 1024, max_width=100, max_height=100, quality=50))
    out = _open(ingestor.ingest(make_image(400, 200, fmt="PNG")))
    assert out.size == (100, 50)

    with pytest.raises(ImageTooLargeError):
        ingestor.ingest(b"\x00" * (1024 * 1024 + 1))
