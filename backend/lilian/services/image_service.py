"""Image ingestion for content uploads.

Uploaded images are capped in size, scaled down to fit a bounding box and
re-encoded as JPEG so that stored blobs stay small and uniform.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image, UnidentifiedImageError

from lilian.config import settings
from lilian.services.errors import ImageTooLargeError, UnprocessableImageError

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 5 * 1024 * 1024
OUTPUT_FORMAT = "JPEG"
OUTPUT_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ImageSettings:
    max_bytes: int = MAX_IMAGE_BYTES
    max_width: int = 800
    max_height: int = 600
    quality: int = 85

    @classmethod
    def from_settings(cls) -> "ImageSettings":
        return cls(
            max_bytes=settings.image_max_bytes,
            max_width=settings.image_max_width,
            max_height=settings.image_max_height,
            quality=settings.image_quality,
        )


class ImageIngestor:
    """Byte-in/byte-out image transform. Has no knowledge of storage."""

    def __init__(self, config: Optional[ImageSettings] = None):
        self.config = config or ImageSettings()

    def ingest(self, raw: bytes) -> bytes:
        """
        Validate, shrink and re-encode an uploaded image.

        Raises:
            ImageTooLargeError: input is larger than ``max_bytes`` (checked
                before any decoding)
            UnprocessableImageError: input cannot be decoded as an image
        """
        if len(raw) > self.config.max_bytes:
            logger.warning(f"Rejected image upload of {len(raw)} bytes (limit {self.config.max_bytes})")
            max_mb = self.config.max_bytes / (1024 * 1024)
            raise ImageTooLargeError(f"Image is too large. Maximum allowed size is {max_mb:g}MB.")

        try:
            with Image.open(io.BytesIO(raw)) as img:
                img.load()
                return self._encode(img)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
            logger.warning(f"Could not decode uploaded image: {e}")
            raise UnprocessableImageError("Error processing the image") from e

    def _encode(self, img: Image.Image) -> bytes:
        # thumbnail() keeps the aspect ratio and never enlarges
        img.thumbnail((self.config.max_width, self.config.max_height), Image.Resampling.LANCZOS)
        if img.mode != "RGB":
            img = img.convert("RGB")

        buf = io.BytesIO()
        img.save(buf, format=OUTPUT_FORMAT, quality=self.config.quality)
        return buf.getvalue()


def get_image_ingestor() -> ImageIngestor:
    return ImageIngestor(ImageSettings.from_settings())
