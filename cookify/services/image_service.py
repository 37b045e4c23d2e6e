"""Validation and downscaling of recipe photos before AI analysis."""

import io
import logging
from dataclasses import dataclass

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from cookify.config import settings

logger = logging.getLogger(__name__)

ALLOWED_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"]


@dataclass
class PreparedImage:
    data: bytes
    media_type: str


class ImageService:
    """Service for handling uploaded recipe photos in memory."""

    def __init__(
        self,
        max_bytes: int | None = None,
        max_width: int | None = None,
    ):
        self.max_bytes = settings.max_image_bytes if max_bytes is None else max_bytes
        self.max_width = settings.max_image_width if max_width is None else max_width

    async def read_upload(self, file: UploadFile) -> bytes:
        """
        Read an uploaded photo after checking its type and size.

        Raises:
            ValueError: If the file is missing, empty, too large or not an image type
        """
        if file is None:
            raise ValueError("No file uploaded.")

        if file.content_type not in ALLOWED_TYPES:
            raise ValueError(
                f"Invalid file type: {file.content_type}. Allowed: {ALLOWED_TYPES}"
            )

        contents = await file.read()
        if not contents:
            raise ValueError("No file uploaded.")
        if len(contents) > self.max_bytes:
            raise ValueError(
                f"Image file is too large. Maximum size is "
                f"{self.max_bytes // (1024 * 1024)}MB"
            )
        return contents

    def prepare_for_analysis(self, contents: bytes) -> PreparedImage:
        """
        Re-encode an image as JPEG no wider than ``max_width``.

        Raises:
            ValueError: If the bytes are not a readable image
        """
        try:
            with Image.open(io.BytesIO(contents)) as img:
                img.load()

                # Convert RGBA/palette to RGB for JPEG output
                if img.mode in ("RGBA", "LA") or (
                    img.mode == "P" and "transparency" in img.info
                ):
                    img = img.convert("RGBA")
                    rgb_img = Image.new("RGB", img.size, (255, 255, 255))
                    rgb_img.paste(img, mask=img.split()[3])
                    img = rgb_img
                elif img.mode != "RGB":
                    img = img.convert("RGB")

                if img.width > self.max_width:
                    ratio = self.max_width / img.width
                    new_height = int(img.height * ratio)
                    img = img.resize(
                        (self.max_width, new_height), Image.Resampling.LANCZOS
                    )

                buffer = io.BytesIO()
                img.save(buffer, format="JPEG", optimize=True, quality=85)
        except (UnidentifiedImageError, OSError) as e:
            raise ValueError(f"Unreadable image: {e}") from e

        logger.debug("Prepared image for analysis (%d bytes)", buffer.tell())
        return PreparedImage(data=buffer.getvalue(), media_type="image/jpeg")


# Singleton instance
image_service = ImageService()
