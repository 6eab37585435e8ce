from __future__ import annotations

from io import BytesIO

from PIL import Image, ImageOps

from sitesmith.backend.app.application.assets.interfaces import NormalizedImage
from sitesmith.backend.app.domain.projects.value_objects import ImageGeometry

# EXIF IFD0 tags
IMAGE_DESCRIPTION = 0x010E
ORIENTATION = 0x0112
# orientations that rotate by 90 or 270 degrees
SWAPS_AXES = frozenset({5, 6, 7, 8})


class PillowImageProcessor:
    """
    Reads geometry and re-encodes every upload to WebP with the description
    stored in EXIF ImageDescription. Sources already in WebP are re-encoded
    too so the metadata is always present.
    """

    content_type = "image/webp"
    extension = ".webp"

    def __init__(self, quality: int = 85) -> None:
        self._quality = quality

    def inspect(self, content: bytes) -> ImageGeometry:
        with Image.open(BytesIO(content)) as img:
            width, height = img.size
            if img.getexif().get(ORIENTATION) in SWAPS_AXES:
                width, height = height, width
        return ImageGeometry(width=width, height=height)

    def normalize(self, content: bytes, *, description: str) -> NormalizedImage:
        with Image.open(BytesIO(content)) as img:
            exif = img.getexif()
            exif[IMAGE_DESCRIPTION] = description

            out = BytesIO()
            if getattr(img, "is_animated", False):
                img.save(out, format="WEBP", save_all=True, quality=self._quality, exif=exif.tobytes())
            else:
                frame = ImageOps.exif_transpose(img)
                # pixels are upright now; a leftover Orientation tag would rotate them twice
                exif.pop(ORIENTATION, None)
                if frame.mode not in ("RGB", "RGBA"):
                    has_alpha = frame.mode in ("LA", "PA") or "transparency" in frame.info
                    frame = frame.convert("RGBA" if has_alpha else "RGB")
                frame.save(out, format="WEBP", quality=self._quality, exif=exif.tobytes())

        return NormalizedImage(
            content=out.getvalue(),
            content_type=self.content_type,
            extension=self.extension,
        )
