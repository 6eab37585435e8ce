from io import BytesIO

import pytest
from PIL import Image

from sitesmith.backend.app.infrastructure.images.pillow_processor import (
    IMAGE_DESCRIPTION,
    ORIENTATION,
    PillowImageProcessor,
)


def encode(img: Image.Image, fmt: str, **kwargs) -> bytes:
    buf = BytesIO()
    img.save(buf, format=fmt, **kwargs)
    return buf.getvalue()


@pytest.fixture
def processor() -> PillowImageProcessor:
    return PillowImageProcessor()


def test_inspect_reads_geometry(processor):
    geometry = processor.inspect(encode(Image.new("RGB", (320, 180), "red"), "PNG"))
    assert (geometry.width, geometry.height) == (320, 180)
    assert geometry.aspect_ratio == "16:9"


def test_inspect_rejects_non_images(processor):
    with pytest.raises(Exception):
        processor.inspect(b"not an image")


@pytest.mark.parametrize(
    "mode,fmt",
    [("RGB", "JPEG"), ("RGBA", "PNG"), ("P", "GIF"), ("RGB", "WEBP")],
)
def test_normalize_outputs_webp_with_description(processor, mode, fmt):
    source = encode(Image.new(mode, (40, 20)), fmt)
    description = "A test image\nAspect Ratio: 2:1 (landscape)"

    out = processor.normalize(source, description=description)

    assert out.content_type == "image/webp"
    assert out.extension == ".webp"
    with Image.open(BytesIO(out.content)) as img:
        assert img.format == "WEBP"
        assert img.size == (40, 20)
        assert img.getexif().get(IMAGE_DESCRIPTION) == description


def test_rotated_photo_is_described_as_stored(processor):
    exif = Image.Exif()
    exif[ORIENTATION] = 6
    source = encode(Image.new("RGB", (400, 200), "blue"), "JPEG", exif=exif.tobytes())

    geometry = processor.inspect(source)
    out = processor.normalize(source, description=geometry.describe("a phone photo"))

    assert (geometry.width, geometry.height) == (200, 400)
    assert geometry.orientation == "portrait"
    with Image.open(BytesIO(out.content)) as img:
        assert img.size == (geometry.width, geometry.height)
        assert ORIENTATION not in img.getexif()
