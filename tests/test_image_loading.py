import base64
import io

import pytest
from PIL import Image

from escposkit.errors import ImageDecodeError
from escposkit.protocol.raster import encode
from escposkit.rendering.image import decode_data_url, load_image


def _png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def test_load_from_bytes_path_and_stream(tmp_path):
    data = _png(Image.new("RGB", (12, 5), (10, 20, 30)))
    path = tmp_path / "logo.png"
    path.write_bytes(data)

    for source in (data, str(path), path, io.BytesIO(data)):
        img = load_image(source)
        assert img.mode == "RGB"
        assert img.size == (12, 5)


def test_load_from_data_url():
    data = _png(Image.new("L", (3, 4), 0))
    url = "data:image/png;base64," + base64.b64encode(data).decode("ascii")
    img = load_image(url)
    assert img.size == (3, 4)
    assert img.getpixel((0, 0)) == (0, 0, 0)


def test_transparent_pixels_print_blank():
    img = Image.new("RGBA", (8, 8), (0, 0, 0, 0))
    img.putpixel((0, 0), (0, 0, 0, 255))
    rgb = load_image(_png(img))
    assert rgb.getpixel((1, 1)) == (255, 255, 255)
    assert encode(rgb, 8, 8) == [b"\x80" + bytes(7)]


def test_pillow_image_is_normalized():
    img = Image.new("1", (8, 8), 1)
    assert load_image(img).mode == "RGB"


def test_garbage_bytes_raise_decode_error():
    with pytest.raises(ImageDecodeError):
        load_image(b"\x00\x01 not an image")


def test_missing_file_raises_decode_error(tmp_path):
    with pytest.raises(ImageDecodeError):
        load_image(str(tmp_path / "missing.png"))


def test_malformed_data_urls():
    with pytest.raises(ImageDecodeError):
        decode_data_url("data:image/png;base64")
    with pytest.raises(ImageDecodeError):
        decode_data_url("data:image/png;base64,@@@")


def test_plain_data_url_is_percent_decoded():
    assert decode_data_url("data:text/plain,a%20b") == b"a b"


def test_oversized_image_raises_decode_error(monkeypatch):
    data = _png(Image.new("RGB", (16, 16), (255, 255, 255)))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(ImageDecodeError):
        load_image(data)
