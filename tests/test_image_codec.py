import pytest

from conftest import JPEG_BYTES
from signup.image_codec import EncodedImage, ImageCodec, ImageReadError


def test_encode_decode_roundtrip():
    codec = ImageCodec()
    for binary in (JPEG_BYTES, b"\x00", bytes(range(256)) * 3):
        assert codec.decode(codec.encode(binary, "image/png")) == binary


def test_encoded_image_is_a_data_uri():
    image = ImageCodec().encode(b"abc", "image/png")

    assert image.data == "YWJj"
    assert image.uri == "data:image/png;base64,YWJj"


def test_empty_file_is_a_read_error():
    with pytest.raises(ImageReadError):
        ImageCodec().encode(b"", "image/jpeg")


def test_non_image_content_type_is_a_read_error():
    with pytest.raises(ImageReadError):
        ImageCodec().encode(b"%PDF-1.7", "application/pdf")


def test_size_limit():
    codec = ImageCodec(max_bytes=4)

    assert codec.encode(b"1234", "image/gif").data == "MTIzNA=="
    with pytest.raises(ImageReadError):
        codec.encode(b"12345", "image/gif")


def test_decode_rejects_corrupt_data():
    with pytest.raises(ImageReadError):
        ImageCodec.decode(EncodedImage(mime_type="image/jpeg", data="not base64!"))


@pytest.mark.asyncio
async def test_read_from_path(tmp_path):
    path = tmp_path / "profile.jpg"
    path.write_bytes(JPEG_BYTES)

    image = await ImageCodec().read(path, "image/jpeg")

    assert ImageCodec.decode(image) == JPEG_BYTES
    assert image.mime_type == "image/jpeg"


@pytest.mark.asyncio
async def test_read_missing_file_is_a_read_error(tmp_path):
    with pytest.raises(ImageReadError):
        await ImageCodec().read(tmp_path / "missing.jpg", "image/jpeg")
