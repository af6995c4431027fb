import json

import pytest

from conftest import JPEG_BYTES
from signup.image_codec import EncodedImage, ImageCodec, ImageReadError
from signup.payload import PayloadBuilder


def test_without_image(valid_form):
    payload = PayloadBuilder().build(valid_form)

    assert payload.image is None
    assert json.loads(payload.json_part()) == {
        "image_url": "",
        "email": "a@b.com",
        "phoneNumber": "01012345678",
        "nickname": "n",
        "password": "abc123!",
    }
    assert set(payload.to_multipart()) == {"postSignUpRequest"}


def test_with_image_strips_data_uri_prefix(valid_form):
    image = ImageCodec().encode(JPEG_BYTES, "image/png")

    payload = PayloadBuilder().build(valid_form, image)

    image_url = payload.request.image_url
    assert image_url == image.data
    assert not image_url.startswith("data:")
    assert "base64," not in image_url


def test_image_part_is_decoded_jpeg_attachment(valid_form):
    image = ImageCodec().encode(JPEG_BYTES, "image/jpeg")

    parts = PayloadBuilder().build(valid_form, image).to_multipart()

    assert parts["image"] == ("profile.jpg", JPEG_BYTES, "image/jpeg")
    filename, body, content_type = parts["postSignUpRequest"]
    assert (filename, content_type) == ("blob", "application/json")
    assert json.loads(body)["image_url"] == image.data


def test_confirm_password_is_not_sent(valid_form):
    body = json.loads(PayloadBuilder().build(valid_form).json_part())

    assert "confirmPassword" not in body


def test_non_ascii_fields_are_utf8_json(valid_form):
    form = valid_form.model_copy(update={"nickname": "여행자"})

    body = PayloadBuilder().build(form).json_part()

    assert json.loads(body.decode("utf-8"))["nickname"] == "여행자"


def test_corrupt_image_raises_read_error(valid_form):
    with pytest.raises(ImageReadError):
        PayloadBuilder().build(valid_form, EncodedImage(mime_type="image/jpeg", data="%%%"))
