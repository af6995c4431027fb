from typing import Dict, Optional, Tuple

from pydantic import BaseModel

from signup.image_codec import EncodedImage, ImageCodec
from signup.state import SignupForm

REQUEST_PART = "postSignUpRequest"
REQUEST_CONTENT_TYPE = "application/json"
# browsers name an appended Blob "blob" when no filename is given
REQUEST_FILENAME = "blob"

IMAGE_PART = "image"
IMAGE_FILENAME = "profile.jpg"
IMAGE_CONTENT_TYPE = "image/jpeg"


class SignupRequest(BaseModel):
    image_url: str = ""
    email: str
    phoneNumber: str
    nickname: str
    password: str


class ImageAttachment(BaseModel):
    filename: str = IMAGE_FILENAME
    content_type: str = IMAGE_CONTENT_TYPE
    content: bytes


class TransportPayload(BaseModel):
    request: SignupRequest
    image: Optional[ImageAttachment] = None

    def json_part(self) -> bytes:
        return self.request.model_dump_json().encode("utf-8")

    def to_multipart(self) -> Dict[str, Tuple[str, bytes, str]]:
        """Parts in the shape httpx accepts for `files=`."""
        parts = {REQUEST_PART: (REQUEST_FILENAME, self.json_part(), REQUEST_CONTENT_TYPE)}
        if self.image is not None:
            parts[IMAGE_PART] = (self.image.filename, self.image.content, self.image.content_type)
        return parts


class PayloadBuilder:
    def __init__(self, codec: Optional[ImageCodec] = None):
        self.codec = codec or ImageCodec()

    def build(self, values: SignupForm, image: Optional[EncodedImage] = None) -> TransportPayload:
        """
        The JSON part carries only the base64 segment of the image (empty string
        without one); the binary part is the decoded image. Raises ImageReadError
        when the encoded image cannot be decoded.
        """
        attachment = None
        image_url = ""
        if image is not None:
            attachment = ImageAttachment(content=self.codec.decode(image))
            image_url = image.data

        request = SignupRequest(
            image_url=image_url,
            email=values.email,
            phoneNumber=values.phoneNumber,
            nickname=values.nickname,
            password=values.password,
        )
        return TransportPayload(request=request, image=attachment)
