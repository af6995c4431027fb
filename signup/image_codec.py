import asyncio
import base64
import binascii
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from observability.logging import get_logger

logger = get_logger(__name__)

ImageSource = Union[bytes, bytearray, str, os.PathLike]


class ImageReadError(Exception):
    """The chosen file could not be turned into an image value."""


class EncodedImage(BaseModel):
    """
    Base64 text of an image plus its MIME type. `uri` is the data URI used for
    previews; `data` alone is what travels to the server.
    """

    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: str

    @property
    def uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class ImageCodec:
    def __init__(self, max_bytes: Optional[int] = None):
        self.max_bytes = max_bytes

    def encode(self, binary: bytes, mime_type: str = "image/jpeg") -> EncodedImage:
        if not binary:
            raise ImageReadError("Image file is empty")
        if not mime_type.startswith("image/"):
            raise ImageReadError(f"Unsupported content type: {mime_type}")
        if self.max_bytes is not None and len(binary) > self.max_bytes:
            raise ImageReadError(
                f"Image is {len(binary)} bytes, limit is {self.max_bytes} bytes"
            )
        return EncodedImage(mime_type=mime_type, data=base64.b64encode(bytes(binary)).decode("ascii"))

    @staticmethod
    def decode(image: EncodedImage) -> bytes:
        try:
            raw = base64.b64decode(image.data.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError) as exc:
            raise ImageReadError("Image data is not valid base64") from exc
        if not raw:
            raise ImageReadError("Image data is empty")
        return raw

    async def read(self, source: ImageSource, mime_type: str) -> EncodedImage:
        """Load a chosen file (raw bytes or a path) and encode it."""
        logger.debug("image_read_started", mime_type=mime_type)
        if isinstance(source, (bytes, bytearray)):
            binary = bytes(source)
        else:
            try:
                binary = await asyncio.to_thread(Path(source).read_bytes)
            except OSError as exc:
                raise ImageReadError(f"Could not read {source}: {exc.strerror}") from exc
        return self.encode(binary, mime_type)
