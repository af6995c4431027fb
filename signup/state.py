from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from signup.image_codec import EncodedImage

EDITABLE_FIELDS = ("email", "phoneNumber", "nickname", "password", "confirmPassword")
IMAGE_FIELD = "image"
SERVER_ERROR_KEY = "server"

# field name -> message; absent key means the field is currently valid
FieldErrors = Dict[str, str]


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SignupForm(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    email: str = Field(default="", description="Account email")
    phoneNumber: str = Field(default="", description="11 digit mobile number")
    nickname: str = Field(default="", description="Display name, up to 10 characters")
    password: str = Field(default="", description="7-15 characters")
    confirmPassword: str = Field(default="", description="Must repeat password")
    image: Optional[EncodedImage] = Field(default=None, description="Chosen profile image")
