import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from signup.messages import MESSAGES

load_dotenv()

ENV_VARS = {
    "api_base_url": "SIGNUP_API_URL",
    "signup_path": "SIGNUP_API_PATH",
    "timeout": "SIGNUP_TIMEOUT",
    "locale": "SIGNUP_LOCALE",
    "next_route": "SIGNUP_NEXT_ROUTE",
    "max_image_mb": "SIGNUP_MAX_IMAGE_MB",
    "log_level": "LOG_LEVEL",
    "log_format": "LOG_FORMAT",
}


class SignupConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_base_url: str = "http://localhost:8080"
    signup_path: str = "/api/auth/signup"
    timeout: float = 10.0
    locale: str = "ko"
    next_route: str = "/onboarding"
    max_image_mb: int = 5
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        if value not in MESSAGES:
            raise ValueError(f"locale must be one of {sorted(MESSAGES)}")
        return value

    @property
    def max_image_bytes(self) -> int:
        return self.max_image_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "SignupConfig":
        values = {field: os.environ[var] for field, var in ENV_VARS.items() if var in os.environ}
        return cls(**values)
