import re
from typing import Dict, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field

from observability.logging import get_logger
from signup.messages import get_messages
from signup.state import FieldErrors, SignupForm

logger = get_logger(__name__)

PHONE_PATTERN = re.compile(r"[0-9]{11}")
PASSWORD_PATTERN = re.compile(
    r"(?=.*[A-Za-z가-힣])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&가-힣]{7,15}"
)
NICKNAME_MAX_LENGTH = 10


class ValidationResult(BaseModel):
    values: Optional[SignupForm] = None
    errors: FieldErrors = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class SignupValidator:
    def __init__(self, messages: Optional[Dict[str, str]] = None):
        self.messages = messages or get_messages()

    def validate(self, values: SignupForm) -> ValidationResult:
        """
        Checks every field independently, then the password confirmation.
        All problems are reported together; nothing is mutated.
        """
        logger.debug("signup_validation_started")
        errors: FieldErrors = {}

        if not self._is_email(values.email):
            errors["email"] = self.messages["email_invalid"]

        if not PHONE_PATTERN.fullmatch(values.phoneNumber):
            errors["phoneNumber"] = self.messages["phone_digits"]

        if len(values.nickname) < 1:
            errors["nickname"] = self.messages["nickname_required"]
        elif len(values.nickname) > NICKNAME_MAX_LENGTH:
            errors["nickname"] = self.messages["nickname_too_long"]

        if not PASSWORD_PATTERN.fullmatch(values.password):
            errors["password"] = self.messages["password_composition"]

        if values.password != values.confirmPassword:
            errors["confirmPassword"] = self.messages["password_mismatch"]

        if errors:
            logger.info("signup_validation_failed", fields=sorted(errors))
            return ValidationResult(errors=errors)

        logger.debug("signup_validation_succeeded")
        return ValidationResult(values=values)

    @staticmethod
    def _is_email(value: str) -> bool:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
