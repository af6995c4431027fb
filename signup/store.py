import re
from typing import Dict, Optional, Union

from observability.logging import get_logger
from signup.image_codec import EncodedImage, ImageReadError
from signup.messages import get_messages
from signup.state import (
    EDITABLE_FIELDS,
    IMAGE_FIELD,
    SERVER_ERROR_KEY,
    FieldErrors,
    SignupForm,
)
from signup.validator import SignupValidator, ValidationResult

logger = get_logger(__name__)

NON_DIGITS = re.compile(r"[^0-9]")


class FormStateStore:
    """
    Current form values, the errors on display and the "submitted" gate.

    Until mark_submitted() is called no validation runs, so nothing the user
    types produces an error. After that, every change re-runs the validator
    and replaces the error mapping as a whole.
    """

    def __init__(
        self,
        validator: SignupValidator,
        messages: Optional[Dict[str, str]] = None,
    ):
        self.validator = validator
        self.messages = messages or get_messages()
        self.values = SignupForm()
        self.submitted = False
        self.preview: Optional[str] = None
        self._errors: FieldErrors = {}
        self._image_error: Optional[str] = None

    @property
    def errors(self) -> FieldErrors:
        return dict(self._errors)

    def set_field(self, name: str, value: str) -> None:
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        if name == "phoneNumber":
            value = NON_DIGITS.sub("", value)
        self.values = self.values.model_copy(update={name: value})
        self.revalidate_if_submitted()

    def set_image(self, image: Union[EncodedImage, ImageReadError]) -> None:
        if isinstance(image, ImageReadError):
            logger.warning("image_read_failed", reason=str(image))
            self.values = self.values.model_copy(update={"image": None})
            self.preview = None
            self._image_error = self.messages["image_read_failed"]
        else:
            self.values = self.values.model_copy(update={"image": image})
            self.preview = image.uri
            self._image_error = None

        errors = {k: v for k, v in self._errors.items() if k != IMAGE_FIELD}
        if self._image_error is not None:
            errors[IMAGE_FIELD] = self._image_error
        self._errors = errors
        self.revalidate_if_submitted()

    def mark_submitted(self) -> None:
        self.submitted = True

    def revalidate_if_submitted(self) -> Optional[ValidationResult]:
        if not self.submitted:
            return None

        result = self.validator.validate(self.values)
        errors = dict(result.errors)
        # a failed read is current state, not a stale error
        if self._image_error is not None:
            errors[IMAGE_FIELD] = self._image_error
        self._errors = errors
        return result

    def set_submission_error(self, message: str, field: str = SERVER_ERROR_KEY) -> None:
        self._errors = {**self._errors, field: message}

    def clear_errors(self) -> None:
        self._errors = {}
        self._image_error = None
