from typing import Dict

DEFAULT_LOCALE = "ko"

MESSAGES: Dict[str, Dict[str, str]] = {
    "ko": {
        "email_invalid": "유효한 이메일 주소를 입력해주세요",
        "phone_digits": "핸드폰 번호는 숫자 11자리여야 합니다",
        "nickname_required": "닉네임은 필수입니다",
        "nickname_too_long": "닉네임은 10자 이하여야 합니다",
        "password_composition": "비밀번호는 한글/영문, 숫자, 특수문자를 포함하여 7~15자여야 합니다",
        "password_mismatch": "비밀번호가 일치하지 않습니다",
        "image_read_failed": "이미지 처리 중 오류가 발생했습니다.",
        "signup_failed": "회원가입에 실패했습니다. 다시 시도해 주세요.",
        "signup_unknown": "회원가입 중 알 수 없는 오류가 발생했습니다.",
        "submit_label": "가입하기",
        "submit_pending_label": "처리 중...",
    },
    "en": {
        "email_invalid": "Please enter a valid email address",
        "phone_digits": "Phone number must be exactly 11 digits",
        "nickname_required": "Nickname is required",
        "nickname_too_long": "Nickname must be 10 characters or fewer",
        "password_composition": (
            "Password must be 7-15 characters and include a letter, a digit and a symbol"
        ),
        "password_mismatch": "Passwords do not match",
        "image_read_failed": "Something went wrong while processing the image.",
        "signup_failed": "Sign-up failed. Please try again.",
        "signup_unknown": "An unknown error occurred during sign-up.",
        "submit_label": "Sign up",
        "submit_pending_label": "Processing...",
    },
}


def get_messages(locale: str = DEFAULT_LOCALE) -> Dict[str, str]:
    if locale not in MESSAGES:
        raise ValueError(f"Unsupported locale: {locale!r}")
    return MESSAGES[locale]
