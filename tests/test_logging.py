import json

from observability.logging import PIIRedactor, get_logger, setup_logging


def test_sensitive_keys_are_redacted():
    out = PIIRedactor()(None, "info", {
        "event": "signup_submit_started",
        "password": "abc123!",
        "confirmPassword": "abc123!",
        "phoneNumber": "01012345678",
        "nested": {"token": "t"},
    })

    assert out["password"] == "[REDACTED]"
    assert out["confirmPassword"] == "[REDACTED]"
    assert out["phoneNumber"] == "[REDACTED]"
    assert out["nested"] == {"token": "[REDACTED]"}
    assert out["event"] == "signup_submit_started"


def test_contact_details_in_strings_are_masked():
    out = PIIRedactor()(None, "info", {"event": "x", "note": "mail a@b.com or call 01012345678"})

    assert out["note"] == "mail [EMAIL] or call [PHONE]"


def test_json_output_is_redacted(capsys):
    setup_logging(level="INFO", format="json")

    get_logger("test").info("signup_rejected", email="a@b.com", status_code=409)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "signup_rejected"
    assert record["email"] == "[REDACTED]"
    assert record["status_code"] == 409


def test_level_filtering(capsys):
    setup_logging(level="WARNING", format="json")

    get_logger("test").info("quiet")

    assert capsys.readouterr().err == ""
