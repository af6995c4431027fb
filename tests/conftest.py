import asyncio

import pytest
import structlog

from signup.messages import get_messages
from signup.state import SignupForm
from signup.store import FormStateStore
from signup.validator import SignupValidator

VALID_FIELDS = {
    "email": "a@b.com",
    "phoneNumber": "01012345678",
    "nickname": "n",
    "password": "abc123!",
    "confirmPassword": "abc123!",
}

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01profile\xff\xd9"


class FakeSignupService:
    def __init__(self, token="token-123", error=None):
        self.token = token
        self.error = error
        self.calls = []
        self.started = asyncio.Event()
        self.gate = None

    def hold(self):
        self.gate = asyncio.Event()
        return self.gate

    async def register(self, payload):
        self.calls.append(payload)
        self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.token


class RecordingAuth:
    def __init__(self, events):
        self.events = events
        self.token = None

    def set_auth(self, token):
        self.token = token
        self.events.append(("auth", token))


class RecordingRouter:
    def __init__(self, events):
        self.events = events

    def navigate(self, route):
        self.events.append(("navigate", route))


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()


@pytest.fixture
def messages():
    return get_messages("ko")


@pytest.fixture
def validator(messages):
    return SignupValidator(messages)


@pytest.fixture
def valid_form():
    return SignupForm(**VALID_FIELDS)


@pytest.fixture
def store(validator, messages):
    return FormStateStore(validator, messages)


@pytest.fixture
def events():
    return []


@pytest.fixture
def service():
    return FakeSignupService()


@pytest.fixture
def auth(events):
    return RecordingAuth(events)


@pytest.fixture
def router(events):
    return RecordingRouter(events)
