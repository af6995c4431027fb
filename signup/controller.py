import asyncio
import inspect
from typing import Any, Awaitable, Dict, Optional, Protocol, Union

from pydantic import BaseModel

from observability.logging import get_logger
from signup.messages import get_messages
from signup.payload import TransportPayload
from signup.state import EDITABLE_FIELDS, IMAGE_FIELD, SERVER_ERROR_KEY, SubmissionStatus
from signup.store import FormStateStore

logger = get_logger(__name__)

DEFAULT_NEXT_ROUTE = "/onboarding"


class SignupServiceError(Exception):
    """A registration attempt the service refused or could not complete."""

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message or "sign-up request failed")
        self.message = message
        self.field = field
        self.status_code = status_code


class SignupService(Protocol):
    async def register(self, payload: TransportPayload) -> str: ...


class AuthState(Protocol):
    def set_auth(self, token: str) -> Union[None, Awaitable[Any]]: ...


class Router(Protocol):
    def navigate(self, route: str) -> Any: ...


class Succeeded(BaseModel):
    token: str


class Failed(BaseModel):
    reason: str
    field: str = SERVER_ERROR_KEY


SubmissionResult = Union[Succeeded, Failed]


class SubmissionController:
    def __init__(
        self,
        service: SignupService,
        auth: AuthState,
        router: Router,
        store: FormStateStore,
        messages: Optional[Dict[str, str]] = None,
        next_route: str = DEFAULT_NEXT_ROUTE,
    ):
        self.service = service
        self.auth = auth
        self.router = router
        self.store = store
        self.messages = messages or get_messages()
        self.next_route = next_route
        self.status = SubmissionStatus.IDLE

    @property
    def is_pending(self) -> bool:
        return self.status is SubmissionStatus.PENDING

    @property
    def submit_disabled(self) -> bool:
        return self.status in (SubmissionStatus.PENDING, SubmissionStatus.SUCCEEDED)

    @property
    def submit_label(self) -> str:
        if self.is_pending:
            return self.messages["submit_pending_label"]
        return self.messages["submit_label"]

    async def submit(self, payload: TransportPayload) -> Optional[SubmissionResult]:
        """
        Sends one registration request. Returns None without calling the
        service when a request is already in flight or has already succeeded.
        """
        if self.submit_disabled:
            logger.warning("signup_submit_ignored", status=self.status.value)
            return None

        self.status = SubmissionStatus.PENDING
        logger.info("signup_submit_started", has_image=payload.image is not None)
        try:
            token = await self.service.register(payload)
            await self._commit_auth(token)
        except asyncio.CancelledError:
            self.status = SubmissionStatus.FAILED
            raise
        except SignupServiceError as exc:
            logger.warning(
                "signup_submit_failed", status_code=exc.status_code, field=exc.field
            )
            return self._fail(exc.message or self.messages["signup_failed"], exc.field)
        except Exception:
            logger.exception("signup_submit_crashed")
            return self._fail(self.messages["signup_unknown"])

        self.status = SubmissionStatus.SUCCEEDED
        self.store.clear_errors()
        logger.info("signup_submit_succeeded", next_route=self.next_route)
        # auth state is committed above, so the route change always comes after it
        self.router.navigate(self.next_route)
        return Succeeded(token=token)

    async def _commit_auth(self, token: str) -> None:
        outcome = self.auth.set_auth(token)
        if inspect.isawaitable(outcome):
            await outcome

    def _fail(self, reason: str, field: Optional[str] = None) -> Failed:
        # errors for fields the form does not show go to the server slot
        if field not in EDITABLE_FIELDS and field != IMAGE_FIELD:
            field = SERVER_ERROR_KEY
        failure = Failed(reason=reason, field=field)
        self.status = SubmissionStatus.FAILED
        self.store.set_submission_error(failure.reason, failure.field)
        return failure
