from typing import Optional

from config.settings import SignupConfig
from observability.logging import get_logger
from signup.controller import AuthState, Router, SignupService, SubmissionController, SubmissionResult
from signup.graph import SignupGraphFactory, SignupState
from signup.image_codec import ImageCodec, ImageReadError, ImageSource
from signup.messages import get_messages
from signup.payload import PayloadBuilder
from signup.state import FieldErrors, SignupForm, SubmissionStatus
from signup.store import FormStateStore
from signup.validator import SignupValidator

logger = get_logger(__name__)


class SignupFlow:
    """
    One sign-up screen's worth of state. A rendering layer feeds it field
    changes, file selections and submit presses, and reads back values,
    errors, the image preview and the submit button state.
    """

    def __init__(
        self,
        service: SignupService,
        auth: AuthState,
        router: Router,
        config: Optional[SignupConfig] = None,
    ):
        self.config = config or SignupConfig()
        messages = get_messages(self.config.locale)

        self.codec = ImageCodec(max_bytes=self.config.max_image_bytes)
        self.store = FormStateStore(SignupValidator(messages), messages)
        self.controller = SubmissionController(
            service,
            auth,
            router,
            self.store,
            messages,
            next_route=self.config.next_route,
        )
        self.graph = SignupGraphFactory(
            self.store, PayloadBuilder(self.codec), self.controller
        ).compile()
        self._image_ticket = 0
        self._in_flight = False

    @property
    def values(self) -> SignupForm:
        return self.store.values

    @property
    def errors(self) -> FieldErrors:
        return self.store.errors

    @property
    def preview(self) -> Optional[str]:
        return self.store.preview

    @property
    def status(self) -> SubmissionStatus:
        return self.controller.status

    @property
    def submit_disabled(self) -> bool:
        return self._in_flight or self.controller.submit_disabled

    @property
    def submit_label(self) -> str:
        if self._in_flight:
            return self.controller.messages["submit_pending_label"]
        return self.controller.submit_label

    def change(self, name: str, value: str) -> None:
        self.store.set_field(name, value)

    async def select_image(self, source: ImageSource, mime_type: str) -> None:
        """
        The latest selection wins: a read that finishes after a newer
        selection was made is thrown away.
        """
        self._image_ticket += 1
        ticket = self._image_ticket

        try:
            image = await self.codec.read(source, mime_type)
        except ImageReadError as exc:
            if ticket != self._image_ticket:
                logger.debug("image_read_discarded", ticket=ticket)
                return
            self.store.set_image(exc)
            return

        if ticket != self._image_ticket:
            logger.debug("image_read_discarded", ticket=ticket)
            return
        logger.info("image_read_completed", mime_type=image.mime_type)
        self.store.set_image(image)

    async def submit(self) -> Optional[SubmissionResult]:
        if self.submit_disabled:
            logger.warning("signup_submit_ignored", status=self.controller.status.value)
            return None

        self._in_flight = True
        try:
            out = await self.graph.ainvoke({"form": self.store.values})
        finally:
            self._in_flight = False
        if isinstance(out, SignupState):
            return out.result
        return out.get("result")
