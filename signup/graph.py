from typing import Any, Dict, Literal, Optional, Union

from langgraph.graph import END, START, StateGraph
from pydantic import BaseModel, ConfigDict, Field

from signup.controller import Failed, SubmissionController, Succeeded
from signup.image_codec import ImageReadError
from signup.payload import PayloadBuilder, TransportPayload
from signup.state import FieldErrors, SignupForm
from signup.store import FormStateStore


class SignupState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    form: SignupForm = Field(default_factory=SignupForm)
    errors: FieldErrors = Field(default_factory=dict)
    payload: Optional[TransportPayload] = None
    result: Optional[Union[Succeeded, Failed]] = None


class SignupGraphFactory:
    def __init__(
        self,
        store: FormStateStore,
        builder: PayloadBuilder,
        controller: SubmissionController,
    ):
        self.store = store
        self.builder = builder
        self.controller = controller

    async def mark_submitted(self, state: SignupState) -> Dict[str, Any]:
        self.store.mark_submitted()
        return {"errors": {}}

    async def validate(self, state: SignupState) -> Dict[str, Any]:
        """
        Runs through the store so the errors on display match this pass exactly.
        """
        result = self.store.revalidate_if_submitted()
        return {"errors": result.errors if result is not None else {}}

    async def build_payload(self, state: SignupState) -> Dict[str, Any]:
        try:
            payload = self.builder.build(state.form, state.form.image)
        except ImageReadError as exc:
            self.store.set_image(exc)
            return {"errors": self.store.errors, "payload": None}
        return {"payload": payload}

    async def submit(self, state: SignupState) -> Dict[str, Any]:
        result = await self.controller.submit(state.payload)
        # the payload holds the password and image bytes; drop it once sent
        return {"result": result, "payload": None}

    @staticmethod
    def should_build(state: SignupState) -> Literal["end", "build"]:
        return "build" if len(state.errors) == 0 else "end"

    @staticmethod
    def should_submit(state: SignupState) -> Literal["end", "submit"]:
        return "submit" if state.payload is not None else "end"

    def build(self) -> StateGraph:
        g = StateGraph(SignupState)

        g.add_node("mark_submitted", self.mark_submitted)
        g.add_node("validate", self.validate)
        g.add_node("build_payload", self.build_payload)
        g.add_node("submit", self.submit)

        g.add_edge(START, "mark_submitted")
        g.add_edge("mark_submitted", "validate")

        g.add_conditional_edges(
            "validate",
            self.should_build,
            {"end": END, "build": "build_payload"},
        )
        g.add_conditional_edges(
            "build_payload",
            self.should_submit,
            {"end": END, "submit": "submit"},
        )
        g.add_edge("submit", END)

        return g

    def compile(self, checkpointer: Any = None):
        return self.build().compile(checkpointer=checkpointer)
