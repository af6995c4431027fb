"""HTTP client for the registration endpoint.

Usage:
    async with HttpSignupService("https://api.example.com") as service:
        flow = SignupFlow(service, auth_store, router)
"""

from typing import Any, Optional

import httpx

from config.settings import SignupConfig
from observability.logging import get_logger
from signup.controller import SignupServiceError
from signup.payload import TransportPayload

logger = get_logger(__name__)


class HttpSignupService:
    """Posts the multipart sign-up payload and returns the issued access token."""

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        path: str = "/api/auth/signup",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.path = path
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: SignupConfig) -> "HttpSignupService":
        return cls(base_url=config.api_base_url, path=config.signup_path, timeout=config.timeout)

    async def __aenter__(self) -> "HttpSignupService":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def register(self, payload: TransportPayload) -> str:
        try:
            response = await self._client.post(self.path, files=payload.to_multipart())
        except httpx.HTTPError as exc:
            logger.warning("signup_transport_failed", error=type(exc).__name__)
            raise SignupServiceError() from exc

        if response.status_code >= 400:
            raise self._error_from(response)

        token = self._token_from(self._json(response))
        if token is None:
            raise SignupServiceError(status_code=response.status_code)
        return token

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _token_from(body: Any) -> Optional[str]:
        if not isinstance(body, dict):
            return None
        data = body.get("data")
        for source in (body, data if isinstance(data, dict) else {}):
            for key in ("accessToken", "token"):
                value = source.get(key)
                if isinstance(value, str) and value:
                    return value
        return None

    def _error_from(self, response: httpx.Response) -> SignupServiceError:
        body = self._json(response)
        message = None
        field = None
        if isinstance(body, dict):
            detail = body.get("detail")
            message = body.get("message")
            if message is None and isinstance(detail, dict):
                message = detail.get("message")
            field = body.get("field")

        # an existing account is the one conflict this endpoint reports
        if field is None and response.status_code == 409:
            field = "email"

        logger.warning("signup_rejected", status_code=response.status_code, field=field)
        return SignupServiceError(
            message if isinstance(message, str) else None,
            field=field if isinstance(field, str) else None,
            status_code=response.status_code,
        )
