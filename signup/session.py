from typing import List, Optional

from observability.logging import get_logger

logger = get_logger(__name__)


class AuthStore:
    """Holds the auth token for one session; create at startup, clear() at session end."""

    def __init__(self):
        self._token: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_auth(self, token: str) -> None:
        self._token = token
        logger.info("auth_state_updated")

    def clear(self) -> None:
        self._token = None


class HistoryRouter:
    def __init__(self, initial: str = "/signup"):
        self.history: List[str] = [initial]

    @property
    def current(self) -> str:
        return self.history[-1]

    def navigate(self, route: str) -> None:
        logger.info("navigate", route=route)
        self.history.append(route)
