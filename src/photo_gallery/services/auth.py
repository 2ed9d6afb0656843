"""Session handling on top of the identity provider."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from photo_gallery.domain.errors import AuthRequiredError, RemoteCallError
from photo_gallery.domain.records import SessionUser

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionUser | None], None]


class IdentityProvider(Protocol):
    """Interface for the external identity provider."""

    def sign_in_url(self, redirect_to: str | None) -> str:
        """Return the URL that starts an OAuth sign-in."""

    def get_user(self, access_token: str) -> SessionUser | None:
        """Return the user behind an access token, if valid."""

    def sign_out(self, access_token: str) -> None:
        """End the session behind an access token."""


@dataclass
class AuthService:
    """Resolves session users and fans out session changes to listeners."""

    provider: IdentityProvider
    listeners: list[SessionListener] = field(default_factory=list)

    def login_url(self, redirect_to: str | None = None) -> str:
        """Return the sign-in URL for the browser popup."""
        return self.provider.sign_in_url(redirect_to)

    def resolve_user(self, access_token: str | None) -> SessionUser | None:
        """Return the current user, or None when signed out."""
        if not access_token:
            return None
        return self.provider.get_user(access_token)

    def require_user(self, access_token: str | None) -> SessionUser:
        """Return the current user or fail when nobody is signed in."""
        user = self.resolve_user(access_token)
        if user is None:
            raise AuthRequiredError("Please login to continue")
        return user

    def logout(self, access_token: str | None) -> None:
        """Sign out and notify listeners."""
        if access_token:
            try:
                self.provider.sign_out(access_token)
            except Exception as exc:
                logger.exception("Logout failed")
                raise RemoteCallError("Failed to sign out") from exc
        self.notify(None)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a session-changed listener and return its unsubscribe."""
        self.listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unsubscribe

    def notify(self, user: SessionUser | None) -> None:
        """Tell every listener the current session changed."""
        for listener in list(self.listeners):
            listener(user)
