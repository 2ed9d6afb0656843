"""Supabase Auth identity provider."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from photo_gallery.domain.records import SessionUser
from photo_gallery.services.auth import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Resolves and ends sessions issued by Supabase Auth."""

    client: Client
    provider: str = "google"

    def sign_in_url(self, redirect_to: str | None) -> str:
        """Return the OAuth URL the browser opens in its sign-in popup."""
        credentials: dict[str, object] = {"provider": self.provider}
        if redirect_to:
            credentials["options"] = {"redirect_to": redirect_to}
        response = self.client.auth.sign_in_with_oauth(credentials)
        return response.url

    def get_user(self, access_token: str) -> SessionUser | None:
        """Return the session user for an access token, if it is valid."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        metadata = response.user.user_metadata or {}
        return SessionUser(
            id=UUID(str(response.user.id)),
            display_name=metadata.get("full_name") or metadata.get("name"),
            avatar_url=metadata.get("avatar_url") or metadata.get("picture"),
        )

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""
        self.client.auth.admin.sign_out(access_token)
