"""Route guards and the small account and not-found views."""

from __future__ import annotations

from taskboard.user_store import UserStore

LOGIN_PATH = "/login"
HOME_PATH = "/"


def require_auth(user_store: UserStore) -> str | None:
    """The path to redirect to when nobody is signed in, else None."""
    if user_store.is_authenticated():
        return None
    return LOGIN_PATH


def sign_out(user_store: UserStore) -> str:
    """End the session and return the path to go to next."""
    user_store.logout()
    return LOGIN_PATH


def profile_summary(user_store: UserStore) -> dict[str, str] | None:
    """Username and e-mail of the signed-in user, or None when signed out."""
    profile = user_store.profile()
    if profile is None:
        return None
    return {"Username": profile.username, "Email": profile.email}


def not_found_message() -> str:
    return "The page you're looking for doesn't exist."