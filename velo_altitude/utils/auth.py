"""API key identification utilities.

Browsing is public: a request without a key is served as a guest viewer.
"""

import logging
from dataclasses import dataclass

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from velo_altitude.config import settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)

GUEST_USERNAME = "guest"


@dataclass(frozen=True)
class Viewer:
    """Identity of the caller, either an API key holder or an anonymous guest."""

    username: str
    is_guest: bool

    @classmethod
    def guest(cls) -> "Viewer":
        return cls(username=GUEST_USERNAME, is_guest=True)


def verify_api_key(api_key: str | None) -> Viewer:
    """Resolve an optional API key to a viewer.

    Args:
        api_key: The API key to verify, or None

    Returns:
        An authenticated viewer, or the guest viewer when no key is given

    Raises:
        HTTPException: If a key is given but is not valid
    """
    if not api_key:
        return Viewer.guest()

    api_keys = settings.get_api_keys()

    if api_key not in api_keys:
        logger.warning(f"API key not found in valid keys. Provided: {api_key[:8]}...")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key.",
        )

    username = api_keys[api_key]
    logger.info(f"API key validated for user: {username}")
    return Viewer(username=username, is_guest=False)


async def get_current_viewer(api_key: str | None = Security(api_key_header)) -> Viewer:
    """FastAPI dependency to get the current viewer.

    Args:
        api_key: API key from header (injected by FastAPI)

    Returns:
        Viewer associated with the API key, or a guest
    """
    return verify_api_key(api_key)
