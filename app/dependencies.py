"""
Shared request dependencies: theme registry access and API token checks.
"""

import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from app.config import Settings, get_settings
from app.themes import ThemeRegistry


def get_themes(request: Request) -> ThemeRegistry:
    """Return the theme registry built during application startup."""
    return request.app.state.themes


async def require_api_token(
    x_auth_token: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Validate the ``X-Auth-Token`` header against the configured API token.

    Requests are always rejected when no token is configured on the server.
    """
    expected = settings.api_auth_token
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing token configuration",
        )

    if not x_auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing token",
        )

    if not secrets.compare_digest(x_auth_token.encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
