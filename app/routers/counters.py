"""
Counter routes - image rendering and authenticated updates
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app import store
from app.config import Settings, get_settings
from app.database import get_db
from app.dependencies import get_themes, require_api_token
from app.models import SetCountResponse
from app.renderer import render_svg
from app.themes import ThemeRegistry

router = APIRouter(tags=["Counters"])
logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}


@router.get(
    "/get/{name}",
    response_class=Response,
    responses={200: {"content": {"image/svg+xml": {}}}},
)
def get_image(
    name: str,
    theme: Optional[str] = None,
    db: Session = Depends(get_db),
    themes: ThemeRegistry = Depends(get_themes),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Count a visit and return the counter image.

    The counter is incremented before the theme is resolved, so the visit
    is recorded even if no theme can be rendered.
    """
    logger.debug(f"GET /get/{name}?theme={theme}")

    count = store.increment(db, name)

    theme_data = themes.resolve(theme, settings.default_theme)
    if theme_data is None:
        logger.error("no themes available")
        raise HTTPException(status_code=500, detail="no themes")

    return Response(
        content=render_svg(theme_data, count),
        media_type="image/svg+xml",
        headers=NO_CACHE_HEADERS,
    )


@router.get(
    "/api/set/{name}",
    response_model=SetCountResponse,
    dependencies=[Depends(require_api_token)],
)
def set_count(
    name: str,
    count: int,
    db: Session = Depends(get_db),
) -> SetCountResponse:
    """
    Overwrite a counter value.

    Requires the ``X-Auth-Token`` header to match the configured API token.
    """
    logger.debug(f"SET /api/set/{name} count={count}")

    if count < 0:
        logger.warning(f"rejected negative count: {count} for {name}")
        raise HTTPException(status_code=400, detail="count must be non-negative")

    store.set_count(db, name, count)

    logger.info(f"set {name} to {count}")
    return SetCountResponse(name=name, count=count)
