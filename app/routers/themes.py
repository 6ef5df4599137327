"""
Theme routes - loaded theme listing
"""

from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import get_themes
from app.models import ThemeSummary
from app.themes import ThemeRegistry

router = APIRouter(prefix="/themes", tags=["Themes"])


@router.get("", response_model=List[ThemeSummary])
async def list_themes(
    themes: ThemeRegistry = Depends(get_themes),
) -> List[ThemeSummary]:
    """List loaded themes and the digits each one provides."""
    return [
        ThemeSummary(name=name, digits=sorted(themes.get(name).digits))
        for name in themes.names()
    ]
