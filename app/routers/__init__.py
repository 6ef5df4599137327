"""
Routers Package
"""

from app.routers.counters import router as counters_router
from app.routers.themes import router as themes_router

__all__ = [
    "counters_router",
    "themes_router",
]
