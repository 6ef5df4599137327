"""
Pydantic models for API responses.
"""

from typing import List

from pydantic import BaseModel, Field


class SetCountResponse(BaseModel):
    name: str
    count: int = Field(description="Value the counter was set to")


class ThemeSummary(BaseModel):
    name: str
    digits: List[str] = Field(description="Digits the theme provides glyphs for")


class HealthResponse(BaseModel):
    status: str
