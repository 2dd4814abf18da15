"""Pydantic models for the landing page catalog."""

from __future__ import annotations
from pydantic import BaseModel, Field


class ModelInfo(BaseModel):
    """A model card in the highlights grid and the comparator."""
    id: str
    name: str
    family: str
    params: str = "?"
    license: str
    released: str
    speed: int = Field(ge=1, le=5, description="Relative speed, 1-5 dots")
    cost: int = Field(ge=1, le=5, description="Relative cost, 1-5 dots")
    strength: list[str] = Field(default_factory=list)


class ModelComparison(BaseModel):
    """Two models side by side."""
    a: ModelInfo
    b: ModelInfo


class LibraryPrompt(BaseModel):
    """A curated prompt in the prompt library."""
    id: int
    title: str
    body: str
    tags: list[str] = Field(default_factory=list)


class PricingTier(BaseModel):
    """A pricing card."""
    name: str
    price: str
    desc: str
    cta: str


class NavLink(BaseModel):
    """An in-page anchor in the nav bar or footer."""
    label: str
    href: str


class PlaygroundRequest(BaseModel):
    prompt: str = ""


class PlaygroundRun(BaseModel):
    """Result of a playground run. The response is canned."""
    prompt: str
    response: str
