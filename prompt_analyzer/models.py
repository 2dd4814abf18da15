"""Pydantic models for prompt analysis data structures."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

MAX_SCORE = 15


class PromptSignals(BaseModel):
    """Boolean heuristics detected in a prompt."""
    role: bool = Field(default=False, description="Prompt assigns a role ('act as', 'you are', 'role-play')")
    context: bool = Field(default=False, description="Prompt references inputs ('given', 'based on', 'using', ...)")
    constraints: bool = Field(default=False, description="Prompt constrains the output ('return', 'format', 'json', ...)")
    audience: bool = Field(default=False, description="Prompt names an audience ('for developers', ...)")


class PromptAnalysisResult(BaseModel):
    """Score and improvement tips for a single prompt."""
    score: int = Field(ge=0, le=MAX_SCORE, description=f"Score from 0-{MAX_SCORE}")
    tips: list[str] = Field(default_factory=list, description="Tips in check order")


class AnalyzeRequest(BaseModel):
    """Request payload for prompt analysis."""
    prompt: str = Field(description="The prompt to analyze, may be empty")


class AnalyzeResponse(PromptAnalysisResult):
    """Analysis result enriched for display."""
    label: str = Field(description="Score formatted for display, e.g. '7/15'")
    word_count: int = Field(ge=0)
    signals: PromptSignals
    message: Optional[str] = Field(
        default=None,
        description="Affirmation shown instead of the tip list when there are no tips",
    )
