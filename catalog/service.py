"""
Display logic over the static catalog: lookup, comparison,
prompt search and the demo playground.
"""

import logging
from typing import Optional

from catalog import data
from catalog.exceptions import ModelNotFoundError
from catalog.models import (
    LibraryPrompt,
    ModelComparison,
    ModelInfo,
    PlaygroundRun,
    PricingTier,
)

logger = logging.getLogger(__name__)

RATING_SCALE = 5


def list_models() -> list[ModelInfo]:
    return list(data.MODELS)


def get_model(model_id: str) -> ModelInfo:
    """Look up a model by id. Raises ModelNotFoundError if unknown."""
    for model in data.MODELS:
        if model.id == model_id:
            return model
    raise ModelNotFoundError(model_id)


def compare_models(
    a_id: Optional[str] = None, b_id: Optional[str] = None
) -> ModelComparison:
    """
    Pick two models for the comparator.

    Defaults to the first and third catalog entries. The same model
    may be picked on both sides.
    """
    return ModelComparison(
        a=get_model(a_id or data.DEFAULT_COMPARE_A),
        b=get_model(b_id or data.DEFAULT_COMPARE_B),
    )


def search_prompts(query: str = "") -> list[LibraryPrompt]:
    """
    Filter the prompt library by title or tag.

    Case-insensitive substring match on the title; tags are stored
    lower-case and matched against the lower-cased query. An empty
    query returns the whole library in catalog order.
    """
    q = (query or "").lower()
    matches = [
        p for p in data.PROMPTS
        if q in p.title.lower() or any(q in t for t in p.tags)
    ]
    logger.debug("Prompt search q=%r matched %d of %d", q, len(matches), len(data.PROMPTS))
    return matches


def list_pricing() -> list[PricingTier]:
    return list(data.PRICING)


def run_playground(prompt: str) -> PlaygroundRun:
    """Simulate a model run. The prompt is echoed, the response is canned."""
    logger.info("Playground run (length=%d)", len(prompt or ""))
    return PlaygroundRun(prompt=prompt or "", response=data.CANNED_RESPONSE)


def rating_dots(n: int) -> list[bool]:
    """Filled/empty state for each of the five rating dots."""
    return [i < n for i in range(RATING_SCALE)]
