"""
Core Prompt Analyzer.

Scores a prompt with a handful of phrase heuristics and returns
a bounded score plus the tips for whatever the prompt is missing.
Runs on every keystroke, so it stays pure and cheap: no I/O, no state.
"""

import logging
import math
import re

from prompt_analyzer.models import (
    MAX_SCORE,
    AnalyzeResponse,
    PromptAnalysisResult,
    PromptSignals,
)

logger = logging.getLogger(__name__)

EMPTY_TIP = "Prompt is empty"
LOOKS_SOLID = "Looks solid. Try adding examples or edge cases."

TIP_MORE_DETAIL = "Add more detail and context."
TIP_DEFINE_ROLE = "Define a role (e.g., 'Act as a…')."
TIP_CONSTRAINTS = "Specify output format or constraints."
TIP_CONTEXT = "Provide concrete inputs or references."

# Matched anywhere in the prompt, case-insensitive, no word boundaries
ROLE_PATTERN = re.compile(r"act as|you are|role-?play", re.IGNORECASE)
CONTEXT_PATTERN = re.compile(r"given|based on|using|about|for the following", re.IGNORECASE)
CONSTRAINTS_PATTERN = re.compile(r"return|format|limit|bullets|steps|json|markdown", re.IGNORECASE)
AUDIENCE_PATTERN = re.compile(
    r"for (developers|designers|students|executives|beginners)", re.IGNORECASE
)

# Words per length point, and the cap on length points
WORDS_PER_POINT = 25
MAX_LENGTH_POINTS = 10
# Below this many words the prompt gets the "more detail" tip
MIN_DETAILED_WORDS = 20

ROLE_POINTS = 2
CONTEXT_POINTS = 2
CONSTRAINTS_POINTS = 2
AUDIENCE_POINTS = 1

# Same whitespace set as JavaScript \s: U+FEFF counts, U+001C-U+001F and U+0085 do not
WHITESPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
WHITESPACE_RUN = re.compile(WHITESPACE + "+")
LEADING_OR_TRAILING_WS = re.compile(rf"\A{WHITESPACE}+|{WHITESPACE}+\Z")


def _trim(text: str) -> str:
    return LEADING_OR_TRAILING_WS.sub("", text or "")


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    s = _trim(text)
    if not s:
        return 0
    return len(WHITESPACE_RUN.split(s))


def detect_signals(text: str) -> PromptSignals:
    """Detect the role/context/constraints/audience signals in a prompt."""
    return PromptSignals(
        role=bool(ROLE_PATTERN.search(text)),
        context=bool(CONTEXT_PATTERN.search(text)),
        constraints=bool(CONSTRAINTS_PATTERN.search(text)),
        audience=bool(AUDIENCE_PATTERN.search(text)),
    )


def _length_points(word_count: int) -> int:
    # Round half up, not Python's round-half-even
    return min(MAX_LENGTH_POINTS, math.floor(word_count / WORDS_PER_POINT + 0.5))


def analyze(text: str) -> PromptAnalysisResult:
    """
    Score a prompt and collect improvement tips.

    Args:
        text: The raw prompt, untrimmed

    Returns:
        PromptAnalysisResult with a score in [0, 15] and tips in check order
    """
    s = _trim(text)
    if not s:
        return PromptAnalysisResult(score=0, tips=[EMPTY_TIP])

    length = count_words(s)
    signals = detect_signals(s)

    score = (
        _length_points(length)
        + (ROLE_POINTS if signals.role else 0)
        + (CONTEXT_POINTS if signals.context else 0)
        + (CONSTRAINTS_POINTS if signals.constraints else 0)
        + (AUDIENCE_POINTS if signals.audience else 0)
    )

    # Audience only scores, it never produces a tip
    tips = []
    if length < MIN_DETAILED_WORDS:
        tips.append(TIP_MORE_DETAIL)
    if not signals.role:
        tips.append(TIP_DEFINE_ROLE)
    if not signals.constraints:
        tips.append(TIP_CONSTRAINTS)
    if not signals.context:
        tips.append(TIP_CONTEXT)

    logger.debug("Analyzed prompt (words=%d, score=%d, tips=%d)", length, score, len(tips))
    return PromptAnalysisResult(score=min(MAX_SCORE, score), tips=tips)


def score_label(score: int) -> str:
    """Format a score for display."""
    return f"{score}/{MAX_SCORE}"


class PromptAnalyzer:
    """
    Heuristic prompt quality analyzer.

    Usage:
        analyzer = PromptAnalyzer()
        result = analyzer.analyze("Your prompt here")
        details = analyzer.describe("Your prompt here")
    """

    def analyze(self, prompt: str) -> PromptAnalysisResult:
        return analyze(prompt)

    def describe(self, prompt: str) -> AnalyzeResponse:
        """Analyze a prompt and add the fields the landing page displays."""
        result = analyze(prompt)
        s = _trim(prompt)
        return AnalyzeResponse(
            score=result.score,
            tips=result.tips,
            label=score_label(result.score),
            word_count=count_words(s),
            signals=detect_signals(s),
            message=None if result.tips else LOOKS_SOLID,
        )
