"""
Prompt Analyzer — heuristic prompt quality scoring.

Usage:
    from prompt_analyzer import analyze
    result = analyze("Your prompt here")
    result.score, result.tips
"""

from prompt_analyzer.analyzer import (
    PromptAnalyzer,
    analyze,
    count_words,
    detect_signals,
    score_label,
)
from prompt_analyzer.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    PromptAnalysisResult,
    PromptSignals,
)

__version__ = "0.1.0"

__all__ = [
    "PromptAnalyzer",
    "analyze",
    "count_words",
    "detect_signals",
    "score_label",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "PromptAnalysisResult",
    "PromptSignals",
]
