"""Recommendation scoring and single-symbol analysis."""

from tickerlens.scoring.analysis import analyze_symbol
from tickerlens.scoring.recommend import (
    build_snapshot,
    evaluate_closes,
    generate_recommendation,
    score_snapshot,
    score_to_signal,
)

__all__ = [
    "analyze_symbol",
    "build_snapshot",
    "evaluate_closes",
    "generate_recommendation",
    "score_snapshot",
    "score_to_signal",
]
