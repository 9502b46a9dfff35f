"""
HR Dashboard - Scoring
Rule-based mock evaluator and roster summary.
"""

from .evaluator import Evaluator, ScoreRule, evaluate, summarize

__all__ = ["Evaluator", "ScoreRule", "evaluate", "summarize"]
