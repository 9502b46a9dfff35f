"""
HR Dashboard - Ranking
Search, sort and truncate the roster into leaderboard and heatmap views.
"""

from .ranker import ranked_view, compare_candidates, matches_search, sort_value
from .heatmap import heatmap_view, score_tier, trend

__all__ = [
    "ranked_view",
    "compare_candidates",
    "matches_search",
    "sort_value",
    "heatmap_view",
    "score_tier",
    "trend",
]
