"""
HR Dashboard - Skill Heatmap
Per-score tiers and trends against the averages of the visible rows.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..models.candidate import Candidate, RankedCandidate
from ..models.roster import mean, round_half_up
from ..models.view import ViewConfig
from .ranker import ranked_view


DIMENSIONS = ("crisis_management", "sustainability", "team_motivation")

TREND_MARGIN = 10


def score_tier(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    return "Needs Work"


def trend(score: int, average: Optional[float]) -> str:
    """'up' more than 10 above the average, 'down' more than 10 below, else 'flat'."""
    if average is None:
        return "flat"
    if score > average + TREND_MARGIN:
        return "up"
    if score < average - TREND_MARGIN:
        return "down"
    return "flat"


def view_averages(rows: List[RankedCandidate]) -> Dict[str, Optional[float]]:
    """Per-dimension averages over the visible rows; None when the view is empty."""
    return {
        dimension: mean([getattr(row.candidate, dimension) for row in rows])
        for dimension in DIMENSIONS
    }


def heatmap_view(
    candidates: Iterable[Candidate],
    config: Optional[ViewConfig] = None
) -> Dict[str, Any]:
    """
    Build heatmap rows for the ranked view.

    The heatmap searches names only unless the config says otherwise.
    """
    config = config or ViewConfig(search_skills=False)
    rows = ranked_view(candidates, config)
    averages = view_averages(rows)

    return {
        "averages": {
            dimension: round_half_up(value, 1) if value is not None else None
            for dimension, value in averages.items()
        },
        "rows": [
            {
                **row.to_dict(),
                "cells": {
                    dimension: {
                        "score": getattr(row.candidate, dimension),
                        "tier": score_tier(getattr(row.candidate, dimension)),
                        "trend": trend(getattr(row.candidate, dimension), averages[dimension]),
                    }
                    for dimension in DIMENSIONS
                },
            }
            for row in rows
        ],
    }
