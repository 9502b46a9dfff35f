"""
HR Dashboard - Models
Candidate records, evaluation results, view configuration and UI state.
"""

from .candidate import Candidate, RankedCandidate, StatusBand, InvalidCandidateError
from .evaluation import EvaluationResult, Summary, TopCandidate
from .view import ViewConfig, SortField, SortDirection
from .roster import Roster
from .dashboard_state import DashboardState, ShareDraft

__all__ = [
    "Candidate",
    "RankedCandidate",
    "StatusBand",
    "InvalidCandidateError",
    "EvaluationResult",
    "Summary",
    "TopCandidate",
    "ViewConfig",
    "SortField",
    "SortDirection",
    "Roster",
    "DashboardState",
    "ShareDraft",
]
