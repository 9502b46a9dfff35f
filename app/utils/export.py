"""
HR Dashboard - CSV Export
Tabular export of the full roster or the current ranked view.
"""

import csv
import io
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional

from ..models.candidate import Candidate, RankedCandidate


SCORE_COLUMNS = [
    "Name",
    "Experience",
    "Crisis Management",
    "Sustainability",
    "Team Motivation",
    "Total Score",
    "Skills",
    "Status",
    "Shared With HR",
]

ROSTER_COLUMNS = ["ID"] + SCORE_COLUMNS
LEADERBOARD_COLUMNS = ["Rank"] + SCORE_COLUMNS


def _never_shared(candidate_id: int) -> bool:
    return False


def _score_cells(candidate: Candidate, shared: bool) -> List[object]:
    return [
        candidate.name,
        candidate.experience_years,
        candidate.crisis_management,
        candidate.sustainability,
        candidate.team_motivation,
        candidate.total_score,
        ", ".join(candidate.skills),
        candidate.status.value,
        "Yes" if shared else "No",
    ]


def _write(header: List[str], rows: Iterable[List[object]]) -> str:
    # QUOTE_MINIMAL quotes fields holding the delimiter, quotes or newlines
    # and doubles embedded quotes
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue()


def export_roster_csv(
    candidates: Iterable[Candidate],
    is_shared: Optional[Callable[[int], bool]] = None
) -> str:
    """One row per roster candidate, keyed by ID."""
    is_shared = is_shared or _never_shared
    return _write(
        ROSTER_COLUMNS,
        ([c.id] + _score_cells(c, is_shared(c.id)) for c in candidates)
    )


def export_view_csv(
    rows: Iterable[RankedCandidate],
    is_shared: Optional[Callable[[int], bool]] = None
) -> str:
    """One row per ranked-view entry, keyed by rank."""
    is_shared = is_shared or _never_shared
    return _write(
        LEADERBOARD_COLUMNS,
        ([row.rank] + _score_cells(row.candidate, is_shared(row.candidate.id)) for row in rows)
    )


def read_csv_rows(text: str) -> List[Dict[str, str]]:
    """Parse exported CSV text back into dict rows."""
    return list(csv.DictReader(io.StringIO(text)))


def export_filename(kind: str, count: int, today: Optional[date] = None) -> str:
    """all-<n>-candidates-<date>.csv for the roster, top-<n>-candidates-<date>.csv for a view."""
    today = today or date.today()
    prefix = "all" if kind == "roster" else "top"
    return f"{prefix}-{count}-candidates-{today.isoformat()}.csv"
