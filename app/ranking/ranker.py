"""
HR Dashboard - Ranker
Derives a ranked view from the immutable roster and a view configuration.

Steps, in order: filter by search query, sort with a three-way comparator,
truncate to the view limit. Equal sort keys keep roster order in both
directions.
"""

import logging
from functools import cmp_to_key
from typing import Any, Dict, Iterable, List, Union

from ..models.candidate import Candidate, RankedCandidate, InvalidCandidateError
from ..models.view import ViewConfig, SortField, SortDirection


logger = logging.getLogger(__name__)


def sort_value(candidate: Candidate, field: SortField) -> Union[int, str]:
    """Comparison key for a field: numeric, or the lowercased name."""
    if field is SortField.NAME:
        return candidate.name.lower()
    if field is SortField.EXPERIENCE:
        return candidate.experience_years
    if field is SortField.CRISIS:
        return candidate.crisis_management
    if field is SortField.SUSTAINABILITY:
        return candidate.sustainability
    if field is SortField.MOTIVATION:
        return candidate.team_motivation
    return candidate.total_score


def compare_candidates(a: Candidate, b: Candidate, field: SortField) -> int:
    """Three-way comparison in ascending order: negative, zero or positive."""
    left, right = sort_value(a, field), sort_value(b, field)
    return (left > right) - (left < right)


def matches_search(candidate: Candidate, query: str, search_skills: bool = True) -> bool:
    """Case-insensitive substring match on the name and, optionally, any skill."""
    if not query:
        return True
    needle = query.lower()
    if needle in candidate.name.lower():
        return True
    return search_skills and any(needle in skill.lower() for skill in candidate.skills)


def _valid_candidates(candidates: Iterable[Union[Candidate, Dict[str, Any]]]) -> List[Candidate]:
    valid = []
    for candidate in candidates:
        if isinstance(candidate, Candidate):
            valid.append(candidate)
            continue
        try:
            valid.append(Candidate.from_dict(candidate))
        except InvalidCandidateError as e:
            logger.warning("Excluding malformed candidate from view: %s", e)
    return valid


def ranked_view(
    candidates: Iterable[Union[Candidate, Dict[str, Any]]],
    config: ViewConfig = ViewConfig()
) -> List[RankedCandidate]:
    """
    Filter, sort and truncate candidates.

    Args:
        candidates: Roster candidates (raw records are validated, bad ones dropped).
        config: Sort field, direction, search query and limit.

    Returns:
        At most config.limit ranked entries, rank 1 first.
    """
    filtered = [
        c for c in _valid_candidates(candidates)
        if matches_search(c, config.search, config.search_skills)
    ]

    sign = 1 if config.sort_direction is SortDirection.ASC else -1
    ordered = sorted(
        filtered,
        key=cmp_to_key(lambda a, b: sign * compare_candidates(a, b, config.sort_field))
    )

    return [
        RankedCandidate(rank=index + 1, candidate=candidate)
        for index, candidate in enumerate(ordered[:max(0, config.limit)])
    ]
