"""
HR Dashboard - Roster
Loads the static candidate fixture once and serves it read-only.
"""

import json
import logging
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .candidate import Candidate, InvalidCandidateError


logger = logging.getLogger(__name__)


def mean(values: List[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty list."""
    if not values:
        return None
    return sum(values) / len(values)


def round_half_up(value: float, digits: int = 0) -> Union[int, float]:
    """
    Round halves away from zero on the exact binary value, the way a
    fixed-decimal display does (71.25 -> 71.3, 2.5 -> 3).

    Returns an int when digits is 0, otherwise a float.
    """
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)


def top_by_total(candidates) -> Optional[Candidate]:
    """Highest total score; the first encountered wins ties."""
    best = None
    for candidate in candidates:
        if best is None or candidate.total_score > best.total_score:
            best = candidate
    return best


class Roster:
    """Immutable, ordered collection of candidates keyed by id."""

    def __init__(self, candidates: List[Candidate]):
        self._candidates: Tuple[Candidate, ...] = tuple(candidates)
        self._by_id: Dict[int, Candidate] = {c.id: c for c in self._candidates}
        self.rejected: List[Dict[str, Any]] = []

    @classmethod
    def from_records(cls, records: List[Any]) -> "Roster":
        """
        Build a roster from raw records.

        Malformed records and duplicate ids are excluded and logged.
        """
        candidates: List[Candidate] = []
        seen = set()
        rejected = []

        for index, record in enumerate(records):
            try:
                candidate = Candidate.from_dict(record)
            except InvalidCandidateError as e:
                logger.warning("Skipping candidate record %d: %s", index, e)
                rejected.append({"index": index, "reason": str(e)})
                continue

            if candidate.id in seen:
                logger.warning("Skipping candidate record %d: duplicate id %d", index, candidate.id)
                rejected.append({"index": index, "reason": f"duplicate id {candidate.id}"})
                continue

            seen.add(candidate.id)
            candidates.append(candidate)

        roster = cls(candidates)
        roster.rejected = rejected
        return roster

    @classmethod
    def load(cls, data_file: Path) -> "Roster":
        """
        Load the roster from a JSON fixture.

        Raises:
            FileNotFoundError: If the fixture does not exist.
            ValueError: If the file is not a JSON list.
        """
        data_file = Path(data_file)
        if not data_file.exists():
            raise FileNotFoundError(f"Candidate fixture not found: {data_file}")

        with open(data_file, 'r', encoding='utf-8') as f:
            records = json.load(f)

        if not isinstance(records, list):
            raise ValueError(f"Candidate fixture must be a JSON list: {data_file}")

        roster = cls.from_records(records)
        logger.info("Loaded %d candidates from %s", len(roster), data_file)
        return roster

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    @property
    def candidates(self) -> Tuple[Candidate, ...]:
        return self._candidates

    def get(self, candidate_id: int) -> Optional[Candidate]:
        return self._by_id.get(candidate_id)

    def top_candidate(self) -> Optional[Candidate]:
        return top_by_total(self._candidates)

    def stats(self) -> Dict[str, Any]:
        """Header statistics: count, average experience, average score out of 100, top performer."""
        avg_experience = mean([c.experience_years for c in self._candidates])
        avg_total = mean([c.total_score for c in self._candidates])
        top = self.top_candidate()

        return {
            "total_candidates": len(self._candidates),
            "average_experience": round_half_up(avg_experience, 1) if avg_experience is not None else None,
            "average_score": round_half_up(avg_total / 3) if avg_total is not None else None,
            "top_performer": top.name if top else None,
        }
