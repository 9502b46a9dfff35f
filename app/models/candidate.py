"""
HR Dashboard - Candidate Models
Immutable roster records and the derived ranking entries.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any, Optional, Tuple, Union


SKILL_VOCABULARY = ("Recycling", "Operations", "Sustainability", "Leadership", "Safety")
SKILLS_PER_CANDIDATE = 3

SCORE_FIELDS = ("crisis_management", "sustainability", "team_motivation")

MIN_SCORE = 50
MAX_SCORE = 100
MIN_EXPERIENCE = 1
MAX_EXPERIENCE = 15

TOP_THRESHOLD = 250
GOOD_THRESHOLD = 200


class InvalidCandidateError(ValueError):
    """Raised when a raw record cannot be turned into a Candidate."""


class StatusBand(Enum):
    """Categorical label derived from the total score."""
    TOP = "Top"
    GOOD = "Good"
    AVERAGE = "Average"


def status_band(total: int) -> StatusBand:
    """Band a total score: [250, inf) Top, [200, 250) Good, else Average."""
    if total >= TOP_THRESHOLD:
        return StatusBand.TOP
    if total >= GOOD_THRESHOLD:
        return StatusBand.GOOD
    return StatusBand.AVERAGE


def _require_int(data: Dict[str, Any], key: str, low: int, high: int) -> int:
    value = data.get(key)
    # bool is an int subclass; a JSON true is not a score
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCandidateError(f"'{key}' must be an integer, got {value!r}")
    if not low <= value <= high:
        raise InvalidCandidateError(f"'{key}' must be in [{low}, {high}], got {value}")
    return value


@dataclass(frozen=True)
class Candidate:
    """One applicant with fixed attributes and ground-truth scores."""

    id: int
    name: str
    experience_years: int
    skills: Tuple[str, ...]
    crisis_management: int
    sustainability: int
    team_motivation: int

    @property
    def total_score(self) -> int:
        return self.crisis_management + self.sustainability + self.team_motivation

    @property
    def average_score(self) -> float:
        return self.total_score / 3

    @property
    def status(self) -> StatusBand:
        return status_band(self.total_score)

    def has_skill(self, skill: str) -> bool:
        return skill in self.skills

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["skills"] = list(self.skills)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Candidate":
        """
        Build a Candidate from a raw fixture record.

        Raises:
            InvalidCandidateError: If a field is missing or out of range.
        """
        if not isinstance(data, dict):
            raise InvalidCandidateError(f"Candidate record must be an object, got {type(data).__name__}")

        candidate_id = data.get("id")
        if isinstance(candidate_id, bool) or not isinstance(candidate_id, int) or candidate_id < 1:
            raise InvalidCandidateError(f"'id' must be a positive integer, got {candidate_id!r}")

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidCandidateError(f"Candidate {candidate_id}: 'name' must be a non-empty string")

        skills = data.get("skills")
        if not isinstance(skills, (list, tuple)) or len(skills) != SKILLS_PER_CANDIDATE:
            raise InvalidCandidateError(
                f"Candidate {candidate_id}: 'skills' must list exactly {SKILLS_PER_CANDIDATE} skills"
            )
        unknown = [s for s in skills if s not in SKILL_VOCABULARY]
        if unknown:
            raise InvalidCandidateError(f"Candidate {candidate_id}: unknown skills {unknown}")
        if len(set(skills)) != len(skills):
            raise InvalidCandidateError(f"Candidate {candidate_id}: duplicate skills {list(skills)}")

        return cls(
            id=candidate_id,
            name=name,
            experience_years=_require_int(data, "experience_years", MIN_EXPERIENCE, MAX_EXPERIENCE),
            skills=tuple(skills),
            crisis_management=_require_int(data, "crisis_management", MIN_SCORE, MAX_SCORE),
            sustainability=_require_int(data, "sustainability", MIN_SCORE, MAX_SCORE),
            team_motivation=_require_int(data, "team_motivation", MIN_SCORE, MAX_SCORE),
        )


def rank_badge(rank: int) -> Union[str, int]:
    """Presentation badge for a 1-based rank: crown, medal, award, then the ordinal."""
    return {1: "crown", 2: "medal", 3: "award"}.get(rank, rank)


@dataclass(frozen=True)
class RankedCandidate:
    """A candidate placed in a ranked view."""

    rank: int
    candidate: Candidate

    @property
    def total(self) -> int:
        return self.candidate.total_score

    @property
    def status(self) -> StatusBand:
        return self.candidate.status

    @property
    def badge(self) -> Union[str, int]:
        return rank_badge(self.rank)

    def to_dict(self, shared: Optional[bool] = None) -> Dict[str, Any]:
        data = {
            **self.candidate.to_dict(),
            "rank": self.rank,
            "badge": self.badge,
            "total": self.total,
            "status": self.status.value,
        }
        if shared is not None:
            data["shared"] = shared
        return data

