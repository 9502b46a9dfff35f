"""
HR Dashboard - Evaluation Models
Ephemeral results produced by the mock evaluator.
"""

from dataclasses import dataclass, asdict, field
from typing import Dict, Any, List, Optional


@dataclass
class EvaluationResult:
    """A freshly synthesized restatement of a candidate's skill scores."""

    crisis_management: int  # 0-100
    sustainability: int  # 0-100
    team_motivation: int  # 0-100
    ai_comments: List[str]
    candidate_id: Optional[int] = None
    candidate_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TopCandidate:
    """One of the top-3 candidates in a summary."""

    name: str
    total_score: int
    strengths: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Summary:
    """Roster-wide evaluation summary."""

    total_candidates: int
    average_scores: Dict[str, float]
    top_performer: Dict[str, Any]
    top_candidates: List[TopCandidate] = field(default_factory=list)
    skill_gaps: List[str] = field(default_factory=list)
    hiring_recommendation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_candidates": self.total_candidates,
            "average_scores": self.average_scores,
            "top_performer": self.top_performer,
            "recommendations": {
                "top_candidates": [c.to_dict() for c in self.top_candidates],
                "skill_gaps": self.skill_gaps,
                "hiring_recommendation": self.hiring_recommendation,
            },
        }
