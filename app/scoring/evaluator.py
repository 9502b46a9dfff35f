"""
HR Dashboard - Mock Evaluator
Turns a candidate's static attributes into plausible-looking skill scores.

Each dimension starts at 50 points, adds fixed points for matching skills
and experience thresholds, then adds a uniform jitter in [0, 10). The
result is rounded half-up and clamped to [0, 100]. Nothing here is real
inference; the scores are derived from the skills list alone.
"""

import logging
import math
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..models.candidate import Candidate, InvalidCandidateError
from ..models.evaluation import EvaluationResult, Summary, TopCandidate
from ..models.roster import mean, round_half_up, top_by_total


logger = logging.getLogger(__name__)

CandidateInput = Union[Candidate, Dict[str, Any]]

BASE_SCORE = 50
JITTER = 10
SCORE_CEILING = 100

STRENGTH_THRESHOLD = 80
SKILL_GAP_THRESHOLD = 70

HIRING_RECOMMENDATION = (
    "Based on AI analysis, prioritize candidates with balanced scores "
    "across all three domains."
)
WELL_ROUNDED = "Well-rounded performer"
NO_SKILL_GAPS = "No significant skill gaps detected"


@dataclass(frozen=True)
class ScoreRule:
    """Point table for one skill dimension."""

    skill_points: Tuple[Tuple[str, int], ...]
    # (minimum years, exclusive; points) pairs, all cumulative
    experience_points: Tuple[Tuple[int, int], ...]

    def base_points(self, candidate: Candidate) -> int:
        points = BASE_SCORE
        for skill, bonus in self.skill_points:
            if candidate.has_skill(skill):
                points += bonus
        for years, bonus in self.experience_points:
            if candidate.experience_years > years:
                points += bonus
        return points


CRISIS_RULE = ScoreRule(
    skill_points=(("Safety", 25), ("Leadership", 15)),
    experience_points=((5, 10), (10, 5))
)
SUSTAINABILITY_RULE = ScoreRule(
    skill_points=(("Sustainability", 30), ("Recycling", 20), ("Operations", 10)),
    experience_points=((3, 5),)
)
TEAM_RULE = ScoreRule(
    skill_points=(("Leadership", 30), ("Operations", 15), ("Safety", 10)),
    experience_points=((2, 5), (5, 5))
)

# (excellent, moderate, needs improvement) per dimension
COMMENT_TIERS = {
    "crisis_management": (
        "✅ Excellent crisis response capability",
        "⚠️ Adequate crisis management skills",
        "❌ Needs improvement in emergency handling",
    ),
    "sustainability": (
        "✅ Strong sustainability knowledge",
        "⚠️ Moderate environmental awareness",
        "❌ Limited recycling regulations knowledge",
    ),
    "team_motivation": (
        "✅ Proven leadership and team-building skills",
        "⚠️ Average team management ability",
        "❌ Needs development in conflict resolution",
    ),
}

STRENGTH_LABELS = (
    ("crisis_management", "Crisis Management"),
    ("sustainability", "Sustainability"),
    ("team_motivation", "Team Leadership"),
)

GAP_LABELS = (
    ("crisis_management", "Crisis Management"),
    ("sustainability", "Sustainability Knowledge"),
    ("team_motivation", "Team Motivation"),
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _tier_comment(dimension: str, score: int) -> str:
    excellent, moderate, weak = COMMENT_TIERS[dimension]
    if score >= 80:
        return excellent
    if score >= 60:
        return moderate
    return weak


def recommendation(average: float) -> str:
    """Overall recommendation line for a ground-truth average score."""
    if average >= 80:
        return "🏆 AI Recommendation: STRONGLY RECOMMEND"
    if average >= 65:
        return "👍 AI Recommendation: RECOMMEND WITH TRAINING"
    return "⚠️ AI Recommendation: REVIEW FURTHER"


def generate_comments(candidate: Candidate) -> List[str]:
    """
    Commentary keyed on the candidate's ground-truth scores.

    One tier line per dimension, then the overall recommendation.
    """
    comments = [
        _tier_comment(dimension, getattr(candidate, dimension))
        for dimension in ("crisis_management", "sustainability", "team_motivation")
    ]
    comments.append(recommendation(candidate.average_score))
    return comments


def strengths(candidate: Candidate) -> List[str]:
    found = [label for field, label in STRENGTH_LABELS if getattr(candidate, field) >= STRENGTH_THRESHOLD]
    return found or [WELL_ROUNDED]


def _coerce(candidate: CandidateInput) -> Optional[Candidate]:
    if isinstance(candidate, Candidate):
        return candidate
    try:
        return Candidate.from_dict(candidate)
    except InvalidCandidateError as e:
        logger.warning("Cannot evaluate malformed candidate: %s", e)
        return None


class Evaluator:
    """
    Mock AI evaluator.

    The random source and the sleep function are injectable so tests can
    seed the jitter and skip the simulated latency.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        delay_range: Optional[Tuple[float, float]] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize evaluator.

        Args:
            rng: Random source for jitter. Defaults to a fresh Random().
            delay_range: Optional (min, max) seconds of simulated thinking time.
            sleep: Function used to wait out the simulated delay.
        """
        self.rng = rng or random.Random()
        self.delay_range = delay_range
        self._sleep = sleep

    def _score(self, rule: ScoreRule, candidate: Candidate) -> int:
        raw = rule.base_points(candidate) + self.rng.random() * JITTER
        return max(0, min(SCORE_CEILING, _round_half_up(raw)))

    def _simulate_latency(self):
        if self.delay_range:
            low, high = self.delay_range
            self._sleep(self.rng.uniform(low, high))

    def evaluate(self, candidate: CandidateInput) -> Optional[EvaluationResult]:
        """
        Evaluate a single candidate.

        Returns:
            EvaluationResult, or None when the candidate record is malformed.
        """
        candidate = _coerce(candidate)
        if candidate is None:
            return None

        logger.debug("Evaluating candidate %d (%s)", candidate.id, candidate.name)
        self._simulate_latency()

        return EvaluationResult(
            crisis_management=self._score(CRISIS_RULE, candidate),
            sustainability=self._score(SUSTAINABILITY_RULE, candidate),
            team_motivation=self._score(TEAM_RULE, candidate),
            ai_comments=generate_comments(candidate),
            candidate_id=candidate.id,
            candidate_name=candidate.name
        )

    def evaluate_all(self, candidates: Iterable[CandidateInput]) -> List[EvaluationResult]:
        """Evaluate candidates in order, skipping malformed ones."""
        results = []
        for candidate in candidates:
            result = self.evaluate(candidate)
            if result is not None:
                results.append(result)
        return results


def summarize(candidates: Iterable[CandidateInput]) -> Optional[Summary]:
    """
    Roster-wide summary over ground-truth scores.

    Returns:
        Summary, or None when there are no valid candidates.
    """
    valid = [c for c in (_coerce(c) for c in candidates) if c is not None]
    if not valid:
        return None

    means = {
        field: mean([getattr(c, field) for c in valid])
        for field, _ in GAP_LABELS
    }

    top = top_by_total(valid)
    top_three = sorted(valid, key=lambda c: c.total_score, reverse=True)[:3]
    gaps = [label for field, label in GAP_LABELS if means[field] < SKILL_GAP_THRESHOLD]

    return Summary(
        total_candidates=len(valid),
        average_scores={field: round_half_up(value, 1) for field, value in means.items()},
        top_performer={**top.to_dict(), "total_score": top.total_score},
        top_candidates=[
            TopCandidate(name=c.name, total_score=c.total_score, strengths=strengths(c))
            for c in top_three
        ],
        skill_gaps=gaps or [NO_SKILL_GAPS],
        hiring_recommendation=HIRING_RECOMMENDATION
    )


_default_evaluator: Optional[Evaluator] = None


def evaluate(candidate: CandidateInput, rng: Optional[random.Random] = None) -> Optional[EvaluationResult]:
    """Evaluate with a throwaway evaluator (seeded by rng) or the shared default one."""
    global _default_evaluator
    if rng is not None:
        return Evaluator(rng=rng).evaluate(candidate)
    if _default_evaluator is None:
        _default_evaluator = Evaluator()
    return _default_evaluator.evaluate(candidate)
