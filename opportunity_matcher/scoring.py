# opportunity_matcher/scoring.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from opportunity_matcher.skills import comparison_tokens
from opportunity_matcher.taxonomy import DEFAULT_TECHNOLOGY_GROUPS, TechnologyGroup

logger = logging.getLogger(__name__)

FULL_POINT = 1.0
PARTIAL_POINT = 0.5


@dataclass
class ScoreBreakdown:
    score: int
    full_hit: List[str] = field(default_factory=list)
    partial_hit: List[Tuple[str, str]] = field(default_factory=list)  # (required token, group name)
    miss: List[str] = field(default_factory=list)

    @property
    def points(self) -> float:
        return len(self.full_hit) * FULL_POINT + len(self.partial_hit) * PARTIAL_POINT


def _contains_either_way(a: str, b: str) -> bool:
    return a in b or b in a


def _direct_hit(required: str, candidate: List[str]) -> bool:
    return any(_contains_either_way(c, required) for c in candidate)


def _related_group(
    required: str,
    candidate: List[str],
    groups: Iterable[TechnologyGroup],
) -> Optional[str]:
    """First group containing the required token that the candidate also has a token in."""
    for group in groups:
        if not group.matches(required):
            continue
        if any(group.matches(c) for c in candidate):
            return group.name
    return None


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def score_breakdown(
    candidate_skills: Any,
    required_skills: Any,
    *,
    use_taxonomy: bool = True,
    groups: Optional[Iterable[TechnologyGroup]] = None,
) -> ScoreBreakdown:
    """
    Explainable 0-100 score of how well candidate skills cover required skills.

    A required skill is a full hit when it and some candidate skill contain one
    another (case-insensitive). Otherwise, with the taxonomy enabled, it earns
    half a point when both it and some candidate skill fall in the same
    technology group. The score is points / number of required skills, rounded
    half up.
    """
    candidate = comparison_tokens(candidate_skills)
    required = comparison_tokens(required_skills)

    if not candidate or not required:
        return ScoreBreakdown(score=0, miss=list(required))

    groups = tuple(groups) if groups is not None else DEFAULT_TECHNOLOGY_GROUPS

    full_hit: List[str] = []
    partial_hit: List[Tuple[str, str]] = []
    miss: List[str] = []

    for req in required:
        if _direct_hit(req, candidate):
            full_hit.append(req)
            continue

        group_name = _related_group(req, candidate, groups) if use_taxonomy else None
        if group_name:
            partial_hit.append((req, group_name))
        else:
            miss.append(req)

    breakdown = ScoreBreakdown(score=0, full_hit=full_hit, partial_hit=partial_hit, miss=miss)
    breakdown.score = _round_half_up(100.0 * breakdown.points / len(required))

    logger.debug(
        "score=%s full=%s partial=%s miss=%s",
        breakdown.score, full_hit, partial_hit, miss,
    )
    return breakdown


def calculate_match_score(
    candidate_skills: Any,
    required_skills: Any,
    *,
    use_taxonomy: bool = True,
    groups: Optional[Iterable[TechnologyGroup]] = None,
) -> int:
    return score_breakdown(
        candidate_skills,
        required_skills,
        use_taxonomy=use_taxonomy,
        groups=groups,
    ).score
