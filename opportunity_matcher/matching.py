# opportunity_matcher/matching.py
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Set

from opportunity_matcher.models import Opportunity, ScoredOpportunity
from opportunity_matcher.scoring import score_breakdown
from opportunity_matcher.taxonomy import TechnologyGroup

logger = logging.getLogger(__name__)


def score_opportunity(
    profile_skills: Any,
    opportunity: Opportunity,
    *,
    use_taxonomy: bool = True,
    groups: Optional[Iterable[TechnologyGroup]] = None,
) -> ScoredOpportunity:
    breakdown = score_breakdown(
        profile_skills,
        opportunity.required_skills,
        use_taxonomy=use_taxonomy,
        groups=groups,
    )
    return ScoredOpportunity(
        opportunity=opportunity,
        match_score=breakdown.score,
        full_hit=breakdown.full_hit,
        partial_hit=breakdown.partial_hit,
        miss=breakdown.miss,
    )


def score_opportunities(
    profile_skills: Any,
    opportunities: Iterable[Opportunity],
    *,
    min_score: int = 0,
    use_taxonomy: bool = True,
    groups: Optional[Iterable[TechnologyGroup]] = None,
) -> List[ScoredOpportunity]:
    """
    Score every opportunity against the profile skills.

    Keeps opportunities scoring at least min_score and returns them best first.
    Equal scores keep their input order.
    """
    groups = tuple(groups) if groups is not None else None

    results: List[ScoredOpportunity] = []
    total = 0
    for opp in opportunities:
        total += 1
        scored = score_opportunity(profile_skills, opp, use_taxonomy=use_taxonomy, groups=groups)
        if scored.match_score < min_score:
            continue
        results.append(scored)

    # sort is stable, ties stay in catalog order
    results.sort(key=lambda r: r.match_score, reverse=True)
    logger.debug("Scored %d opportunities, %d at or above %d", total, len(results), min_score)
    return results


def eligible_for_auto_apply(
    scored: Iterable[ScoredOpportunity],
    applied_ids: Set[str],
    min_score: int,
) -> List[ScoredOpportunity]:
    """Drop opportunities already applied to and those under the auto-apply threshold."""
    out = []
    for s in scored:
        if s.opportunity.id in applied_ids:
            continue
        if s.match_score < min_score:
            continue
        out.append(s)
    return out
