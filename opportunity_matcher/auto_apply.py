# opportunity_matcher/auto_apply.py
"""
Applying to opportunities, one at a time or in bulk.

Bulk auto-apply: submit an application, with a generated cover letter, to every
opportunity the user has not applied to yet whose match score clears the
auto-apply threshold.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from opportunity_matcher.cover_letter import compose_cover_letter
from opportunity_matcher.matching import eligible_for_auto_apply, score_opportunities
from opportunity_matcher.models import Application, Opportunity, Profile, ScoredOpportunity
from opportunity_matcher.scoring import calculate_match_score
from opportunity_matcher.stores.base import MatchStore, StoreError
from opportunity_matcher.taxonomy import TechnologyGroup

logger = logging.getLogger(__name__)

AUTO_APPLY_MIN_SCORE = 75
NO_RESUME_MESSAGE = "No resume found. Please upload a resume first."


@dataclass
class AutoApplyResult:
    success: bool
    message: str
    applications: List[Application] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)  # opportunity ids whose insert failed

    @property
    def applications_count(self) -> int:
        return len(self.applications)


def apply_to_opportunity(
    store: MatchStore,
    user_id: str,
    opportunity: Opportunity,
    *,
    match_score: Optional[int] = None,
    use_taxonomy: bool = True,
    groups: Optional[Iterable[TechnologyGroup]] = None,
    now: Optional[datetime] = None,
) -> Application:
    """
    Apply to a single opportunity the user picked.

    match_score is the score the user saw; when not given it is computed from
    the current profile. Store failures propagate.
    """
    profile = store.get_profile(user_id)

    if match_score is None:
        match_score = calculate_match_score(
            profile.skills,
            opportunity.required_skills,
            use_taxonomy=use_taxonomy,
            groups=groups,
        )

    application = Application(
        user_id=profile.id,
        opportunity_id=opportunity.id,
        status="applied",
        match_score=match_score,
        cover_letter=compose_cover_letter(profile, opportunity),
        applied_at=(now or datetime.now(timezone.utc)).isoformat(),
    )
    stored = store.insert_application(application)
    logger.info("User %s applied to opportunity %s (score %s)", profile.id, opportunity.id, match_score)
    return stored


def plan_auto_apply(
    store: MatchStore,
    profile: Profile,
    *,
    min_score: int = AUTO_APPLY_MIN_SCORE,
    use_taxonomy: bool = True,
    groups: Optional[Iterable[TechnologyGroup]] = None,
) -> List[ScoredOpportunity]:
    """Opportunities the workflow would apply to, best match first."""
    opportunities = store.list_opportunities()
    applied_ids = store.list_applied_opportunity_ids(profile.id)

    scored = score_opportunities(
        profile.skills,
        opportunities,
        min_score=min_score,
        use_taxonomy=use_taxonomy,
        groups=groups,
    )
    eligible = eligible_for_auto_apply(scored, applied_ids, min_score)
    logger.info(
        "User %s: %d opportunities, %d already applied, %d eligible at >= %d",
        profile.id, len(opportunities), len(applied_ids), len(eligible), min_score,
    )
    return eligible


def auto_apply(
    store: MatchStore,
    user_id: str,
    *,
    min_score: int = AUTO_APPLY_MIN_SCORE,
    use_taxonomy: bool = True,
    groups: Optional[Iterable[TechnologyGroup]] = None,
    now: Optional[datetime] = None,
) -> AutoApplyResult:
    profile = store.get_profile(user_id)

    if not profile.resume_url:
        logger.info("User %s has no resume, nothing submitted", user_id)
        return AutoApplyResult(success=False, message=NO_RESUME_MESSAGE)

    eligible = plan_auto_apply(
        store,
        profile,
        min_score=min_score,
        use_taxonomy=use_taxonomy,
        groups=groups,
    )

    applied_at = (now or datetime.now(timezone.utc)).isoformat()
    result = AutoApplyResult(success=True, message="")

    for match in eligible:
        opp = match.opportunity
        application = Application(
            user_id=profile.id,
            opportunity_id=opp.id,
            status="applied",
            match_score=match.match_score,
            cover_letter=compose_cover_letter(profile, opp),
            applied_at=applied_at,
        )
        try:
            stored = store.insert_application(application)
        except StoreError as e:
            logger.error("Auto-apply to opportunity %s failed: %s", opp.id, e)
            result.failed.append(opp.id)
            continue
        result.applications.append(stored)

    result.message = f"Successfully auto-applied to {result.applications_count} opportunities!"
    logger.info(result.message)
    return result
