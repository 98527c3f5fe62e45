from __future__ import annotations

from typing import Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from opportunity_matcher.skills import normalize_skills


class Profile(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    skills: Any = None  # raw, see normalize_skills
    education: Optional[str] = None
    experience: Optional[str] = None
    resume_url: Optional[str] = None
    resume_name: Optional[str] = None

    @property
    def skill_set(self) -> List[str]:
        return normalize_skills(self.skills)


class Opportunity(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    title: str
    platform: str
    deadline: Optional[str] = None  # ISO date text, not interpreted here
    category: Optional[str] = None
    required_skills: Any = None
    company: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    application_url: Optional[str] = None

    @property
    def skill_set(self) -> List[str]:
        return normalize_skills(self.required_skills)


class Application(BaseModel):
    """
    Snapshot written when a user applies.
    match_score is the score at application time and is never recomputed.
    """
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: Optional[str] = None
    user_id: str
    opportunity_id: str
    status: Literal["pending", "applied"] = "pending"
    match_score: int = Field(ge=0, le=100)
    cover_letter: Optional[str] = None
    applied_at: Optional[str] = None


class ScoredOpportunity(BaseModel):
    opportunity: Opportunity
    match_score: int
    full_hit: List[str] = Field(default_factory=list)
    partial_hit: List[Tuple[str, str]] = Field(default_factory=list)
    miss: List[str] = Field(default_factory=list)
