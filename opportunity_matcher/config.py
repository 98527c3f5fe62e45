from __future__ import annotations

import os
from typing import Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, Field

from opportunity_matcher.taxonomy import (
    DEFAULT_TECHNOLOGY_GROUPS,
    TechnologyGroup,
    load_technology_groups,
)


class Thresholds(BaseModel):
    # Opportunities list shows anything at or above browse_min_score,
    # the dashboard only the stronger matches.
    browse_min_score: int = 50
    dashboard_min_score: int = 70
    auto_apply_min_score: int = 75


class Scoring(BaseModel):
    use_taxonomy: bool = True
    taxonomy_path: Optional[str] = None  # None -> built-in groups

    def technology_groups(self) -> Tuple[TechnologyGroup, ...]:
        if self.taxonomy_path:
            return load_technology_groups(self.taxonomy_path)
        return DEFAULT_TECHNOLOGY_GROUPS


class Store(BaseModel):
    backend: Literal["local", "supabase"] = "local"
    data_dir: str = "data"
    supabase_url: Optional[str] = None
    supabase_key_env: str = "SUPABASE_SERVICE_ROLE_KEY"
    timeout: float = 30

    def resolved_supabase_url(self) -> Optional[str]:
        return os.environ.get("SUPABASE_URL") or self.supabase_url

    def resolved_supabase_key(self) -> str:
        return os.environ.get(self.supabase_key_env, "")


class Output(BaseModel):
    top_n: int = 200
    out_dir: str = "data/results"


class Config(BaseModel):
    version: int = 1
    thresholds: Thresholds = Field(default_factory=Thresholds)
    scoring: Scoring = Field(default_factory=Scoring)
    store: Store = Field(default_factory=Store)
    output: Output = Field(default_factory=Output)


def load_config(path: str) -> Config:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config YAML must be a dict: {path}")

    cfg = Config(**raw)

    for name, value in cfg.thresholds.model_dump().items():
        if not 0 <= value <= 100:
            raise ValueError(f"Threshold {name} must be between 0 and 100 (got {value})")

    return cfg
