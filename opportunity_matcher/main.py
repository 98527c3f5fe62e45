# opportunity_matcher/main.py
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from opportunity_matcher.config import Config, load_config
from opportunity_matcher.matching import score_opportunities
from opportunity_matcher.models import ScoredOpportunity
from opportunity_matcher.stores import MatchStore, build_store
from opportunity_matcher.utils import atomic_write_json

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[1]

FIELDNAMES = [
    "match_score",
    "title",
    "company",
    "platform",
    "category",
    "location",
    "deadline",
    "required_skills",
    "full_hit",
    "partial_hit",
    "miss",
    "application_url",
]


def _resolve(path: str) -> Path:
    p = Path(path).expanduser()
    return p if p.is_absolute() else REPO_ROOT / p


def _to_row(s: ScoredOpportunity) -> Dict[str, Any]:
    opp = s.opportunity
    return {
        "id": opp.id,
        "match_score": s.match_score,
        "title": opp.title,
        "company": opp.company or "",
        "platform": opp.platform,
        "category": opp.category or "",
        "location": opp.location or "",
        "deadline": opp.deadline or "",
        "required_skills": opp.skill_set,
        "full_hit": s.full_hit,
        "partial_hit": [f"{req} ({group})" for req, group in s.partial_hit],
        "miss": s.miss,
        "application_url": opp.application_url or "",
    }


def _write_results(results: List[Dict[str, Any]], out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    out_json = out_dir / "results.json"
    out_csv = out_dir / "results.csv"

    atomic_write_json(out_json, results)

    with out_csv.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        for r in results:
            row = dict(r)
            for key in ("required_skills", "full_hit", "partial_hit", "miss"):
                row[key] = ", ".join(r.get(key, []))
            writer.writerow({k: row.get(k, "") for k in FIELDNAMES})

    print(f"Wrote {len(results)} matches → {out_json}")
    print(f"Wrote CSV → {out_csv}")


def prepare(config_path: str = "config/config.yaml") -> Tuple[Config, MatchStore]:
    """Load config, resolve its relative paths against the repo root and build the store."""
    config_file = (REPO_ROOT / config_path).resolve()
    logger.debug("Using config file: %s", config_file)

    cfg = load_config(str(config_file))
    cfg.store.data_dir = str(_resolve(cfg.store.data_dir))
    if cfg.scoring.taxonomy_path:
        cfg.scoring.taxonomy_path = str(_resolve(cfg.scoring.taxonomy_path))
    return cfg, build_store(cfg)


def run(
    user_id: str,
    config_path: str = "config/config.yaml",
    min_score: Optional[int] = None,
) -> List[Dict[str, Any]]:
    cfg, store = prepare(config_path)
    groups = cfg.scoring.technology_groups()

    profile = store.get_profile(user_id)
    opportunities = store.list_opportunities()
    if not opportunities:
        print("No opportunities found in the store.")
        return []

    threshold = cfg.thresholds.browse_min_score if min_score is None else min_score
    scored = score_opportunities(
        profile.skills,
        opportunities,
        min_score=threshold,
        use_taxonomy=cfg.scoring.use_taxonomy,
        groups=groups,
    )

    results = [_to_row(s) for s in scored[: cfg.output.top_n]]

    _write_results(results, _resolve(cfg.output.out_dir))
    return results
