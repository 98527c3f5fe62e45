# scripts/auto_apply.py
import argparse
import logging
import os
import sys

from opportunity_matcher.auto_apply import auto_apply, plan_auto_apply
from opportunity_matcher.main import prepare


def main():
    parser = argparse.ArgumentParser(
        description="Apply to every opportunity that clears the auto-apply threshold."
    )
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--user-id", required=True)
    parser.add_argument("--dry-run", action="store_true",
                        help="List eligible opportunities without submitting")
    args = parser.parse_args()

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg, store = prepare(args.config)
    groups = cfg.scoring.technology_groups()
    min_score = cfg.thresholds.auto_apply_min_score

    if args.dry_run:
        profile = store.get_profile(args.user_id)
        eligible = plan_auto_apply(
            store,
            profile,
            min_score=min_score,
            use_taxonomy=cfg.scoring.use_taxonomy,
            groups=groups,
        )
        for m in eligible:
            print(f"[DRY RUN] {m.match_score:>3}%  {m.opportunity.title} ({m.opportunity.platform})")
        print(f"[DRY RUN] Would apply to {len(eligible)} opportunities")
        return

    result = auto_apply(
        store,
        args.user_id,
        min_score=min_score,
        use_taxonomy=cfg.scoring.use_taxonomy,
        groups=groups,
    )
    print(result.message)
    if result.failed:
        print(f"Failed: {', '.join(result.failed)}")
    if not result.success or result.failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
