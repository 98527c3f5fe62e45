# scripts/run_matcher.py
import argparse
import logging
import os

from opportunity_matcher.main import run


def main():
    parser = argparse.ArgumentParser(description="Score the opportunity catalog for one user.")
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--user-id", required=True)
    parser.add_argument("--min-score", type=int, default=None,
                        help="Override thresholds.browse_min_score from the config")
    args = parser.parse_args()

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(args.user_id, args.config, min_score=args.min_score)


if __name__ == "__main__":
    main()
