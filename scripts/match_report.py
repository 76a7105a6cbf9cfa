"""Print the ranked mentor shortlist for one learner.

Runs the match engine over a profiles file without starting the API.

Usage:
    python scripts/match_report.py --learner L1 [--profiles data/sample_profiles.json]
        [--limit 5] [--config configs/matching.yaml] [--json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from config import load_matching_config  # noqa: E402
from models.schemas.matching_config import MatchingConfig  # noqa: E402
from services.matching.engine import MatchEngine  # noqa: E402
from services.matching.errors import LearnerNotFoundError  # noqa: E402
from services.profile_store import JsonProfileRepository  # noqa: E402

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def main(
    learner_id: str,
    profiles_path: str = "data/sample_profiles.json",
    limit: int = 10,
    config_path: str | None = None,
    as_json: bool = False,
) -> int:
    config = load_matching_config(config_path) if config_path else MatchingConfig()
    repository = JsonProfileRepository(profiles_path)
    engine = MatchEngine(config)

    try:
        results = engine.find_matches(
            repository.get_learner(learner_id),
            repository.list_eligible_mentors(),
            limit,
        )
    except LearnerNotFoundError:
        logger.error("Learner %s not found in %s", learner_id, profiles_path)
        return 1

    if as_json:
        print(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
        return 0

    if not results:
        print(f"No mentors above {config.min_score:.2f} for learner {learner_id}")
        return 0

    for rank, r in enumerate(results, start=1):
        print(f"{rank:>2}. {r.mentor_id:<12} {r.score:.3f}  {', '.join(r.reasons) or '-'}")
        subs = r.sub_scores.model_dump()
        print("    " + "  ".join(f"{name}={value:.2f}" for name, value in subs.items()))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rank mentors for a learner")
    parser.add_argument("--learner", required=True)
    parser.add_argument("--profiles", default="data/sample_profiles.json")
    parser.add_argument("--limit", type=int, default=10)
    parser.add_argument("--config", default=None)
    parser.add_argument("--json", action="store_true")
    args = parser.parse_args()
    sys.exit(main(args.learner, args.profiles, args.limit, args.config, args.json))
