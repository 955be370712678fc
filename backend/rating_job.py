"""Batch BOK score recalculation.

Run: python rating_job.py --entity-type hotel --only-missing
     python rating_job.py --entity-type restaurant --input rows.json --output scores.json --dry-run
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import settings
from etl.db import get_supabase
from etl.services import create_services
from etl.storage import fetch_entities
from etl.worker import BatchStats, RatingWorker
from models import EntityType


def load_records(path: Path) -> List[Dict[str, Any]]:
    """Rows from a JSON file: either a list or {"records": [...]}."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("records", [])
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a list of records")
    return data


def write_payload(payload: dict, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2))
    logging.info("Saved %s", output_path)
    return output_path


def run_job(args: argparse.Namespace) -> BatchStats:
    entity_type = EntityType(args.entity_type)

    with create_services(analyzer=args.analyzer, dry_run=args.dry_run) as services:
        if args.input:
            records = load_records(args.input)
            if args.limit:
                records = records[: args.limit]
        else:
            supabase = get_supabase()
            if supabase is None:
                raise SystemExit("Supabase is not configured; pass --input to score a JSON file")
            records = fetch_entities(supabase, entity_type, only_missing=args.only_missing, limit=args.limit)

        if not records:
            logging.warning("No %s records to score", entity_type.value)

        if services.sink is None and not args.dry_run:
            logging.warning("No storage configured; results will not be persisted")

        worker = RatingWorker(
            calculator=services.calculator,
            service=services.service,
            analyzer=services.analyzer if entity_type == EntityType.RESTAURANT else None,
            sink=services.sink,
            delay=args.delay,
        )
        stats = worker.run(entity_type, records, only_missing=args.only_missing)

    if args.output:
        write_payload(
            {
                "date": datetime.now(timezone.utc).isoformat(),
                "entity_type": entity_type.value,
                "ratings": worker.results,
            },
            args.output,
        )
    return stats


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recalculate BOK scores")
    parser.add_argument(
        "--entity-type",
        type=str,
        default=EntityType.RESTAURANT.value,
        choices=[e.value for e in EntityType],
        help="Which entities to score",
    )
    parser.add_argument("--limit", type=int, default=None, help="Max entities to process")
    parser.add_argument("--delay", type=float, default=settings.RATING_BATCH_DELAY,
                        help="Seconds to wait between entities")
    parser.add_argument("--only-missing", action="store_true", help="Skip entities that already have a score")
    parser.add_argument(
        "--analyzer",
        type=str,
        default=settings.SENTIMENT_PROVIDER,
        choices=["openai", "keyword", "none"],
        help="Review sentiment backend for restaurants",
    )
    parser.add_argument("--input", type=Path, default=None, help="Score rows from a JSON file instead of Supabase")
    parser.add_argument("--output", type=Path, default=None, help="Where to save computed ratings as JSON")
    parser.add_argument("--dry-run", action="store_true", help="Do not write ratings to the database")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    stats = run_job(args)
    print(stats.summary())
    return 1 if stats.failed else 0


if __name__ == "__main__":
    sys.exit(main())
