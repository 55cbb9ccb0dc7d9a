"""
Seed the word table from the IELTS and TOEFL GitHub word lists.

Every fetched term is enriched through the Free Dictionary API and upserted
by term, so the script is safe to re-run. Unlike GET /seed it does not skip
a database that already holds words.

Usage: python seed.py [--limit 50] [--delay 0.3]
"""

import argparse
import logging
import sys

from core.config import settings
from core.database import SessionLocal, init_db
from core.log_config import setup_logging
from services.dictionary_service import DictionaryClient
from services.ingestion_service import IngestionService

logger = logging.getLogger("seed")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed FluentFocus vocabulary")
    parser.add_argument("--limit", type=int, default=settings.SEED_WORDS_PER_SOURCE,
                        help="maximum words taken from each source")
    parser.add_argument("--delay", type=float, default=settings.SEED_REQUEST_DELAY,
                        help="seconds to wait between dictionary lookups")
    parser.add_argument("--no-fallback", action="store_true",
                        help="do not use the sample words when every source fails")
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    if settings.AUTO_CREATE_TABLES:
        init_db()

    db = SessionLocal()
    try:
        with DictionaryClient() as client:
            svc = IngestionService(
                db,
                client,
                limit=args.limit,
                delay=args.delay,
                use_fallback=not args.no_fallback,
            )
            report = svc.run()
    except Exception:
        logger.exception("Fatal error during seeding")
        return 1
    finally:
        db.close()

    for name, count in report.source_counts.items():
        logger.info("%s words: %d", name, count)
    logger.info("Successfully seeded: %d", report.succeeded)
    logger.info("Failed: %d", report.failed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
