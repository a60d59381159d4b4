"""
Cleaner Service - Main Entry Point

This is the command-line interface for the cleaner service.

Usage:
    python -m dsjobs.cleaner.main [OPTIONS]

Options:
    --config TEXT        Path to cleaner.yml configuration file
    --dry-run            Clean but do not write to the database
    --verbose            Enable debug logging
    --help               Show this message and exit

Examples:
    # Clean the raw table and replace the clean table:
    python -m dsjobs.cleaner.main

    # Check that the raw data cleans without errors:
    python -m dsjobs.cleaner.main --dry-run --verbose

Exit Codes:
    0: Success
    1: Cleaning failed (bad raw data, nothing was written)
    2: Fatal error (database connection, configuration, etc.)
"""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv

from .config import load_cleaner_config
from .db_operations import CleanerDB, DatabaseError
from .pipeline import CleaningError, FinalizationError, clean_job_postings

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send INFO and above to stdout."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Clean raw Glassdoor job postings into a typed dataset',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to cleaner.yml configuration file (default: config/cleaner.yml)',
        default=None
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Clean but do not write to the database',
        dest='dry_run'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def run_cleaner(db: CleanerDB, dry_run: bool = False) -> dict[str, int]:
    """
    Main cleaner logic.

    Args:
        db: Database interface
        dry_run: If True, don't write to database

    Returns:
        Dictionary with statistics:
        - fetched: Number of raw postings read
        - duplicates_removed: Number of exact duplicates dropped
        - cleaned: Number of cleaned postings produced
        - written: Number written to the clean table

    Raises:
        CleaningError: If the raw data cannot be cleaned (nothing is written)
        DatabaseError: If reading or writing fails
    """
    stats = {
        'fetched': 0,
        'duplicates_removed': 0,
        'cleaned': 0,
        'written': 0,
    }

    start_time = datetime.now(timezone.utc)
    logger.info("Starting cleaner service", extra={'dry_run': dry_run})

    raw_postings = db.fetch_raw_postings()
    stats['fetched'] = len(raw_postings)

    if not raw_postings:
        logger.warning("No raw postings found to clean")

    cleaned = clean_job_postings(raw_postings)
    stats['cleaned'] = len(cleaned)
    stats['duplicates_removed'] = stats['fetched'] - stats['cleaned']

    if dry_run:
        logger.info(f"DRY RUN: Would write {len(cleaned)} postings to the clean table")
    else:
        logger.info(f"Writing {len(cleaned)} cleaned postings")
        stats['written'] = db.replace_clean_postings(cleaned)

    duration = (datetime.now(timezone.utc) - start_time).total_seconds()
    logger.info(
        "Cleaner service completed",
        extra={'duration_seconds': duration, **stats}
    )

    return stats


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the cleaner service.

    Returns:
        Exit code (0 = success, 1 = cleaning failed, 2 = fatal error)
    """
    configure_logging()
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")

    database_url = os.getenv('DATABASE_URL')
    if not database_url:
        logger.error("DATABASE_URL environment variable must be set")
        return 2

    try:
        config = load_cleaner_config(args.config)

        logger.info("Connecting to database")
        db = CleanerDB(database_url, config.raw_table, config.clean_table)

        run_cleaner(db=db, dry_run=args.dry_run)

        logger.info("Cleaner completed successfully")
        return 0

    except FinalizationError as e:
        logger.error(
            f"Cleaning aborted, clean table left untouched: {e}",
            extra={'idx': e.idx, 'field': e.field}
        )
        return 1

    except CleaningError as e:
        logger.error(f"Cleaning aborted, clean table left untouched: {e}")
        return 1

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        return 2

    except DatabaseError as e:
        logger.error(f"Database error: {e}")
        return 2

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(
            "Unexpected fatal error",
            extra={
                'error': str(e),
                'error_type': type(e).__name__,
            },
            exc_info=True
        )
        return 2


if __name__ == '__main__':
    sys.exit(main())
