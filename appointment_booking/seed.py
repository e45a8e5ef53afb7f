"""
Load medical records and bills into the store.

Usage::

    python -m appointment_booking.seed data/seed.json

The file maps usernames to their rows::

    {
        "records": {"alice": [{"date": "2024-01-05", "notes": "Annual checkup"}]},
        "bills": {"alice": [{"id": "B-1001", "date": "2024-01-05", "amount": 120, "status": "Unpaid"}]}
    }
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .core.database import SessionLocal, commit_or_raise, init_db
from .core.exceptions import StorageError
from .services.billing_service import BillingService

logger = logging.getLogger(__name__)

def load_seed_file(path: Path) -> Dict[str, Any]:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object with 'records' and/or 'bills'")
    return data

def seed(data: Dict[str, Any], db) -> Dict[str, int]:
    """Insert everything in ``data`` in a single transaction."""
    service = BillingService(db)
    counts = {
        "records": service.seed_records(data.get("records") or {}, commit=False),
        "bills": service.seed_bills(data.get("bills") or {}, commit=False),
    }
    commit_or_raise(db)
    return counts

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed medical records and bills.")
    parser.add_argument("path", type=Path, help="JSON seed file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        data = load_seed_file(args.path)
    except (OSError, ValueError) as exc:
        logger.error(f"Cannot read seed file: {exc}")
        return 1

    init_db()
    db = SessionLocal()
    try:
        counts = seed(data, db)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        logger.error(f"Malformed entry in {args.path}, nothing was seeded: {exc!r}")
        return 1
    except StorageError as exc:
        logger.error(f"Seeding {args.path} failed: {exc.detail}")
        return 1
    finally:
        db.close()

    logger.info(f"Seeded {counts['records']} record(s) and {counts['bills']} bill(s) from {args.path}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
