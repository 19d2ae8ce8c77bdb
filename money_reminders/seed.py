#!/usr/bin/env python3
"""
Seed the reminders table with sample data when it is empty.

Usage:
  python -m money_reminders.seed
  python -m money_reminders.seed --create-tables
"""
import argparse
import logging
import sys
from datetime import timedelta
from typing import List

from money_reminders import crud
from money_reminders.core.database_utils import create_tables, get_db_session
from money_reminders.schemas.reminder import ReminderCreate
from money_reminders.utils.timezone import now_utc

logger = logging.getLogger(__name__)


def sample_reminders() -> List[ReminderCreate]:
    now = now_utc()
    return [
        ReminderCreate(person_name="Rahul Sharma", phone_number="9876543210", amount=500,
                       due_date=now + timedelta(days=2), is_paid=False),
        ReminderCreate(person_name="Amit Patel", phone_number="9123456789", amount=1200,
                       due_date=now - timedelta(days=1), is_paid=False),
        ReminderCreate(person_name="Sneha Gupta", phone_number="9988776655", amount=250,
                       due_date=now - timedelta(days=5), is_paid=True),
    ]


def seed(db) -> int:
    """Insert the samples into an empty table. Returns how many rows were added."""
    if crud.reminder.list(db):
        logger.info("Database already has data, skipping seed.")
        return 0
    samples = sample_reminders()
    for item in samples:
        crud.reminder.create(db, obj_in=item)
    logger.info(f"Seeded {len(samples)} reminders")
    return len(samples)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed sample payment reminders")
    parser.add_argument("--create-tables", action="store_true", help="Create tables before seeding")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        if args.create_tables:
            create_tables()
        with get_db_session() as db:
            seed(db)
    except Exception as e:
        logger.error(f"Error seeding: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
