"""Seed the band and review tables with the default multipliers."""
import logging
import os
import sys

# Ensure we can import appraisal_api when run from the repository root
sys.path.append(os.getcwd())

from appraisal_api.core.init_system import seed_reference_data
from appraisal_api.database import SessionLocal, init_db

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def seed():
    init_db()
    db = SessionLocal()
    try:
        created = seed_reference_data(db)
        print(f"Added {created['bands']} band(s) and {created['reviews']} review(s)")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
