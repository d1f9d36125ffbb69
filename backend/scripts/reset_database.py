#!/usr/bin/env python3
"""
Reset the ERP database: delete every stored purchase order and rebuild the
schema from the Alembic migrations.

Usage:
    python scripts/reset_database.py          # asks for confirmation
    python scripts/reset_database.py --yes    # no prompt (CI / local dev)
"""

import sys
import os

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, BACKEND_DIR)

# DATABASE_URL may live in backend/.env
from dotenv import load_dotenv
load_dotenv(os.path.join(BACKEND_DIR, '.env'))

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect, text
from erp_bridge.config import settings
from erp_bridge.database import engine, Base
from erp_bridge.models import PurchaseOrder, LineItem
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def count_rows() -> dict:
    """Row counts per ERP table, skipping tables that do not exist yet"""
    existing = set(inspect(engine).get_table_names())
    counts = {}
    with engine.connect() as conn:
        for model in (PurchaseOrder, LineItem):
            table = model.__tablename__
            if table in existing:
                counts[table] = conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()
    return counts


def reset_database(assume_yes: bool = False):
    """Drop the ERP tables and migrate an empty schema back to head"""
    counts = count_rows()
    logger.warning(f"Resetting database {settings.database_url.split('@')[-1]}")
    for table, rows in counts.items():
        logger.warning(f"  {table}: {rows} row(s) will be deleted")

    if not assume_yes:
        response = input("Delete all purchase orders and line items? (yes/no): ")
        if response.lower() != "yes":
            logger.info("Aborted.")
            return

    # Line items go with their orders (FK ON DELETE CASCADE); drop_all orders by dependency
    Base.metadata.drop_all(bind=engine)
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
    logger.info("Dropped ERP tables and Alembic version table")

    alembic_cfg = Config(os.path.join(BACKEND_DIR, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(BACKEND_DIR, "alembic"))
    command.upgrade(alembic_cfg, "head")
    logger.info(f"Schema rebuilt at migration head; tables now: {sorted(count_rows())}")


if __name__ == "__main__":
    reset_database(assume_yes="--yes" in sys.argv[1:])
