#!/usr/bin/env python3
"""
Create the dashboard tables and load Faker-generated demo data.

Usage:
    python scripts/seed_database.py [--customers N] [--invoices N]

Environment variables required:
    POSTGRES_URL - connection string (read via app/config.py, .env supported)

Optional:
    POSTGRES_SCHEMA - target schema (default: public)
"""

import argparse
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
APP_DIR = os.path.join(REPO_ROOT, "app")
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from config import ConfigError, get_config  # noqa: E402
from data import mock_data, seed  # noqa: E402
from data.connection import close_pool, open_pool  # noqa: E402
from logging_config import setup_logging  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the invoicing dashboard database")
    parser.add_argument("--customers", type=int, default=12)
    parser.add_argument("--invoices", type=int, default=60)
    args = parser.parse_args()

    try:
        cfg = get_config()
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 1

    setup_logging(cfg.log_level)

    customers = mock_data.customers_mock(args.customers)
    invoices = mock_data.invoices_mock(customers, args.invoices)
    revenue = mock_data.revenue_mock()

    print("=" * 60)
    print("Invoicing Dashboard - Seed Database")
    print("=" * 60)
    print(f"Schema: {cfg.postgres_schema}")
    print(f"Customers: {len(customers)}  Invoices: {len(invoices)}  Revenue months: {len(revenue)}")

    pool = open_pool(cfg)
    try:
        with pool.connection() as conn:
            seed.create_tables(conn, cfg.fq_schema)
            seed.load(conn, cfg.fq_schema, customers, invoices, revenue)
    finally:
        close_pool(pool)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
