"""
Table creation and demo data loading.

Used by scripts/seed_database.py and the Postgres integration tests. This is
dev tooling only: the query service never writes.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import pandas as pd
from psycopg import Connection


logger = logging.getLogger(__name__)


def create_tables(conn: Connection, fq_schema: str) -> None:
    conn.execute(f"CREATE SCHEMA IF NOT EXISTS {fq_schema}")
    conn.execute(
        f"""
        CREATE TABLE IF NOT EXISTS {fq_schema}.customers (
          id UUID PRIMARY KEY,
          name VARCHAR(255) NOT NULL,
          email VARCHAR(255) NOT NULL,
          image_url VARCHAR(255) NOT NULL
        )
        """
    )
    conn.execute(
        f"""
        CREATE TABLE IF NOT EXISTS {fq_schema}.invoices (
          id UUID PRIMARY KEY,
          customer_id UUID NOT NULL REFERENCES {fq_schema}.customers(id),
          amount INT NOT NULL,
          status VARCHAR(255) NOT NULL CHECK (status IN ('pending', 'paid')),
          date DATE NOT NULL
        )
        """
    )
    conn.execute(
        f"""
        CREATE TABLE IF NOT EXISTS {fq_schema}.revenue (
          month VARCHAR(16) NOT NULL UNIQUE,
          revenue INT NOT NULL
        )
        """
    )


def _rows(df: pd.DataFrame, columns: list[str]) -> Iterable[tuple[Any, ...]]:
    return [tuple(r[c] for c in columns) for r in df.to_dict(orient="records")]


def load(
    conn: Connection,
    fq_schema: str,
    customers: pd.DataFrame,
    invoices: pd.DataFrame,
    revenue: pd.DataFrame,
) -> None:
    """Insert demo rows; rows already present (same key) are left alone."""
    with conn.cursor() as cur:
        cur.executemany(
            f"""
            INSERT INTO {fq_schema}.customers (id, name, email, image_url)
            VALUES (%s::uuid, %s, %s, %s)
            ON CONFLICT (id) DO NOTHING
            """,
            _rows(customers, ["id", "name", "email", "image_url"]),
        )
        cur.executemany(
            f"""
            INSERT INTO {fq_schema}.invoices (id, customer_id, amount, status, date)
            VALUES (%s::uuid, %s::uuid, %s, %s, %s)
            ON CONFLICT (id) DO NOTHING
            """,
            _rows(invoices, ["id", "customer_id", "amount", "status", "date"]),
        )
        cur.executemany(
            f"""
            INSERT INTO {fq_schema}.revenue (month, revenue)
            VALUES (%s, %s)
            ON CONFLICT (month) DO NOTHING
            """,
            _rows(revenue, ["month", "revenue"]),
        )
    logger.info(
        "Seeded %s customers, %s invoices, %s revenue rows into %s",
        len(customers),
        len(invoices),
        len(revenue),
        fq_schema,
    )
