from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import pandas as pd
from psycopg_pool import ConnectionPool

from config import AppConfig


logger = logging.getLogger(__name__)


def open_pool(cfg: AppConfig) -> ConnectionPool:
    """
    Build the process-wide connection pool.

    Called once at startup; requests beyond `pool_max_size` wait in the pool's
    queue until a connection frees or `pool_timeout` elapses.
    """
    kwargs: dict[str, Any] = {}
    if cfg.postgres_sslmode:
        kwargs["sslmode"] = cfg.postgres_sslmode

    pool = ConnectionPool(
        conninfo=cfg.postgres_url,
        min_size=1,
        max_size=cfg.pool_max_size,
        timeout=cfg.pool_timeout,
        kwargs=kwargs,
        open=False,
    )
    # Don't block startup on the first connection; failures surface per query.
    pool.open(wait=False)
    logger.info("Opened connection pool (max_size=%s, schema=%s)", cfg.pool_max_size, cfg.postgres_schema)
    return pool


def close_pool(pool: ConnectionPool) -> None:
    pool.close()
    logger.info("Closed connection pool")


@dataclass(frozen=True)
class SqlClient:
    cfg: AppConfig
    pool: ConnectionPool

    def query(self, query: str, params: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
        """
        Returns a pandas.DataFrame for one parameterized statement.
        Borrows a connection from the pool for the duration of the call.
        """
        with self.pool.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query, params)
                rows = cur.fetchall()
                cols = [d.name for d in (cur.description or [])]
                return pd.DataFrame(rows, columns=cols)


def get_sql_client(cfg: AppConfig, pool: ConnectionPool) -> SqlClient:
    return SqlClient(cfg=cfg, pool=pool)
