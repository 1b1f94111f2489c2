"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import atexit
import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.header import render_header  # noqa: E402
from config import AppConfig, get_config  # noqa: E402
from data.connection import SqlClient, close_pool, get_sql_client, open_pool  # noqa: E402
from logging_config import setup_logging  # noqa: E402

from views import customers, dashboard, invoices  # noqa: E402


@st.cache_resource
def _sql_client(cfg: AppConfig) -> SqlClient:
    # One pool per process, closed when the interpreter exits
    pool = open_pool(cfg)
    atexit.register(close_pool, pool)
    return get_sql_client(cfg, pool)


def main() -> None:
    apply_theme()
    # Missing POSTGRES_URL raises ConfigError here and stops the app
    cfg = get_config()
    setup_logging(cfg.log_level)
    client = _sql_client(cfg)
    state = render_sidebar(cfg)

    render_header(
        app_name="Invoicing Dashboard",
        subtitle="Revenue, invoices and customers",
        right_pill=f"Schema: {cfg.postgres_schema}",
    )

    # Routing only
    if state.view == "dashboard":
        dashboard.render(client)
    elif state.view == "invoices":
        invoices.render(client)
    elif state.view == "customers":
        customers.render(client)
    else:
        st.error("Unknown view")


if __name__ == "__main__":
    main()
