from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str


NAV_ITEMS = [
    ("🏠 Overview", "dashboard"),
    ("🧾 Invoices", "invoices"),
    ("👥 Customers", "customers"),
]


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🧾 Invoicing")
        st.caption("Revenue, invoices and customers")

        labels = [l for l, _ in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", labels[0])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        with st.expander("⚙️ Settings", expanded=False):
            st.markdown("**Database schema**")
            st.code(cfg.postgres_schema, language="text")
            st.caption(f"Connection pool: up to {cfg.pool_max_size} connections")

    return SidebarState(view=view)
