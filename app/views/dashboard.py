from __future__ import annotations

import streamlit as st

from components.metrics import render_kpi_row, revenue_chart, summary_kpis
from components.narrative import render_tab_intro
from components.tables import render_latest_invoices
from data.connection import SqlClient
from data.service import fetch_card_data, fetch_latest_invoices, fetch_revenue


def render(client: SqlClient) -> None:
    st.title("Overview")

    render_tab_intro(
        question="How much have we billed, and how much is still outstanding?",
        context="Totals cover every invoice on record. Amounts are shown in major currency units.",
    )

    render_kpi_row(summary_kpis(fetch_card_data(client)))

    st.divider()

    c1, c2 = st.columns([3, 2])

    with c1:
        st.subheader("Recent revenue")
        revenue = fetch_revenue(client)
        if revenue:
            revenue_chart(revenue)
        else:
            st.info("No revenue data available.")

    with c2:
        st.subheader("Latest invoices")
        latest = fetch_latest_invoices(client)
        if latest:
            render_latest_invoices(latest)
        else:
            st.info("No invoices yet.")
