from __future__ import annotations

from dataclasses import asdict

import pandas as pd
import streamlit as st

from components.narrative import render_tab_intro
from data.connection import SqlClient
from data.service import fetch_filtered_customers


def render(client: SqlClient) -> None:
    st.title("Customers")

    render_tab_intro(
        question="Who owes us, and who has paid?",
        context="Customers without invoices are listed with zero totals.",
    )

    query = st.text_input("Search customers", placeholder="Name or email")
    customers = fetch_filtered_customers(client, query)
    if not customers:
        st.info("No customers match this search.")
        return

    df = pd.DataFrame([asdict(c) for c in customers])
    st.dataframe(
        df[["name", "email", "total_invoices", "total_pending", "total_paid"]],
        hide_index=True,
        use_container_width=True,
        column_config={
            "total_invoices": "Invoices",
            "total_pending": "Pending",
            "total_paid": "Paid",
        },
    )
