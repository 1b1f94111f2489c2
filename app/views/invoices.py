from __future__ import annotations

import streamlit as st

from components.narrative import render_tab_intro
from components.tables import render_invoice_table
from data.connection import SqlClient
from data.formatting import format_currency
from data.service import fetch_customers, fetch_filtered_invoices, fetch_invoice_by_id, fetch_invoices_pages


def _render_detail(client: SqlClient, invoice_id: str) -> None:
    invoice = fetch_invoice_by_id(client, invoice_id)
    if invoice is None:
        st.warning("Invoice not found.")
        return

    customers = fetch_customers(client)
    names = [c.name for c in customers]
    ids = [c.id for c in customers]
    idx = ids.index(invoice.customer_id) if invoice.customer_id in ids else None

    c1, c2, c3 = st.columns(3)
    c1.selectbox("Customer", names, index=idx, disabled=True, key=f"inv_customer_{invoice.id}")
    c2.number_input("Amount", value=invoice.amount, format="%.2f", disabled=True, key=f"inv_amount_{invoice.id}")
    c3.radio("Status", ["pending", "paid"], index=0 if invoice.status == "pending" else 1, disabled=True, horizontal=True, key=f"inv_status_{invoice.id}")


def render(client: SqlClient) -> None:
    st.title("Invoices")

    render_tab_intro(
        question="Find an invoice by customer, email, amount, date or status.",
        context="Search is case-insensitive and matches any part of a field.",
    )

    query = st.text_input("Search invoices", placeholder="e.g. pending, 2024-06, jane@…")

    # New search starts from the first page
    if st.session_state.get("invoice_query") != query:
        st.session_state["invoice_query"] = query
        st.session_state["invoice_page"] = 1

    total_pages = fetch_invoices_pages(client, query)
    if st.session_state.get("invoice_page", 1) > total_pages:
        st.session_state["invoice_page"] = total_pages
    page = st.number_input("Page", min_value=1, max_value=total_pages, step=1, key="invoice_page")
    st.caption(f"Page {page} of {total_pages}")

    rows = fetch_filtered_invoices(client, query, int(page))
    if not rows:
        st.info("No invoices match this search.")
        return

    render_invoice_table(rows)

    with st.expander("Invoice details"):
        labels = {r.id: f"{r.name} · {format_currency(r.amount)} · {r.date}" for r in rows}
        selected = st.selectbox("Invoice", list(labels), format_func=labels.get)
        if selected:
            _render_detail(client, selected)
