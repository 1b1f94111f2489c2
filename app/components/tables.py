from __future__ import annotations

import html

import streamlit as st

from data.formatting import format_currency
from data.models import InvoiceRow, LatestInvoice


def status_badge(status: str) -> str:
    label = "Paid" if status == "paid" else "Pending"
    return f'<span class="status-badge status-{html.escape(status)}">{label}</span>'


def render_invoice_table(rows: list[InvoiceRow]) -> None:
    """Search results; amounts arrive in minor units and are formatted here for display."""
    body = "".join(
        "<tr>"
        f"<td>{html.escape(r.name)}</td>"
        f"<td>{html.escape(r.email)}</td>"
        f'<td class="num">{format_currency(r.amount)}</td>'
        f"<td>{r.date}</td>"
        f"<td>{status_badge(r.status)}</td>"
        "</tr>"
        for r in rows
    )
    st.markdown(
        '<table class="invoice-table"><thead><tr>'
        "<th>Customer</th><th>Email</th><th>Amount</th><th>Date</th><th>Status</th>"
        f"</tr></thead><tbody>{body}</tbody></table>",
        unsafe_allow_html=True,
    )


def render_latest_invoices(latest: list[LatestInvoice]) -> None:
    items = "".join(
        '<li class="latest-row">'
        f'<div><div class="latest-name">{html.escape(i.name)}</div>'
        f'<div class="latest-email">{html.escape(i.email)}</div></div>'
        f'<div class="latest-amount">{html.escape(i.amount)}</div>'
        "</li>"
        for i in latest
    )
    st.markdown(f'<ul class="latest-list">{items}</ul>', unsafe_allow_html=True)
