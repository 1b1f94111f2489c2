from __future__ import annotations

import html
from dataclasses import asdict, dataclass
from typing import Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from config import THEME
from data.formatting import CURRENCY_SYMBOL
from data.mock_data import MONTHS
from data.models import CardSummary, Revenue


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    tone: Optional[str] = None  # "paid" | "pending" tints the card edge


def summary_kpis(cards: CardSummary) -> list[Kpi]:
    return [
        Kpi("Collected", cards.total_paid_invoices, tone="paid"),
        Kpi("Pending", cards.total_pending_invoices, tone="pending"),
        Kpi("Total invoices", f"{cards.number_of_invoices:,}"),
        Kpi("Total customers", f"{cards.number_of_customers:,}"),
    ]


def render_kpi_row(kpis: list[Kpi]) -> None:
    for col, kpi in zip(st.columns(len(kpis)), kpis):
        tone = f" kpi-{kpi.tone}" if kpi.tone else ""
        col.markdown(
            f'<div class="kpi{tone}"><div class="kpi-label">{html.escape(kpi.label)}</div>'
            f'<div class="kpi-value">{html.escape(kpi.value)}</div></div>',
            unsafe_allow_html=True,
        )


def revenue_chart(revenue: list[Revenue]) -> None:
    """Monthly revenue bars; month-name labels are drawn in calendar order."""
    df = pd.DataFrame([asdict(r) for r in revenue])
    calendar = set(df["month"]).issubset(MONTHS)
    fig = px.bar(
        df,
        x="month",
        y="revenue",
        category_orders={"month": MONTHS} if calendar else None,
        color_discrete_sequence=[THEME["accent_primary"]],
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        font=dict(color=THEME["text_primary"]),
        bargap=0.35,
    )
    fig.update_xaxes(title_text=None)
    fig.update_yaxes(title_text=None, gridcolor=THEME["grid"], tickprefix=CURRENCY_SYMBOL, separatethousands=True)
    st.plotly_chart(fig, use_container_width=True)
