from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Invoicing Dashboard"

# THEME key -> CSS custom property
_CSS_VARS = {
    "accent_primary": "--accent",
    "navy_900": "--ink",
    "bg_primary": "--page",
    "bg_card": "--card",
    "border_color": "--line",
    "text_primary": "--text",
    "text_secondary": "--muted",
    "shadow": "--shadow",
    "success": "--paid",
    "warning": "--pending",
}

_RULES = """
#MainMenu, footer { visibility: hidden; }
[data-testid="stAppViewContainer"] { background: var(--page); color: var(--text); }
[data-testid="stSidebar"] { background: var(--card); border-right: 1px solid var(--line); }

.dash-header {
  display: flex; align-items: center; justify-content: space-between;
  background: var(--card); border: 1px solid var(--line); border-radius: var(--radius);
  padding: 10px 14px; margin-bottom: 14px;
}
.dash-title { font-size: 20px; font-weight: 700; color: var(--ink); }
.dash-subtitle { font-size: 14px; color: var(--muted); }
.pill {
  display: inline-flex; align-items: center; gap: 6px; border: 1px solid var(--line);
  border-radius: 999px; padding: 4px 10px; font-size: 13px; font-weight: 600;
}
.pill .dot { width: 8px; height: 8px; border-radius: 999px; background: var(--accent); }

.tab-intro { border-left: 4px solid var(--accent); background: var(--card); padding: 10px 14px; margin-bottom: 14px; }
.tab-intro-question { font-size: 18px; font-weight: 700; color: var(--ink); }
.tab-intro-context { font-size: 14px; color: var(--muted); }

/* KPI cards: collected/pending get a coloured edge */
.kpi {
  background: var(--card); border: 1px solid var(--line); border-radius: var(--radius);
  box-shadow: var(--shadow); padding: 12px 14px;
}
.kpi-paid { border-top: 3px solid var(--paid); }
.kpi-pending { border-top: 3px solid var(--pending); }
.kpi-label { font-size: 14px; color: var(--muted); }
.kpi-value { font-size: 24px; font-weight: 700; }

/* Invoice search results */
.invoice-table { width: 100%; border-collapse: collapse; background: var(--card); }
.invoice-table th { text-align: left; font-size: 13px; color: var(--muted); border-bottom: 1px solid var(--line); padding: 8px; }
.invoice-table td { border-bottom: 1px solid var(--line); padding: 8px; font-size: 14px; }
.invoice-table td.num { font-variant-numeric: tabular-nums; }
.status-badge { border-radius: 999px; padding: 2px 10px; font-size: 12px; font-weight: 600; }
.status-paid { background: #ECFDF3; color: var(--paid); }
.status-pending { background: #FFFAEB; color: var(--pending); }

/* Latest invoices list */
.latest-list { list-style: none; padding: 0; margin: 0; }
.latest-row { display: flex; justify-content: space-between; padding: 10px 0; border-bottom: 1px solid var(--line); }
.latest-name { font-weight: 600; }
.latest-email { font-size: 13px; color: var(--muted); }
.latest-amount { font-weight: 600; font-variant-numeric: tabular-nums; }
"""


def theme_css() -> str:
    variables = "".join(f"{name}: {THEME[key]};" for key, name in _CSS_VARS.items())
    return f"<style>:root {{ {variables} --radius: {THEME['radius_px']}px; }}{_RULES}</style>"


def apply_theme() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="wide", initial_sidebar_state="expanded")
    st.markdown(theme_css(), unsafe_allow_html=True)
