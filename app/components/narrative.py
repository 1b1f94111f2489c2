from __future__ import annotations

import streamlit as st


def render_tab_intro(question: str, context: str | None = None) -> None:
    """Page heading: the question the page answers plus optional one-line context."""
    st.markdown(
        f"""
<div class="tab-intro">
  <div class="tab-intro-question">{question}</div>
  {f'<div class="tab-intro-context">{context}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )
