# ui/streamlit_cards.py
import streamlit as st

from ui.theme import COLORS, TYPE, LAYOUT


def inject_card_css() -> None:
    st.markdown(
        f"""
<style>
/* --- Summary KPI cards --- */
.ls-kpi-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
  gap: 16px;
  margin-bottom: 24px;
}}

.ls-kpi {{
  background: {COLORS.card_bg};
  border: 2px solid {COLORS.border};
  border-radius: {LAYOUT.card_radius_px}px;
  padding: 20px;
  text-align: center;
}}

.ls-kpi:hover {{ border-color: {COLORS.accent}; }}

.ls-kpi-alert {{
  background: {COLORS.alert_bg};
  border-color: {COLORS.alert};
}}

.ls-kpi-label {{
  font-size: {TYPE.kpi_label_size}px;
  font-weight: 900;
  letter-spacing: 0.12em;
  text-transform: uppercase;
  color: {COLORS.accent_soft};
  margin: 0 0 8px 0;
}}

.ls-kpi-value {{
  font-size: {TYPE.kpi_value_size}px;
  font-weight: 900;
  font-style: italic;
  color: {COLORS.text_h1};
  margin: 0;
}}

.ls-kpi-value-accent {{ color: {COLORS.accent_soft}; }}
.ls-kpi-value-alert {{ color: {COLORS.alert}; }}

/* --- Ranked client cards --- */
.ls-ranking {{
  max-height: {LAYOUT.ranking_height_px}px;
  overflow-y: auto;
  padding-right: 8px;
}}

.ls-client {{
  background: {COLORS.card_bg_dark};
  border: 2px solid {COLORS.border_strong};
  border-radius: {LAYOUT.client_card_radius_px}px;
  padding: 16px;
  margin-bottom: 12px;
}}

.ls-client:hover {{ border-color: {COLORS.accent}; }}

.ls-client-alert {{
  background: {COLORS.alert_bg};
  border-color: {COLORS.alert};
}}

.ls-client-title {{
  display: flex;
  justify-content: space-between;
  font-size: {TYPE.card_title_size}px;
  font-weight: 900;
  text-transform: uppercase;
  color: {COLORS.text_h1};
  margin-bottom: 12px;
}}

.ls-client-row {{
  display: flex;
  justify-content: space-between;
  font-size: {TYPE.card_body_size}px;
  font-weight: 700;
  color: {COLORS.text_muted};
  margin-bottom: 6px;
}}

.ls-client-rr {{ color: {COLORS.accent_text}; }}
.ls-red {{ color: {COLORS.alert_text} !important; }}

.ls-client-foot {{
  font-size: 9px;
  color: #6B7280;
  border-top: 1px solid {COLORS.border};
  padding-top: 8px;
  margin-top: 8px;
}}
</style>
        """,
        unsafe_allow_html=True,
    )
