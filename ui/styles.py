# ui/styles.py
import streamlit as st

from ui.theme import COLORS, TYPE, LAYOUT


def inject_global_styles() -> None:
    """
    Dark LeadScale base styling:
    - App background + typography
    - Max width container
    - Page header / section titles
    - Scrollbar for the ranked list
    """
    st.markdown(
        f"""
<style>
/* ---------- App base ---------- */
.stApp {{
  background: {COLORS.app_bg};
  color: {COLORS.text_body};
  font-family: {TYPE.font_family};
}}

.block-container {{
  max-width: {LAYOUT.max_width_px}px;
  padding-left: 2rem;
  padding-right: 2rem;
}}

/* ---------- Header ---------- */
.ls-header {{
  display: flex;
  align-items: center;
  gap: 12px;
  padding-bottom: 24px;
  margin-bottom: 24px;
  border-bottom: 1px solid {COLORS.border};
}}

.ls-logo {{
  width: 48px;
  height: 48px;
  border-radius: 12px;
  background: linear-gradient(135deg, {COLORS.accent}, #6B21A8);
  color: #FFFFFF;
  font-weight: 900;
  font-size: 20px;
  display: flex;
  align-items: center;
  justify-content: center;
}}

.ls-h1 {{
  margin: 0;
  font-size: {TYPE.h1_size}px;
  font-weight: {TYPE.h1_weight};
  color: {COLORS.text_h1};
}}

.ls-section-title {{
  font-size: {TYPE.section_size}px;
  font-weight: {TYPE.section_weight};
  letter-spacing: {TYPE.section_letter_spacing};
  text-transform: uppercase;
  color: {COLORS.accent_soft};
  margin: 0 0 16px 0;
}}

.ls-empty {{
  color: #6B7280;
  text-align: center;
  padding: 48px 0;
}}

/* ---------- Scrollbar ---------- */
.ls-scroll::-webkit-scrollbar {{ width: 6px; }}
.ls-scroll::-webkit-scrollbar-track {{ background: #1A1A1A; border-radius: 10px; }}
.ls-scroll::-webkit-scrollbar-thumb {{ background: {COLORS.accent}; border-radius: 10px; }}
</style>
        """,
        unsafe_allow_html=True,
    )


def render_page_header(title: str = "LEADSCALE", logo_letter: str = "L") -> None:
    st.markdown(
        f'<div class="ls-header"><div class="ls-logo">{logo_letter}</div>'
        f'<h1 class="ls-h1">{title}</h1></div>',
        unsafe_allow_html=True,
    )


def section_title(text: str) -> None:
    st.markdown(f'<div class="ls-section-title">{text}</div>', unsafe_allow_html=True)


def empty_placeholder(text: str) -> None:
    st.markdown(f'<div class="ls-empty">{text}</div>', unsafe_allow_html=True)
