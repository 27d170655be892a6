# ui/theme.py
from dataclasses import dataclass

@dataclass(frozen=True)
class Colors:
    # Base / Layout
    app_bg: str = "#000000"
    card_bg: str = "rgba(255,255,255,0.05)"
    card_bg_dark: str = "rgba(0,0,0,0.4)"
    border: str = "#1F2937"
    border_strong: str = "#374151"

    # Brand
    accent: str = "#7C3AED"        # bars, borders on hover
    accent_soft: str = "#A78BFA"   # lead bars, RA/RR figures
    accent_text: str = "#C4B5FD"

    # Text hierarchy
    text_h1: str = "#FFFFFF"
    text_body: str = "#E5E5E5"
    text_muted: str = "#9CA3AF"

    # Alerts
    alert: str = "#EF4444"
    alert_text: str = "#F87171"
    alert_bg: str = "rgba(127,29,29,0.3)"

@dataclass(frozen=True)
class Typography:
    font_family: str = "Inter, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif"

    h1_size: int = 24
    h1_weight: int = 900

    section_size: int = 12
    section_weight: int = 900
    section_letter_spacing: str = "0.12em"

    kpi_label_size: int = 10
    kpi_value_size: int = 24

    card_title_size: int = 11
    card_body_size: int = 10

@dataclass(frozen=True)
class Layout:
    max_width_px: int = 1280
    card_radius_px: int = 24
    client_card_radius_px: int = 16
    ranking_height_px: int = 720

COLORS = Colors()
TYPE = Typography()
LAYOUT = Layout()
