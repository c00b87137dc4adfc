"""
Showroom Theme - fixed palette plus CSS generated from the live display settings.

Color Philosophy:
- Primary and secondary colors come from the remote settings
- Danger and muted colors are fixed
- Font family, base size and dashboard background follow the settings
"""

from __future__ import annotations

from catalogue.shared.domain.models import DisplaySettings

# =============================================================================
# FIXED COLORS
# =============================================================================
DANGER_RED = "#d9534f"         # Delete, clear-all, danger zone header
MUTED_GRAY = "#6c757d"         # Cancel buttons
TEXT_DARK = "#333"             # Titles
TEXT_BODY = "#555"             # Descriptions
BG_APP = "#f4f6f8"             # Page background
BG_CARD = "#fff"               # Product cards, settings sections
OVERLAY_DARK = "rgba(0, 0, 0, 0.5)"     # Dashboard background dimming
OVERLAY_LOGIN = "rgba(0, 0, 0, 0.6)"    # Login background dimming

_CSS_UNSAFE = str.maketrans("", "", "<>;{}")
_URL_UNSAFE = {
    ord('"'): "%22",
    ord("<"): "%3C",
    ord(">"): "%3E",
    ord("\\"): "%5C",
    ord("\n"): None,
    ord("\r"): None,
}
_MARKDOWN_SPECIAL = set("\\`*_{}[]()#+-.!|~<>$:")


def css_value(text: str) -> str:
    """Settings text usable as a single CSS declaration value."""
    return text.translate(_CSS_UNSAFE).strip()


def markdown_text(text: str) -> str:
    """Backslash-escape Markdown syntax so ``st.markdown`` shows the text verbatim."""
    return "".join(f"\\{char}" if char in _MARKDOWN_SPECIAL else char for char in text)


def background_css(url: str, overlay: str = OVERLAY_DARK) -> str:
    """CSS background value with a dimming gradient over an image."""
    safe_url = url.translate(_URL_UNSAFE)
    return f'linear-gradient({overlay}, {overlay}), url("{safe_url}")'


def build_css(settings: DisplaySettings, with_background: bool = False) -> str:
    """Stylesheet for the Streamlit page derived from the display settings."""
    size = settings.base_font_size_px
    font_family = css_value(settings.font_family)
    primary = css_value(settings.primary_color)
    secondary = css_value(settings.secondary_color)
    rules = [
        f"""
html, body, [class*="css"], .stApp {{
    font-family: {font_family};
    font-size: {size:g}px;
}}
.stApp h1, .stApp h2, .stApp h3 {{
    color: {TEXT_DARK};
}}
div.stButton > button[kind="primary"] {{
    background-color: {primary};
    border-color: {primary};
    color: #fff;
}}
.catalogue-price {{
    color: {secondary};
    font-weight: bold;
    font-size: {size * 0.875:g}px;
}}
.catalogue-detail-price {{
    color: {secondary};
    font-weight: bold;
    font-size: {size * 1.5:g}px;
    text-align: center;
}}
.catalogue-product-name {{
    font-weight: 600;
    color: {TEXT_DARK};
    margin: 0 0 5px 0;
}}
.catalogue-description {{
    color: {TEXT_BODY};
    line-height: 1.6;
    text-align: center;
}}
.catalogue-danger {{
    color: {DANGER_RED};
}}
"""
    ]
    if with_background:
        rules.append(
            f"""
.stApp {{
    background-image: {background_css(settings.background_url)};
    background-size: cover;
    background-position: center;
}}
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label {{
    color: #fff;
}}
"""
        )
    return "<style>" + "".join(rules) + "</style>"


def login_css(background_url: str) -> str:
    return f"""<style>
.stApp {{
    background-image: {background_css(background_url, OVERLAY_LOGIN)};
    background-size: cover;
    background-position: center;
}}
.stApp h1, .stApp p, .stApp label {{
    color: #fff;
}}
</style>"""
