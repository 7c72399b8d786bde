from typing import Dict, List

import streamlit as st

WOOD_COLORS: Dict[str, str] = {
    "dark": "#4E342E",
    "light": "#8D6E63",
    "cream": "#EFEBE9",
    "walnut": "#6D4C41",
    "coffee": "#5D4037",
    "darkest": "#3E2723",
}

FONT_FAMILIES: Dict[str, List[str]] = {
    "heading": ["Poppins", "Montserrat", "sans-serif"],
    "body": ["Roboto", "Open Sans", "sans-serif"],
}

def color(name: str) -> str:
    """Return the hex value of a palette entry; unknown names raise ``KeyError``."""
    return WOOD_COLORS[name]


def _font_stack(role: str) -> str:
    return ", ".join(
        f"'{family}'" if " " in family else family for family in FONT_FAMILIES[role]
    )


def build_css() -> str:
    """Return the page stylesheet built from the palette and font families."""
    variables = "\n".join(
        f"  --wood-{name}: {value};" for name, value in WOOD_COLORS.items()
    )
    return f"""
:root {{
{variables}
}}
html, body, [class*="css"] {{
  font-family: {_font_stack("body")};
  color: var(--wood-darkest);
}}
h1, h2, h3, h4 {{
  font-family: {_font_stack("heading")};
  color: var(--wood-dark);
}}
section[data-testid="stSidebar"] {{
  background-color: var(--wood-cream);
}}
"""


def load_css() -> None:
    st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)
