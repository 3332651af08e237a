import streamlit as st

from domain.constants import CARD_HEIGHT, CONTENT_PADDING

SURFACE_BG = "#FFFFFF"
LABEL_BORDER = "rgba(0,0,0,0.2)"
PRIMARY_ACCENT = "#6200EE"  # matches .streamlit/config.toml primaryColor
RED = "#B00020"
CARD_RADIUS = 8


def inject_base_css():
    """Card, label and spinner styles. Call once per script run."""
    st.markdown(
        f"""
        <style>
        .block-container {{padding:{CONTENT_PADDING}px;}}
        .pet-card {{
            position:relative; width:100%; height:{CARD_HEIGHT}px; overflow:hidden;
            border-radius:{CARD_RADIUS}px; background:{SURFACE_BG};
            box-shadow:0 2px 4px rgba(0,0,0,.2), 0 4px 8px rgba(0,0,0,.12);
        }}
        .pet-card img.pet-image {{width:100%; height:100%; object-fit:cover; display:block;}}
        .pet-card .pet-center {{
            position:absolute; inset:0; display:flex; align-items:center; justify-content:center;
        }}
        .pet-spinner {{
            width:40px; height:40px; border-radius:50%;
            border:4px solid rgba(0,0,0,.1); border-top-color:{PRIMARY_ACCENT};
            animation:pet-spin 1s linear infinite;
        }}
        @keyframes pet-spin {{to {{transform:rotate(360deg);}}}}
        .pet-error {{font-size:24px; color:{RED};}}
        .pet-label {{
            position:absolute; left:0; right:0; bottom:0; padding:16px;
            background:{SURFACE_BG}; color:#000;
            border:1px solid {LABEL_BORDER}; border-top:none;
            border-radius:0 0 {CARD_RADIUS}px {CARD_RADIUS}px;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )
