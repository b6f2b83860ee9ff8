"""Bilingual portfolio site for devsandoval.me, served with Streamlit."""

__version__ = "1.0.0"
