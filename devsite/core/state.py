# devsite/core/state.py

from __future__ import annotations
import streamlit as st
from pydantic import BaseModel

from .constants import HOME_PAGE_ID, DEFAULT_LANGUAGE
from .models import I18nConfig


class AppState(BaseModel):
    """
    Request-scoped state: which page is shown and in which language.
    Mirrors the `lang` / `page` query parameters so every view is linkable.
    """

    language: str = DEFAULT_LANGUAGE
    page_id: str = HOME_PAGE_ID

    @classmethod
    def from_streamlit(cls, i18n: I18nConfig) -> AppState:
        """
        Builds the state from Streamlit's query and session state.
        Call once at the beginning of each script run.
        """
        # Priority: Query Param > Session State > Default
        requested = _get_query_param("lang") or st.session_state.get("lang", i18n.default_locale)
        page_id = _get_query_param("page", default=HOME_PAGE_ID)

        st.session_state["lang"] = normalize_locale(requested, i18n)
        return cls(language=st.session_state["lang"], page_id=page_id)

    def apply_to_streamlit(self) -> None:
        """Writes the state back to the query parameters so the URL reflects it."""
        _set_query_param("lang", self.language)
        _set_query_param("page", self.page_id)
        st.session_state["lang"] = self.language

    def set_language(self, lang_code: str):
        self.language = lang_code


def normalize_locale(code: str, i18n: I18nConfig) -> str:
    """Lower-cases a locale code and replaces unsupported ones with the default locale."""
    candidate = (code or "").strip().lower()
    return candidate if i18n.is_supported(candidate) else i18n.default_locale

# --- Helper functions to interact with Streamlit's query params ---
def _get_query_param(name: str, default: str = "") -> str:
    """A robust way to get a single query parameter."""
    params = st.query_params
    value = params.get(name)
    if isinstance(value, list):
        return str(value[0]) if value else default
    return str(value) if value is not None else default

def _set_query_param(name: str, value: str):
    """Sets a query parameter."""
    st.query_params[name] = value
