# devsite/view/components.py

from __future__ import annotations
from typing import Dict, List, Optional

import streamlit as st

from devsite.core.models import SiteConfig, I18nConfig
from devsite.core.state import AppState
from devsite.core.i18n import t
from devsite.core.languages import get_language_label
from devsite.core.constants import HOME_PAGE_ID, BADGES_PAGE_ID


def render_header(site_config: SiteConfig, lang: str):
    """Renders the page header with the site name, tagline and social links."""
    left, right = st.columns([2, 1])
    with left:
        st.title(f"{site_config.branding.page_icon} {site_config.site_name}")
        if site_config.tagline:
            st.caption(site_config.tagline)

    with right:
        links = []
        if site_config.social.github:
            links.append(f"[GitHub]({site_config.social.github})")
        if site_config.social.linkedin:
            links.append(f"[LinkedIn]({site_config.social.linkedin})")
        if site_config.email:
            links.append(f"[Email](mailto:{site_config.email})")

        if links:
            st.write(" &nbsp;•&nbsp; ".join(links))


def render_footer(site_config: SiteConfig, lang: str):
    """Renders the page footer."""
    st.write("---")
    st.caption(f"© {site_config.author or site_config.site_name} · {t('ui.footer', lang, i18n=site_config.i18n)}")


def render_language_switcher(site_config: SiteConfig, current_lang: str) -> str:
    """Renders the language selection dropdown next to the current locale's flag."""
    codes = list(site_config.i18n.locales)
    if len(codes) <= 1:
        return current_lang

    labels = []
    for code in codes:
        entry = get_language_label(code)
        labels.append(entry.label if entry else code)

    try:
        current_idx = codes.index(current_lang)
    except ValueError:
        current_idx = 0

    col1, col2 = st.sidebar.columns([1, 4])

    with col1:
        entry = get_language_label(current_lang)
        if entry:
            st.markdown(
                f'<div style="height: 38px; display: flex; align-items: center; justify-content: center;">'
                f'<img src="https://flagcdn.com/24x18/{entry.flag}.png">'
                f'</div>',
                unsafe_allow_html=True
            )

    with col2:
        selected_label = st.selectbox(
            label=t("ui.language", current_lang, i18n=site_config.i18n),
            options=labels,
            index=current_idx,
            label_visibility="collapsed"
        )

    return codes[labels.index(selected_label)]


def page_options(page_ids: List[str], lang: str, i18n: Optional[I18nConfig] = None) -> Dict[str, str]:
    """Navigation entries (page id -> translated title); home first, badges last."""
    ordered = [HOME_PAGE_ID] + sorted(p for p in page_ids if p not in (HOME_PAGE_ID, BADGES_PAGE_ID))
    ordered.append(BADGES_PAGE_ID)
    return {page_id: t(f"pages.{page_id}", lang, default=page_id.replace("-", " ").title(), i18n=i18n) for page_id in ordered}


def render_sidebar_navigation(page_ids: List[str], site_config: SiteConfig, state: AppState) -> AppState:
    """Renders the sidebar (language switcher + page list) and returns the updated state."""
    st.sidebar.header(t("ui.navigation", state.language, i18n=site_config.i18n))

    new_lang = render_language_switcher(site_config, state.language)
    if new_lang != state.language:
        state.set_language(new_lang)

    options = page_options(page_ids, state.language, site_config.i18n)
    # Unknown page ids stay selected so the 404 page renders, the radio just shows home.
    keys = list(options.keys())
    index = keys.index(state.page_id) if state.page_id in options else 0

    selected = st.sidebar.radio(
        label=t("ui.page", state.language, i18n=site_config.i18n),
        options=keys,
        index=index,
        format_func=lambda page_id: options.get(page_id, page_id),
    )
    if state.page_id in options or selected != keys[index]:
        state.page_id = selected

    return state
