import streamlit as st
import logging

from devsite.core.state import AppState
from devsite.core.services import load_site_config, load_badges, get_badges, scan_pages, get_page_content
from devsite.core.routing import resolve_route, get_app_url, RouteResolution
from devsite.core.i18n import t
from devsite.core.constants import ASSETS_DIR, BADGES_PAGE_ID
from devsite.core.utils import read_text_file
from devsite.view.components import render_header, render_footer, render_sidebar_navigation
from devsite.view.presentation import render_markdown_page, render_badges_page, render_not_found_page

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

def apply_global_styles(stylesheets):
    """Reads and injects the configured stylesheets, in order."""
    for name in stylesheets:
        try:
            css = read_text_file(ASSETS_DIR / name)
        except FileNotFoundError:
            logging.warning("assets/%s not found. Its styles will not be applied.", name)
            continue
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)

def main():
    """
    The main execution flow of the Streamlit application.
    """
    # --- 1. Initial Setup ---
    site_config = load_site_config()
    i18n = site_config.i18n

    # --- 2. State Initialization ---
    state = AppState.from_streamlit(i18n)

    # --- 3. Route Resolution ---
    # Resolved before set_page_config, which has to know whether this is the 404 page.
    pages = scan_pages()
    resolution = None
    if state.page_id == BADGES_PAGE_ID:
        resolution = RouteResolution(
            requested_locale=state.language,
            content_locale=state.language,
            page_id=BADGES_PAGE_ID,
            url=get_app_url(state.language, BADGES_PAGE_ID, site_config),
        )
    elif state.page_id in pages:
        resolution = resolve_route(state.language, state.page_id, pages[state.page_id], i18n)

    if resolution and resolution.redirect_to:
        # Redirect fallback: switch the visitor to the locale that has the page.
        state.set_language(resolution.content_locale)
        state.apply_to_streamlit()
        st.rerun()

    page_title = site_config.site_name if resolution else t("not-found.title", state.language, i18n=i18n)
    st.set_page_config(
        page_title=page_title,
        page_icon=site_config.branding.page_icon or "💻",
        layout="wide",
    )
    apply_global_styles(site_config.styles)

    # --- 4. Sidebar Rendering and State Update ---
    original_state = state.model_copy(deep=True)
    render_sidebar_navigation(list(pages), site_config, state)

    # --- 5. State Reconciliation and Rerun ---
    if state != original_state:
        state.apply_to_streamlit()
        st.rerun()

    # --- 6. Main Content Rendering ---
    render_header(site_config, state.language)

    if resolution is None:
        render_not_found_page(state.language, i18n)
    elif resolution.page_id == BADGES_PAGE_ID:
        render_badges_page(get_badges(load_badges(), state.language, i18n), state.language, i18n)
    else:
        content = get_page_content(resolution.page_id, resolution.content_locale) or ""
        render_markdown_page(content, resolution, state.language, i18n)

    # --- 7. Footer ---
    render_footer(site_config, state.language)


if __name__ == "__main__":
    main()
