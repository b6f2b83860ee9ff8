from __future__ import annotations
from typing import List
import html
import logging

import streamlit as st

from devsite.core.models import BadgeItem, I18nConfig
from devsite.core.routing import RouteResolution
from devsite.core.i18n import get_translator
from devsite.core.utils import load_image, secure_path_resolve, is_remote_url
from devsite.core.constants import ASSETS_DIR, HOME_PAGE_ID

logger = logging.getLogger(__name__)

BADGE_COLUMNS = 4


def render_markdown_page(content: str, resolution: RouteResolution, lang: str, i18n: I18nConfig):
    """Renders a markdown page, noting when the text comes from a fallback locale."""
    if resolution.is_fallback:
        st.info(get_translator(lang, i18n=i18n)("ui.fallback-notice"))
    st.markdown(content, unsafe_allow_html=True)


def _badge_image(image: str):
    """Returns something st.image accepts, or None when a local asset cannot be resolved."""
    if is_remote_url(image):
        return image
    try:
        return load_image(secure_path_resolve(ASSETS_DIR, image))
    except (ValueError, FileNotFoundError) as e:
        logger.warning("Could not resolve badge image '%s': %s", image, e)
        return None


def _render_badge_card(badge: BadgeItem, lang: str, i18n: I18nConfig):
    _ = get_translator(lang, i18n=i18n)
    image = _badge_image(badge.image)
    if image is not None:
        st.image(image, width="stretch")
    st.markdown(f"**{html.escape(badge.label)}**")
    if badge.link:
        st.markdown(f"[{_('badges.verify')}]({badge.link})")


def render_badges_page(badges: List[BadgeItem], lang: str, i18n: I18nConfig):
    """Renders the badges grid; order follows badges.yaml."""
    _ = get_translator(lang, i18n=i18n)
    st.header(_("badges.heading"))

    if not badges:
        st.caption(_("badges.empty"))
        return

    rows = [badges[i:i + BADGE_COLUMNS] for i in range(0, len(badges), BADGE_COLUMNS)]
    for row_badges in rows:
        cols = st.columns(BADGE_COLUMNS)
        for i, badge in enumerate(row_badges):
            with cols[i]:
                _render_badge_card(badge, lang, i18n)


def render_not_found_page(lang: str, i18n: I18nConfig):
    """Renders the 404 page entirely from the not-found.* dictionary."""
    _ = get_translator(lang, i18n=i18n)
    safe = lambda key: html.escape(_(key))

    home_href = f"?page={HOME_PAGE_ID}&lang={lang}"

    st.markdown(
        "<div class=\"not-found\">"
        "<p class=\"not-found-code\">404</p>"
        f"<h2>{safe('not-found.heading')}</h2>"
        f"<p class=\"caption\">{safe('not-found.description')}</p>"
        f"<p>{safe('not-found.message')}</p>"
        "<div class=\"not-found-actions\">"
        f"<a href=\"{home_href}\" target=\"_self\" class=\"button-primary\">{safe('not-found.home-button')}</a>"
        f"<a href=\"javascript:history.back()\" target=\"_self\" class=\"button-secondary\">{safe('not-found.back-button')}</a>"
        "</div>"
        f"<blockquote>{safe('not-found.quote')}</blockquote>"
        "</div>",
        unsafe_allow_html=True,
    )
