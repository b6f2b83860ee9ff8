"""
Locale-aware URL rules for the site.

URLs look like `/about` for the default locale and `/en/about` for the others
(unless `prefix_default_locale` is set). Pages missing in a locale are served
from its fallback locale, either under the requested URL ("rewrite") or by
redirecting to the fallback locale's URL ("redirect").
"""
from __future__ import annotations
from typing import Iterable, List, Optional
from urllib.parse import urlencode

from pydantic import BaseModel

from .models import I18nConfig, SiteConfig
from .constants import HOME_PAGE_ID


class RouteResolution(BaseModel):
    requested_locale: str
    content_locale: str
    page_id: str
    # URL the visitor ends up seeing.
    url: str
    # Set only for fallback_type == "redirect".
    redirect_to: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.content_locale != self.requested_locale


def page_path(page_id: str) -> str:
    """The landing page lives at the locale root, every other page under its id."""
    return "" if page_id == HOME_PAGE_ID else page_id


def _segments(path: str) -> List[str]:
    return [part for part in (path or "").split("/") if part]


def get_locale_from_path(path: str, i18n: I18nConfig) -> str:
    """Returns the locale named by the first path segment, or the default locale."""
    segments = _segments(path)
    if segments and i18n.is_supported(segments[0].lower()):
        return segments[0].lower()
    return i18n.default_locale


def strip_locale(path: str, i18n: I18nConfig) -> str:
    """Removes a leading locale segment: '/en/about' -> 'about'."""
    segments = _segments(path)
    if segments and i18n.is_supported(segments[0].lower()):
        segments = segments[1:]
    return "/".join(segments)


def get_relative_locale_url(locale: str, path: str, i18n: I18nConfig) -> str:
    if not i18n.is_supported(locale):
        raise ValueError(f"Unsupported locale '{locale}', expected one of {i18n.locales}")

    segments = _segments(path)
    if locale != i18n.default_locale or i18n.routing.prefix_default_locale:
        segments.insert(0, locale)
    return "/" + "/".join(segments)


def get_absolute_locale_url(locale: str, path: str, config: SiteConfig) -> str:
    return config.site + get_relative_locale_url(locale, path, config.i18n)


def get_app_url(locale: str, page_id: str, config: SiteConfig) -> str:
    """
    URL the Streamlit app actually answers for a page: `?page=<id>&lang=<locale>`.
    Follows the same rules as the path URLs: the home page and the default
    locale (unless prefixed) add no parameter.
    """
    i18n = config.i18n
    if not i18n.is_supported(locale):
        raise ValueError(f"Unsupported locale '{locale}', expected one of {i18n.locales}")

    params = {}
    if page_id != HOME_PAGE_ID:
        params["page"] = page_id
    if locale != i18n.default_locale or i18n.routing.prefix_default_locale:
        params["lang"] = locale
    query = urlencode(params)
    return f"{config.site}/" + (f"?{query}" if query else "")


def fallback_chain(locale: str, i18n: I18nConfig) -> List[str]:
    """Follows the fallback map from `locale`: en -> es -> ... Stops at the first repeat."""
    chain: List[str] = []
    seen = {locale}
    current = i18n.fallback.get(locale)
    while current and current not in seen:
        chain.append(current)
        seen.add(current)
        current = i18n.fallback.get(current)
    return chain


def resolve_route(
    locale: str,
    page_id: str,
    available_locales: Iterable[str],
    i18n: I18nConfig,
) -> Optional[RouteResolution]:
    """
    Decides which locale's content answers a request for `page_id` in `locale`.
    Returns None when neither the locale nor any of its fallbacks has the page.
    """
    if not i18n.is_supported(locale):
        return None

    available = set(available_locales)
    requested_url = get_relative_locale_url(locale, page_path(page_id), i18n)

    for candidate in [locale] + fallback_chain(locale, i18n):
        if candidate not in available:
            continue
        if candidate == locale or i18n.routing.fallback_type == "rewrite":
            return RouteResolution(
                requested_locale=locale,
                content_locale=candidate,
                page_id=page_id,
                url=requested_url,
            )
        target = get_relative_locale_url(candidate, page_path(page_id), i18n)
        return RouteResolution(
            requested_locale=locale,
            content_locale=candidate,
            page_id=page_id,
            url=target,
            redirect_to=target,
        )
    return None
