from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Mapping
import logging
import xml.etree.ElementTree as ET

from .models import SiteConfig
from .routing import get_app_url, resolve_route

logger = logging.getLogger(__name__)

ROBOTS_INTEGRATION = "robots-txt"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"
# The urlset referenced by the sitemap index.
SITEMAP_PAGE_NAME = "sitemap-0.xml"


def static_url(config: SiteConfig, name: str) -> str:
    """Public URL of a file written to static/."""
    prefix = config.static_url_path.strip("/")
    return "/".join(part for part in (config.site, prefix, name) if part)


def sitemap_url(config: SiteConfig) -> str | None:
    sitemap = config.robots.sitemap
    if sitemap is False:
        return None
    if isinstance(sitemap, str):
        return sitemap
    return static_url(config, config.robots.sitemap_name)


def build_robots_txt(config: SiteConfig) -> str:
    """Renders robots.txt: one block per policy, then the Sitemap line."""
    blocks: List[str] = []
    for policy in config.robots.policy:
        lines = [f"User-agent: {policy.user_agent}"]
        lines.extend(f"Allow: {path}" for path in policy.allow)
        lines.extend(f"Disallow: {path}" for path in policy.disallow)
        if policy.crawl_delay is not None:
            lines.append(f"Crawl-delay: {policy.crawl_delay}")
        blocks.append("\n".join(lines))

    url = sitemap_url(config)
    if url:
        blocks.append(f"Sitemap: {url}")
    return "\n\n".join(blocks) + "\n"


def _serving_locales(config: SiteConfig, page_id: str, available: Iterable[str]) -> List[str]:
    """Locales whose URL answers with content (directly or via a rewrite) for the page."""
    available = list(available)
    serving = []
    for locale in config.i18n.locales:
        resolution = resolve_route(locale, page_id, available, config.i18n)
        if resolution and resolution.redirect_to is None:
            serving.append(locale)
    return serving


def build_sitemap(config: SiteConfig, pages: Mapping[str, Iterable[str]]) -> str:
    """
    Renders a <urlset> with one <url> per (page, locale) that serves content.
    Locations are the query-string URLs the app answers, not the path-style ones.
    Each entry lists its sibling translations as hreflang alternates.
    """
    ET.register_namespace("", SITEMAP_NS)
    ET.register_namespace("xhtml", XHTML_NS)
    urlset = ET.Element(f"{{{SITEMAP_NS}}}urlset")

    for page_id in sorted(pages):
        locales = _serving_locales(config, page_id, pages[page_id])
        for locale in locales:
            url = ET.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
            ET.SubElement(url, f"{{{SITEMAP_NS}}}loc").text = get_app_url(locale, page_id, config)
            if len(locales) > 1:
                for alternate in locales:
                    ET.SubElement(url, f"{{{XHTML_NS}}}link", {
                        "rel": "alternate",
                        "hreflang": alternate,
                        "href": get_app_url(alternate, page_id, config),
                    })

    ET.indent(urlset)
    return ET.tostring(urlset, encoding="unicode", xml_declaration=True) + "\n"


def build_sitemap_index(config: SiteConfig) -> str:
    ET.register_namespace("", SITEMAP_NS)
    index = ET.Element(f"{{{SITEMAP_NS}}}sitemapindex")
    entry = ET.SubElement(index, f"{{{SITEMAP_NS}}}sitemap")
    ET.SubElement(entry, f"{{{SITEMAP_NS}}}loc").text = static_url(config, SITEMAP_PAGE_NAME)
    ET.indent(index)
    return ET.tostring(index, encoding="unicode", xml_declaration=True) + "\n"


def write_seo_files(config: SiteConfig, pages: Mapping[str, Iterable[str]], out_dir: Path) -> List[Path]:
    """Writes robots.txt (if the integration is enabled) and the sitemap files into out_dir."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    if config.has_integration(ROBOTS_INTEGRATION):
        robots_path = out_dir / "robots.txt"
        robots_path.write_text(build_robots_txt(config), encoding="utf-8")
        written.append(robots_path)
    else:
        logger.info("'%s' integration disabled, skipping robots.txt", ROBOTS_INTEGRATION)

    if config.robots.sitemap is True:
        index_path = out_dir / config.robots.sitemap_name
        index_path.write_text(build_sitemap_index(config), encoding="utf-8")
        pages_path = out_dir / SITEMAP_PAGE_NAME
        pages_path.write_text(build_sitemap(config, pages), encoding="utf-8")
        written.extend([index_path, pages_path])

    logger.info("Wrote %d SEO file(s) to %s", len(written), out_dir)
    return written
