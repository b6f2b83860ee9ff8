from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Dict
import logging

import streamlit as st
from pydantic import ValidationError

from .models import SiteConfig, I18nConfig, BadgeItem, BadgesByLanguage
from .routing import fallback_chain
from .utils import read_text_file, read_yaml_file, secure_path_resolve
from .constants import SITE_CONFIG_PATH, BADGES_PATH, PAGES_DIR

logger = logging.getLogger(__name__)


# --- Configuration Loading ---

@st.cache_data(show_spinner=False)
def load_site_config(config_path: Path = SITE_CONFIG_PATH) -> SiteConfig:
    """Loads the main site configuration from site.yaml."""
    if not config_path.exists():
        logger.error("%s not found, using default SiteConfig.", config_path.name)
        return SiteConfig()

    data = read_yaml_file(config_path)
    # Keyword init (not model_validate) so the APP_* environment source is consulted, and wins.
    return SiteConfig(**data)


# --- Badge Loading ---

@st.cache_data(show_spinner=False)
def load_badges(badges_path: Path = BADGES_PATH) -> BadgesByLanguage:
    """
    Reads badges.yaml ({lang: [ {label, image, link?}, ... ]}) into BadgesByLanguage.
    Invalid entries are logged and skipped; the rest keep their declaration order.
    """
    if not badges_path.exists():
        logger.warning("Badges file not found: %s", badges_path)
        return {}

    raw = read_yaml_file(badges_path)
    badges: BadgesByLanguage = {}

    for lang, entries in raw.items():
        lang = str(lang)
        if not isinstance(entries, list):
            logger.error("Badges for '%s' must be a list, got %s; skipping.", lang, type(entries).__name__)
            continue

        items: List[BadgeItem] = []
        for position, entry in enumerate(entries):
            try:
                items.append(BadgeItem.model_validate(entry))
            except ValidationError:
                logger.error("Invalid badge #%d for '%s'", position, lang, exc_info=True)
        badges[lang] = items

    logger.info("Loaded %d badge(s) across %d language(s).", sum(len(v) for v in badges.values()), len(badges))
    return badges

def get_badges(badges: BadgesByLanguage, lang: str, i18n: Optional[I18nConfig] = None) -> List[BadgeItem]:
    """Badges for `lang`, or for the first fallback locale that declares any."""
    config = i18n or I18nConfig()
    for candidate in [lang] + fallback_chain(lang, config):
        if badges.get(candidate):
            return list(badges[candidate])
    return []


# --- Page Content ---

def scan_pages(pages_dir: Path = PAGES_DIR) -> Dict[str, List[str]]:
    """Maps page ids to the locales that have a `<page>.<lang>.md` file."""
    pages: Dict[str, List[str]] = {}
    if not pages_dir.exists():
        logger.warning("Pages directory not found: %s", pages_dir)
        return pages

    for path in sorted(pages_dir.glob("*.md")):
        stem_parts = path.name.split(".")
        if len(stem_parts) != 3:
            logger.debug("Ignoring page file without a locale suffix: %s", path.name)
            continue
        page_id, lang, _ = stem_parts
        pages.setdefault(page_id, []).append(lang)
    return pages

def get_page_content(page_id: str, lang: str, pages_dir: Path = PAGES_DIR) -> Optional[str]:
    """Returns the markdown for a page in exactly `lang`, or None if that file does not exist."""
    try:
        path = secure_path_resolve(pages_dir, f"{page_id}.{lang}.md")
    except (ValueError, FileNotFoundError):
        return None
    return read_text_file(path)
