from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Mapping

from ..languages import Language
from .not_found import NOT_FOUND_TRANSLATIONS
from .ui import UI_TRANSLATIONS

Dictionary = Mapping[Language, Mapping[str, str]]

# Every page dictionary registered here is merged into TRANSLATIONS.
PAGE_DICTIONARIES = (NOT_FOUND_TRANSLATIONS, UI_TRANSLATIONS)


def merge_dictionaries(*dictionaries: Dictionary) -> Dictionary:
    """Merges page dictionaries into one read-only table per language. Later keys win."""
    merged: Dict[Language, Dict[str, str]] = {lang: {} for lang in Language}
    for dictionary in dictionaries:
        for lang, entries in dictionary.items():
            merged.setdefault(Language(lang), {}).update(entries)
    return MappingProxyType({lang: MappingProxyType(entries) for lang, entries in merged.items()})


TRANSLATIONS = merge_dictionaries(*PAGE_DICTIONARIES)

__all__ = ["TRANSLATIONS", "NOT_FOUND_TRANSLATIONS", "UI_TRANSLATIONS", "merge_dictionaries", "Dictionary"]
