from __future__ import annotations
from enum import Enum
from typing import Dict, NamedTuple, Optional, Union


class Language(str, Enum):
    """UI languages the site ships dictionaries for."""

    ENGLISH = "en"
    SPANISH = "es"

    def __str__(self) -> str:
        return self.value


class LanguageLabel(NamedTuple):
    label: str
    flag: str


# Shown by the sidebar language switcher; `flag` is a flagcdn.com country code.
LANGUAGE_LABELS: Dict[Language, LanguageLabel] = {
    Language.SPANISH: LanguageLabel(label="Español", flag="es"),
    Language.ENGLISH: LanguageLabel(label="English", flag="gb"),
}


def normalize_language(
    code: Union[str, Language, None],
    default: Union[str, Language] = Language.SPANISH,
) -> Language:
    """Converts a raw language code ('EN', ' es ') into a Language, or returns the default."""
    if isinstance(code, Language):
        return code
    candidate = (code or "").strip().lower()
    try:
        return Language(candidate)
    except ValueError:
        return Language(str(default))


def get_language_label(lang: Union[str, Language]) -> Optional[LanguageLabel]:
    try:
        return LANGUAGE_LABELS.get(Language(str(lang)))
    except ValueError:
        return None
