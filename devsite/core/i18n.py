from __future__ import annotations
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union
import logging

from .dictionaries import TRANSLATIONS, Dictionary
from .languages import Language, normalize_language
from .models import SiteConfig, I18nConfig
from .constants import DEFAULT_LANGUAGE
from .routing import fallback_chain

logger = logging.getLogger(__name__)

LanguageCode = Union[str, Language]


class MissingTranslationError(KeyError):
    """Raised when a key is absent from a language and every locale it falls back to."""

    def __init__(self, key: str, tried: Sequence[str]):
        self.key = key
        self.tried = list(tried)
        super().__init__(f"No translation for '{key}' (tried: {', '.join(self.tried)})")


def _entries_for(translations: Dictionary, code: str) -> Mapping[str, str]:
    # A locale can be routable (declared in site.yaml) without having a dictionary.
    try:
        return translations.get(Language(code), {})
    except ValueError:
        return {}


def _lookup_chain(lang: str, i18n: Optional[I18nConfig]) -> List[str]:
    config = i18n or I18nConfig()
    chain = [lang]
    if config.is_supported(lang):
        chain.extend(fallback_chain(lang, config))
    if config.default_locale not in chain:
        chain.append(config.default_locale)
    return chain


def t(
    key: str,
    lang: LanguageCode,
    default: Optional[str] = None,
    *,
    translations: Dictionary = TRANSLATIONS,
    i18n: Optional[I18nConfig] = None,
) -> str:
    """
    Translates a dot-namespaced key.
    The chain is: requested language -> its fallback locales -> `default`.
    A key found nowhere raises MissingTranslationError instead of leaking the key into the page.
    """
    code = normalize_language(lang, default=DEFAULT_LANGUAGE).value
    chain = _lookup_chain(code, i18n)

    for position, candidate in enumerate(chain):
        value = _entries_for(translations, candidate).get(key)
        if value:
            if position > 0:
                logger.warning("Translation '%s' missing for '%s', served from '%s'", key, code, candidate)
            return value

    if default is not None:
        return default
    raise MissingTranslationError(key, chain)


def get_translator(lang: LanguageCode, **kwargs) -> Callable[[str], str]:
    """Returns `t` bound to one language, for templates that only ever render one locale."""
    def translate(key: str, default: Optional[str] = None) -> str:
        return t(key, lang, default, **kwargs)
    return translate


# --- Dictionary consistency checks ---

def find_missing_keys(translations: Dictionary = TRANSLATIONS) -> Dict[Language, Set[str]]:
    """For each language, the keys some other language defines and it does not."""
    all_keys: Set[str] = set()
    for entries in translations.values():
        all_keys.update(entries)

    missing = {}
    for lang, entries in translations.items():
        absent = all_keys - set(entries)
        if absent:
            missing[lang] = absent
    return missing


def find_empty_values(translations: Dictionary = TRANSLATIONS) -> List[Tuple[Language, str]]:
    """(language, key) pairs whose value is empty, whitespace or not a string."""
    empty = []
    for lang, entries in translations.items():
        for key, value in entries.items():
            if not isinstance(value, str) or not value.strip():
                empty.append((lang, key))
    return sorted(empty)


def keys_with_prefix(prefix: str, lang: LanguageCode, translations: Mapping = TRANSLATIONS) -> List[str]:
    """Keys under a namespace like 'not-found.'; handy for rendering whole sections."""
    entries = translations.get(normalize_language(lang, default=DEFAULT_LANGUAGE), {})
    return sorted(k for k in entries if k.startswith(prefix))


def get_initial_language(site_config: SiteConfig) -> str:
    """Determines the initial language for the session."""
    return site_config.i18n.default_locale or DEFAULT_LANGUAGE
