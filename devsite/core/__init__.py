from .languages import Language, normalize_language

from .models import SiteConfig, I18nConfig, BadgeItem, BadgesByLanguage, BadgeLanguage

from .i18n import t, get_translator, MissingTranslationError
