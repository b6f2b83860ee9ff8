from types import MappingProxyType

from ..languages import Language

# Page chrome: sidebar, header/footer and the badges section.
UI_TRANSLATIONS = MappingProxyType({
    Language.ENGLISH: MappingProxyType({
        "ui.navigation": "Navigation",
        "ui.language": "Language",
        "ui.page": "Page",
        "ui.footer": "Built with Streamlit",
        "ui.fallback-notice": "This page is not available in English yet; showing the Spanish version.",
        "pages.home": "Home",
        "pages.about": "About me",
        "pages.badges": "Badges",
        "badges.heading": "Certifications & badges",
        "badges.empty": "No badges to show yet.",
        "badges.verify": "Verify credential",
    }),
    Language.SPANISH: MappingProxyType({
        "ui.navigation": "Navegación",
        "ui.language": "Idioma",
        "ui.page": "Página",
        "ui.footer": "Hecho con Streamlit",
        "ui.fallback-notice": "Esta página aún no está disponible en español; se muestra otra versión.",
        "pages.home": "Inicio",
        "pages.about": "Sobre mí",
        "pages.badges": "Insignias",
        "badges.heading": "Certificaciones e insignias",
        "badges.empty": "Todavía no hay insignias.",
        "badges.verify": "Verificar credencial",
    }),
})
