"""Tests for SiteConfig / I18nConfig validation and loading from site.yaml."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from devsite.core.models import SiteConfig, I18nConfig, RoutingConfig
from devsite.core.services import load_site_config
from devsite.core.i18n import get_initial_language


class TestSiteConfigDefaults:
    def test_matches_published_site(self, site_config: SiteConfig) -> None:
        assert site_config.site == "https://devsandoval.me"
        assert site_config.integrations == ["robots-txt"]
        assert site_config.styles == ["style.css"]

    def test_locale_routing_defaults(self, i18n: I18nConfig) -> None:
        assert i18n.locales == ["es", "en"]
        assert i18n.default_locale == "es"
        assert i18n.routing.prefix_default_locale is False
        assert i18n.routing.fallback_type == "rewrite"
        assert i18n.fallback == {"en": "es"}

    def test_default_locale_is_supported(self, i18n: I18nConfig) -> None:
        assert i18n.default_locale in i18n.locales

    def test_every_fallback_target_is_supported(self, i18n: I18nConfig) -> None:
        for source, target in i18n.fallback.items():
            assert source in i18n.locales
            assert target in i18n.locales

    def test_site_trailing_slash_is_stripped(self) -> None:
        assert SiteConfig(site="https://example.com/").site == "https://example.com"

    def test_initial_language_is_default_locale(self, site_config: SiteConfig) -> None:
        assert get_initial_language(site_config) == "es"


class TestI18nValidation:
    def test_default_locale_outside_locales_rejected(self) -> None:
        with pytest.raises(ValidationError, match="default_locale"):
            I18nConfig(locales=["es", "en"], default_locale="fr")

    def test_fallback_to_unsupported_locale_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unsupported locale 'fr'"):
            I18nConfig(fallback={"en": "fr"})

    def test_fallback_from_unsupported_locale_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unsupported locale 'de'"):
            I18nConfig(fallback={"de": "es"})

    def test_self_fallback_rejected(self) -> None:
        with pytest.raises(ValidationError, match="itself"):
            I18nConfig(fallback={"en": "en"})

    def test_duplicate_locales_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate"):
            I18nConfig(locales=["es", "ES", "en"])

    def test_empty_locales_rejected(self) -> None:
        with pytest.raises(ValidationError):
            I18nConfig(locales=[], default_locale="es", fallback={})

    def test_unknown_fallback_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RoutingConfig(fallback_type="proxy")

    def test_relative_site_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            SiteConfig(site="devsandoval.me")


class TestLoadSiteConfig:
    def test_reads_yaml(self, write_yaml) -> None:
        path = write_yaml("site.yaml", {
            "site": "https://example.org",
            "integrations": [],
            "i18n": {
                "locales": ["en", "es"],
                "default_locale": "en",
                "routing": {"prefix_default_locale": True, "fallback_type": "redirect"},
                "fallback": {"es": "en"},
            },
        })
        config = load_site_config(path)

        assert config.site == "https://example.org"
        assert config.integrations == []
        assert config.i18n.default_locale == "en"
        assert config.i18n.routing.fallback_type == "redirect"
        assert config.i18n.fallback == {"es": "en"}

    def test_missing_file_falls_back_to_defaults(self, tmp_path, caplog) -> None:
        config = load_site_config(tmp_path / "nope.yaml")

        assert config == SiteConfig()
        assert "not found" in caplog.text

    def test_invalid_yaml_config_raises(self, write_yaml) -> None:
        path = write_yaml("broken.yaml", {"i18n": {"default_locale": "fr"}})
        with pytest.raises(ValidationError):
            load_site_config(path)

    def test_environment_fills_unset_fields(self, write_yaml, monkeypatch) -> None:
        monkeypatch.setenv("APP_SITE_NAME", "Staging")
        path = write_yaml("env.yaml", {"site": "https://staging.example.org"})

        config = load_site_config(path)

        assert config.site_name == "Staging"
        assert config.site == "https://staging.example.org"


class TestEnvironmentOverrides:
    site_yaml = {
        "site": "https://devsandoval.me",
        "i18n": {
            "locales": ["es", "en"],
            "default_locale": "es",
            "routing": {"prefix_default_locale": False, "fallback_type": "rewrite"},
            "fallback": {"en": "es"},
        },
    }

    def test_environment_beats_yaml(self, write_yaml, monkeypatch) -> None:
        monkeypatch.setenv("APP_SITE", "https://staging.devsandoval.me")
        path = write_yaml("site.yaml", self.site_yaml)

        assert load_site_config(path).site == "https://staging.devsandoval.me"

    def test_nested_override_keeps_sibling_yaml_values(self, write_yaml, monkeypatch) -> None:
        monkeypatch.setenv("APP_I18N__DEFAULT_LOCALE", "en")
        monkeypatch.setenv("APP_I18N__ROUTING__FALLBACK_TYPE", "redirect")
        path = write_yaml("site.yaml", self.site_yaml)

        i18n = load_site_config(path).i18n

        assert i18n.default_locale == "en"
        assert i18n.routing.fallback_type == "redirect"
        assert i18n.routing.prefix_default_locale is False
        assert i18n.locales == ["es", "en"]
        assert i18n.fallback == {"en": "es"}

    def test_invalid_override_is_rejected(self, write_yaml, monkeypatch) -> None:
        monkeypatch.setenv("APP_I18N__DEFAULT_LOCALE", "fr")
        path = write_yaml("site.yaml", self.site_yaml)

        with pytest.raises(ValidationError):
            load_site_config(path)
