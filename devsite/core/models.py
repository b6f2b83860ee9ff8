# devsite/core/models.py

from __future__ import annotations
from typing import List, Optional, Literal, Dict, Union
import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

logger = logging.getLogger(__name__)

FallbackType = Literal["redirect", "rewrite"]


# --- Site Configuration Models ---

class RoutingConfig(BaseModel):
    # When False the default locale is served from "/", the rest from "/<locale>/".
    prefix_default_locale: bool = False
    # "rewrite" serves fallback content under the requested URL, "redirect" sends the visitor there.
    fallback_type: FallbackType = "rewrite"

class I18nConfig(BaseModel):
    locales: List[str] = ["es", "en"]
    default_locale: str = "es"
    routing: RoutingConfig = RoutingConfig()
    fallback: Dict[str, str] = {"en": "es"}

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, v: List[str]) -> List[str]:
        locales = [code.strip().lower() for code in v]
        if not locales:
            raise ValueError("at least one locale is required")
        if len(set(locales)) != len(locales):
            raise ValueError(f"duplicate locales in {locales}")
        return locales

    @field_validator("default_locale")
    @classmethod
    def normalize_default(cls, v: str) -> str:
        return v.strip().lower()

    @model_validator(mode="after")
    def check_locale_references(self) -> I18nConfig:
        if self.default_locale not in self.locales:
            raise ValueError(
                f"default_locale '{self.default_locale}' is not one of the locales {self.locales}"
            )
        for source, target in self.fallback.items():
            if source not in self.locales:
                raise ValueError(f"fallback defined for unsupported locale '{source}'")
            if target not in self.locales:
                raise ValueError(f"locale '{source}' falls back to unsupported locale '{target}'")
            if source == target:
                raise ValueError(f"locale '{source}' cannot fall back to itself")
        return self

    def is_supported(self, locale: str) -> bool:
        return locale in self.locales

class RobotsPolicy(BaseModel):
    user_agent: str = "*"
    allow: List[str] = ["/"]
    disallow: List[str] = []
    crawl_delay: Optional[int] = None

class RobotsConfig(BaseModel):
    policy: List[RobotsPolicy] = [RobotsPolicy()]
    # True -> "<site><static_url_path>/<sitemap_name>", a string -> that exact URL, False -> no Sitemap line.
    sitemap: Union[bool, str] = True
    sitemap_name: str = "sitemap-index.xml"

class SocialLinks(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None

class Branding(BaseModel):
    page_icon: str = "💻"

class SiteConfig(BaseSettings):
    site: str = "https://devsandoval.me"
    site_name: str = "David Sandoval"
    tagline: str = ""
    author: str = "David Sandoval"
    email: str = ""
    social: SocialLinks = SocialLinks()
    branding: Branding = Branding()
    integrations: List[str] = ["robots-txt"]
    styles: List[str] = ["style.css"]
    # Where Streamlit serves static/ (server.enableStaticServing), relative to the site origin.
    static_url_path: str = "/app/static"
    robots: RobotsConfig = RobotsConfig()
    i18n: I18nConfig = I18nConfig()

    model_config = SettingsConfigDict(env_prefix="APP_", env_nested_delimiter="__")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # APP_* variables override site.yaml, which arrives as init kwargs. Nested dicts are deep-merged.
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @field_validator("site")
    @classmethod
    def validate_site(cls, v: str) -> str:
        # Canonical origin is stored without a trailing slash so URLs can be joined with "/".
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"site must be an absolute http(s) URL, got '{v}'")
        return v

    def has_integration(self, name: str) -> bool:
        return name in self.integrations


# --- Badge Models ---

class BadgeItem(BaseModel):
    """A certification or achievement badge, as declared in content/badges.yaml."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    # Remote URL or a path relative to the assets directory.
    image: str = Field(min_length=1)
    # Optional credential verification URL.
    link: Optional[str] = None

    @field_validator("label", "image")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("link")
    @classmethod
    def empty_link_is_none(cls, v: Optional[str]) -> Optional[str]:
        return (v or "").strip() or None


# Keys are language codes by convention; list order is display order.
BadgesByLanguage = Dict[str, List[BadgeItem]]

BadgeLanguage = Literal["es", "en"]
