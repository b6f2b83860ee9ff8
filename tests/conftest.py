"""
Shared fixtures for the site tests.

Configuration fixtures are plain pydantic objects; file-based fixtures write
YAML/markdown into pytest's tmp_path so the cached loaders see a fresh path
in every test.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml

from devsite.core.models import SiteConfig, I18nConfig, RoutingConfig


@pytest.fixture(autouse=True)
def _clear_app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep APP_* variables from the developer's shell out of SiteConfig."""
    for name in list(os.environ):
        if name.startswith("APP_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def i18n() -> I18nConfig:
    return I18nConfig()


@pytest.fixture
def redirect_i18n() -> I18nConfig:
    return I18nConfig(routing=RoutingConfig(fallback_type="redirect"))


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig()


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Returns a helper that dumps data to tmp_path/<name> and returns the path."""

    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """A pages directory with home in both locales and about only in Spanish."""
    directory = tmp_path / "pages"
    directory.mkdir()
    (directory / "home.es.md").write_text("# Inicio", encoding="utf-8")
    (directory / "home.en.md").write_text("# Home", encoding="utf-8")
    (directory / "about.es.md").write_text("# Sobre mí", encoding="utf-8")
    (directory / "README.md").write_text("not a page", encoding="utf-8")
    return directory
