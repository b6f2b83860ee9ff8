"""End-to-end runs of app.py through Streamlit's AppTest harness."""

from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from devsite.core.services import load_site_config

APP_PATH = Path(__file__).resolve().parents[1] / "app.py"


def run_app(**query) -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    for name, value in query.items():
        at.query_params[name] = value
    return at.run()


def markdown_text(at: AppTest) -> str:
    return "\n".join(m.value for m in at.markdown)


class TestPages:
    def test_home_in_default_language(self) -> None:
        at = run_app()

        assert not at.exception
        assert "Hola, soy David" in markdown_text(at)

    def test_home_in_english(self) -> None:
        at = run_app(lang="en")

        assert not at.exception
        assert "Hi, I'm David" in markdown_text(at)

    def test_missing_english_page_rewritten_to_spanish(self) -> None:
        at = run_app(lang="en", page="about")

        assert not at.exception
        assert "Sobre mí" in markdown_text(at)
        assert at.info and "not available in English" in at.info[0].value

    def test_badges_page(self) -> None:
        at = run_app(lang="en", page="badges")

        assert not at.exception
        assert "Certifications & badges" in [h.value for h in at.header]


class TestNotFound:
    @pytest.mark.parametrize("lang, heading", [("es", "Página no encontrada"), ("en", "Page not found")])
    def test_unknown_page(self, lang, heading) -> None:
        at = run_app(lang=lang, page="does-not-exist")

        assert not at.exception
        assert heading in markdown_text(at)

    def test_path_like_page_id_is_not_found(self) -> None:
        at = run_app(lang="es", page="../config/site")

        assert "Página no encontrada" in markdown_text(at)


@pytest.fixture
def redirect_fallback(monkeypatch: pytest.MonkeyPatch):
    """Switches site.yaml's rewrite fallback to redirect through the environment."""
    monkeypatch.setenv("APP_I18N__ROUTING__FALLBACK_TYPE", "redirect")
    load_site_config.clear()
    yield
    load_site_config.clear()


class TestRedirectFallback:
    def test_missing_english_page_switches_to_spanish(self, redirect_fallback) -> None:
        at = run_app(lang="en", page="about")

        assert not at.exception
        assert at.session_state["lang"] == "es"
        assert at.query_params["lang"] in ("es", ["es"])
        assert "Sobre mí" in markdown_text(at)
        # Served in its own locale now, so no fallback notice.
        assert not at.info


def _badges_with_remote_image():
    from devsite.core.models import BadgeItem, I18nConfig
    from devsite.view.presentation import render_badges_page

    render_badges_page(
        [BadgeItem(label="Remote", image="https://example.com/badge.png", link="https://example.com/verify")],
        "en",
        I18nConfig(),
    )


class TestBadgeCards:
    def test_remote_image_card(self) -> None:
        at = AppTest.from_function(_badges_with_remote_image, default_timeout=30).run()

        assert not at.exception
        assert "**Remote**" in markdown_text(at)
        assert "[Verify credential](https://example.com/verify)" in markdown_text(at)
