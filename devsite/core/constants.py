from pathlib import Path

# --- Project Paths ---
# Absolute root of the repository (one level above the `devsite` package).
ROOT_DIR = Path(__file__).resolve().parents[2]
CONFIG_DIR = ROOT_DIR / "config"
CONTENT_DIR = ROOT_DIR / "content"
PAGES_DIR = CONTENT_DIR / "pages"
ASSETS_DIR = ROOT_DIR / "assets"
STATIC_DIR = ROOT_DIR / "static"

SITE_CONFIG_PATH = CONFIG_DIR / "site.yaml"
BADGES_PATH = CONTENT_DIR / "badges.yaml"

# --- Special Identifiers ---
# Landing page shown when no `page` query parameter is given.
HOME_PAGE_ID = "home"
# Built-in page rendered from content/badges.yaml rather than markdown.
BADGES_PAGE_ID = "badges"

# --- Default Values ---
DEFAULT_LANGUAGE = "es"
