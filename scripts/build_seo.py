#!/usr/bin/env python3
# scripts/build_seo.py

from __future__ import annotations
import argparse
import logging
from pathlib import Path
import sys

# Add project root to path to allow importing from 'devsite'
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from devsite.core.constants import STATIC_DIR, BADGES_PAGE_ID
from devsite.core.services import load_site_config, scan_pages
from devsite.core.seo import write_seo_files


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate robots.txt and the sitemap for the site.")
    parser.add_argument("--out", type=Path, default=STATIC_DIR, help="Output directory (default: static/)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    site_config = load_site_config()
    pages = scan_pages()
    # Rendered from badges.yaml, so it has no markdown file but exists in every locale.
    pages.setdefault(BADGES_PAGE_ID, list(site_config.i18n.locales))
    for path in write_seo_files(site_config, pages, args.out):
        print(f"Wrote {path}")

if __name__ == "__main__":
    main()
