#!/usr/bin/env python3
# scripts/new_badge.py

from __future__ import annotations
import argparse
from pathlib import Path
import sys

import yaml

# Add project root to path to allow importing from 'devsite'
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from devsite.core.models import BadgeItem
from devsite.core.utils import slugify

BADGES_FILE = ROOT / "content" / "badges.yaml"


def add_badge(badges_file: Path, lang: str, badge: BadgeItem) -> int:
    """Appends a badge to `lang` in badges_file and returns its position in that list."""
    data = {}
    if badges_file.exists():
        with badges_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{badges_file} must map languages to badge lists")

    # `es:` with no items loads as None.
    entries = data.get(lang) or []
    if not isinstance(entries, list):
        raise ValueError(f"Badges for '{lang}' in {badges_file} must be a list")
    data[lang] = entries

    if any(isinstance(entry, dict) and entry.get("label") == badge.label for entry in entries):
        raise ValueError(f"Badge '{badge.label}' already exists for '{lang}'")

    entries.append(badge.model_dump(exclude_none=True))
    badges_file.parent.mkdir(parents=True, exist_ok=True)
    with badges_file.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    return len(entries) - 1


def main(argv=None):
    parser = argparse.ArgumentParser(description="Add a badge to content/badges.yaml.")
    parser.add_argument("label", help="Badge title, e.g. 'Python Essentials'")
    parser.add_argument("--lang", default="es", choices=["es", "en"], help="Language list to append to")
    parser.add_argument("--image", default="", help="Image URL or path under assets/ (default: badges/<slug>.png)")
    parser.add_argument("--link", default=None, help="Credential verification URL")
    parser.add_argument("--file", type=Path, default=BADGES_FILE, help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    badge_slug = slugify(args.label)
    if not badge_slug:
        print("Error: Could not generate a valid slug from the provided label.")
        sys.exit(1)

    badge = BadgeItem(label=args.label, image=args.image or f"badges/{badge_slug}.png", link=args.link)
    try:
        position = add_badge(args.file, args.lang, badge)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Added badge '{badge.label}' to '{args.lang}' at position {position + 1}")
    if not args.image:
        print(f"Remember to add the image at: assets/{badge.image}")

if __name__ == "__main__":
    main()
