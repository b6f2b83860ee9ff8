#!/usr/bin/env python3
# scripts/check_translations.py
"""Fails (exit code 1) when a dictionary key is missing in some language or has an empty value."""

from __future__ import annotations
from pathlib import Path
import sys

# Add project root to path to allow importing from 'devsite'
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from devsite.core.dictionaries import TRANSLATIONS
from devsite.core.i18n import find_missing_keys, find_empty_values


def main() -> int:
    problems = 0
    for lang, keys in sorted(find_missing_keys(TRANSLATIONS).items()):
        for key in sorted(keys):
            print(f"[{lang}] missing key: {key}")
            problems += 1
    for lang, key in find_empty_values(TRANSLATIONS):
        print(f"[{lang}] empty value: {key}")
        problems += 1

    if problems:
        print(f"{problems} translation problem(s) found.")
        return 1
    print(f"OK: {len(TRANSLATIONS)} languages, all keys translated.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
