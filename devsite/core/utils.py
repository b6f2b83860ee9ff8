from __future__ import annotations
from typing import Any, Dict
from pathlib import Path
import yaml
import logging

import streamlit as st
from PIL import Image
from slugify import slugify as python_slugify

logger = logging.getLogger(__name__)

# --- Caching Primitives ---

@st.cache_data(show_spinner=False)
def read_text_file(path: str | Path) -> str:
    """Cached function to read a text file."""
    p = Path(path)
    return p.read_text(encoding="utf-8")

@st.cache_data(show_spinner=False)
def read_yaml_file(path: str | Path) -> Dict[str, Any]:
    """Cached function to read a YAML mapping. An empty file yields an empty dict."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {p}, got {type(data).__name__}")
    return data

@st.cache_resource(show_spinner=False)
def load_image(path: str | Path) -> Image.Image:
    """Cached function to load an image object."""
    p = Path(path)
    return Image.open(str(p))


# --- Security & Path Utilities ---

def is_remote_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))

def secure_path_resolve(base_dir: Path, user_path: str) -> Path:
    """
    Safely resolves a path, ensuring it doesn't escape the base directory.
    Prevents Path Traversal attacks.
    """
    abs_base = base_dir.resolve()
    abs_res = (abs_base / user_path).resolve()

    if abs_res != abs_base and abs_base not in abs_res.parents:
        logger.warning(
            "Path Traversal attempt detected: base='%s', path='%s'",
            base_dir, user_path
        )
        raise ValueError("Path Traversal attempt detected")

    if not abs_res.exists():
        raise FileNotFoundError(f"Asset not found at resolved path: {abs_res}")

    return abs_res


# --- String Utilities ---

def slugify(text: str) -> str:
    """Generates a URL-friendly slug, transliterating accents (e.g. 'Diseño' -> 'diseno')."""
    return python_slugify(text)
