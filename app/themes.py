"""
Theme asset loading.

A theme root holds one subdirectory per theme; each theme directory holds
digit glyph files named ``<digit><anything>.<ext>``. Glyphs are read once
at startup, encoded as ``data:`` URIs and indexed per theme.
"""

import base64
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

MIME_TYPES = {
    "png": "image/png",
    "gif": "image/gif",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


class Theme(BaseModel):
    """A loaded glyph set, ready for rendering."""

    model_config = ConfigDict(frozen=True)

    name: str
    digits: Mapping[str, str]  # digit -> glyph id
    images: Mapping[str, str]  # glyph id -> data URI

    @field_validator("digits", "images")
    @classmethod
    def _freeze(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


class ThemeRegistry(BaseModel):
    """
    All themes loaded at startup, keyed by name.

    Built once before serving and shared read-only between requests.
    """

    model_config = ConfigDict(frozen=True)

    themes: Mapping[str, Theme] = Field(default_factory=dict, validate_default=True)

    @field_validator("themes")
    @classmethod
    def _freeze(cls, value: Mapping[str, Theme]) -> Mapping[str, Theme]:
        return MappingProxyType(dict(value))

    def __len__(self) -> int:
        return len(self.themes)

    def __contains__(self, name: object) -> bool:
        return name in self.themes

    def get(self, name: str) -> Optional[Theme]:
        return self.themes.get(name)

    def names(self) -> List[str]:
        return list(self.themes)

    def resolve(self, requested: Optional[str], default: str) -> Optional[Theme]:
        """
        Pick the theme for a request.

        Order: requested key, then the configured default, then the first
        loaded theme. Returns None only when no themes are loaded.
        """
        if requested and requested in self.themes:
            return self.themes[requested]
        if default in self.themes:
            return self.themes[default]
        return next(iter(self.themes.values()), None)


def mime_for(ext: str) -> str:
    """MIME type for a file extension (without the dot)."""
    return MIME_TYPES.get(ext.lower(), DEFAULT_MIME_TYPE)


def load_digit(path: Path) -> Optional[Tuple[str, str]]:
    """
    Load a single glyph file.

    Returns ``(digit, data_uri)``, or None when the file is not a digit
    glyph or cannot be read.
    """
    try:
        path.name.encode("utf-8")
    except UnicodeEncodeError:
        logger.debug(f"skipping file with undecodable name: {path!r}")
        return None

    stem = path.stem
    if not stem or stem[0] not in DIGITS:
        return None

    ext = path.suffix[1:]
    if not ext:
        logger.debug(f"skipping file without extension: {path}")
        return None

    try:
        data = path.read_bytes()
    except OSError as e:
        logger.debug(f"failed to read glyph {path}: {e}")
        return None

    uri = f"data:{mime_for(ext)};base64,{base64.b64encode(data).decode('ascii')}"

    logger.debug(f"loaded digit {stem[0]} ({path})")
    return stem[0], uri


def _list_entries(directory: Path, keep: Callable[[Path], bool]) -> List[Path]:
    """
    Sorted entries of ``directory`` accepted by ``keep``.

    An entry whose ``keep`` check fails with OSError is skipped; an
    unreadable ``directory`` raises.
    """
    entries = []
    for entry in directory.iterdir():
        try:
            if keep(entry):
                entries.append(entry)
        except OSError as e:
            logger.debug(f"skipping unreadable entry {entry}: {e}")
    return sorted(entries)


def load_theme(theme_dir: Path) -> Optional[Theme]:
    """
    Load every glyph directly inside ``theme_dir``.

    Byte-identical glyphs (same data URI) share one glyph id. Files are
    visited in filename order; if several files provide the same digit the
    last one wins. Returns None if the directory is unreadable or holds no
    glyphs.
    """
    try:
        files = _list_entries(theme_dir, Path.is_file)
    except OSError as e:
        logger.warning(f"failed to read theme directory {theme_dir.name}: {e}")
        return None

    uri_to_id: Dict[str, str] = {}
    digits: Dict[str, str] = {}

    for path in files:
        loaded = load_digit(path)
        if loaded is None:
            continue
        digit, uri = loaded
        glyph_id = uri_to_id.get(uri)
        if glyph_id is None:
            glyph_id = f"i{len(uri_to_id)}"
            uri_to_id[uri] = glyph_id
        digits[digit] = glyph_id

    if not digits:
        logger.info(f"skipping theme without digits: {theme_dir.name}")
        return None

    images = {glyph_id: uri for uri, glyph_id in uri_to_id.items()}

    return Theme(name=theme_dir.name, digits=digits, images=images)


def load_themes(root: str) -> ThemeRegistry:
    """
    Scan ``root`` and build the theme registry.

    An unreadable root yields an empty registry; unreadable or empty theme
    directories are skipped.
    """
    logger.info(f"loading themes from {root}")

    try:
        theme_dirs = _list_entries(Path(root), Path.is_dir)
    except OSError as e:
        logger.warning(f"failed to read themes directory {root}: {e}")
        return ThemeRegistry()

    themes: Dict[str, Theme] = {}
    for theme_dir in theme_dirs:
        logger.debug(f"loading theme: {theme_dir.name}")
        theme = load_theme(theme_dir)
        if theme is None:
            continue
        logger.info(f"loaded theme: {theme.name} with {len(theme.digits)} digits")
        themes[theme.name] = theme

    logger.info(f"loaded {len(themes)} themes total")
    return ThemeRegistry(themes=themes)
