"""Embedded image keyword reading.

Reads the combined keyword set of an image file from every tag block
that can carry keywords:

- XMP ``dc:subject`` (JPEG, PNG, TIFF, WebP, GIF with XMP packets)
- IPTC Keywords, record 2 dataset 25 (JPEG, TIFF)
- EXIF ``XPKeywords`` (semicolon separated UTF-16LE, written by Windows)

Raster images are opened with Pillow. SVG documents carry their
metadata as RDF inside ``<metadata>`` and are parsed as XML.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from defusedxml import ElementTree
from PIL import Image, IptcImagePlugin, UnidentifiedImageError

logger = logging.getLogger(__name__)

IPTC_KEYWORDS = (2, 25)
EXIF_XP_KEYWORDS = 0x9C9E

_RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
_DC_NS = "http://purl.org/dc/elements/1.1/"

# Containers Pillow's XMP dictionary uses for RDF lists
_RDF_CONTAINERS = ("Bag", "Seq", "Alt", "li")


class TagReadError(Exception):
    """Raised when an image cannot be opened or its tags cannot be read."""


def read_keywords(path: str) -> tuple[str, ...]:
    """Read the combined keyword list of an image file.

    Keywords from all tag blocks are merged in XMP, IPTC, EXIF order
    with duplicates removed.

    Args:
        path: Absolute path to the image file.

    Returns:
        Tuple of keywords, empty if the image carries none.

    Raises:
        TagReadError: If the file cannot be opened or is not a readable image.
    """
    if Path(path).suffix.lower() == ".svg":
        keywords = _read_svg_keywords(path)
    else:
        keywords = _read_raster_keywords(path)
    return _unique(keywords)


def _read_raster_keywords(path: str) -> list[str]:
    """Read keywords from a raster image with Pillow."""
    try:
        with Image.open(path) as image:
            logger.debug("Opened %s as %s", path, image.format)
            return [
                *xmp_keywords(image.getxmp()),
                *iptc_keywords(IptcImagePlugin.getiptcinfo(image)),
                *xp_keywords(image.getexif().get(EXIF_XP_KEYWORDS)),
            ]
    except UnidentifiedImageError as e:
        raise TagReadError(f"Unsupported or corrupt image: {path}") from e
    except (OSError, SyntaxError, ValueError) as e:
        raise TagReadError(f"Failed to read tags from {path}: {e}") from e


def _read_svg_keywords(path: str) -> list[str]:
    """Read RDF ``dc:subject`` keywords from an SVG document."""
    try:
        root = ElementTree.parse(path).getroot()
    except ElementTree.ParseError as e:
        raise TagReadError(f"Invalid SVG document: {path}: {e}") from e
    except (OSError, ValueError) as e:
        raise TagReadError(f"Failed to read tags from {path}: {e}") from e

    keywords: list[str] = []
    for subject in root.iter(f"{{{_DC_NS}}}subject"):
        keywords.extend(item.text or "" for item in subject.iter(f"{{{_RDF_NS}}}li"))
    return keywords


def xmp_keywords(xmp: dict[str, Any]) -> list[str]:
    """Extract ``dc:subject`` entries from a Pillow XMP dictionary.

    Args:
        xmp: Dictionary as returned by ``Image.getxmp()``.

    Returns:
        List of keywords in document order.
    """
    keywords: list[str] = []
    for subject in _find_key(xmp, "subject"):
        keywords.extend(_rdf_items(subject))
    return keywords


def iptc_keywords(info: dict[tuple[int, int], Any] | None) -> list[str]:
    """Extract the Keywords dataset from IPTC info.

    Args:
        info: Mapping as returned by ``IptcImagePlugin.getiptcinfo()``.

    Returns:
        List of decoded keywords.
    """
    if not info:
        return []
    raw = info.get(IPTC_KEYWORDS)
    if raw is None:
        return []
    values = raw if isinstance(raw, list) else [raw]
    return [_decode_iptc(value) for value in values]


def xp_keywords(raw: bytes | tuple[int, ...] | None) -> list[str]:
    """Decode the Windows ``XPKeywords`` EXIF value.

    Args:
        raw: Raw tag value, UTF-16LE bytes or a tuple of byte values.

    Returns:
        List of keywords split on semicolons.
    """
    if not raw:
        return []
    data = bytes(raw)
    text = data.decode("utf-16-le", errors="replace").rstrip("\x00")
    return [part.strip() for part in text.split(";")]


def _find_key(node: Any, key: str) -> Iterator[Any]:
    """Yield every value stored under ``key`` in nested dicts and lists."""
    if isinstance(node, dict):
        for name, value in node.items():
            if name == key:
                yield value
            else:
                yield from _find_key(value, key)
    elif isinstance(node, list):
        for item in node:
            yield from _find_key(item, key)


def _rdf_items(value: Any) -> list[str]:
    """Flatten an RDF Bag/Seq/Alt value into strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [item for entry in value for item in _rdf_items(entry)]
    if isinstance(value, dict):
        for container in _RDF_CONTAINERS:
            if container in value:
                return _rdf_items(value[container])
        # <rdf:li xml:lang="en">text</rdf:li>
        return _rdf_items(value.get("text"))
    return []


def _decode_iptc(value: bytes | str) -> str:
    """Decode an IPTC string, falling back to Latin-1."""
    if isinstance(value, str):
        return value
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError:
        return value.decode("latin-1")


def _unique(keywords: Iterable[str]) -> tuple[str, ...]:
    """Strip keywords, drop empty ones and remove duplicates keeping order."""
    seen: dict[str, None] = {}
    for keyword in keywords:
        cleaned = keyword.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return tuple(seen)
