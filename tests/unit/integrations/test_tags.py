"""Unit tests for the Pillow-based tag reader.

Tests for keyword extraction from XMP, IPTC, EXIF and SVG metadata.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from tagmeta.integrations.tags import (
    EXIF_XP_KEYWORDS,
    IPTC_KEYWORDS,
    TagReadError,
    iptc_keywords,
    read_keywords,
    xmp_keywords,
    xp_keywords,
)


class TestXmpKeywords:
    """Tests for xmp_keywords function."""

    def test_bag(self) -> None:
        """Keywords inside an rdf:Bag are returned in order."""
        xmp = {
            "xmpmeta": {
                "RDF": {
                    "Description": {
                        "about": "",
                        "subject": {"Bag": {"li": ["sunset", "beach"]}},
                    }
                }
            }
        }

        assert xmp_keywords(xmp) == ["sunset", "beach"]

    def test_single_item(self) -> None:
        """A single rdf:li is a plain string."""
        xmp = {"xmpmeta": {"RDF": {"Description": {"subject": {"Bag": {"li": "solo"}}}}}}

        assert xmp_keywords(xmp) == ["solo"]

    def test_language_alternatives(self) -> None:
        """Language-tagged items contribute their text."""
        xmp = {"RDF": {"Description": {"subject": {"Alt": {"li": {"lang": "en", "text": "x"}}}}}}

        assert xmp_keywords(xmp) == ["x"]

    def test_multiple_descriptions(self) -> None:
        """Subjects from several descriptions are combined."""
        xmp = {
            "xmpmeta": {
                "RDF": {
                    "Description": [
                        {"subject": {"Bag": {"li": "a"}}},
                        {"creator": {"Seq": {"li": "someone"}}},
                        {"subject": {"Seq": {"li": ["b", "c"]}}},
                    ]
                }
            }
        }

        assert xmp_keywords(xmp) == ["a", "b", "c"]

    def test_empty(self) -> None:
        """Images without XMP have no keywords."""
        assert xmp_keywords({}) == []


class TestIptcKeywords:
    """Tests for iptc_keywords function."""

    def test_list(self) -> None:
        """Repeated datasets are decoded in order."""
        info = {IPTC_KEYWORDS: [b"alpha", "beta".encode()], (2, 5): b"title"}

        assert iptc_keywords(info) == ["alpha", "beta"]

    def test_single_value(self) -> None:
        """A single dataset is a bytes value."""
        assert iptc_keywords({IPTC_KEYWORDS: b"solo"}) == ["solo"]

    def test_latin1_fallback(self) -> None:
        """Non-UTF-8 bytes are decoded as Latin-1."""
        assert iptc_keywords({IPTC_KEYWORDS: b"caf\xe9"}) == ["café"]

    def test_none(self) -> None:
        """Missing IPTC info has no keywords."""
        assert iptc_keywords(None) == []
        assert iptc_keywords({(2, 5): b"title"}) == []


class TestXpKeywords:
    """Tests for xp_keywords function."""

    def test_bytes(self) -> None:
        """UTF-16LE values are split on semicolons."""
        raw = "cat; dog\x00".encode("utf-16-le")

        assert xp_keywords(raw) == ["cat", "dog"]

    def test_tuple(self) -> None:
        """Tuples of byte values are accepted."""
        raw = tuple("tree".encode("utf-16-le"))

        assert xp_keywords(raw) == ["tree"]

    def test_none(self) -> None:
        """A missing tag has no keywords."""
        assert xp_keywords(None) == []


class TestReadKeywords:
    """Tests for read_keywords function."""

    def test_combines_sources(self) -> None:
        """Keywords from all blocks are merged without duplicates."""
        image = MagicMock()
        image.__enter__.return_value = image
        image.format = "JPEG"
        image.getxmp.return_value = {"RDF": {"Description": {"subject": {"Bag": {"li": ["a", "b"]}}}}}
        image.getexif.return_value = {EXIF_XP_KEYWORDS: "b;c".encode("utf-16-le")}

        with (
            patch("tagmeta.integrations.tags.Image.open", return_value=image),
            patch(
                "tagmeta.integrations.tags.IptcImagePlugin.getiptcinfo",
                return_value={IPTC_KEYWORDS: [b"a", b" d "]},
            ),
        ):
            result = read_keywords("/img/photo.jpg")

        assert result == ("a", "b", "d", "c")

    def test_plain_png(self, plain_png: Path) -> None:
        """A real image without tags has no keywords."""
        assert read_keywords(str(plain_png)) == ()

    def test_png_with_xmp(self, tagged_png: Path) -> None:
        """XMP keywords are read from a real PNG."""
        assert read_keywords(str(tagged_png)) == ("sunset", "beach")

    def test_repeated_reads(self, tagged_png: Path) -> None:
        """Reading an unchanged file twice gives the same keywords and leaves it untouched."""
        before = tagged_png.stat()
        content = tagged_png.read_bytes()

        first = read_keywords(str(tagged_png))
        second = read_keywords(str(tagged_png))

        after = tagged_png.stat()
        assert first == second == ("sunset", "beach")
        assert (after.st_size, after.st_mtime_ns) == (before.st_size, before.st_mtime_ns)
        assert tagged_png.read_bytes() == content

    def test_svg(self, tagged_svg: Path) -> None:
        """RDF keywords are read from SVG metadata."""
        assert read_keywords(str(tagged_svg)) == ("logo", "vector")

    def test_svg_without_metadata(self, tmp_path: Path) -> None:
        """SVG documents without metadata have no keywords."""
        path = tmp_path / "plain.svg"
        path.write_text('<svg xmlns="http://www.w3.org/2000/svg"/>')

        assert read_keywords(str(path)) == ()

    def test_corrupt_image(self, tmp_path: Path) -> None:
        """Unreadable images raise TagReadError."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"this is not a png")

        with pytest.raises(TagReadError, match="Unsupported or corrupt"):
            read_keywords(str(path))

    def test_invalid_svg(self, tmp_path: Path) -> None:
        """Malformed SVG raises TagReadError."""
        path = tmp_path / "broken.svg"
        path.write_text("<svg")

        with pytest.raises(TagReadError, match="Invalid SVG"):
            read_keywords(str(path))

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise TagReadError."""
        with pytest.raises(TagReadError):
            read_keywords(str(tmp_path / "gone.jpg"))
