"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from PIL import Image, PngImagePlugin

XMP_PACKET = """<?xpacket begin="" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
    <rdf:Description rdf:about="" xmlns:dc="http://purl.org/dc/elements/1.1/">
      <dc:subject>
        <rdf:Bag>
          <rdf:li>sunset</rdf:li>
          <rdf:li>beach</rdf:li>
        </rdf:Bag>
      </dc:subject>
    </rdf:Description>
  </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""

SVG_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     width="10" height="10">
  <metadata>
    <rdf:RDF>
      <rdf:Description rdf:about="">
        <dc:subject>
          <rdf:Bag>
            <rdf:li>logo</rdf:li>
            <rdf:li>vector</rdf:li>
          </rdf:Bag>
        </dc:subject>
      </rdf:Description>
    </rdf:RDF>
  </metadata>
  <rect width="10" height="10"/>
</svg>
"""


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop CLI log handlers installed during a test."""
    logger = logging.getLogger("tagmeta")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def plain_png(tmp_path: Path) -> Path:
    """A small PNG without any keyword tags."""
    path = tmp_path / "plain.png"
    Image.new("RGB", (4, 4), "red").save(path)
    return path


@pytest.fixture
def tagged_png(tmp_path: Path) -> Path:
    """A small PNG carrying an XMP packet with two keywords."""
    path = tmp_path / "tagged.png"
    info = PngImagePlugin.PngInfo()
    info.add_itxt("XML:com.adobe.xmp", XMP_PACKET)
    Image.new("RGB", (4, 4), "blue").save(path, pnginfo=info)
    return path


@pytest.fixture
def tagged_svg(tmp_path: Path) -> Path:
    """An SVG document with RDF keywords in its metadata."""
    path = tmp_path / "logo.svg"
    path.write_text(SVG_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def mixed_dir(tmp_path: Path) -> Path:
    """A directory with two images and a text file."""
    folder = tmp_path / "photos"
    folder.mkdir()
    Image.new("RGB", (2, 2)).save(folder / "a.png")
    Image.new("RGB", (2, 2)).save(folder / "b.png")
    (folder / "notes.txt").write_text("not an image", encoding="utf-8")
    return folder
