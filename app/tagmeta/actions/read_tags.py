"""Read embedded keywords from image files."""

import logging
from collections.abc import Callable

from tagmeta.actions.base import Action
from tagmeta.integrations.tags import TagReadError, read_keywords
from tagmeta.models.errors import operation_failed
from tagmeta.models.records import AcceptedFile, ItemOutcome, TagMetadata

logger = logging.getLogger(__name__)

# Image formats the tag reader is asked to open. Anything else is skipped
# silently so wildcard batches over mixed folders stay quiet.
SUPPORTED_FORMATS: tuple[str, ...] = (
    "bmp",
    "gif",
    "jpeg",
    "pbm",
    "pgm",
    "ppm",
    "pnm",
    "pcx",
    "png",
    "tiff",
    "dng",
    "svg",
    "jpg",
)

TagReader = Callable[[str], tuple[str, ...]]


def is_supported_format(file: AcceptedFile) -> bool:
    """Check if a file's extension is in SUPPORTED_FORMATS.

    Args:
        file: File to check.

    Returns:
        True if the lower-cased extension without the dot is supported.
    """
    return file.extension[1:].lower() in SUPPORTED_FORMATS


class ReadTagAction(Action):
    """Reads the combined keyword list of supported image files.

    Args:
        reader: Function returning the keywords of an image path.
            Defaults to the Pillow-based tag reader.
    """

    def __init__(self, reader: TagReader | None = None) -> None:
        self._reader = reader or read_keywords

    @property
    def name(self) -> str:
        return "read-tags"

    def run(self, file: AcceptedFile) -> ItemOutcome | None:
        logger.debug("Processing %s", file.full_name)
        logger.debug("Extension: %s", file.extension.lower())

        if not is_supported_format(file):
            logger.debug("File format is not supported")
            logger.debug("Supported formats: %s", ", ".join(SUPPORTED_FORMATS))
            return None

        logger.debug("File format is supported")
        try:
            keywords = self._reader(file.full_name)
        except (TagReadError, OSError) as e:
            logger.debug("Reading tags from %s failed: %s", file.full_name, e)
            return ItemOutcome.fail(operation_failed("TagReadFailed", file.full_name, e))

        logger.debug("Keywords: %s", "; ".join(keywords))
        return ItemOutcome.ok(TagMetadata(file=file, keywords=keywords))
