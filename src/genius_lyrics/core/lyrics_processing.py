"""Lyrics processing: extracting lyrics containers and normalizing text."""

import re
from typing import List

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from ..utils.logging import get_logger

logger = get_logger(__name__)

# Genius marks each block of lyrics with <div data-lyrics-container="true">
LYRICS_CONTAINER_ATTR = "data-lyrics-container"

# Fragment separator within a container, and container separator
FRAGMENT_SEPARATOR = "\n"
CONTAINER_SEPARATOR = "\n\n"

# [Chorus], [Verse 1: Artist], ... may span lines
ANNOTATION_PATTERN = re.compile(r"\[.*?\]", re.DOTALL)
# Every character str.splitlines() treats as a line boundary
LINE_BREAKS_PATTERN = re.compile(r"[\r\n\v\f\x1c\x1d\x1e\x85\u2028\u2029]+")


def find_lyrics_containers(html: str) -> List[Tag]:
    """Return the lyrics container divs of a page in document order."""
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        logger.debug(f"Unparseable lyrics page: {e}")
        return []
    return soup.find_all("div", attrs={LYRICS_CONTAINER_ATTR: "true"})


def container_text(container: Tag) -> str:
    return container.get_text(FRAGMENT_SEPARATOR)


def extract_lyrics(html: str) -> str:
    """
    Extract the raw lyrics text of a Genius page.

    Text fragments inside one container are joined by a newline, containers
    by a blank line. A page without containers yields "".
    """
    containers = find_lyrics_containers(html)
    if not containers:
        logger.warning("No lyrics containers found on page")
        return ""
    return CONTAINER_SEPARATOR.join(container_text(c) for c in containers)


def strip_annotations(text: str) -> str:
    return ANNOTATION_PATTERN.sub("", text)


def collapse_line_breaks(text: str) -> str:
    """Replace each run of line breaks, however long, with a single space."""
    return LINE_BREAKS_PATTERN.sub(" ", text)


def normalize_lyrics(text: str) -> str:
    """
    Turn extracted lyrics into a single annotation-free line.

    Bracketed annotations are removed first, then every run of line breaks
    becomes one space and the result is trimmed.
    """
    text = strip_annotations(text)
    text = collapse_line_breaks(text)
    return text.strip()
