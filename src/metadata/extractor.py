import html
import logging
from typing import Callable, Iterable
from bs4 import BeautifulSoup

from src.metadata.favicon import get_favicon_url
from src.metadata.schemas import PageMetadata

logger = logging.getLogger(__name__)

Lookup = Callable[[], str | None]


def parse_document(markup: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def get_attribute(soup: BeautifulSoup, selector: str, attribute: str) -> str | None:
    """Return an attribute of the first element matching the selector."""
    element = soup.select_one(selector)
    if element is None:
        return None
    value = element.get(attribute)
    return value if isinstance(value, str) else None


def get_raw_text(soup: BeautifulSoup, selector: str) -> str | None:
    """
    Return the content of the first matching element as raw text.
    Markup nested inside it is kept verbatim, entities are decoded.
    """
    element = soup.select_one(selector)
    return html.unescape(element.decode_contents()) if element else None


def first_match(lookups: Iterable[Lookup]) -> str:
    """
    Evaluate lookups in order and return the first non-empty value.
    Lookups after the winning one are never called.
    """
    for lookup in lookups:
        value = lookup()
        if value:
            return value
    return ""


def extract_title(soup: BeautifulSoup) -> str:
    return first_match(
        [
            lambda: get_attribute(soup, 'meta[property="og:title"]', "content"),
            lambda: get_raw_text(soup, "title"),
        ]
    )


def extract_image_url(soup: BeautifulSoup) -> str:
    return first_match(
        [
            lambda: get_attribute(soup, 'meta[property="og:image"]', "content"),
            lambda: get_attribute(soup, 'meta[name="twitter:image"]', "content"),
        ]
    )


def extract_description(soup: BeautifulSoup) -> str:
    return first_match(
        [
            lambda: get_attribute(soup, 'meta[property="og:description"]', "content"),
            lambda: get_attribute(soup, 'meta[name="description"]', "content"),
        ]
    )


def extract_date(soup: BeautifulSoup) -> str:
    return first_match(
        [
            lambda: get_attribute(
                soup, 'meta[property="article:published_time"]', "content"
            ),
            lambda: get_attribute(
                soup, 'meta[property="article:modified_time"]', "content"
            ),
            lambda: get_attribute(soup, "time", "datetime"),
        ]
    )


def extract_metadata(soup: BeautifulSoup, url: str) -> PageMetadata:
    metadata = PageMetadata(
        title=extract_title(soup),
        image_url=extract_image_url(soup),
        description=extract_description(soup),
        date=extract_date(soup),
        favicon=get_favicon_url(soup, url),
    )
    logger.debug(f"Extracted metadata for {url}: {metadata}")
    return metadata
