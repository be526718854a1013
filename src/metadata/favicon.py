import logging
from urllib.parse import urljoin
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

FAVICON_SELECTORS = [
    # Apple touch icons
    'link[rel="apple-touch-icon"]',
    'link[rel="apple-touch-icon-precomposed"]',
    # Standard favicons
    'link[rel="icon"]',
    'link[rel="shortcut icon"]',
    'link[rel="mask-icon"]',
    # Legacy, non-standard rel value
    'link[rel="favicon"]',
]

DEFAULT_FAVICON_PATH = "/favicon.ico"


def resolve_favicon_path(favicon_path: str, base_url: str) -> str:
    # Prefix check only, "httpfoo://x" is returned untouched
    if favicon_path.startswith("http"):
        return favicon_path
    if favicon_path.startswith("//"):
        return f"https:{favicon_path}"
    return urljoin(base_url, favicon_path)


def get_favicon_url(soup: BeautifulSoup, base_url: str) -> str:
    for selector in FAVICON_SELECTORS:
        link = soup.select_one(selector)
        favicon_path = link.get("href") if link else None
        if not favicon_path or not isinstance(favicon_path, str):
            continue

        try:
            return resolve_favicon_path(favicon_path, base_url)
        except ValueError as e:
            logger.warning(f"Error processing favicon path {favicon_path}: {e}")
            continue

    try:
        return urljoin(base_url, DEFAULT_FAVICON_PATH)
    except ValueError:
        return ""
