import logging
from types import TracebackType
from typing import Type
from aiohttp import ClientSession, ClientTimeout

from src.config import get_settings
from src.metadata.exceptions import MetadataFetchError
from src.metadata.extractor import extract_metadata, parse_document
from src.metadata.schemas import PageMetadata


logger = logging.getLogger(__name__)


class MetadataClient:
    def __init__(self, *, user_agent: str, request_timeout: float | None = None):
        self.user_agent = user_agent
        self.session: ClientSession = ClientSession(
            headers={"User-Agent": self.user_agent},
            timeout=ClientTimeout(total=request_timeout),
        )

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        await self.session.close()

    async def fetch_html(self, url: str) -> str:
        # Invalid bytes decode to U+FFFD
        async with self.session.get(url) as response:
            response.raise_for_status()
            return await response.text(errors="replace")

    async def fetch_metadata(self, url: str) -> PageMetadata:
        logger.debug(f"Fetching metadata from {url}")

        try:
            html = await self.fetch_html(url)
            soup = parse_document(html)
            return extract_metadata(soup, url)
        except Exception as e:
            logger.exception(f"Error fetching metadata from {url}")
            raise MetadataFetchError(str(e)) from e


async def get_url_metadata(url: str) -> PageMetadata:
    settings = get_settings()

    async with MetadataClient(
        user_agent=settings.USER_AGENT,
        request_timeout=settings.REQUEST_TIMEOUT,
    ) as client:
        return await client.fetch_metadata(url)
