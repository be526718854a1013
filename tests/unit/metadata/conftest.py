from typing import AsyncGenerator

import pytest

from src.metadata.client import MetadataClient


@pytest.fixture
async def metadata_client() -> AsyncGenerator[MetadataClient, None]:
    async with MetadataClient(user_agent="test-agent") as client:
        yield client


@pytest.fixture
def sample_html() -> str:
    return """
    <!DOCTYPE html>
    <html>
        <head>
            <title>Fallback Title</title>
            <meta property="og:title" content="Hello">
            <meta property="og:image" content="http://x/y.png">
            <meta name="description" content="D">
            <link rel="icon" href="/f.ico">
        </head>
        <body>
            <article>
                <time datetime="2024-01-01">January 1, 2024</time>
            </article>
        </body>
    </html>
    """
