import asyncio
import json
import logging
import sys

from src.config import get_settings
from src.metadata.client import get_url_metadata
from src.metadata.exceptions import MetadataFetchError

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


async def run(url: str) -> int:
    try:
        metadata = await get_url_metadata(url)
    except MetadataFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(metadata.model_dump(by_alias=True), indent=2))
    return 0


def main() -> None:
    sys.exit(asyncio.run(run(settings.DEMO_URL)))


if __name__ == "__main__":
    main()
