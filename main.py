import argparse
import asyncio
import logging
from dotenv import load_dotenv

from core.cache import ArticleCache
from core.config import Settings
from core.http_client import HTTPClient
from core.pipeline import NewsPipeline
from sources.registry import SOURCES

# Load env
load_dotenv()

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


async def main(run_once: bool = False):
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    logger.info("Starting India News Harvester...")

    http = HTTPClient(timeout=settings.http_timeout_seconds, retry_wait=settings.retry_wait_seconds)
    cache = ArticleCache()
    pipeline = NewsPipeline(http.fetch_page, SOURCES, cache)

    try:
        # Run immediately, then on the fixed interval
        await pipeline.run_once()

        if run_once or not settings.enable_scheduler:
            logger.info("Scheduler disabled - exiting after one run")
            return

        interval = settings.scrape_interval_minutes * 60
        logger.info(f"Scheduling updates every {settings.scrape_interval_minutes} minutes")
        while True:
            await asyncio.sleep(interval)
            await pipeline.run_once()
    finally:
        await http.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Harvest and enrich Indian news headlines")
    parser.add_argument("--once", action="store_true", help="run a single harvest and exit")
    args = parser.parse_args()
    asyncio.run(main(run_once=args.once))
