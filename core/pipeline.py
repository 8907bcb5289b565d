import asyncio
import logging
from typing import List, Optional, Sequence, Set

from core.cache import ArticleCache
from core.enrichment import ArticleEnricher
from core.exceptions import FetchError, ParseError
from core.fallback import fallback_articles
from core.models import ArticleRecord, Source
from core.scraper_base import FetchFn, SourceScraper

logger = logging.getLogger(__name__)


class NewsPipeline:
    def __init__(self, fetch: FetchFn, sources: Sequence[Source], cache: ArticleCache,
                 enricher: Optional[ArticleEnricher] = None):
        self.cache = cache
        self.enricher = enricher or ArticleEnricher()
        self.scrapers = [SourceScraper(source, fetch, self.enricher) for source in sources]
        self._tasks: Set[asyncio.Task] = set()

    async def _scrape_source(self, scraper: SourceScraper) -> List[ArticleRecord]:
        try:
            return await scraper.fetch_articles()
        except FetchError as e:
            if e.status_code is not None:
                logger.error(f"Error scraping {scraper.name}: response status {e.status_code}")
            else:
                logger.error(f"Error scraping {scraper.name}: {e}")
        except ParseError as e:
            logger.error(f"Could not parse page from {scraper.name}: {e}")
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(f"Scraper {scraper.name} failed unexpectedly")
        return []

    async def run_once(self) -> List[ArticleRecord]:
        """
        One full harvest. Sources run one after another; a failing source
        contributes nothing. If nothing at all was harvested the built-in
        sample articles are stored instead. Never raises.
        """
        logger.info("Starting news update...")
        all_articles: List[ArticleRecord] = []
        try:
            for scraper in self.scrapers:
                logger.info(f"Processing source: {scraper.name}")
                articles = await self._scrape_source(scraper)
                all_articles.extend(articles)

            if not all_articles:
                logger.warning("No articles scraped, using fallback articles")
                all_articles = fallback_articles()

            self.cache.replace(all_articles)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("News update failed; keeping previous cache contents")
            return list(self.cache.snapshot())

        logger.info(f"Update complete. Total articles: {len(all_articles)}")
        return all_articles

    def trigger_run(self) -> asyncio.Task:
        """Fire-and-forget run on the current event loop."""
        task = asyncio.get_running_loop().create_task(self.run_once())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def get_current_articles(self) -> List[ArticleRecord]:
        return self.cache.get_current_articles()
