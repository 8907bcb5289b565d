import logging
from typing import Awaitable, Callable, List, Optional

from core import markup
from core.enrichment import ArticleEnricher
from core.models import ArticleRecord, Source
from core.recovery import recover

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], Awaitable[str]]


class SourceScraper:
    def __init__(self, source: Source, fetch: FetchFn, enricher: Optional[ArticleEnricher] = None):
        self.source = source
        self.fetch = fetch
        self.enricher = enricher or ArticleEnricher()
        self.name = source.name

    async def fetch_articles(self) -> List[ArticleRecord]:
        """
        Fetch the source page and turn it into article records.
        FetchError and ParseError propagate to the caller; a single bad
        article is logged and skipped.
        """
        logger.info(f"Attempting to scrape {self.name} from {self.source.url}")
        html = await self.fetch(self.source.url)
        return self.extract_articles(html)

    def extract_articles(self, html) -> List[ArticleRecord]:
        doc = markup.parse(html)
        candidates = recover(doc, self.source)

        articles = []
        for candidate in candidates:
            try:
                articles.append(self.enricher.enrich(candidate, self.name))
            except Exception as e:
                logger.error(f"Error enriching article from {self.name}: {e}")
                continue

        logger.info(f"Successfully scraped {len(articles)} articles from {self.name}")
        return articles
