import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from core.fallback import fallback_articles
from core.models import ArticleRecord

logger = logging.getLogger(__name__)


class ArticleCache:
    def __init__(self):
        """
        Holds the article list of the latest successful run.

        The list is stored as one immutable tuple and swapped with a single
        assignment, so a reader gets either the previous run or the new one,
        never a mix. In-memory only; nothing survives a restart.
        """
        self._articles: Tuple[ArticleRecord, ...] = ()
        self._last_updated: Optional[datetime] = None

    @property
    def is_populated(self) -> bool:
        return bool(self._articles)

    @property
    def last_updated(self) -> Optional[datetime]:
        return self._last_updated

    def replace(self, articles: Sequence[ArticleRecord]):
        """Swap in a new, non-empty article list."""
        snapshot = tuple(articles)
        if not snapshot:
            raise ValueError("Refusing to replace the cache with an empty article list")
        self._articles = snapshot
        self._last_updated = datetime.now(timezone.utc)
        logger.info(f"Cache updated with {len(snapshot)} articles")

    def snapshot(self) -> Tuple[ArticleRecord, ...]:
        return self._articles

    def get_current_articles(self) -> List[ArticleRecord]:
        """
        Articles for the serving layer.
        Before the first run completes this returns the built-in samples.
        """
        articles = self._articles
        if not articles:
            logger.debug("Cache empty - serving fallback articles")
            return fallback_articles()
        return list(articles)
