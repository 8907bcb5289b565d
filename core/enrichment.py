import logging
from datetime import datetime, timezone
from typing import Optional

from core.entities import EntityRecognizer
from core.models import ArticleRecord, RawArticleCandidate, UNTITLED
from core.sentiment import SentimentScorer
from core.topics import TopicClassifier

logger = logging.getLogger(__name__)

SUMMARY_WORDS = 30


def summarize(content: str, title: str) -> str:
    words = content.split()
    if not words:
        return title
    return " ".join(words[:SUMMARY_WORDS]) + "..."


class ArticleEnricher:
    """Runs the topic, sentiment and entity heuristics over a recovered candidate."""

    def __init__(self, classifier: Optional[TopicClassifier] = None,
                 scorer: Optional[SentimentScorer] = None,
                 recognizer: Optional[EntityRecognizer] = None):
        self.classifier = classifier or TopicClassifier()
        self.scorer = scorer or SentimentScorer()
        self.recognizer = recognizer or EntityRecognizer()

    def enrich(self, candidate: RawArticleCandidate, source_name: str) -> ArticleRecord:
        title = candidate.title.strip() or UNTITLED
        content = candidate.content.strip()
        text = content or title

        record = ArticleRecord(
            source=source_name,
            title=title,
            summary=summarize(content, title),
            topic=self.classifier.classify(text),
            sentiment=self.scorer.score_text(text),
            entities=self.recognizer.extract(text),
            url=candidate.link,
            timestamp=datetime.now(timezone.utc),
        )
        logger.debug(f"Enriched [{source_name}] {title[:50]} -> {record.topic} ({record.sentiment})")
        return record
