import logging
from typing import Dict, List, Optional

from core.lexicons import TOPIC_KEYWORDS

logger = logging.getLogger(__name__)


class TopicClassifier:
    def __init__(self, taxonomy: Optional[Dict[str, List[str]]] = None):
        taxonomy = TOPIC_KEYWORDS if taxonomy is None else taxonomy
        if not taxonomy:
            raise ValueError("Topic taxonomy must contain at least one category")
        self.taxonomy = {
            topic: [keyword.lower() for keyword in keywords]
            for topic, keywords in taxonomy.items()
        }

    @property
    def topics(self) -> List[str]:
        return list(self.taxonomy)

    def scores(self, text: str) -> Dict[str, int]:
        """Per-topic count of tokens containing any of the topic's keywords."""
        words = (text or "").lower().split()
        return {
            topic: sum(1 for word in words if any(keyword in word for keyword in keywords))
            for topic, keywords in self.taxonomy.items()
        }

    def classify(self, text: str) -> str:
        best_topic, best_score = None, -1
        for topic, score in self.scores(text).items():
            # Strictly greater: ties stay with the earlier topic
            if score > best_score:
                best_topic, best_score = topic, score
        return best_topic
