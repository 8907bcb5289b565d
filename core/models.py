from dataclasses import dataclass, field
from typing import Optional, Tuple, FrozenSet, Dict, Any
from datetime import datetime

UNTITLED = "Untitled Article"


@dataclass(frozen=True)
class ExtractionProfile:
    article_selector: str  # Repeating article container
    title_selector: str    # Title inside the container
    content_selector: str  # Body/synopsis inside the container


@dataclass(frozen=True)
class Source:
    name: str
    url: str
    profiles: Tuple[ExtractionProfile, ...] = ()


@dataclass
class RawArticleCandidate:
    element: Any  # core.markup.Element the profile matched
    title: str
    content: str
    link: Optional[str] = None


@dataclass(frozen=True)
class Entities:
    states: FrozenSet[str] = frozenset()
    people: FrozenSet[str] = frozenset()

    def to_dict(self) -> Dict[str, list]:
        return {"states": sorted(self.states), "people": sorted(self.people)}


@dataclass
class ArticleRecord:
    source: str
    title: str
    summary: str
    topic: str
    sentiment: str  # Two-decimal text, e.g. "0.25"
    entities: Entities = field(default_factory=Entities)
    url: Optional[str] = None
    timestamp: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view for the serving layer."""
        return {
            "source": self.source,
            "title": self.title,
            "summary": self.summary,
            "topic": self.topic,
            "sentiment": self.sentiment,
            "entities": self.entities.to_dict(),
            "url": self.url,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
