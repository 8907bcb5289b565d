from typing import List, Tuple

from core.models import ExtractionProfile, Source

SOURCES: Tuple[Source, ...] = (
    Source(
        name="Times of India",
        url="https://timesofindia.indiatimes.com/india",
        profiles=(
            ExtractionProfile(".main-content article", "span.title", "p.synopsis"),
        ),
    ),
    Source(
        name="Economic Times",
        url="https://economictimes.indiatimes.com/news/india",
        profiles=(
            ExtractionProfile(".article", ".title", ".synopsis"),
        ),
    ),
    Source(
        name="Hindustan Times",
        url="https://www.hindustantimes.com/india-news",
        profiles=(
            ExtractionProfile(".cartHolder", "h3.hdg3", ".sortDec"),
            ExtractionProfile(".hdg3", "a", ".sortDec"),
        ),
    ),
    Source(
        name="News18",
        url="https://www.news18.com/india/",
        profiles=(
            ExtractionProfile(".jsx-3621759782", "h4", "p"),
        ),
    ),
    Source(
        name="India Today",
        url="https://www.indiatoday.in/india",
        profiles=(
            ExtractionProfile(
                ".B1S3_content__wrap__9mSB6",
                ".B1S3_story__title__9qn_v",
                ".B1S3_story__shortcontent__5kVZf",
            ),
        ),
    ),
)


def source_names() -> List[str]:
    return [source.name for source in SOURCES]


def get_source(name: str) -> Source:
    for source in SOURCES:
        if source.name == name:
            return source
    raise KeyError(f"Source '{name}' not found. Available: {source_names()}")
