"""
Field recovery: turns a parsed page into article candidates.

Profiles are tried in order, then GENERIC_PROFILE. The first profile that
produces at least one usable candidate wins. Within an element, a missing
content selector falls back to the element's whole text, and a missing title
is taken from the first sentence of the content.
"""
import logging
from typing import List, Optional, Sequence
from urllib.parse import urljoin

from core.markup import Document, Element
from core.models import ExtractionProfile, RawArticleCandidate, Source

logger = logging.getLogger(__name__)

# Hard per-source cap on examined elements
MAX_ARTICLES_PER_SOURCE = 5
MAX_TITLE_LENGTH = 60

GENERIC_PROFILE = ExtractionProfile(
    article_selector="article, .article, .story, .news-item, .story-card, .post",
    title_selector="h1, h2, h3, h4, .title, .headline",
    content_selector="p, .summary, .synopsis, .description",
)


def _text_of(element: Element, selector: str) -> str:
    match = element.first_descendant(selector)
    return match.text() if match else ""


def title_from_content(content: str):
    """
    Derive a title from the first sentence of content.
    Returns (title, remaining_content).
    """
    first_sentence, period, _ = content.partition(".")
    if len(first_sentence) > MAX_TITLE_LENGTH:
        return first_sentence[:MAX_TITLE_LENGTH] + "...", content[MAX_TITLE_LENGTH:]
    return first_sentence, content[len(first_sentence) + len(period):]


def find_link(element: Element, base_url: str) -> Optional[str]:
    href = None
    if element.tag_name == "a":
        href = element.attribute("href")
    if not href:
        anchor = element.first_descendant("a[href]")
        href = anchor.attribute("href") if anchor else None
    if not href or not href.strip():
        return None
    return urljoin(base_url, href.strip())


def extract_candidate(element: Element, profile: ExtractionProfile, base_url: str) -> Optional[RawArticleCandidate]:
    title = _text_of(element, profile.title_selector)
    content = _text_of(element, profile.content_selector)

    if not content:
        content = element.text()

    if not title and content:
        title, content = title_from_content(content)

    # Either field alone is still worth keeping
    if not title and not content:
        return None

    return RawArticleCandidate(
        element=element,
        title=title,
        content=content,
        link=find_link(element, base_url),
    )


def recover_with_profile(doc: Document, profile: ExtractionProfile, base_url: str) -> List[RawArticleCandidate]:
    elements = doc.select(profile.article_selector)
    if not elements:
        logger.debug(f"No elements matched {profile.article_selector!r}")
        return []

    # Selector lists can match a card and the <article> inside it
    elements = [element for element in elements if not element.is_nested_in(elements)]

    candidates = []
    for element in elements[:MAX_ARTICLES_PER_SOURCE]:
        candidate = extract_candidate(element, profile, base_url)
        if candidate is None:
            logger.debug("Skipping element with neither title nor content")
            continue
        candidates.append(candidate)
    return candidates


def profiles_to_try(profiles: Sequence[ExtractionProfile]) -> List[ExtractionProfile]:
    ordered = list(profiles)
    if GENERIC_PROFILE not in ordered:
        ordered.append(GENERIC_PROFILE)
    return ordered


def recover(doc: Document, source: Source) -> List[RawArticleCandidate]:
    for index, profile in enumerate(profiles_to_try(source.profiles)):
        candidates = recover_with_profile(doc, profile, source.url)
        if candidates:
            if index > 0:
                logger.info(f"{source.name}: recovered {len(candidates)} articles with fallback profile #{index + 1}")
            return candidates

    logger.info(f"{source.name}: no articles matched. Selectors tried: "
                f"{[p.article_selector for p in profiles_to_try(source.profiles)]}")
    return []
