"""
Thin wrapper around BeautifulSoup so the rest of the pipeline only sees
select/text/attribute operations.

The lxml tree builder recovers from unclosed tags, stray end tags and unknown
entities, so malformed pages still produce a usable tree.
"""
import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from core.exceptions import ParseError

logger = logging.getLogger(__name__)


def _safe_select(node: Tag, selector: str) -> List[Tag]:
    try:
        return node.select(selector)
    except SelectorSyntaxError as e:
        logger.warning(f"Invalid selector {selector!r}: {e}")
        return []


class Element:
    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def tag_name(self) -> str:
        return self._tag.name

    def text(self) -> str:
        return self._tag.get_text().strip()

    def inner_html(self) -> str:
        return self._tag.decode_contents()

    def attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            # bs4 splits multi-valued attributes such as class
            return " ".join(value)
        return value

    def select(self, selector: str) -> List["Element"]:
        return [Element(tag) for tag in _safe_select(self._tag, selector)]

    def first_descendant(self, selector: str) -> Optional["Element"]:
        matches = _safe_select(self._tag, selector)
        return Element(matches[0]) if matches else None

    def is_nested_in(self, elements: List["Element"]) -> bool:
        """True if one of `elements` is an ancestor of this element."""
        ancestors = {id(element._tag) for element in elements}
        return any(id(parent) in ancestors for parent in self._tag.parents)

    def __repr__(self):
        return f"<Element {self._tag.name}>"


class Document:
    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def select(self, selector: str) -> List[Element]:
        return [Element(tag) for tag in _safe_select(self._soup, selector)]

    def text(self) -> str:
        return self._soup.get_text().strip()


def parse(html: Union[str, bytes]) -> Document:
    """
    Parse raw markup into a Document.
    Only non-text input is an error; broken HTML is repaired by lxml.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"Cannot parse markup of type {type(html).__name__}")
    return Document(BeautifulSoup(html, "lxml"))
