import re
from typing import Iterable, Optional

from core.lexicons import PLACE_NAMES
from core.models import Entities

WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")
# Capitalised word; also matches the first word of every sentence
PERSON_PATTERN = re.compile(r"^[A-Z][a-z]+$")


class EntityRecognizer:
    def __init__(self, places: Optional[Iterable[str]] = None):
        self.places = [place.lower() for place in (PLACE_NAMES if places is None else places)]

    def find_states(self, text: str):
        lowered = (text or "").lower()
        return frozenset(place for place in self.places if place in lowered)

    def find_people(self, text: str):
        return frozenset(
            word for word in WORD_PATTERN.findall(text or "")
            if len(word) > 2 and PERSON_PATTERN.match(word)
        )

    def extract(self, text: str) -> Entities:
        return Entities(states=self.find_states(text), people=self.find_people(text))
