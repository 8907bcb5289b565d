"""
Data tables for the text heuristics. Each analyzer takes its table as a
constructor argument, so tests and deployments can swap these out.
"""
from functools import lru_cache
from importlib import resources
from typing import Dict

# Order matters: ties go to the earlier category.
# Tokens are lower-cased before matching, so technology uses "artificial"
# where an upper-case "AI" keyword could never match and "ai" would hit
# "said" or "rain".
TOPIC_KEYWORDS = {
    "politics": ["government", "minister", "election", "party", "parliament"],
    "sports": ["cricket", "football", "game", "player", "tournament"],
    "agriculture": ["farmer", "crop", "agriculture", "harvest", "farming"],
    "technology": ["tech", "digital", "software", "artificial", "innovation"],
    "business": ["market", "economy", "stock", "company", "trade"],
}

PLACE_NAMES = ["delhi", "mumbai", "kerala", "gujarat", "punjab"]

NEGATIONS = frozenset(["not", "no", "never", "neither", "nor", "without", "cannot"])

AFINN_FILENAME = "AFINN-en-165.txt"


def read_word_file(text: str) -> Dict[str, int]:
    """Parse AFINN's tab-separated `word<TAB>weight` lines."""
    weights = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        word, _, weight = line.rpartition("\t")
        weights[word.strip()] = int(weight)
    return weights


@lru_cache(maxsize=1)
def load_afinn() -> Dict[str, int]:
    """The full AFINN-165 word list (Finn Årup Nielsen) shipped with the afinn package."""
    data = resources.files("afinn").joinpath("data").joinpath(AFINN_FILENAME)
    return read_word_file(data.read_text(encoding="utf-8"))
