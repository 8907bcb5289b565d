"""
Lexicon-based sentiment scoring.

Every token is Porter-stemmed and looked up in a stemmed copy of the
polarity lexicon. A negation word flips the sign of the matches after it.
The score is the sum of matched weights divided by the number of tokens,
so unmatched tokens pull the score towards zero and long texts stay small.
"""
import logging
import string
from typing import Dict, Iterable, List, Optional

from nltk.stem import PorterStemmer

from core.lexicons import NEGATIONS, load_afinn

logger = logging.getLogger(__name__)

_PUNCTUATION = string.punctuation + "‘’“”"


def tokenize(text: str) -> List[str]:
    tokens = []
    for raw in (text or "").split():
        token = raw.strip(_PUNCTUATION).lower()
        if token:
            tokens.append(token)
    return tokens


def format_sentiment(value: float) -> str:
    """Two-decimal text; tiny negatives print as 0.00, not -0.00."""
    formatted = f"{value:.2f}"
    if formatted == "-0.00":
        return "0.00"
    return formatted


class SentimentScorer:
    def __init__(self, lexicon: Optional[Dict[str, float]] = None,
                 negations: Optional[Iterable[str]] = None, stemmer=None):
        self.stemmer = stemmer or PorterStemmer()
        self.negations = frozenset(NEGATIONS if negations is None else negations)
        self.vocabulary: Dict[str, float] = {}
        for word, weight in (load_afinn() if lexicon is None else lexicon).items():
            # First entry wins when two words share a stem
            self.vocabulary.setdefault(self.stemmer.stem(word.lower()), weight)

    def score(self, text: str) -> float:
        tokens = tokenize(text)
        if not tokens:
            return 0.0

        total = 0.0
        negator = 1
        for token in tokens:
            if token in self.negations:
                negator = -1
                continue
            weight = self.vocabulary.get(self.stemmer.stem(token))
            if weight is not None:
                total += negator * weight
        return total / len(tokens)

    def score_text(self, text: str) -> str:
        return format_sentiment(self.score(text))
