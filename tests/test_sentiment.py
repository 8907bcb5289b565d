import re

import pytest

from core.lexicons import load_afinn, read_word_file
from core.sentiment import SentimentScorer, format_sentiment, tokenize

SENTIMENT_PATTERN = re.compile(r"^-?\d+\.\d{2}$")


@pytest.fixture
def scorer():
    return SentimentScorer(lexicon={"happy": 2, "sad": -2, "win": 4})


def test_mean_over_all_tokens(scorer):
    assert scorer.score("happy happy sad day") == pytest.approx(0.5)


def test_stemmed_lookup(scorer):
    assert scorer.score("wins") == pytest.approx(4.0)


def test_negation_flips_following_matches(scorer):
    assert scorer.score("not happy") == pytest.approx(-1.0)


def test_punctuation_stripped(scorer):
    assert scorer.score("Happy!") == pytest.approx(2.0)


def test_empty_text_is_zero(scorer):
    assert scorer.score("") == 0.0
    assert scorer.score_text("   ") == "0.00"


def test_default_lexicon_scores_positive_and_negative():
    default = SentimentScorer()
    assert default.score("a great victory") > 0
    assert default.score("a terrible disaster") < 0


@pytest.mark.parametrize("text", [
    "",
    "Markets surge sharply.",
    "Floods kill dozens, a terrible tragedy",
    "win win win",
    "Breaking news today",
])
def test_formatted_score_has_two_decimals(text):
    assert SENTIMENT_PATTERN.match(SentimentScorer().score_text(text))


def test_format_sentiment():
    assert format_sentiment(0.333333) == "0.33"
    assert format_sentiment(-0.001) == "0.00"
    assert format_sentiment(-1.5) == "-1.50"


def test_tokenize():
    assert tokenize("“Hello,” world ...") == ["hello", "world"]


def test_default_table_is_full_afinn_165():
    table = load_afinn()
    assert len(table) == 3382
    assert table["good"] == 3
    assert table["bad"] == -3
    assert table["abandon"] == -2
    assert table["outstanding"] == 5
    assert table["win"] == 4


@pytest.mark.parametrize("word", ["surge", "drought", "achieve", "recovery", "slump"])
def test_table_has_no_made_up_words(word):
    assert word not in load_afinn()


def test_read_word_file():
    table = read_word_file("good\t3\ncool stuff\t3\n\nworst\t-3\n")
    assert table == {"good": 3, "cool stuff": 3, "worst": -3}
