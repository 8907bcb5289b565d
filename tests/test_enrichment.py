import re

from core import markup
from core.enrichment import ArticleEnricher, summarize
from core.models import RawArticleCandidate, UNTITLED
from core.recovery import recover


def _records(html, source):
    enricher = ArticleEnricher()
    return [enricher.enrich(c, source.name) for c in recover(markup.parse(html), source)]


def test_farm_article_scenario(make_source, farm_html):
    records = _records(farm_html, make_source())

    assert len(records) == 1
    record = records[0]
    assert record.topic == "agriculture"
    assert record.title == "Farmers adopt new crop tech"
    assert "punjab" in record.entities.states
    assert record.source == "Test Times"
    assert re.match(r"^-?\d+\.\d{2}$", record.sentiment)
    assert record.timestamp is not None


def test_pipeline_stages_are_deterministic(make_source, farm_html):
    html = farm_html * 3
    first = [r.to_dict() for r in _records(html, make_source())]
    second = [r.to_dict() for r in _records(html, make_source())]
    for record in first + second:
        record.pop("timestamp")
    assert first == second


def test_summary_is_first_thirty_words():
    content = " ".join(f"w{i}" for i in range(40))
    assert summarize(content, "Title") == " ".join(f"w{i}" for i in range(30)) + "..."


def test_summary_falls_back_to_title():
    assert summarize("", "Only a title") == "Only a title"


def test_title_only_candidate():
    candidate = RawArticleCandidate(element=None, title="Cricket tournament opens", content="")
    record = ArticleEnricher().enrich(candidate, "Sports Desk")
    assert record.summary == "Cricket tournament opens"
    assert record.topic == "sports"


def test_empty_title_gets_placeholder():
    candidate = RawArticleCandidate(element=None, title="  ", content="Stock market rallies")
    record = ArticleEnricher().enrich(candidate, "Desk")
    assert record.title == UNTITLED
    assert record.topic == "business"


def test_to_dict_is_json_friendly(make_source, farm_html):
    data = _records(farm_html, make_source())[0].to_dict()
    assert data["entities"]["states"] == ["punjab"]
    assert isinstance(data["timestamp"], str)
