from core import markup
from core.models import ExtractionProfile
from core.recovery import (
    GENERIC_PROFILE,
    MAX_ARTICLES_PER_SOURCE,
    profiles_to_try,
    recover,
    title_from_content,
)


def test_recovers_title_content_and_link(make_source, farm_html):
    html = farm_html.replace("</div>", '<a href="/india/farm-story.cms">more</a></div>')
    candidates = recover(markup.parse(html), make_source())

    assert len(candidates) == 1
    candidate = candidates[0]
    assert candidate.title == "Farmers adopt new crop tech"
    assert candidate.content.startswith("Farmers across Punjab")
    assert candidate.link == "https://news.example.com/india/farm-story.cms"


def test_absolute_link_kept(make_source):
    html = '<div class="article"><span class="title">T</span><a href="https://other.example.org/a">x</a></div>'
    candidates = recover(markup.parse(html), make_source())
    assert candidates[0].link == "https://other.example.org/a"


def test_no_link_is_none(make_source, farm_html):
    assert recover(markup.parse(farm_html), make_source())[0].link is None


def test_never_more_than_five(make_source):
    html = "".join(
        f'<div class="article"><span class="title">Story {i}</span></div>' for i in range(12)
    )
    candidates = recover(markup.parse(html), make_source())
    assert len(candidates) == MAX_ARTICLES_PER_SOURCE
    assert [c.title for c in candidates] == [f"Story {i}" for i in range(5)]


def test_title_from_first_sentence(make_source):
    html = '<div class="article">Breaking news today. Markets surge sharply.</div>'
    candidate = recover(markup.parse(html), make_source())[0]
    assert candidate.title == "Breaking news today"
    assert candidate.content == " Markets surge sharply."


def test_long_first_sentence_truncated():
    content = "A" * 70 + ". Rest of story"
    title, rest = title_from_content(content)
    assert title == "A" * 60 + "..."
    assert rest == "A" * 10 + ". Rest of story"


def test_content_without_period_becomes_title():
    assert title_from_content("No period here") == ("No period here", "")


def test_content_falls_back_to_element_text(make_source):
    html = '<div class="article"><span class="title">Headline</span><em>Loose text</em></div>'
    candidate = recover(markup.parse(html), make_source())[0]
    assert candidate.title == "Headline"
    assert candidate.content == "HeadlineLoose text"


def test_generic_profile_used_when_primary_misses(make_source):
    html = "<main><article><h2>Monsoon arrives early</h2><p>Rain lashes the coast.</p></article></main>"
    source = make_source(profiles=[ExtractionProfile(".does-not-exist", ".t", ".c")])
    candidates = recover(markup.parse(html), source)
    assert len(candidates) == 1
    assert candidates[0].title == "Monsoon arrives early"
    assert candidates[0].content == "Rain lashes the coast."


def test_later_profile_used_when_earlier_yields_only_empty_elements(make_source):
    html = '<div class="teaser"></div><section class="story"><h3>Real story</h3></section>'
    source = make_source(profiles=[
        ExtractionProfile(".teaser", ".t", ".c"),
        ExtractionProfile(".story", "h3", "p"),
    ])
    candidates = recover(markup.parse(html), source)
    assert [c.title for c in candidates] == ["Real story"]


def test_nothing_matches_returns_empty(make_source):
    html = "<div><span>Just a page chrome</span></div>"
    source = make_source(profiles=[ExtractionProfile(".nope", ".t", ".c")])
    assert recover(markup.parse(html), source) == []


def test_generic_profile_not_tried_twice():
    profiles = profiles_to_try([GENERIC_PROFILE])
    assert profiles == [GENERIC_PROFILE]


def test_nested_generic_matches_counted_once(make_source):
    html = "".join(
        f'<div class="story-card"><article><h2>Story {i}</h2><p>Body {i}.</p></article></div>'
        for i in range(4)
    )
    source = make_source(profiles=[ExtractionProfile(".does-not-exist", ".t", ".c")])
    candidates = recover(markup.parse(html), source)
    assert [c.title for c in candidates] == [f"Story {i}" for i in range(4)]
