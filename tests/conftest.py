import pytest

from core.models import ExtractionProfile, Source

FARM_HTML = (
    '<div class="article"><span class="title">Farmers adopt new crop tech</span>'
    '<p class="synopsis">Farmers across Punjab are adopting new crop technology to boost '
    'harvest yields amid changing weather.</p></div>'
)


@pytest.fixture
def farm_html():
    return FARM_HTML


@pytest.fixture
def article_profile():
    return ExtractionProfile(
        article_selector=".article",
        title_selector=".title",
        content_selector=".synopsis",
    )


@pytest.fixture
def make_source(article_profile):
    def _make(name="Test Times", url="https://news.example.com/india", profiles=None):
        return Source(name=name, url=url, profiles=tuple(profiles) if profiles is not None else (article_profile,))
    return _make
