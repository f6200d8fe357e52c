"""Pytest configuration and fixtures."""

import pytest

from analyzers.meta import MetaAnalyzer
from fakes import FakeDocument, FakeHead, StubFetcher


@pytest.fixture
def head() -> FakeHead:
    """Empty in-memory head section."""
    return FakeHead()


@pytest.fixture
def analyze_head():
    """Run the analyzer against an in-memory head."""

    def _analyze(head, url: str = "https://example.com"):
        analyzer = MetaAnalyzer(fetcher=StubFetcher(FakeDocument(head)))
        return analyzer.analyze(url)

    return _analyze


@pytest.fixture
def analyze_html():
    """Run the analyzer against literal HTML parsed with BeautifulSoup."""
    from analyzers.document import parse_document

    def _analyze(html: str, url: str = "https://example.com"):
        analyzer = MetaAnalyzer(fetcher=StubFetcher(parse_document(html)))
        return analyzer.analyze(url)

    return _analyze
