"""In-memory stand-ins for the document query capability and the fetcher."""

from analyzers.document import Document, Node

FULL_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Test Page Title</title>
    <meta name="description" content="Test description">
    <link rel="canonical" href="https://example.com">
    <meta name="robots" content="index, follow">
    <meta property="og:title" content="OG Title">
    <meta property="og:description" content="OG Description">
    <meta property="og:image" content="https://example.com/image.jpg">
    <meta name="twitter:title" content="Twitter Title">
    <meta name="twitter:description" content="Twitter Description">
    <meta name="twitter:image" content="https://example.com/twitter-image.jpg">
    <script type="application/ld+json">{"@context":"https://schema.org"}</script>
</head>
<body>Content</body>
</html>
"""


class FakeNode(Node):
    """Node that answers selector lookups from a fixed table."""

    def __init__(
        self,
        attrs: dict[str, str] | None = None,
        text: str = "",
        inner_html: str = "",
        children: dict[str, "FakeNode"] | None = None,
    ):
        self._attrs = attrs or {}
        self._text = text
        self._inner_html = inner_html
        self.children = children or {}
        self.queries: list[str] = []

    def select_first(self, selector: str) -> Node | None:
        self.queries.append(selector)
        return self.children.get(selector)

    def attr(self, name: str) -> str:
        return self._attrs.get(name, "")

    def text(self) -> str:
        return self._text

    def inner_html(self) -> str:
        return self._inner_html


class FakeHead(FakeNode):
    """Head node with helpers for registering tags."""

    def title(self, text: str) -> "FakeHead":
        self.children["title"] = FakeNode(text=text)
        return self

    def meta(self, key: str, content: str, attribute: str = "name") -> "FakeHead":
        self.children[f'meta[{attribute}="{key}" i]'] = FakeNode(attrs={"content": content})
        return self

    def link(self, rel: str, href: str) -> "FakeHead":
        self.children[f'link[rel="{rel}" i]'] = FakeNode(attrs={"href": href})
        return self

    def json_ld(self, content: str) -> "FakeHead":
        self.children['script[type="application/ld+json"]'] = FakeNode(inner_html=content)
        return self


class FakeDocument(Document):
    def __init__(self, head: Node | None):
        self._head = head

    def head(self) -> Node | None:
        return self._head


class StubFetcher:
    """Fetcher double that returns a canned document or raises."""

    def __init__(self, document: Document | None = None, error: Exception | None = None):
        self.document = document
        self.error = error
        self.requested: list[str | None] = []

    def fetch(self, url: str | None) -> Document:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.document
