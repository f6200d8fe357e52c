"""Metadata completeness analysis engine."""

import logging

from analyzers.base import (
    AnalysisResult,
    BaseAnalyzer,
    FeedbackItem,
    FeedbackKind,
    MetaTags,
    PreviewData,
    ScoreBreakdown,
)
from analyzers.document import Node
from analyzers.fetcher import Fetcher

logger = logging.getLogger(__name__)

# Open Graph and Twitter Card totals are compared literally, not derived from
# the per-tag weights below.
OG_FULL_SCORE = 25
TWITTER_FULL_SCORE = 20


def get_meta_content(head: Node, key: str) -> str | None:
    """Return the content of meta[name=key], falling back to meta[property=key].

    Attribute values are matched case-insensitively.
    """
    tag = head.select_first(f'meta[name="{key}" i]')
    if tag is None:
        tag = head.select_first(f'meta[property="{key}" i]')
    return tag.attr("content") if tag is not None else None


def get_link_href(head: Node, rel: str) -> str | None:
    """Return the href of the first link[rel=...] tag."""
    tag = head.select_first(f'link[rel="{rel}" i]')
    return tag.attr("href") if tag is not None else None


def render_previews(meta: MetaTags, url: str) -> PreviewData:
    """Render plain-text previews. Nothing is truncated."""
    return PreviewData(
        google_preview=f"{meta.title}\n{url}\n{meta.description}",
        facebook_preview=f"{meta.og_title}\n{meta.og_description}",
        twitter_preview=f"{meta.twitter_title}\n{meta.twitter_description}",
    )


class MetaAnalyzer(BaseAnalyzer):
    """
    Scores a page's head metadata against a fixed 100-point rubric.

    Checks, in order:
    - Title tag (15)
    - Meta description (15)
    - Canonical URL (10)
    - Robots meta tag (5)
    - Open Graph title/description/image (10/10/5)
    - Twitter Card title/description/image (8/7/5)
    - Structured data (JSON-LD) (10)
    """

    WEIGHTS = {
        "title": 15,
        "description": 15,
        "canonical": 10,
        "robots": 5,
        "og:title": 10,
        "og:description": 10,
        "og:image": 5,
        "twitter:title": 8,
        "twitter:description": 7,
        "twitter:image": 5,
        "structured_data": 10,
    }

    def __init__(self, fetcher: Fetcher | None = None):
        self.fetcher = fetcher or Fetcher()

    @property
    def name(self) -> str:
        return "meta"

    def analyze(self, url: str | None) -> AnalysisResult:
        """
        Fetch ``url`` and score its metadata.

        Never raises: fetch and parse failures are reported as a single
        ``missing`` feedback item on a zero-score result.
        """
        try:
            document = self.fetcher.fetch(url)
            head = document.head()
            if head is None:
                logger.info(f"No <head> section in {url}")
                return AnalysisResult(
                    score=0,
                    feedback=(
                        FeedbackItem(FeedbackKind.MISSING, "<head> section is missing"),
                    ),
                )
            return self.analyze_head(head, url)

        except Exception as e:
            logger.exception(f"Metadata analysis failed for {url}: {e}")
            return AnalysisResult(
                score=0,
                feedback=(
                    FeedbackItem(
                        FeedbackKind.MISSING,
                        f"Failed to fetch or parse the URL: {e}",
                    ),
                ),
            )

    def analyze_head(self, head: Node, url: str) -> AnalysisResult:
        """Run every check against an already located <head>."""
        feedback: list[FeedbackItem] = []

        title_node = head.select_first("title")
        title = title_node.text() if title_node is not None else None
        description = get_meta_content(head, "description")
        canonical = get_link_href(head, "canonical")
        robots = get_meta_content(head, "robots")
        og = {key: get_meta_content(head, key) for key in ("og:title", "og:description", "og:image")}
        twitter = {
            key: get_meta_content(head, key)
            for key in ("twitter:title", "twitter:description", "twitter:image")
        }
        structured_data = self._get_structured_data(head)

        title_points = self._check_present(
            title, "title", "Title tag", FeedbackKind.MISSING, feedback
        )
        description_points = self._check_present(
            description, "description", "Description meta tag", FeedbackKind.WARNING, feedback
        )
        canonical_points = self._check_present(
            canonical, "canonical", "Canonical tag", FeedbackKind.WARNING, feedback
        )
        robots_points = self._check_present(
            robots, "robots", "Robots meta tag", FeedbackKind.WARNING, feedback
        )
        og_points = self._check_group(og, "Open Graph tags", OG_FULL_SCORE, feedback)
        twitter_points = self._check_group(
            twitter, "Twitter Card tags", TWITTER_FULL_SCORE, feedback
        )
        structured_points = self._check_present(
            structured_data,
            "structured_data",
            "Structured data (JSON-LD)",
            FeedbackKind.WARNING,
            feedback,
        )

        breakdown = ScoreBreakdown(
            title_description=title_points + description_points,
            open_graph=og_points,
            twitter_card=twitter_points,
            canonical_robots=canonical_points + robots_points,
            structured_data=structured_points,
        )
        meta = MetaTags(
            title=title,
            description=description,
            canonical=canonical,
            og_title=og["og:title"],
            og_description=og["og:description"],
            og_image=og["og:image"],
            twitter_title=twitter["twitter:title"],
            twitter_description=twitter["twitter:description"],
            twitter_image=twitter["twitter:image"],
            robots=robots,
            structured_data=structured_data,
        )

        return AnalysisResult(
            score=breakdown.total,
            breakdown=breakdown,
            meta=meta,
            feedback=tuple(feedback),
            previews=render_previews(meta, url),
        )

    def _check_present(
        self,
        value: str | None,
        weight_key: str,
        label: str,
        missing_kind: FeedbackKind,
        feedback: list[FeedbackItem],
    ) -> int:
        """Award the full weight for a non-empty value."""
        if value:
            feedback.append(FeedbackItem(FeedbackKind.GOOD, f"{label} is present"))
            return self.WEIGHTS[weight_key]
        feedback.append(FeedbackItem(missing_kind, f"{label} is missing"))
        return 0

    def _check_group(
        self,
        values: dict[str, str | None],
        label: str,
        full_score: int,
        feedback: list[FeedbackItem],
    ) -> int:
        """Sum independent per-tag points and report full/partial/missing."""
        points = sum(self.WEIGHTS[key] for key, value in values.items() if value)

        if points == 0:
            feedback.append(FeedbackItem(FeedbackKind.MISSING, f"{label} are missing"))
        else:
            kind = FeedbackKind.GOOD if points == full_score else FeedbackKind.WARNING
            feedback.append(FeedbackItem(kind, f"{label}: {points}/{full_score}"))

        return points

    def _get_structured_data(self, head: Node) -> str | None:
        """Return the first JSON-LD script's raw content, unvalidated."""
        script = head.select_first('script[type="application/ld+json"]')
        return script.inner_html() if script is not None else None


# Convenience function
def run_meta_analysis(url: str) -> AnalysisResult:
    """Run metadata analysis on the given URL."""
    analyzer = MetaAnalyzer()
    return analyzer.analyze(url)
