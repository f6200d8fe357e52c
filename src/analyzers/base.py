"""Base analyzer interface and result types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from enum import Enum


class FeedbackKind(str, Enum):
    """Severity of a single feedback item."""

    GOOD = "good"
    WARNING = "warning"
    MISSING = "missing"


@dataclass(frozen=True)
class FeedbackItem:
    """One human-readable finding, in evaluation order."""

    kind: FeedbackKind
    message: str


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points earned per rubric category."""

    title_description: int = 0
    open_graph: int = 0
    twitter_card: int = 0
    canonical_robots: int = 0
    structured_data: int = 0

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class MetaTags:
    """Extracted head metadata. None means no matching tag was found."""

    title: str | None = None
    description: str | None = None
    canonical: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None
    robots: str | None = None
    structured_data: str | None = None


@dataclass(frozen=True)
class PreviewData:
    """Plain-text renderings of how the page shows up in search and social feeds."""

    google_preview: str | None = None
    facebook_preview: str | None = None
    twitter_preview: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Standard result format for a metadata analysis."""

    score: int  # Overall score (0-100), equals breakdown.total
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)
    meta: MetaTags = field(default_factory=MetaTags)
    feedback: tuple[FeedbackItem, ...] = ()
    previews: PreviewData = field(default_factory=PreviewData)


class BaseAnalyzer(ABC):
    """Abstract base class for all analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return analyzer name."""
        pass

    @abstractmethod
    def analyze(self, url: str) -> AnalysisResult:
        """
        Run analysis on the given URL.

        Args:
            url: The website URL to analyze

        Returns:
            AnalysisResult with score, breakdown, metadata and feedback
        """
        pass
