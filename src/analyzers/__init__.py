"""MetaSnap analyzers package."""

from analyzers.base import (
    AnalysisResult,
    BaseAnalyzer,
    FeedbackItem,
    FeedbackKind,
    MetaTags,
    PreviewData,
    ScoreBreakdown,
)
from analyzers.document import Document, Node, SoupDocument, SoupNode, parse_document
from analyzers.fetcher import FetchError, Fetcher
from analyzers.meta import MetaAnalyzer, run_meta_analysis

__all__ = [
    "AnalysisResult",
    "BaseAnalyzer",
    "FeedbackItem",
    "FeedbackKind",
    "MetaTags",
    "PreviewData",
    "ScoreBreakdown",
    "Document",
    "Node",
    "SoupDocument",
    "SoupNode",
    "parse_document",
    "FetchError",
    "Fetcher",
    "MetaAnalyzer",
    "run_meta_analysis",
]
