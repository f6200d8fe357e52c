"""Metadata analysis endpoint."""

from fastapi import APIRouter, Depends

from analyzers.meta import MetaAnalyzer
from api.schemas import AnalyzeRequest, AnalyzeResponse

router = APIRouter(tags=["Analysis"])


def get_analyzer() -> MetaAnalyzer:
    """Provide a fresh analyzer per request."""
    return MetaAnalyzer()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze a page's metadata",
    description="Fetch the page, score its SEO and social metadata, and return feedback and previews.",
)
def analyze(
    request: AnalyzeRequest,
    analyzer: MetaAnalyzer = Depends(get_analyzer),
) -> AnalyzeResponse:
    """
    Analyze a single page.

    Declared as a plain function so FastAPI runs the blocking fetch in its
    threadpool. Fetch failures come back as a 200 with a zero score.
    """
    result = analyzer.analyze(request.url)
    return AnalyzeResponse.from_result(result)
