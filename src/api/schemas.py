"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from analyzers.base import AnalysisResult, FeedbackKind


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class AnalyzeRequest(BaseModel):
    """Request body for analyzing a page."""

    url: str = Field(
        ...,
        description="The URL of the page to analyze",
        examples=["https://example.com"],
    )

    @field_validator("url")
    @classmethod
    def url_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("URL is required")
        return value


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class CamelModel(BaseModel):
    """Base model that serializes field names in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ScoreBreakdownResponse(CamelModel):
    title_description: int = 0
    open_graph: int = 0
    twitter_card: int = 0
    canonical_robots: int = 0
    structured_data: int = 0


class MetaTagsResponse(CamelModel):
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


class FeedbackItemResponse(CamelModel):
    kind: FeedbackKind = Field(alias="type")
    message: str


class PreviewDataResponse(CamelModel):
    google_preview: str | None = None
    facebook_preview: str | None = None
    twitter_preview: str | None = None


class AnalyzeResponse(BaseModel):
    """Response schema for a metadata analysis."""

    model_config = ConfigDict(from_attributes=True)

    score: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdownResponse
    meta: MetaTagsResponse
    feedback: list[FeedbackItemResponse]
    previews: PreviewDataResponse

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls.model_validate(result, from_attributes=True)


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "healthy"
    service: str = "metasnap"
    version: str = "0.1.0"
