"""Webinar request and response schemas.

Pydantic schemas for webinar API endpoints. Seat counts are not bounded
here: the handlers own the seat rules and answer with domain messages.
"""

from pydantic import AwareDatetime, BaseModel, Field

from src.application.dtos.webinar_dtos import OrganizeWebinarResult


# =============================================================================
# Request Schemas
# =============================================================================


class WebinarCreateRequest(BaseModel):
    """Request body for organizing a webinar.

    Attributes:
        title: Webinar title.
        seats: Requested seat capacity.
        start_date: Scheduled start (timezone-aware ISO 8601).
        end_date: Scheduled end (timezone-aware ISO 8601).
    """

    title: str = Field(..., description="Webinar title", examples=["Intro to FastAPI"])
    seats: int = Field(..., description="Seat capacity", examples=[100])
    start_date: AwareDatetime = Field(
        ..., description="Scheduled start", examples=["2024-01-10T10:00:00Z"]
    )
    end_date: AwareDatetime = Field(
        ..., description="Scheduled end", examples=["2024-01-10T11:00:00Z"]
    )


class WebinarSeatsUpdateRequest(BaseModel):
    """Request body for changing a webinar's seat count."""

    seats: int = Field(..., description="New seat capacity", examples=[200])


# =============================================================================
# Response Schemas
# =============================================================================


class WebinarCreateResponse(BaseModel):
    """Response for a newly organized webinar."""

    id: str = Field(..., description="Webinar identifier")

    @classmethod
    def from_dto(cls, dto: OrganizeWebinarResult) -> "WebinarCreateResponse":
        """Convert application DTO to response schema."""
        return cls(id=dto.id)


class WebinarSeatsUpdateResponse(BaseModel):
    """Acknowledgement for a seat change."""

    message: str = Field("Seats updated", description="Outcome message")
