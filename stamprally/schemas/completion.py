"""Completion schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CompleteRequest(BaseModel):
    """Record a venue check-in."""

    model_config = ConfigDict(extra="forbid")

    venuesid: str = Field(..., min_length=1, max_length=255)
    userid: str = Field(..., min_length=1, max_length=255)
    complate: Literal[0, 1] = 0


class CompleteResponse(BaseModel):
    """Echo of the stored check-in."""

    model_config = ConfigDict(populate_by_name=True)

    venuesid: str
    userid: str
    complate: int
    created_at: int = Field(..., alias="createdAt")


class CouponResponse(BaseModel):
    """Static coupon entry."""

    vendorid: str
    imgurl: str


class VenueSummaryResponse(BaseModel):
    """A user's rally progress."""

    model_config = ConfigDict(populate_by_name=True)

    completed_venues: list[str] = Field(..., alias="completedVenues")
    coupon: list[CouponResponse]
    required_venues: list[str] = Field(..., alias="requiredVenues")
    done_count: int = Field(..., alias="doneCount")
    total_required: int = Field(..., alias="totalRequired")
