"""Pydantic schemas for API requests and responses."""

from stamprally.schemas.completion import (
    CompleteRequest,
    CompleteResponse,
    CouponResponse,
    VenueSummaryResponse,
)

__all__ = [
    "CompleteRequest",
    "CompleteResponse",
    "CouponResponse",
    "VenueSummaryResponse",
]
