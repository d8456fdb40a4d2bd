"""Stamp and coupon boards built from a completion summary."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from stamprally.client.ledger import CouponLedger

TOTAL_VENUES = 15


class CouponStatus(str, Enum):
    """Display state of a venue's coupon."""

    AVAILABLE = "available"
    USED = "used"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class StampCell:
    venue_id: str
    completed: bool


@dataclass(frozen=True)
class CouponCell:
    venue_id: str
    status: CouponStatus
    coupon: dict[str, str] | None = None


def fallback_summary(required_venues: list[str] | None = None) -> dict[str, Any]:
    """Summary shown when the API cannot be reached or no user is known."""
    required = list(required_venues or [])
    return {
        "completedVenues": [],
        "coupon": [],
        "requiredVenues": required,
        "doneCount": 0,
        "totalRequired": len(required) or TOTAL_VENUES,
    }


def vendor_to_venue(vendor_id: str) -> str:
    """Map a coupon's vendor id (vendor01) to its venue id (venue01)."""
    return vendor_id.replace("vendor", "venue")


def venue_ids(total: int = TOTAL_VENUES) -> list[str]:
    return [f"venue{i:02d}" for i in range(1, total + 1)]


def stamp_board(summary: dict[str, Any]) -> list[StampCell]:
    """One cell per required venue, in catalog order."""
    completed = set(summary.get("completedVenues") or [])
    return [
        StampCell(venue_id=venue_id, completed=venue_id in completed)
        for venue_id in summary.get("requiredVenues") or []
    ]


def coupon_board(
    summary: dict[str, Any], ledger: CouponLedger, total: int = TOTAL_VENUES
) -> list[CouponCell]:
    """One cell per venue slot with the coupon's redemption status."""
    coupons = {vendor_to_venue(c["vendorid"]): c for c in summary.get("coupon") or []}
    used = ledger.used_coupons()

    cells = []
    for venue_id in venue_ids(total):
        coupon = coupons.get(venue_id)
        if coupon is None:
            status = CouponStatus.UNAVAILABLE
        elif used.get(venue_id):
            status = CouponStatus.USED
        else:
            status = CouponStatus.AVAILABLE
        cells.append(CouponCell(venue_id=venue_id, status=status, coupon=coupon))
    return cells


def redeem(cell: CouponCell, ledger: CouponLedger) -> bool:
    """Use an available coupon.

    Raises ValueError for a venue with no coupon or one already used.
    """
    if cell.status == CouponStatus.UNAVAILABLE:
        raise ValueError(f"No coupon earned for {cell.venue_id}")
    if cell.status == CouponStatus.USED:
        raise ValueError(f"Coupon for {cell.venue_id} already used")
    return ledger.mark_used(cell.venue_id)
