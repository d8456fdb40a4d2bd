"""Venue requirement catalog and static coupon list."""

from dataclasses import dataclass

from stamprally.config import Settings


@dataclass(frozen=True)
class Coupon:
    """A coupon offered by a participating vendor."""

    vendor_id: str
    img_url: str

    def as_dict(self) -> dict[str, str]:
        return {"vendorid": self.vendor_id, "imgurl": self.img_url}


@dataclass(frozen=True)
class RallyCatalog:
    """Venues a user must visit, and the coupons on offer.

    Only used to report progress; check-ins for venues outside the catalog
    are still accepted and counted.
    """

    required_venues: tuple[str, ...]
    coupons: tuple[Coupon, ...]

    @classmethod
    def from_settings(cls, settings: Settings) -> "RallyCatalog":
        """Build the catalog from application settings."""
        return cls(
            required_venues=tuple(settings.required_venues),
            coupons=tuple(Coupon(c["vendorid"], c["imgurl"]) for c in settings.coupons),
        )

    @property
    def total_required(self) -> int:
        return len(self.required_venues)

    def coupon_dicts(self) -> list[dict[str, str]]:
        return [coupon.as_dict() for coupon in self.coupons]
