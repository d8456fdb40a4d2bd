"""Local coupon redemption ledger.

Redeemed coupons are tracked only on the client, in a JSON file keyed by
venue id. Nothing here is ever sent to the server, and removing the file
forgets every redemption.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

logger = logging.getLogger(__name__)

STORAGE_KEY = "stamp_used_coupons"


class CouponLedger:
    """Tracks which venue coupons have been used on this device."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def used_coupons(self) -> dict[str, str]:
        """Get used coupons as {venue_id: used_at ISO timestamp}."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read coupon ledger {self.path}: {e}")
            return {}
        used = data.get(STORAGE_KEY) if isinstance(data, dict) else None
        return used if isinstance(used, dict) else {}

    def is_used(self, venue_id: str) -> bool:
        return bool(self.used_coupons().get(venue_id))

    def mark_used(self, venue_id: str) -> bool:
        """Mark a coupon as used, overwriting any earlier timestamp."""
        used = self.used_coupons()
        used[venue_id] = datetime.now(UTC).isoformat()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({STORAGE_KEY: used}), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write coupon ledger {self.path}: {e}")
            return False
        return True
