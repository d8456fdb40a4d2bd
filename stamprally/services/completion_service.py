"""Completion service for recording and aggregating venue check-ins."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stamprally.exceptions import InvalidRequest, StorageUnavailable
from stamprally.models.completion import Completion
from stamprally.services.catalog import RallyCatalog

logger = logging.getLogger(__name__)


class CompletionService:
    """Service for completion-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def record_completion(self, venue_id: str, user_id: str, completed_flag: int) -> Completion:
        """Append one check-in record.

        No uniqueness is enforced: the same user may check in at the same
        venue any number of times.
        """
        if not venue_id or not user_id:
            raise InvalidRequest("Invalid request")

        completion = Completion(
            venues_id=venue_id,
            user_id=user_id,
            complate=completed_flag == 1,
        )
        try:
            self.db.add(completion)
            self.db.commit()
            self.db.refresh(completion)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Failed to record completion for user {user_id}")
            raise StorageUnavailable() from e

        logger.info(
            f"Recorded completion: user={user_id} venue={venue_id} complate={completion.complate}"
        )
        return completion

    def completed_venues(self, user_id: str) -> list[str]:
        """Get the distinct venues a user has completed."""
        if not user_id:
            raise InvalidRequest("Invalid userId")

        try:
            rows = (
                self.db.query(Completion.venues_id)
                .filter(
                    Completion.user_id == user_id,
                    Completion.complate == True,  # noqa: E712
                )
                .distinct()
                .order_by(Completion.venues_id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception(f"Failed to load completions for user {user_id}")
            raise StorageUnavailable() from e

        return [venue_id for (venue_id,) in rows]

    def summarize(self, user_id: str, catalog: RallyCatalog) -> dict:
        """
        Build a user's rally progress.

        Returns:
            {
                "completedVenues": list[str],
                "coupon": list[dict],
                "requiredVenues": list[str],
                "doneCount": int,
                "totalRequired": int,
            }
        """
        completed = self.completed_venues(user_id)
        return {
            "completedVenues": completed,
            "coupon": catalog.coupon_dicts(),
            "requiredVenues": list(catalog.required_venues),
            "doneCount": len(completed),
            "totalRequired": catalog.total_required,
        }
