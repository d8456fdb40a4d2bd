"""Tests for completion recording and aggregation."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from stamprally.exceptions import InvalidRequest, StorageUnavailable
from stamprally.models.completion import Completion
from stamprally.services.catalog import Coupon, RallyCatalog
from stamprally.services.completion_service import CompletionService


@pytest.fixture
def service(db):
    return CompletionService(db)


@pytest.fixture
def catalog():
    return RallyCatalog(
        required_venues=("venue01", "venue02", "venue03"),
        coupons=(Coupon("vendor01", "/Image/coupon01.png"),),
    )


class TestRecordCompletion:
    """Tests for CompletionService.record_completion."""

    def test_assigns_id_and_timestamp(self, service):
        completion = service.record_completion("venue01", "u1", 1)

        assert completion.id
        assert completion.venues_id == "venue01"
        assert completion.user_id == "u1"
        assert completion.complate is True
        assert isinstance(completion.created_at, int)

    def test_values_set_before_flush(self):
        completion = Completion(venues_id="venue01", user_id="u1")

        assert completion.id
        assert isinstance(completion.created_at, int)
        assert completion.complate is False

    def test_ids_are_unique(self, service):
        first = service.record_completion("venue01", "u1", 1)
        second = service.record_completion("venue01", "u1", 1)

        assert first.id != second.id

    def test_flag_other_than_one_is_incomplete(self, service):
        completion = service.record_completion("venue01", "u1", 0)
        assert completion.complate is False

    @pytest.mark.parametrize("venue_id,user_id", [("", "u1"), ("venue01", ""), (None, "u1")])
    def test_rejects_empty_identifiers(self, service, db, venue_id, user_id):
        with pytest.raises(InvalidRequest):
            service.record_completion(venue_id, user_id, 1)
        assert db.query(Completion).count() == 0

    def test_storage_fault_rolls_back(self, service, db):
        error = OperationalError("INSERT", {}, Exception("disk full"))
        with patch.object(db, "commit", side_effect=error):
            with pytest.raises(StorageUnavailable):
                service.record_completion("venue01", "u1", 1)

        assert db.query(Completion).count() == 0


class TestCompletedVenues:
    """Tests for CompletionService.completed_venues."""

    def test_distinct_completed_only(self, service):
        service.record_completion("venue02", "u1", 1)
        service.record_completion("venue01", "u1", 1)
        service.record_completion("venue02", "u1", 1)
        service.record_completion("venue03", "u1", 0)
        service.record_completion("venue04", "u2", 1)

        assert service.completed_venues("u1") == ["venue01", "venue02"]

    def test_incomplete_then_complete(self, service):
        service.record_completion("venue01", "u1", 0)
        assert service.completed_venues("u1") == []

        service.record_completion("venue01", "u1", 1)
        assert service.completed_venues("u1") == ["venue01"]

    def test_rejects_empty_user(self, service):
        with pytest.raises(InvalidRequest):
            service.completed_venues("")

    def test_storage_fault(self, service, db):
        error = OperationalError("SELECT", {}, Exception("locked"))
        with patch.object(db, "query", side_effect=error):
            with pytest.raises(StorageUnavailable):
                service.completed_venues("u1")


class TestSummarize:
    """Tests for CompletionService.summarize."""

    def test_summary_shape(self, service, catalog):
        service.record_completion("venue01", "u1", 1)
        service.record_completion("venue99", "u1", 1)

        summary = service.summarize("u1", catalog)

        assert summary == {
            "completedVenues": ["venue01", "venue99"],
            "coupon": [{"vendorid": "vendor01", "imgurl": "/Image/coupon01.png"}],
            "requiredVenues": ["venue01", "venue02", "venue03"],
            "doneCount": 2,
            "totalRequired": 3,
        }

    def test_total_required_independent_of_user(self, service, catalog):
        assert service.summarize("nobody", catalog)["totalRequired"] == 3
