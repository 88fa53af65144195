"""Tests for profile and eligibility schemas."""

import pytest
from pydantic import ValidationError

from residency.constants import StatusCategory
from residency.schemas.eligibility import EligibilitySnapshot
from residency.schemas.profile import Profile, StatusEntry


class TestProfile:
    def test_camel_case_record(self):
        profile = Profile.model_validate(
            {
                "uid": "user-1",
                "email": "someone@example.com",
                "statusHistory": [
                    {"id": "1", "status": "study_permit", "from": "2020-09-01", "to": "2022-08-31"}
                ],
                "travelAbsences": [{"id": "a", "from": "2021-12-20", "to": "2022-01-05"}],
                "prDate": "2022-09-01",
            }
        )
        assert profile.status_history[0].status == StatusCategory.STUDY_PERMIT
        assert profile.status_history[0].from_ == "2020-09-01"
        assert profile.travel_absences[0].place is None
        assert profile.pr_date == "2022-09-01"

    def test_null_lists_become_empty(self):
        profile = Profile.model_validate(
            {"statusHistory": None, "travelAbsences": None, "presenceInCanada": None}
        )
        assert profile.status_history == []
        assert profile.travel_absences == []
        assert profile.presence_in_canada == []

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            StatusEntry.model_validate({"status": "tourist", "from": "2020-01-01"})

    def test_serializes_with_stored_keys(self):
        entry = StatusEntry(status=StatusCategory.WORK_PERMIT, from_="2020-01-01")
        data = entry.model_dump(by_alias=True)
        assert data["from"] == "2020-01-01"
        assert data["status"] == StatusCategory.WORK_PERMIT
        assert data["to"] is None


class TestEligibilitySnapshot:
    def test_serializes_camel_case(self):
        snapshot = EligibilitySnapshot(
            days_under_qualifying_status=730,
            partial_credit=0,
            total_absence_days=13,
            total_eligible_days=717,
            days_remaining=378,
            earliest_eligibility_date="2025-01-13",
            calculated_on="2024-01-01",
        )
        data = snapshot.model_dump(by_alias=True)
        assert data["daysUnderQualifyingStatus"] == 730
        assert data["earliestEligibilityDate"] == "2025-01-13"

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            EligibilitySnapshot(
                days_under_qualifying_status=-1,
                partial_credit=0,
                total_absence_days=0,
                total_eligible_days=0,
                days_remaining=0,
                earliest_eligibility_date="2025-01-13",
                calculated_on="2024-01-01",
            )
