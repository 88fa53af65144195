"""Tests for the eligibility API router."""

RESIDENT_PROFILE = {
    "statusHistory": [{"id": "1", "status": "permanent_resident", "from": "2022-01-01"}],
    "travelAbsences": [{"id": "a", "from": "2023-06-01", "to": "2023-06-15", "place": "Lisbon"}],
}

PERMIT_PROFILE = {
    "statusHistory": [{"id": "1", "status": "work_permit", "from": "2023-01-01"}],
    "travelAbsences": [],
}


class TestAppEndpoints:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestSnapshotEndpoint:
    def test_snapshot(self, client):
        response = client.post(
            "/api/eligibility/snapshot",
            json={"profile": RESIDENT_PROFILE, "referenceDate": "2024-01-01"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["daysUnderQualifyingStatus"] == 730
        assert data["partialCredit"] == 0
        assert data["totalAbsenceDays"] == 13
        assert data["totalEligibleDays"] == 717
        assert data["daysRemaining"] == 378
        assert data["earliestEligibilityDate"] == "2025-01-13"

    def test_snapshot_without_qualifying_status(self, client):
        response = client.post(
            "/api/eligibility/snapshot",
            json={"profile": PERMIT_PROFILE, "referenceDate": "2024-01-01"},
        )
        assert response.status_code == 404

    def test_snapshot_defaults_to_today(self, client):
        response = client.post("/api/eligibility/snapshot", json={"profile": RESIDENT_PROFILE})
        assert response.status_code == 200
        assert response.json()["calculatedOn"]

    def test_malformed_date_reports_field(self, client):
        profile = {
            **RESIDENT_PROFILE,
            "travelAbsences": [{"id": "a", "from": "2023-06-01", "to": "2023-06-31"}],
        }
        response = client.post(
            "/api/eligibility/snapshot",
            json={"profile": profile, "referenceDate": "2024-01-01"},
        )
        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "ValidationError"
        assert data["details"][0]["field"] == "travelAbsences[0].to"
        assert data["path"] == "/api/eligibility/snapshot"

    def test_malformed_reference_date(self, client):
        response = client.post(
            "/api/eligibility/snapshot",
            json={"profile": RESIDENT_PROFILE, "referenceDate": "Jan 1 2024"},
        )
        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "referenceDate"

    def test_unknown_status_rejected(self, client):
        profile = {"statusHistory": [{"status": "tourist", "from": "2022-01-01"}]}
        response = client.post("/api/eligibility/snapshot", json={"profile": profile})
        assert response.status_code == 422


class TestProjectionEndpoint:
    def test_projection(self, client):
        response = client.post(
            "/api/eligibility/projection",
            json={"profile": PERMIT_PROFILE, "referenceDate": "2024-01-01"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["grossDays"] == 366
        assert data["projectedCredit"] == 183
        assert data["daysNeededAsQualifyingHolder"] == 912
        assert data["projectedEarliestDate"] == "2026-07-01"

    def test_projection_for_empty_profile(self, client):
        response = client.post(
            "/api/eligibility/projection",
            json={"profile": {}, "referenceDate": "2024-01-01"},
        )
        assert response.status_code == 200
        assert response.json()["daysNeededAsQualifyingHolder"] == 1095


class TestEvaluateEndpoint:
    def test_resident(self, client):
        response = client.post(
            "/api/eligibility/evaluate",
            json={"profile": RESIDENT_PROFILE, "referenceDate": "2024-01-01"},
        )
        data = response.json()
        assert data["mode"] == "snapshot"
        assert data["snapshot"]["daysRemaining"] == 378
        assert "projection" not in data

    def test_permit_holder(self, client):
        response = client.post(
            "/api/eligibility/evaluate",
            json={"profile": PERMIT_PROFILE, "referenceDate": "2024-01-01"},
        )
        data = response.json()
        assert data["mode"] == "projection"
        assert data["projection"]["projectedCredit"] == 183


class TestProgressEndpoint:
    def test_progress(self, client):
        snapshot = client.post(
            "/api/eligibility/snapshot",
            json={"profile": RESIDENT_PROFILE, "referenceDate": "2024-01-01"},
        ).json()

        response = client.post(
            "/api/eligibility/progress", json={"snapshot": snapshot, "today": "2025-01-13"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["isEligible"] is True
        assert data["daysRemaining"] == 0
        assert data["daysRequired"] == 1095


class TestShouldRecalculateEndpoint:
    def test_changed_absences(self, client):
        response = client.post(
            "/api/eligibility/should-recalculate",
            json={
                "newData": {"travelAbsences": []},
                "existingData": {"travelAbsences": RESIDENT_PROFILE["travelAbsences"]},
                "isNewRecord": False,
            },
        )
        assert response.json() == {"shouldRecalculate": True}

    def test_unchanged(self, client):
        response = client.post(
            "/api/eligibility/should-recalculate",
            json={"newData": RESIDENT_PROFILE, "existingData": RESIDENT_PROFILE},
        )
        assert response.json() == {"shouldRecalculate": False}


class TestOverlapsEndpoint:
    def test_overlapping_trip(self, client):
        response = client.post(
            "/api/eligibility/overlaps",
            json={
                "range": {"from": "2023-06-10", "to": "2023-06-20"},
                "existing": [
                    {"from": "2023-06-01", "to": "2023-06-15"},
                    {"from": "2023-08-01", "to": "2023-08-05"},
                ],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["overlapping"] == [{"from": "2023-06-01", "to": "2023-06-15"}]
        assert data["isExactDuplicate"] is False

    def test_inverted_candidate(self, client):
        response = client.post(
            "/api/eligibility/overlaps",
            json={"range": {"from": "2023-06-20", "to": "2023-06-10"}},
        )
        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "range.to"


class TestTimelineEndpoint:
    def test_resident_with_planned_trip(self, client):
        profile = {
            **RESIDENT_PROFILE,
            "travelAbsences": [
                *RESIDENT_PROFILE["travelAbsences"],
                {"id": "b", "from": "2024-03-01", "to": "2024-03-10"},
            ],
        }
        response = client.post(
            "/api/eligibility/timeline",
            json={"profile": profile, "referenceDate": "2024-01-01"},
        )
        assert response.status_code == 200
        assert response.json() == {
            "currentStatus": "permanent_resident",
            "holdsQualifyingStatus": True,
            "upcomingTrips": 1,
            "referenceDate": "2024-01-01",
        }

    def test_permit_holder(self, client):
        response = client.post(
            "/api/eligibility/timeline",
            json={"profile": PERMIT_PROFILE, "referenceDate": "2024-01-01"},
        )
        data = response.json()
        assert data["currentStatus"] == "work_permit"
        assert data["holdsQualifyingStatus"] is False


class TestStatusHistoryEndpoint:
    def test_append_closes_open_period(self, client):
        response = client.post(
            "/api/eligibility/status-history",
            json={
                "statusHistory": PERMIT_PROFILE["statusHistory"],
                "entry": {"id": "2", "status": "permanent_resident", "from": "2024-03-01"},
            },
        )
        assert response.status_code == 200
        history = response.json()["statusHistory"]
        assert history[0]["to"] == "2024-02-29"
        assert history[1]["from"] == "2024-03-01"
        assert history[1]["to"] is None

    def test_second_open_period_on_same_day_rejected(self, client):
        response = client.post(
            "/api/eligibility/status-history",
            json={
                "statusHistory": PERMIT_PROFILE["statusHistory"],
                "entry": {"id": "2", "status": "permanent_resident", "from": "2023-01-01"},
            },
        )
        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "entry.from"
