"""Integration tests for the job workflow over the HTTP API."""

from uuid import uuid4

import pytest
import pytest_asyncio

API = "/api/v1"


async def create_client(client, email="jane@example.com"):
    response = await client.post(
        f"{API}/clients",
        json={"email": email, "firstName": "Jane", "lastName": "Doe"},
    )
    assert response.status_code == 201, response.text
    return response.json()["client"]


async def create_tradesperson(client, email, postcode="SW1A 2BB", verify=True):
    response = await client.post(
        f"{API}/tradespeople",
        json={
            "email": email,
            "firstName": "Dave",
            "lastName": "Pipe",
            "trade": "Plumber",
            "postcode": postcode,
        },
    )
    assert response.status_code == 201, response.text
    tradesperson = response.json()["tradesperson"]
    if verify:
        response = await client.post(
            f"{API}/admin/verify-tradesperson",
            json={"tradespersonId": tradesperson["id"]},
        )
        assert response.status_code == 200, response.text
        tradesperson = response.json()["tradesperson"]
    return tradesperson


async def post_job(client, client_id, approve=True):
    response = await client.post(
        f"{API}/jobs/post",
        json={
            "clientId": client_id,
            "trade": "Plumber",
            "jobDescription": "Fix leaking kitchen tap",
            "postcode": "SW1A 1AA",
            "budget": 200,
        },
    )
    assert response.status_code == 201, response.text
    job = response.json()["job"]
    if approve:
        response = await client.post(f"{API}/admin/approve-job", json={"jobId": job["id"]})
        assert response.status_code == 200, response.text
        job = response.json()["job"]
    return job


async def apply(client, job_id, tradesperson_id, amount=180):
    return await client.post(
        f"{API}/jobs/apply",
        json={
            "jobId": job_id,
            "tradespersonId": tradesperson_id,
            "quotationAmount": amount,
            "quotationNotes": "Parts included",
        },
    )


@pytest.mark.integration
class TestJobWorkflowApi:
    """Drives a job from posting to review through the API."""

    @pytest_asyncio.fixture
    async def setup(self, client):
        owner = await create_client(client)
        dave = await create_tradesperson(client, "dave@example.com")
        job = await post_job(client, owner["id"])
        return owner, dave, job

    @pytest.mark.asyncio
    async def test_post_apply_assign_complete_rate(self, client, setup):
        owner, dave, job = setup
        assert job["status"] == "open"
        assert job["is_approved"] is True

        available = await client.get(
            f"{API}/jobs/available", params={"tradespersonId": dave["id"]}
        )
        assert available.status_code == 200
        assert [j["id"] for j in available.json()["jobs"]] == [job["id"]]

        applied = await apply(client, job["id"], dave["id"])
        assert applied.status_code == 201, applied.text
        assert applied.json()["application"]["status"] == "pending"

        # Already applied, so no longer listed as available
        available = await client.get(
            f"{API}/jobs/available", params={"tradespersonId": dave["id"]}
        )
        assert available.json()["jobs"] == []

        assigned = await client.post(
            f"{API}/jobs/client-assign",
            json={
                "jobId": job["id"],
                "tradespersonId": dave["id"],
                "clientId": owner["id"],
                "assignedBy": "client",
            },
        )
        assert assigned.status_code == 200, assigned.text
        body = assigned.json()
        assert body["job"]["status"] == "in_progress"
        assert body["job"]["assigned_tradesperson_id"] == dave["id"]
        assert body["job"]["assigned_by"] == "client"
        assert body["job"]["quotation_amount"] == 180
        assert body["application"]["status"] == "accepted"

        completed = await client.post(
            f"{API}/jobs/complete", json={"jobId": job["id"], "completedBy": "client"}
        )
        assert completed.status_code == 200, completed.text
        assert completed.json()["job"]["status"] == "completed"
        assert completed.json()["job"]["is_completed"] is True

        rated = await client.post(
            f"{API}/jobs/rate-tradesperson",
            json={
                "jobId": job["id"],
                "tradespersonId": dave["id"],
                "rating": 5,
                "review": "Quick and tidy",
            },
        )
        assert rated.status_code == 201, rated.text
        assert rated.json()["review"]["rating"] == 5
        assert rated.json()["review"]["reviewer_id"] == owner["id"]
        assert rated.json()["job"]["status"] == "reviewed"

        listing = await client.get(f"{API}/jobs", params={"clientId": owner["id"]})
        assert listing.status_code == 200
        jobs = listing.json()["jobs"]
        assert len(jobs) == 1
        assert jobs[0]["tradesperson"]["id"] == dave["id"]
        assert jobs[0]["client"]["email"] == "jane@example.com"
        assert [r["rating"] for r in jobs[0]["reviews"]] == [5]

        completed_listing = await client.get(f"{API}/jobs", params={"status": "completed"})
        assert completed_listing.status_code == 200
        [done] = completed_listing.json()["jobs"]
        assert done["id"] == job["id"]
        assert done["is_completed"] is True
        assert [r["rating"] for r in done["reviews"]] == [5]

        open_listing = await client.get(f"{API}/jobs", params={"status": "open"})
        assert open_listing.json()["jobs"] == []

    @pytest.mark.asyncio
    async def test_duplicate_application_conflicts(self, client, setup):
        _, dave, job = setup

        assert (await apply(client, job["id"], dave["id"])).status_code == 201
        duplicate = await apply(client, job["id"], dave["id"])

        assert duplicate.status_code == 409
        assert duplicate.json()["type"] == "conflict"

    @pytest.mark.asyncio
    async def test_unapproved_job_rejects_applications(self, client):
        owner = await create_client(client)
        dave = await create_tradesperson(client, "dave@example.com")
        job = await post_job(client, owner["id"], approve=False)

        response = await apply(client, job["id"], dave["id"])

        assert response.status_code == 409
        assert response.json()["type"] == "invalid_transition"

    @pytest.mark.asyncio
    async def test_unverified_tradesperson_cannot_apply(self, client, setup):
        _, _, job = setup
        newcomer = await create_tradesperson(client, "new@example.com", verify=False)

        response = await apply(client, job["id"], newcomer["id"])

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_cannot_override_client_assignment(self, client, setup):
        owner, dave, job = setup
        sam = await create_tradesperson(client, "sam@example.com")
        await apply(client, job["id"], dave["id"])
        await apply(client, job["id"], sam["id"], amount=150)

        await client.post(
            f"{API}/jobs/client-assign",
            json={"jobId": job["id"], "tradespersonId": dave["id"], "clientId": owner["id"]},
        )
        response = await client.post(
            f"{API}/admin/assign-job",
            json={"jobId": job["id"], "tradespersonId": sam["id"]},
        )

        assert response.status_code == 403
        assert response.json()["type"] == "authorization_error"

        applications = await client.get(f"{API}/jobs/{job['id']}/applications")
        statuses = {
            a["tradesperson_id"]: a["status"] for a in applications.json()["applications"]
        }
        assert statuses == {dave["id"]: "accepted", sam["id"]: "rejected"}

        listing = await client.get(f"{API}/jobs", params={"clientId": owner["id"]})
        assert listing.json()["jobs"][0]["assigned_tradesperson_id"] == dave["id"]
        assert listing.json()["jobs"][0]["assigned_by"] == "client"

    @pytest.mark.asyncio
    async def test_client_cannot_override_admin_assignment(self, client, setup):
        owner, dave, job = setup
        sam = await create_tradesperson(client, "sam@example.com")
        await apply(client, job["id"], dave["id"])
        await apply(client, job["id"], sam["id"], amount=150)

        admin = await client.post(
            f"{API}/admin/assign-job",
            json={"jobId": job["id"], "tradespersonId": sam["id"], "quotationAmount": 140},
        )
        assert admin.status_code == 200, admin.text
        assert admin.json()["job"]["quotation_amount"] == 140
        assert admin.json()["rejected_application_ids"] != []

        response = await client.post(
            f"{API}/jobs/client-assign",
            json={"jobId": job["id"], "tradespersonId": dave["id"], "clientId": owner["id"]},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_reassignment(self, client, setup):
        _, dave, job = setup
        sam = await create_tradesperson(client, "sam@example.com")
        await apply(client, job["id"], dave["id"])
        await apply(client, job["id"], sam["id"], amount=150)

        await client.post(
            f"{API}/admin/assign-job",
            json={"jobId": job["id"], "tradespersonId": dave["id"]},
        )
        response = await client.post(
            f"{API}/admin/assign-job",
            json={"jobId": job["id"], "tradespersonId": sam["id"]},
        )

        assert response.status_code == 200, response.text
        assert response.json()["reassigned"] is True
        assert response.json()["job"]["assigned_tradesperson_id"] == sam["id"]

        applications = await client.get(f"{API}/admin/job-applications")
        accepted = [
            a for a in applications.json()["applications"] if a["status"] == "accepted"
        ]
        assert [a["tradesperson_id"] for a in accepted] == [sam["id"]]

    @pytest.mark.asyncio
    async def test_complete_unassigned_job(self, client, setup):
        _, _, job = setup

        response = await client.post(
            f"{API}/jobs/complete", json={"jobId": job["id"], "completedBy": "client"}
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_completion_with_ratings(self, client, setup):
        owner, dave, job = setup
        await apply(client, job["id"], dave["id"])
        await client.post(
            f"{API}/jobs/client-assign",
            json={"jobId": job["id"], "tradespersonId": dave["id"]},
        )

        response = await client.post(
            f"{API}/jobs/complete",
            json={
                "jobId": job["id"],
                "completedBy": "client",
                "reviewerType": "client",
                "ratings": [{"tradespersonId": dave["id"], "rating": 4}],
            },
        )

        assert response.status_code == 200, response.text
        assert response.json()["job"]["status"] == "reviewed"
        assert [r["rating"] for r in response.json()["reviews"]] == [4]

        again = await client.post(
            f"{API}/jobs/rate-tradesperson",
            json={"jobId": job["id"], "tradespersonId": dave["id"], "rating": 5},
        )
        assert again.status_code == 409

    @pytest.mark.asyncio
    async def test_invalid_rating_rolls_back_completion(self, client, setup):
        owner, dave, job = setup
        await apply(client, job["id"], dave["id"])
        await client.post(
            f"{API}/jobs/client-assign",
            json={"jobId": job["id"], "tradespersonId": dave["id"]},
        )

        response = await client.post(
            f"{API}/jobs/complete",
            json={
                "jobId": job["id"],
                "reviewerType": "client",
                "ratings": [{"tradespersonId": dave["id"], "rating": 9}],
            },
        )
        assert response.status_code == 400

        listing = await client.get(f"{API}/jobs", params={"clientId": owner["id"]})
        assert listing.json()["jobs"][0]["status"] == "in_progress"
        assert listing.json()["jobs"][0]["reviews"] == []

    @pytest.mark.asyncio
    async def test_approve_quotation(self, client, setup):
        _, dave, job = setup
        applied = await apply(client, job["id"], dave["id"])
        application_id = applied.json()["application"]["id"]

        response = await client.post(
            f"{API}/admin/approve-quotation",
            json={"applicationId": application_id, "action": "approve"},
        )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["action"] == "approve"
        assert body["job"]["status"] == "in_progress"
        assert body["job"]["assigned_by"] == "admin"
        assert body["application"]["status"] == "accepted"

    @pytest.mark.asyncio
    async def test_reject_quotation(self, client, setup):
        _, dave, job = setup
        applied = await apply(client, job["id"], dave["id"])
        application_id = applied.json()["application"]["id"]

        response = await client.post(
            f"{API}/admin/approve-quotation",
            json={"applicationId": application_id, "action": "reject"},
        )

        assert response.status_code == 200, response.text
        assert response.json()["application"]["status"] == "rejected"
        assert response.json()["job"]["status"] == "open"

    @pytest.mark.asyncio
    async def test_unknown_job(self, client):
        response = await client.post(f"{API}/admin/approve-job", json={"jobId": str(uuid4())})

        assert response.status_code == 404
        assert response.json()["type"] == "not_found"

    @pytest.mark.asyncio
    async def test_malformed_body(self, client):
        response = await client.post(f"{API}/jobs/apply", json={"jobId": "nope"})

        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"

    @pytest.mark.asyncio
    async def test_repeat_approval_is_noop(self, client, setup):
        _, _, job = setup

        response = await client.post(f"{API}/admin/approve-job", json={"jobId": job["id"]})

        assert response.status_code == 200
        assert response.json()["message"] == "Job was already approved"
        assert response.json()["job"]["status"] == "open"

    @pytest.mark.asyncio
    async def test_application_listings(self, client, setup):
        _, dave, job = setup
        sara = await create_tradesperson(client, "sara@example.com", verify=False)
        application = (await apply(client, job["id"], dave["id"])).json()["application"]

        by_job = await client.get(f"{API}/jobs/{job['id']}/applications")
        assert by_job.status_code == 200
        [listed] = by_job.json()["applications"]
        assert listed["id"] == application["id"]
        assert listed["tradesperson"]["email"] == "dave@example.com"

        mine = await client.get(
            f"{API}/jobs/applications", params={"tradespersonId": dave["id"]}
        )
        assert mine.status_code == 200
        assert [a["job"]["id"] for a in mine.json()["applications"]] == [job["id"]]

        everything = await client.get(f"{API}/admin/job-applications")
        assert [a["id"] for a in everything.json()["applications"]] == [application["id"]]

        roster = await client.get(f"{API}/admin/tradespeople")
        assert roster.status_code == 200
        approval = {t["email"]: t["is_approved"] for t in roster.json()["tradespeople"]}
        assert approval == {"dave@example.com": True, "sara@example.com": False}

        missing = await client.get(f"{API}/jobs/{uuid4()}/applications")
        assert missing.status_code == 404
