"""Integration tests for the quote request pipeline and service endpoints."""

import pytest
import pytest_asyncio

API = "/api/v1"


@pytest.mark.integration
class TestQuotePipelineApi:
    """Customer request, admin screening, tradesperson quote, customer answer."""

    @pytest_asyncio.fixture
    async def tradesperson(self, client):
        response = await client.post(
            f"{API}/tradespeople",
            json={
                "email": "bob@builders.example.com",
                "firstName": "Bob",
                "lastName": "Builder",
                "trade": "Builder",
                "postcode": "LS1 4AP",
            },
        )
        assert response.status_code == 201, response.text
        return response.json()["tradesperson"]

    @pytest_asyncio.fixture
    async def quote_request(self, client, tradesperson):
        response = await client.post(
            f"{API}/quote-requests",
            json={
                "tradespersonId": tradesperson["id"],
                "customerName": "Sam Client",
                "customerEmail": "Sam@Example.com",
                "projectType": "Extension",
                "projectDescription": "Single storey rear extension",
                "budgetRange": "30k-40k",
            },
        )
        assert response.status_code == 201, response.text
        return response.json()["quote_request"]

    async def visible_requests(self, client, tradesperson_id):
        response = await client.get(
            f"{API}/tradesperson/quote-requests",
            params={"tradespersonId": tradesperson_id},
        )
        assert response.status_code == 200, response.text
        return response.json()["quote_requests"]

    @pytest.mark.asyncio
    async def test_full_pipeline(self, client, tradesperson, quote_request):
        assert quote_request["status"] == "pending"
        assert quote_request["customer_email"] == "sam@example.com"
        assert await self.visible_requests(client, tradesperson["id"]) == []

        screened = await client.post(
            f"{API}/admin/approve-quote-request",
            json={"quoteRequestId": quote_request["id"], "action": "approve"},
        )
        assert screened.status_code == 200, screened.text
        assert screened.json()["quote_request"]["admin_approved"] is True

        visible = await self.visible_requests(client, tradesperson["id"])
        assert [r["id"] for r in visible] == [quote_request["id"]]

        submitted = await client.post(
            f"{API}/tradesperson/submit-quote",
            json={
                "quoteRequestId": quote_request["id"],
                "tradespersonId": tradesperson["id"],
                "quoteAmount": 36500,
                "quoteDescription": "Includes foundations and roof",
            },
        )
        assert submitted.status_code == 201, submitted.text
        quote = submitted.json()["quote"]
        assert quote["status"] == "pending"
        assert submitted.json()["quote_request"]["status"] == "quoted"

        customer_view = await client.get(
            f"{API}/client/quote-requests", params={"email": "sam@example.com"}
        )
        assert customer_view.status_code == 200
        listed = customer_view.json()["quote_requests"]
        assert len(listed) == 1
        assert listed[0]["quote"]["id"] == quote["id"]
        assert listed[0]["chat_enabled"] is False

        answered = await client.post(
            f"{API}/client/approve-quote",
            json={"quoteId": quote["id"], "action": "approve"},
        )
        assert answered.status_code == 200, answered.text
        assert answered.json()["quote"]["status"] == "client_approved"
        assert answered.json()["quote_request"]["chat_enabled"] is True

        again = await client.post(
            f"{API}/client/approve-quote",
            json={"quoteId": quote["id"], "action": "reject"},
        )
        assert again.status_code == 409

    @pytest.mark.asyncio
    async def test_quote_before_screening(self, client, tradesperson, quote_request):
        response = await client.post(
            f"{API}/tradesperson/submit-quote",
            json={
                "quoteRequestId": quote_request["id"],
                "tradespersonId": tradesperson["id"],
                "quoteAmount": 36500,
            },
        )

        assert response.status_code == 409
        assert response.json()["type"] == "invalid_transition"

    @pytest.mark.asyncio
    async def test_rejected_request_stays_hidden(self, client, tradesperson, quote_request):
        response = await client.post(
            f"{API}/admin/approve-quote-request",
            json={"quoteRequestId": quote_request["id"], "action": "reject"},
        )

        assert response.status_code == 200
        assert response.json()["quote_request"]["status"] == "rejected"
        assert await self.visible_requests(client, tradesperson["id"]) == []


@pytest.mark.integration
class TestServiceEndpoints:
    @pytest.mark.asyncio
    async def test_liveness(self, client):
        response = await client.get(f"{API}/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    @pytest.mark.asyncio
    async def test_readiness(self, client):
        response = await client.get(f"{API}/health/ready")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_metrics_exposed(self, client):
        await client.get(f"{API}/health/live")

        response = await client.get(f"{API}/health/metrics")

        assert response.status_code == 200
        assert "api_requests_total" in response.text

    @pytest.mark.asyncio
    async def test_duplicate_client_email(self, client):
        body = {"email": "jane@example.com", "firstName": "Jane"}

        assert (await client.post(f"{API}/clients", json=body)).status_code == 201
        duplicate = await client.post(f"{API}/clients", json=body)

        assert duplicate.status_code == 409
