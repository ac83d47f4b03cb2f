"""
Unit tests for the quote request pipeline.
"""

from uuid import uuid4

import pytest

from marketplace.application.use_cases.quotes import (
    CreateQuoteRequestRequest,
    QuotePipeline,
    SubmitQuoteRequest,
)
from marketplace.domain.entities.quote_request import Quote, QuoteRequest
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import (
    AuthorizationError,
    InvalidTransitionError,
)
from marketplace.domain.value_objects.approval_action import ApprovalAction
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus, QuoteStatus


class TestQuotePipeline:
    """Test cases for QuotePipeline."""

    @pytest.fixture
    def pipeline(
        self,
        mock_quote_repository,
        mock_tradesperson_repository,
        mock_transaction_service,
    ):
        return QuotePipeline(
            quote_repo=mock_quote_repository,
            tradesperson_repo=mock_tradesperson_repository,
            transaction_service=mock_transaction_service,
        )

    @pytest.fixture
    def quote_request(self, sample_tradesperson):
        return QuoteRequest(
            tradesperson_id=sample_tradesperson.id,
            customer_name="Sam Client",
            customer_email="sam@example.com",
            project_description="Bathroom refit",
        )

    @pytest.mark.asyncio
    async def test_create_request(
        self, pipeline, sample_tradesperson, mock_tradesperson_repository
    ):
        mock_tradesperson_repository.get_by_id.return_value = sample_tradesperson

        created = await pipeline.create_request(
            CreateQuoteRequestRequest(
                tradesperson_id=sample_tradesperson.id,
                customer_name="Sam Client",
                customer_email="Sam@Example.com",
                project_description="Bathroom refit",
                budget_range="5k-8k",
            )
        )

        assert created.status == QuoteRequestStatus.PENDING
        assert created.customer_email == "sam@example.com"
        assert created.budget_range == "5k-8k"

    @pytest.mark.asyncio
    async def test_create_request_invalid_email(
        self, pipeline, sample_tradesperson, mock_tradesperson_repository
    ):
        mock_tradesperson_repository.get_by_id.return_value = sample_tradesperson

        with pytest.raises(ValidationError):
            await pipeline.create_request(
                CreateQuoteRequestRequest(
                    tradesperson_id=sample_tradesperson.id,
                    customer_name="Sam Client",
                    customer_email="not-an-email",
                    project_description="Bathroom refit",
                )
            )

    @pytest.mark.asyncio
    async def test_create_request_unknown_tradesperson(
        self, pipeline, mock_tradesperson_repository
    ):
        mock_tradesperson_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await pipeline.create_request(
                CreateQuoteRequestRequest(
                    tradesperson_id=uuid4(),
                    customer_name="Sam Client",
                    customer_email="sam@example.com",
                    project_description="Bathroom refit",
                )
            )

    @pytest.mark.asyncio
    async def test_admin_review(self, pipeline, quote_request, mock_quote_repository):
        mock_quote_repository.get_request.return_value = quote_request

        approved = await pipeline.review_request(quote_request.id, ApprovalAction.APPROVE)

        assert approved.status == QuoteRequestStatus.ADMIN_APPROVED
        assert approved.admin_approved is True

    @pytest.mark.asyncio
    async def test_submit_quote_before_approval(
        self, pipeline, quote_request, sample_tradesperson, mock_quote_repository
    ):
        mock_quote_repository.get_request.return_value = quote_request

        with pytest.raises(InvalidTransitionError):
            await pipeline.submit_quote(
                SubmitQuoteRequest(
                    quote_request_id=quote_request.id,
                    tradesperson_id=sample_tradesperson.id,
                    quote_amount=6500,
                )
            )
        mock_quote_repository.create_quote.assert_not_called()

    @pytest.mark.asyncio
    async def test_submit_quote_by_other_tradesperson(
        self, pipeline, quote_request, mock_quote_repository
    ):
        quote_request.approve_by_admin()
        mock_quote_repository.get_request.return_value = quote_request

        with pytest.raises(AuthorizationError):
            await pipeline.submit_quote(
                SubmitQuoteRequest(
                    quote_request_id=quote_request.id,
                    tradesperson_id=uuid4(),
                    quote_amount=6500,
                )
            )

    @pytest.mark.asyncio
    async def test_quote_accepted_enables_chat(
        self, pipeline, quote_request, sample_tradesperson, mock_quote_repository
    ):
        quote_request.approve_by_admin()
        mock_quote_repository.get_request.return_value = quote_request

        submitted = await pipeline.submit_quote(
            SubmitQuoteRequest(
                quote_request_id=quote_request.id,
                tradesperson_id=sample_tradesperson.id,
                quote_amount=6500,
                quote_description="Includes tiling",
            )
        )
        assert submitted.quote_request.status == QuoteRequestStatus.QUOTED
        assert submitted.quote_request.tradesperson_quoted is True

        mock_quote_repository.get_quote.return_value = submitted.quote
        answered = await pipeline.respond_to_quote(submitted.quote.id, ApprovalAction.APPROVE)

        assert answered.quote.status == QuoteStatus.CLIENT_APPROVED
        assert answered.quote_request.status == QuoteRequestStatus.CLIENT_APPROVED
        assert answered.quote_request.chat_enabled is True

    @pytest.mark.asyncio
    async def test_second_answer_conflicts(
        self,
        pipeline,
        quote_request,
        sample_tradesperson,
        mock_quote_repository,
        mock_transaction_service,
    ):
        quote_request.approve_by_admin()
        quote_request.record_quote()
        quote = Quote(
            quote_request_id=quote_request.id,
            tradesperson_id=sample_tradesperson.id,
            quote_amount=6500,
        )
        mock_quote_repository.get_request.return_value = quote_request
        mock_quote_repository.get_quote.return_value = quote

        await pipeline.respond_to_quote(quote.id, ApprovalAction.APPROVE)
        with pytest.raises(InvalidTransitionError):
            await pipeline.respond_to_quote(quote.id, ApprovalAction.REJECT)

        # Both reads are row-locked inside the transaction
        mock_quote_repository.get_quote.assert_called_with(quote.id, for_update=True)
        mock_quote_repository.get_request.assert_called_with(
            quote_request.id, for_update=True
        )
        assert mock_transaction_service.execute_in_transaction.call_count == 2
        assert mock_quote_repository.update_quote.call_count == 1
        assert quote.status == QuoteStatus.CLIENT_APPROVED

    @pytest.mark.asyncio
    async def test_pending_requests_hidden_from_tradesperson(
        self,
        pipeline,
        quote_request,
        sample_tradesperson,
        mock_quote_repository,
        mock_tradesperson_repository,
    ):
        approved = QuoteRequest(
            tradesperson_id=sample_tradesperson.id,
            customer_name="Alex",
            customer_email="alex@example.com",
            project_description="Garden wall",
            status=QuoteRequestStatus.ADMIN_APPROVED,
        )
        mock_tradesperson_repository.get_by_id.return_value = sample_tradesperson
        mock_quote_repository.list_requests_for_tradesperson.return_value = [
            quote_request,
            approved,
        ]

        visible = await pipeline.list_for_tradesperson(sample_tradesperson.id)
        assert visible == [approved]

        assert (
            await pipeline.list_for_tradesperson(
                sample_tradesperson.id, QuoteRequestStatus.PENDING
            )
            == []
        )

    @pytest.mark.asyncio
    async def test_customer_listing_includes_latest_quote(
        self, pipeline, quote_request, mock_quote_repository
    ):
        quote_request.approve_by_admin()
        quote_request.record_quote()
        quote = Quote(
            quote_request_id=quote_request.id,
            tradesperson_id=quote_request.tradesperson_id,
            quote_amount=6500,
        )
        mock_quote_repository.list_requests_for_customer.return_value = [quote_request]
        mock_quote_repository.latest_quote.return_value = quote

        listings = await pipeline.list_for_customer("sam@example.com")

        assert len(listings) == 1
        assert listings[0].quote is quote
        mock_quote_repository.latest_quote.assert_called_once_with(quote_request.id)
