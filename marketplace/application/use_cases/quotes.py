"""Quote request pipeline use cases.

Customers ask a specific tradesperson for a quote, an admin screens the
request, the tradesperson prices it and the customer accepts or declines the
price. Acceptance is what enables chat between the two parties.
"""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    QuoteRepositoryInterface,
    TradespersonRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.quote_request import Quote, QuoteRequest
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import AuthorizationError
from marketplace.domain.value_objects.approval_action import ApprovalAction
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from marketplace.infrastructure.monitoring.metrics import record_quote_request_status

logger = get_logger(__name__)

# Requests stay hidden from the tradesperson until an admin lets them through
VISIBLE_TO_TRADESPERSON = (
    QuoteRequestStatus.ADMIN_APPROVED,
    QuoteRequestStatus.QUOTED,
    QuoteRequestStatus.CLIENT_APPROVED,
    QuoteRequestStatus.QUOTE_REJECTED,
)


@dataclass
class CreateQuoteRequestRequest:
    tradesperson_id: UUID
    customer_name: str
    customer_email: str
    project_description: str
    customer_phone: Optional[str] = None
    project_type: Optional[str] = None
    location: Optional[str] = None
    timeframe: Optional[str] = None
    budget_range: Optional[str] = None


@dataclass
class SubmitQuoteRequest:
    quote_request_id: UUID
    tradesperson_id: UUID
    quote_amount: float
    quote_description: Optional[str] = None


@dataclass
class QuoteRequestListing:
    """A quote request together with its most recent quote."""

    quote_request: QuoteRequest
    quote: Optional[Quote] = None


@dataclass
class QuoteDecisionResult:
    quote: Quote
    quote_request: QuoteRequest


class QuotePipeline:
    """All steps of the quote request pipeline over one repository."""

    def __init__(
        self,
        quote_repo: QuoteRepositoryInterface,
        tradesperson_repo: TradespersonRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.quote_repo = quote_repo
        self.tradesperson_repo = tradesperson_repo
        self.transaction_service = transaction_service

    async def create_request(self, request: CreateQuoteRequestRequest) -> QuoteRequest:
        """Record a customer's request addressed to one tradesperson."""
        tradesperson = await self.tradesperson_repo.get_by_id(request.tradesperson_id)
        if not tradesperson:
            raise NotFoundError("Tradesperson", request.tradesperson_id)

        try:
            quote_request = QuoteRequest(
                tradesperson_id=tradesperson.id,
                customer_name=request.customer_name,
                customer_email=request.customer_email,
                project_description=request.project_description,
                customer_phone=request.customer_phone,
                project_type=request.project_type,
                location=request.location,
                timeframe=request.timeframe,
                budget_range=request.budget_range,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        created = await self.transaction_service.execute_in_transaction(
            lambda: self.quote_repo.create_request(quote_request)
        )
        record_quote_request_status(created.status.value)
        logger.info(
            "Quote request created",
            quote_request_id=str(created.id),
            tradesperson_id=str(tradesperson.id),
        )
        return created

    async def review_request(
        self, quote_request_id: UUID, action: ApprovalAction
    ) -> QuoteRequest:
        """Admin screening of a pending request."""

        async def review() -> QuoteRequest:
            quote_request = await self._get_request(quote_request_id, for_update=True)
            if ApprovalAction(action) == ApprovalAction.APPROVE:
                quote_request.approve_by_admin()
            else:
                quote_request.reject_by_admin()
            return await self.quote_repo.update_request(quote_request)

        updated = await self.transaction_service.execute_in_transaction(review)
        record_quote_request_status(updated.status.value)
        logger.info(
            "Quote request reviewed",
            quote_request_id=str(quote_request_id),
            status=updated.status.value,
        )
        return updated

    async def submit_quote(self, request: SubmitQuoteRequest) -> QuoteDecisionResult:
        """Tradesperson prices an approved request."""

        async def submit() -> QuoteDecisionResult:
            quote_request = await self._get_request(request.quote_request_id, for_update=True)
            if quote_request.tradesperson_id != request.tradesperson_id:
                raise AuthorizationError(
                    "This quote request was sent to a different tradesperson",
                    actor="tradesperson",
                )

            try:
                quote = Quote(
                    quote_request_id=quote_request.id,
                    tradesperson_id=request.tradesperson_id,
                    quote_amount=request.quote_amount,
                    quote_description=request.quote_description,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e
            quote_request.record_quote()

            created = await self.quote_repo.create_quote(quote)
            updated = await self.quote_repo.update_request(quote_request)
            return QuoteDecisionResult(quote=created, quote_request=updated)

        result = await self.transaction_service.execute_in_transaction(submit)
        record_quote_request_status(result.quote_request.status.value)
        logger.info(
            "Quote submitted",
            quote_id=str(result.quote.id),
            quote_request_id=str(result.quote_request.id),
            quote_amount=result.quote.quote_amount,
        )
        return result

    async def respond_to_quote(
        self, quote_id: UUID, action: ApprovalAction
    ) -> QuoteDecisionResult:
        """Customer accepts or declines the price.

        Both rows are locked, so a second answer to the same quote waits for
        the first and then fails as no longer pending.
        """

        async def respond() -> QuoteDecisionResult:
            quote = await self.quote_repo.get_quote(quote_id, for_update=True)
            if not quote:
                raise NotFoundError("Quote", quote_id)
            quote_request = await self._get_request(quote.quote_request_id, for_update=True)

            if ApprovalAction(action) == ApprovalAction.APPROVE:
                quote.approve()
                quote_request.approve_by_client()
            else:
                quote.reject()
                quote_request.reject_by_client()

            updated_quote = await self.quote_repo.update_quote(quote)
            updated_request = await self.quote_repo.update_request(quote_request)
            return QuoteDecisionResult(quote=updated_quote, quote_request=updated_request)

        result = await self.transaction_service.execute_in_transaction(respond)
        record_quote_request_status(result.quote_request.status.value)
        logger.info(
            "Quote answered by customer",
            quote_id=str(quote_id),
            status=result.quote.status.value,
            chat_enabled=result.quote_request.chat_enabled,
        )
        return result

    async def list_for_tradesperson(
        self, tradesperson_id: UUID, status: Optional[QuoteRequestStatus] = None
    ) -> List[QuoteRequest]:
        if not await self.tradesperson_repo.get_by_id(tradesperson_id):
            raise NotFoundError("Tradesperson", tradesperson_id)

        if status is not None:
            if QuoteRequestStatus(status) not in VISIBLE_TO_TRADESPERSON:
                return []
            return await self.quote_repo.list_requests_for_tradesperson(
                tradesperson_id, status=status
            )

        requests = await self.quote_repo.list_requests_for_tradesperson(tradesperson_id)
        return [r for r in requests if r.status in VISIBLE_TO_TRADESPERSON]

    async def list_for_customer(self, email: str) -> List[QuoteRequestListing]:
        requests = await self.quote_repo.list_requests_for_customer(email)
        listings = []
        for quote_request in requests:
            quote = None
            if quote_request.tradesperson_quoted:
                quote = await self.quote_repo.latest_quote(quote_request.id)
            listings.append(QuoteRequestListing(quote_request=quote_request, quote=quote))
        return listings

    async def _get_request(
        self, quote_request_id: UUID, for_update: bool = False
    ) -> QuoteRequest:
        quote_request = await self.quote_repo.get_request(
            quote_request_id, for_update=for_update
        )
        if not quote_request:
            raise NotFoundError("Quote request", quote_request_id)
        return quote_request
