"""Quote request and quote repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.interfaces.repositories import QuoteRepositoryInterface
from marketplace.domain.entities.quote_request import Quote, QuoteRequest
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus
from marketplace.infrastructure.database.models.quote import QuoteModel, QuoteRequestModel

from .mappers import quote_from_model, quote_request_from_model


class QuoteRepository(QuoteRepositoryInterface):
    """Quote request and quote repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_request(self, quote_request: QuoteRequest) -> QuoteRequest:
        """Create a new quote request."""
        model = QuoteRequestModel(
            id=quote_request.id,
            tradesperson_id=quote_request.tradesperson_id,
            customer_name=quote_request.customer_name,
            customer_email=quote_request.customer_email,
            customer_phone=quote_request.customer_phone,
            project_type=quote_request.project_type,
            project_description=quote_request.project_description,
            location=quote_request.location,
            timeframe=quote_request.timeframe,
            budget_range=quote_request.budget_range,
            status=quote_request.status.value,
            admin_approved=quote_request.admin_approved,
            tradesperson_quoted=quote_request.tradesperson_quoted,
            client_approved=quote_request.client_approved,
            created_at=quote_request.created_at,
            updated_at=quote_request.updated_at,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        return quote_request_from_model(model)

    async def get_request(
        self, quote_request_id: UUID, for_update: bool = False
    ) -> Optional[QuoteRequest]:
        """Get quote request by ID."""
        model = await self._get_request_model(quote_request_id, for_update=for_update)
        return quote_request_from_model(model) if model else None

    async def update_request(self, quote_request: QuoteRequest) -> QuoteRequest:
        """Persist status changes of a quote request."""
        model = await self._get_request_model(quote_request.id)
        if not model:
            raise NotFoundError("Quote request", quote_request.id)

        model.status = quote_request.status.value
        model.admin_approved = quote_request.admin_approved
        model.tradesperson_quoted = quote_request.tradesperson_quoted
        model.client_approved = quote_request.client_approved
        model.updated_at = quote_request.updated_at

        await self.db.flush()
        await self.db.refresh(model)

        return quote_request_from_model(model)

    async def list_requests_for_tradesperson(
        self, tradesperson_id: UUID, status: Optional[QuoteRequestStatus] = None
    ) -> List[QuoteRequest]:
        """List quote requests addressed to a tradesperson."""
        stmt = (
            select(QuoteRequestModel)
            .where(QuoteRequestModel.tradesperson_id == tradesperson_id)
            .order_by(QuoteRequestModel.created_at.desc())
        )
        if status is not None:
            stmt = stmt.where(QuoteRequestModel.status == QuoteRequestStatus(status).value)

        result = await self.db.execute(stmt)
        return [quote_request_from_model(model) for model in result.scalars().all()]

    async def list_requests_for_customer(self, email: str) -> List[QuoteRequest]:
        """List quote requests made by a customer email."""
        stmt = (
            select(QuoteRequestModel)
            .where(QuoteRequestModel.customer_email == email.strip().lower())
            .order_by(QuoteRequestModel.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return [quote_request_from_model(model) for model in result.scalars().all()]

    async def create_quote(self, quote: Quote) -> Quote:
        """Create a new quote."""
        model = QuoteModel(
            id=quote.id,
            quote_request_id=quote.quote_request_id,
            tradesperson_id=quote.tradesperson_id,
            quote_amount=quote.quote_amount,
            quote_description=quote.quote_description,
            status=quote.status.value,
            created_at=quote.created_at,
        )

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        return quote_from_model(model)

    async def get_quote(self, quote_id: UUID, for_update: bool = False) -> Optional[Quote]:
        """Get quote by ID."""
        stmt = select(QuoteModel).where(QuoteModel.id == quote_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return quote_from_model(model) if model else None

    async def update_quote(self, quote: Quote) -> Quote:
        """Persist status changes of a quote."""
        stmt = select(QuoteModel).where(QuoteModel.id == quote.id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise NotFoundError("Quote", quote.id)

        model.status = quote.status.value
        await self.db.flush()
        await self.db.refresh(model)

        return quote_from_model(model)

    async def latest_quote(self, quote_request_id: UUID) -> Optional[Quote]:
        """Get the most recent quote for a request."""
        stmt = (
            select(QuoteModel)
            .where(QuoteModel.quote_request_id == quote_request_id)
            .order_by(QuoteModel.created_at.desc())
            .limit(1)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return quote_from_model(model) if model else None

    async def _get_request_model(
        self, quote_request_id: UUID, for_update: bool = False
    ) -> Optional[QuoteRequestModel]:
        stmt = select(QuoteRequestModel).where(QuoteRequestModel.id == quote_request_id)
        if for_update:
            # Serialise concurrent answers to the same request
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
