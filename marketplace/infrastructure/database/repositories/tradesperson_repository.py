"""Tradesperson repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.interfaces.repositories import (
    TradespersonRepositoryInterface,
)
from marketplace.domain.entities.tradesperson import Tradesperson
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.workflow_error import ConflictError
from marketplace.infrastructure.database.models.tradesperson import TradespersonModel

from .mappers import tradesperson_from_model


class TradespersonRepository(TradespersonRepositoryInterface):
    """Tradesperson repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, tradesperson_id: UUID) -> Optional[Tradesperson]:
        """Get tradesperson by ID."""
        stmt = select(TradespersonModel).where(TradespersonModel.id == tradesperson_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return tradesperson_from_model(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Tradesperson]:
        """Get tradesperson by email."""
        stmt = select(TradespersonModel).where(
            TradespersonModel.email == email.strip().lower()
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return tradesperson_from_model(model) if model else None

    async def create(self, tradesperson: Tradesperson) -> Tradesperson:
        """Create a new tradesperson."""
        model = TradespersonModel(
            id=tradesperson.id,
            email=tradesperson.email,
            first_name=tradesperson.first_name,
            last_name=tradesperson.last_name,
            phone=tradesperson.phone,
            trade=tradesperson.trade,
            postcode=tradesperson.postcode,
            years_experience=tradesperson.years_experience,
            hourly_rate=tradesperson.hourly_rate,
            is_verified=tradesperson.is_verified,
            is_approved=tradesperson.is_approved,
            is_active=tradesperson.is_active,
            created_at=tradesperson.created_at,
            updated_at=tradesperson.updated_at,
        )

        self.db.add(model)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise ConflictError(
                f"A tradesperson with email {tradesperson.email} already exists"
            ) from e
        await self.db.refresh(model)

        return tradesperson_from_model(model)

    async def update(self, tradesperson: Tradesperson) -> Tradesperson:
        """Update an existing tradesperson."""
        stmt = select(TradespersonModel).where(TradespersonModel.id == tradesperson.id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise NotFoundError("Tradesperson", tradesperson.id)

        model.first_name = tradesperson.first_name
        model.last_name = tradesperson.last_name
        model.phone = tradesperson.phone
        model.trade = tradesperson.trade
        model.postcode = tradesperson.postcode
        model.years_experience = tradesperson.years_experience
        model.hourly_rate = tradesperson.hourly_rate
        model.is_verified = tradesperson.is_verified
        model.is_approved = tradesperson.is_approved
        model.is_active = tradesperson.is_active
        model.updated_at = tradesperson.updated_at

        await self.db.flush()
        await self.db.refresh(model)

        return tradesperson_from_model(model)

    async def list_all(self, limit: int = 100) -> List[Tradesperson]:
        """List tradespeople newest first."""
        stmt = (
            select(TradespersonModel)
            .order_by(TradespersonModel.created_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [tradesperson_from_model(model) for model in result.scalars().all()]
