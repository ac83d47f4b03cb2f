"""Client repository implementation."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.interfaces.repositories import ClientRepositoryInterface
from marketplace.domain.entities.client import Client
from marketplace.domain.exceptions.workflow_error import ConflictError
from marketplace.infrastructure.database.models.client import ClientModel

from .mappers import client_from_model


class ClientRepository(ClientRepositoryInterface):
    """Client repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID."""
        stmt = select(ClientModel).where(ClientModel.id == client_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return client_from_model(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Client]:
        """Get client by email."""
        stmt = select(ClientModel).where(ClientModel.email == email.strip().lower())
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return client_from_model(model) if model else None

    async def create(self, client: Client) -> Client:
        """Create a new client."""
        model = ClientModel(
            id=client.id,
            email=client.email,
            first_name=client.first_name,
            last_name=client.last_name,
            phone=client.phone,
            postcode=client.postcode,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )

        self.db.add(model)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise ConflictError(f"A client with email {client.email} already exists") from e
        await self.db.refresh(model)

        return client_from_model(model)
