"""Client and tradesperson profile use cases."""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from marketplace.application.interfaces.repositories import (
    ClientRepositoryInterface,
    TradespersonRepositoryInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.client import Client
from marketplace.domain.entities.tradesperson import Tradesperson
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import ConflictError
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class RegisterClientRequest:
    email: str
    first_name: str
    last_name: str = ""
    phone: Optional[str] = None
    postcode: Optional[str] = None


@dataclass
class RegisterTradespersonRequest:
    email: str
    first_name: str
    trade: str
    postcode: str
    last_name: str = ""
    phone: Optional[str] = None
    years_experience: Optional[int] = None
    hourly_rate: Optional[float] = None


class RegisterClientUseCase:
    """Create the profile record of a client."""

    def __init__(
        self,
        client_repo: ClientRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.client_repo = client_repo
        self.transaction_service = transaction_service

    async def execute(self, request: RegisterClientRequest) -> Client:
        try:
            client = Client(
                email=request.email,
                first_name=request.first_name,
                last_name=request.last_name,
                phone=request.phone,
                postcode=request.postcode,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        if await self.client_repo.get_by_email(client.email):
            raise ConflictError(f"A client with email {client.email} already exists")

        created = await self.transaction_service.execute_in_transaction(
            lambda: self.client_repo.create(client)
        )
        logger.info("Client registered", client_id=str(created.id))
        return created


class RegisterTradespersonUseCase:
    """Create the profile record of a tradesperson, pending admin verification."""

    def __init__(
        self,
        tradesperson_repo: TradespersonRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.tradesperson_repo = tradesperson_repo
        self.transaction_service = transaction_service

    async def execute(self, request: RegisterTradespersonRequest) -> Tradesperson:
        try:
            tradesperson = Tradesperson(
                email=request.email,
                first_name=request.first_name,
                last_name=request.last_name,
                trade=request.trade,
                postcode=request.postcode,
                phone=request.phone,
                years_experience=request.years_experience,
                hourly_rate=request.hourly_rate,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        if await self.tradesperson_repo.get_by_email(tradesperson.email):
            raise ConflictError(
                f"A tradesperson with email {tradesperson.email} already exists"
            )

        created = await self.transaction_service.execute_in_transaction(
            lambda: self.tradesperson_repo.create(tradesperson)
        )
        logger.info(
            "Tradesperson registered",
            tradesperson_id=str(created.id),
            trade=created.trade,
        )
        return created


class VerifyTradespersonUseCase:
    """Admin check of a tradesperson's documents, which also approves the account."""

    def __init__(
        self,
        tradesperson_repo: TradespersonRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.tradesperson_repo = tradesperson_repo
        self.transaction_service = transaction_service

    async def execute(self, tradesperson_id: UUID) -> Tradesperson:
        tradesperson = await self.tradesperson_repo.get_by_id(tradesperson_id)
        if not tradesperson:
            raise NotFoundError("Tradesperson", tradesperson_id)

        tradesperson.verify()
        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.tradesperson_repo.update(tradesperson)
        )
        logger.info("Tradesperson verified", tradesperson_id=str(tradesperson_id))
        return updated


class ListTradespeopleUseCase:
    def __init__(self, tradesperson_repo: TradespersonRepositoryInterface, max_results: int = 500):
        self.tradesperson_repo = tradesperson_repo
        self.max_results = max_results

    async def execute(self) -> List[Tradesperson]:
        return await self.tradesperson_repo.list_all(limit=self.max_results)
