"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from marketplace.domain.entities.client import Client
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.entities.job_review import JobReview
from marketplace.domain.entities.quote_request import Quote, QuoteRequest
from marketplace.domain.entities.tradesperson import Tradesperson
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.job_stage import JobStage
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus


@dataclass
class JobListing:
    """A job together with the records listings show next to it."""

    job: Job
    client: Optional[Client] = None
    tradesperson: Optional[Tradesperson] = None
    reviews: List[JobReview] = field(default_factory=list)


@dataclass
class ApplicationListing:
    """An application together with its job and tradesperson."""

    application: JobApplication
    job: Optional[Job] = None
    tradesperson: Optional[Tradesperson] = None


class JobRepositoryInterface(ABC):
    """Job repository interface."""

    @abstractmethod
    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID, optionally locking the row for the transaction."""
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Create a new job."""
        pass

    @abstractmethod
    async def update(self, job: Job) -> Job:
        """Update an existing job."""
        pass

    @abstractmethod
    async def list_jobs(
        self,
        client_id: Optional[UUID] = None,
        stage: Optional[JobStage] = None,
        limit: int = 100,
    ) -> List[JobListing]:
        """List jobs newest first with client, tradesperson and reviews."""
        pass

    @abstractmethod
    async def find_open_by_trade(
        self,
        trade: str,
        exclude_applied_by: Optional[UUID] = None,
        district: Optional[str] = None,
        limit: int = 100,
    ) -> List[Job]:
        """Find approved open jobs for a trade, optionally in one postal district."""
        pass


class JobApplicationRepositoryInterface(ABC):
    """Job application repository interface."""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[JobApplication]:
        """Get application by ID."""
        pass

    @abstractmethod
    async def get_by_job_and_tradesperson(
        self, job_id: UUID, tradesperson_id: UUID
    ) -> Optional[JobApplication]:
        """Get the application a tradesperson made on a job."""
        pass

    @abstractmethod
    async def create(self, application: JobApplication) -> JobApplication:
        """Create a new application."""
        pass

    @abstractmethod
    async def update(self, application: JobApplication) -> JobApplication:
        """Persist status changes of an application."""
        pass

    @abstractmethod
    async def reject_others(self, job_id: UUID, keep_application_id: UUID) -> List[UUID]:
        """Reject every pending or accepted application of a job except one.

        Returns the IDs of the applications that were rejected.
        """
        pass

    @abstractmethod
    async def list_for_job(self, job_id: UUID) -> List[ApplicationListing]:
        """List applications made on a job."""
        pass

    @abstractmethod
    async def list_for_tradesperson(self, tradesperson_id: UUID) -> List[ApplicationListing]:
        """List applications made by a tradesperson."""
        pass

    @abstractmethod
    async def list_all(self, limit: int = 100) -> List[ApplicationListing]:
        """List all applications newest first."""
        pass


class JobReviewRepositoryInterface(ABC):
    """Job review repository interface."""

    @abstractmethod
    async def create(self, review: JobReview) -> JobReview:
        """Create a new review."""
        pass

    @abstractmethod
    async def exists(
        self,
        job_id: UUID,
        tradesperson_id: UUID,
        reviewer_type: ActorType,
        reviewer_id: UUID,
    ) -> bool:
        """Check if the reviewer already reviewed the tradesperson on the job."""
        pass

    @abstractmethod
    async def list_for_job(self, job_id: UUID) -> List[JobReview]:
        """List reviews attached to a job."""
        pass


class ClientRepositoryInterface(ABC):
    """Client repository interface."""

    @abstractmethod
    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Client]:
        """Get client by email."""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Create a new client."""
        pass


class TradespersonRepositoryInterface(ABC):
    """Tradesperson repository interface."""

    @abstractmethod
    async def get_by_id(self, tradesperson_id: UUID) -> Optional[Tradesperson]:
        """Get tradesperson by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Tradesperson]:
        """Get tradesperson by email."""
        pass

    @abstractmethod
    async def create(self, tradesperson: Tradesperson) -> Tradesperson:
        """Create a new tradesperson."""
        pass

    @abstractmethod
    async def update(self, tradesperson: Tradesperson) -> Tradesperson:
        """Update an existing tradesperson."""
        pass

    @abstractmethod
    async def list_all(self, limit: int = 100) -> List[Tradesperson]:
        """List tradespeople newest first."""
        pass


class QuoteRepositoryInterface(ABC):
    """Quote request and quote repository interface."""

    @abstractmethod
    async def create_request(self, quote_request: QuoteRequest) -> QuoteRequest:
        """Create a new quote request."""
        pass

    @abstractmethod
    async def get_request(
        self, quote_request_id: UUID, for_update: bool = False
    ) -> Optional[QuoteRequest]:
        """Get quote request by ID, optionally locking the row for the transaction."""
        pass

    @abstractmethod
    async def update_request(self, quote_request: QuoteRequest) -> QuoteRequest:
        """Persist status changes of a quote request."""
        pass

    @abstractmethod
    async def list_requests_for_tradesperson(
        self, tradesperson_id: UUID, status: Optional[QuoteRequestStatus] = None
    ) -> List[QuoteRequest]:
        """List quote requests addressed to a tradesperson."""
        pass

    @abstractmethod
    async def list_requests_for_customer(self, email: str) -> List[QuoteRequest]:
        """List quote requests made by a customer email."""
        pass

    @abstractmethod
    async def create_quote(self, quote: Quote) -> Quote:
        """Create a new quote."""
        pass

    @abstractmethod
    async def get_quote(self, quote_id: UUID, for_update: bool = False) -> Optional[Quote]:
        """Get quote by ID, optionally locking the row for the transaction."""
        pass

    @abstractmethod
    async def update_quote(self, quote: Quote) -> Quote:
        """Persist status changes of a quote."""
        pass

    @abstractmethod
    async def latest_quote(self, quote_request_id: UUID) -> Optional[Quote]:
        """Get the most recent quote for a request."""
        pass
