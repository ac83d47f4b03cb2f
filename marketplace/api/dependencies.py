"""
FastAPI dependency injection container.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.services.review_recorder import ReviewRecorder
from marketplace.application.use_cases.accounts import (
    ListTradespeopleUseCase,
    RegisterClientUseCase,
    RegisterTradespersonUseCase,
    VerifyTradespersonUseCase,
)
from marketplace.application.use_cases.apply_to_job import ApplyToJobUseCase
from marketplace.application.use_cases.approve_job import ApproveJobUseCase
from marketplace.application.use_cases.approve_quotation import ApproveQuotationUseCase
from marketplace.application.use_cases.assign_job import AssignJobUseCase
from marketplace.application.use_cases.complete_job import CompleteJobUseCase
from marketplace.application.use_cases.listings import (
    AvailableJobsUseCase,
    ListApplicationsUseCase,
    ListJobsUseCase,
)
from marketplace.application.use_cases.post_job import PostJobUseCase
from marketplace.application.use_cases.quotes import QuotePipeline
from marketplace.application.use_cases.rate_tradesperson import RateTradespersonUseCase
from marketplace.config.database import get_db_session
from marketplace.config.settings import settings
from marketplace.infrastructure.database.repositories.client_repository import (
    ClientRepository,
)
from marketplace.infrastructure.database.repositories.job_application_repository import (
    JobApplicationRepository,
)
from marketplace.infrastructure.database.repositories.job_repository import JobRepository
from marketplace.infrastructure.database.repositories.job_review_repository import (
    JobReviewRepository,
)
from marketplace.infrastructure.database.repositories.quote_repository import (
    QuoteRepository,
)
from marketplace.infrastructure.database.repositories.tradesperson_repository import (
    TradespersonRepository,
)
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)


# Database Dependencies
async def get_job_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_application_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobApplicationRepository:
    """Get job application repository instance."""
    return JobApplicationRepository(db)


async def get_review_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobReviewRepository:
    """Get job review repository instance."""
    return JobReviewRepository(db)


async def get_client_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ClientRepository:
    """Get client repository instance."""
    return ClientRepository(db)


async def get_tradesperson_repository(
    db: AsyncSession = Depends(get_db_session),
) -> TradespersonRepository:
    """Get tradesperson repository instance."""
    return TradespersonRepository(db)


async def get_quote_repository(
    db: AsyncSession = Depends(get_db_session),
) -> QuoteRepository:
    """Get quote repository instance."""
    return QuoteRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(db)


JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
ApplicationRepositoryDep = Annotated[
    JobApplicationRepository, Depends(get_application_repository)
]
ReviewRepositoryDep = Annotated[JobReviewRepository, Depends(get_review_repository)]
ClientRepositoryDep = Annotated[ClientRepository, Depends(get_client_repository)]
TradespersonRepositoryDep = Annotated[
    TradespersonRepository, Depends(get_tradesperson_repository)
]
QuoteRepositoryDep = Annotated[QuoteRepository, Depends(get_quote_repository)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]


# Use case Dependencies
async def get_review_recorder(review_repo: ReviewRepositoryDep) -> ReviewRecorder:
    return ReviewRecorder(
        review_repo, enforce_unique_reviews=settings.ENFORCE_UNIQUE_REVIEWS
    )


async def get_post_job_use_case(
    job_repo: JobRepositoryDep,
    client_repo: ClientRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> PostJobUseCase:
    return PostJobUseCase(job_repo, client_repo, transaction_service)


async def get_approve_job_use_case(
    job_repo: JobRepositoryDep, transaction_service: TransactionServiceDep
) -> ApproveJobUseCase:
    return ApproveJobUseCase(job_repo, transaction_service)


async def get_apply_to_job_use_case(
    job_repo: JobRepositoryDep,
    application_repo: ApplicationRepositoryDep,
    tradesperson_repo: TradespersonRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> ApplyToJobUseCase:
    return ApplyToJobUseCase(
        job_repo, application_repo, tradesperson_repo, transaction_service
    )


async def get_assign_job_use_case(
    job_repo: JobRepositoryDep,
    application_repo: ApplicationRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> AssignJobUseCase:
    return AssignJobUseCase(job_repo, application_repo, transaction_service)


async def get_approve_quotation_use_case(
    job_repo: JobRepositoryDep,
    application_repo: ApplicationRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> ApproveQuotationUseCase:
    return ApproveQuotationUseCase(job_repo, application_repo, transaction_service)


async def get_complete_job_use_case(
    job_repo: JobRepositoryDep,
    review_recorder: ReviewRecorder = Depends(get_review_recorder),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> CompleteJobUseCase:
    return CompleteJobUseCase(job_repo, review_recorder, transaction_service)


async def get_rate_tradesperson_use_case(
    job_repo: JobRepositoryDep,
    review_recorder: ReviewRecorder = Depends(get_review_recorder),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> RateTradespersonUseCase:
    return RateTradespersonUseCase(job_repo, review_recorder, transaction_service)


async def get_list_jobs_use_case(job_repo: JobRepositoryDep) -> ListJobsUseCase:
    return ListJobsUseCase(job_repo, max_results=settings.MAX_LISTING_SIZE)


async def get_available_jobs_use_case(
    job_repo: JobRepositoryDep, tradesperson_repo: TradespersonRepositoryDep
) -> AvailableJobsUseCase:
    return AvailableJobsUseCase(
        job_repo,
        tradesperson_repo,
        match_postcode=settings.AVAILABLE_JOBS_MATCH_POSTCODE,
        max_results=settings.MAX_LISTING_SIZE,
    )


async def get_list_applications_use_case(
    application_repo: ApplicationRepositoryDep,
    job_repo: JobRepositoryDep,
    tradesperson_repo: TradespersonRepositoryDep,
) -> ListApplicationsUseCase:
    return ListApplicationsUseCase(
        application_repo,
        job_repo,
        tradesperson_repo,
        max_results=settings.MAX_LISTING_SIZE,
    )


async def get_register_client_use_case(
    client_repo: ClientRepositoryDep, transaction_service: TransactionServiceDep
) -> RegisterClientUseCase:
    return RegisterClientUseCase(client_repo, transaction_service)


async def get_register_tradesperson_use_case(
    tradesperson_repo: TradespersonRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> RegisterTradespersonUseCase:
    return RegisterTradespersonUseCase(tradesperson_repo, transaction_service)


async def get_verify_tradesperson_use_case(
    tradesperson_repo: TradespersonRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> VerifyTradespersonUseCase:
    return VerifyTradespersonUseCase(tradesperson_repo, transaction_service)


async def get_list_tradespeople_use_case(
    tradesperson_repo: TradespersonRepositoryDep,
) -> ListTradespeopleUseCase:
    return ListTradespeopleUseCase(
        tradesperson_repo, max_results=settings.MAX_LISTING_SIZE
    )


async def get_quote_pipeline(
    quote_repo: QuoteRepositoryDep,
    tradesperson_repo: TradespersonRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> QuotePipeline:
    return QuotePipeline(quote_repo, tradesperson_repo, transaction_service)


PostJobDep = Annotated[PostJobUseCase, Depends(get_post_job_use_case)]
ApproveJobDep = Annotated[ApproveJobUseCase, Depends(get_approve_job_use_case)]
ApplyToJobDep = Annotated[ApplyToJobUseCase, Depends(get_apply_to_job_use_case)]
AssignJobDep = Annotated[AssignJobUseCase, Depends(get_assign_job_use_case)]
ApproveQuotationDep = Annotated[
    ApproveQuotationUseCase, Depends(get_approve_quotation_use_case)
]
CompleteJobDep = Annotated[CompleteJobUseCase, Depends(get_complete_job_use_case)]
RateTradespersonDep = Annotated[
    RateTradespersonUseCase, Depends(get_rate_tradesperson_use_case)
]
ListJobsDep = Annotated[ListJobsUseCase, Depends(get_list_jobs_use_case)]
AvailableJobsDep = Annotated[AvailableJobsUseCase, Depends(get_available_jobs_use_case)]
ListApplicationsDep = Annotated[
    ListApplicationsUseCase, Depends(get_list_applications_use_case)
]
RegisterClientDep = Annotated[
    RegisterClientUseCase, Depends(get_register_client_use_case)
]
RegisterTradespersonDep = Annotated[
    RegisterTradespersonUseCase, Depends(get_register_tradesperson_use_case)
]
VerifyTradespersonDep = Annotated[
    VerifyTradespersonUseCase, Depends(get_verify_tradesperson_use_case)
]
ListTradespeopleDep = Annotated[
    ListTradespeopleUseCase, Depends(get_list_tradespeople_use_case)
]
QuotePipelineDep = Annotated[QuotePipeline, Depends(get_quote_pipeline)]
