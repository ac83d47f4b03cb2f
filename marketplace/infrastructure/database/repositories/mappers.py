"""
Conversions between SQLAlchemy models and domain entities.
"""

from marketplace.domain.entities.client import Client
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.entities.job_review import JobReview
from marketplace.domain.entities.quote_request import Quote, QuoteRequest
from marketplace.domain.entities.tradesperson import Tradesperson
from marketplace.infrastructure.database.models.client import ClientModel
from marketplace.infrastructure.database.models.job import JobModel
from marketplace.infrastructure.database.models.job_application import (
    JobApplicationModel,
)
from marketplace.infrastructure.database.models.job_review import JobReviewModel
from marketplace.infrastructure.database.models.quote import QuoteModel, QuoteRequestModel
from marketplace.infrastructure.database.models.tradesperson import TradespersonModel


def job_from_model(model: JobModel) -> Job:
    return Job(
        id=model.id,
        client_id=model.client_id,
        trade=model.trade,
        description=model.description,
        postcode=model.postcode,
        budget=model.budget,
        budget_type=model.budget_type,
        preferred_date=model.preferred_date,
        status=model.status,
        is_approved=model.is_approved,
        approved_at=model.approved_at,
        assigned_tradesperson_id=model.assigned_tradesperson_id,
        assigned_by=model.assigned_by,
        assigned_at=model.assigned_at,
        quotation_amount=model.quotation_amount,
        quotation_notes=model.quotation_notes,
        is_completed=model.is_completed,
        completed_at=model.completed_at,
        completed_by=model.completed_by,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def apply_job_to_model(job: Job, model: JobModel) -> JobModel:
    """Copy mutable job fields onto a model."""
    model.trade = job.trade
    model.description = job.description
    model.postcode = job.postcode
    model.budget = job.budget
    model.budget_type = job.budget_type.value
    model.preferred_date = job.preferred_date
    model.status = job.status.value
    model.is_approved = job.is_approved
    model.approved_at = job.approved_at
    model.assigned_tradesperson_id = job.assigned_tradesperson_id
    model.assigned_by = job.assigned_by.value if job.assigned_by else None
    model.assigned_at = job.assigned_at
    model.quotation_amount = job.quotation_amount
    model.quotation_notes = job.quotation_notes
    model.is_completed = job.is_completed
    model.completed_at = job.completed_at
    model.completed_by = job.completed_by.value if job.completed_by else None
    model.updated_at = job.updated_at
    return model


def application_from_model(model: JobApplicationModel) -> JobApplication:
    return JobApplication(
        id=model.id,
        job_id=model.job_id,
        tradesperson_id=model.tradesperson_id,
        quotation_amount=model.quotation_amount,
        quotation_notes=model.quotation_notes,
        status=model.status,
        applied_at=model.applied_at,
        updated_at=model.updated_at,
    )


def review_from_model(model: JobReviewModel) -> JobReview:
    return JobReview(
        id=model.id,
        job_id=model.job_id,
        tradesperson_id=model.tradesperson_id,
        reviewer_type=model.reviewer_type,
        reviewer_id=model.reviewer_id,
        rating=model.rating,
        review_text=model.review_text,
        reviewed_at=model.reviewed_at,
    )


def client_from_model(model: ClientModel) -> Client:
    return Client(
        id=model.id,
        email=model.email,
        first_name=model.first_name,
        last_name=model.last_name,
        phone=model.phone,
        postcode=model.postcode,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def tradesperson_from_model(model: TradespersonModel) -> Tradesperson:
    return Tradesperson(
        id=model.id,
        email=model.email,
        first_name=model.first_name,
        last_name=model.last_name,
        phone=model.phone,
        trade=model.trade,
        postcode=model.postcode,
        years_experience=model.years_experience,
        hourly_rate=model.hourly_rate,
        is_verified=model.is_verified,
        is_approved=model.is_approved,
        is_active=model.is_active,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def quote_request_from_model(model: QuoteRequestModel) -> QuoteRequest:
    return QuoteRequest(
        id=model.id,
        tradesperson_id=model.tradesperson_id,
        customer_name=model.customer_name,
        customer_email=model.customer_email,
        customer_phone=model.customer_phone,
        project_type=model.project_type,
        project_description=model.project_description,
        location=model.location,
        timeframe=model.timeframe,
        budget_range=model.budget_range,
        status=model.status,
        admin_approved=model.admin_approved,
        tradesperson_quoted=model.tradesperson_quoted,
        client_approved=model.client_approved,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def quote_from_model(model: QuoteModel) -> Quote:
    return Quote(
        id=model.id,
        quote_request_id=model.quote_request_id,
        tradesperson_id=model.tradesperson_id,
        quote_amount=model.quote_amount,
        quote_description=model.quote_description,
        status=model.status,
        created_at=model.created_at,
    )
