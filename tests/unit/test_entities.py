"""
Unit tests for domain entities.
"""

from uuid import uuid4

import pytest

from marketplace.domain.entities.client import Client
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.entities.job_review import JobReview
from marketplace.domain.entities.quote_request import Quote, QuoteRequest
from marketplace.domain.entities.tradesperson import Tradesperson
from marketplace.domain.exceptions.workflow_error import (
    AuthorizationError,
    InvalidTransitionError,
)
from marketplace.domain.value_objects.actor_type import ActorType
from marketplace.domain.value_objects.application_status import ApplicationStatus
from marketplace.domain.value_objects.job_stage import JobStage
from marketplace.domain.value_objects.quote_status import QuoteRequestStatus, QuoteStatus


class TestJob:
    """Test Job entity."""

    @pytest.fixture
    def job(self):
        return Job(
            client_id=uuid4(),
            trade="Plumber",
            description="Fix leaking kitchen tap",
            postcode="sw1a1aa",
            budget=200,
        )

    def test_new_job_waits_for_approval(self, job):
        assert job.status == JobStage.PENDING_APPROVAL
        assert job.is_approved is False
        assert job.postcode == "SW1A 1AA"
        assert job.created_at is not None

    def test_missing_description_raises(self):
        with pytest.raises(ValueError, match="Job description is required"):
            Job(client_id=uuid4(), trade="Plumber", description=" ", postcode="SW1A 1AA", budget=1)

    def test_negative_budget_raises(self):
        with pytest.raises(ValueError, match="Budget"):
            Job(client_id=uuid4(), trade="Plumber", description="x", postcode="SW1A 1AA", budget=-5)

    def test_approve_is_idempotent(self, job):
        assert job.approve() is True
        approved_at = job.approved_at

        assert job.approve() is False
        assert job.approved_at == approved_at
        assert job.status == JobStage.OPEN

    def test_assign_sets_every_assignment_field(self, job):
        job.approve()
        tradesperson_id = uuid4()

        previous = job.assign(tradesperson_id, 180, "Parts included", ActorType.CLIENT)

        assert previous is None
        assert job.status == JobStage.IN_PROGRESS
        assert job.assigned_tradesperson_id == tradesperson_id
        assert job.assigned_by == ActorType.CLIENT
        assert job.quotation_amount == 180
        assert job.quotation_notes == "Parts included"
        assert job.assigned_at is not None

    def test_reassign_returns_previous_tradesperson(self, job):
        job.approve()
        first, second = uuid4(), uuid4()
        job.assign(first, 180, None, ActorType.ADMIN)

        previous = job.assign(second, 150, None, ActorType.ADMIN)

        assert previous == first
        assert job.assigned_tradesperson_id == second

    def test_cross_actor_reassign_leaves_job_untouched(self, job):
        job.approve()
        tradesperson_id = uuid4()
        job.assign(tradesperson_id, 180, None, ActorType.CLIENT)

        with pytest.raises(AuthorizationError):
            job.assign(uuid4(), 100, None, ActorType.ADMIN)

        assert job.assigned_tradesperson_id == tradesperson_id
        assert job.assigned_by == ActorType.CLIENT
        assert job.quotation_amount == 180

    def test_assign_with_non_positive_quotation_raises(self, job):
        job.approve()

        with pytest.raises(ValueError, match="Quotation amount"):
            job.assign(uuid4(), 0, None, ActorType.CLIENT)
        assert job.status == JobStage.OPEN

    def test_complete_unassigned_job_raises(self, job):
        job.approve()

        with pytest.raises(InvalidTransitionError):
            job.complete(ActorType.CLIENT)
        assert job.is_completed is False

    def test_complete_and_review(self, job):
        job.approve()
        job.assign(uuid4(), 180, None, ActorType.CLIENT)

        job.complete(ActorType.CLIENT)
        assert job.status == JobStage.COMPLETED
        assert job.is_completed is True
        assert job.completed_by == ActorType.CLIENT

        job.mark_reviewed(ActorType.CLIENT)
        assert job.status == JobStage.REVIEWED

    def test_completed_job_requires_tradesperson(self):
        with pytest.raises(ValueError, match="assigned tradesperson"):
            Job(
                client_id=uuid4(),
                trade="Plumber",
                description="x",
                postcode="SW1A 1AA",
                budget=1,
                is_completed=True,
            )


class TestJobApplication:
    """Test JobApplication entity."""

    def test_non_positive_quotation_raises(self):
        with pytest.raises(ValueError):
            JobApplication(job_id=uuid4(), tradesperson_id=uuid4(), quotation_amount=0)

    def test_accept(self, pending_application):
        pending_application.accept()
        assert pending_application.status == ApplicationStatus.ACCEPTED

        with pytest.raises(InvalidTransitionError):
            pending_application.accept()

    def test_rejected_application_can_be_accepted_later(self, pending_application):
        pending_application.reject()

        pending_application.accept()

        assert pending_application.status == ApplicationStatus.ACCEPTED

    def test_only_pending_applications_can_be_rejected(self, pending_application):
        pending_application.accept()

        with pytest.raises(InvalidTransitionError, match="Only pending"):
            pending_application.reject()


class TestJobReview:
    """Test JobReview entity."""

    @pytest.mark.parametrize("rating", [0, 6, 4.5, True])
    def test_rating_out_of_range_raises(self, rating):
        with pytest.raises(ValueError):
            JobReview(
                job_id=uuid4(),
                tradesperson_id=uuid4(),
                reviewer_type=ActorType.CLIENT,
                reviewer_id=uuid4(),
                rating=rating,
            )

    def test_admin_cannot_review(self):
        with pytest.raises(ValueError, match="cannot leave reviews"):
            JobReview(
                job_id=uuid4(),
                tradesperson_id=uuid4(),
                reviewer_type=ActorType.ADMIN,
                reviewer_id=uuid4(),
                rating=5,
            )

    def test_reviewer_type_coerced_from_string(self):
        review = JobReview(
            job_id=uuid4(),
            tradesperson_id=uuid4(),
            reviewer_type="client",
            reviewer_id=uuid4(),
            rating=5,
        )
        assert review.reviewer_type == ActorType.CLIENT
        assert review.reviewed_at is not None


class TestAccounts:
    def test_client_email_normalised(self):
        client = Client(email=" Jane@Example.COM ", first_name="Jane", last_name="Doe")

        assert client.email == "jane@example.com"
        assert client.full_name == "Jane Doe"

    def test_invalid_email_raises(self):
        with pytest.raises(ValueError):
            Client(email="nope", first_name="Jane", last_name="Doe")

    def test_tradesperson_needs_approval_to_apply(self, sample_tradesperson):
        assert sample_tradesperson.can_apply() is True

        sample_tradesperson.is_active = False
        assert sample_tradesperson.can_apply() is False

    def test_verify_approves_account(self):
        tradesperson = Tradesperson(
            email="new@example.com",
            first_name="New",
            last_name="Starter",
            trade="Roofer",
            postcode="LS1 4AP",
        )
        assert tradesperson.can_apply() is False

        tradesperson.verify()

        assert tradesperson.is_verified is True
        assert tradesperson.can_apply() is True

    def test_trade_and_district_matching(self, sample_tradesperson):
        assert sample_tradesperson.matches_trade(" plumber ")
        assert not sample_tradesperson.matches_trade("Electrician")
        assert sample_tradesperson.district == "SW1A"


class TestQuoteRequest:
    """Test QuoteRequest and Quote entities."""

    @pytest.fixture
    def quote_request(self):
        return QuoteRequest(
            tradesperson_id=uuid4(),
            customer_name="Sam Client",
            customer_email="Sam@Example.com",
            project_description="Loft conversion",
        )

    def test_full_pipeline(self, quote_request):
        assert quote_request.customer_email == "sam@example.com"

        quote_request.approve_by_admin()
        quote_request.record_quote()
        assert quote_request.chat_enabled is False

        quote_request.approve_by_client()

        assert quote_request.status == QuoteRequestStatus.CLIENT_APPROVED
        assert quote_request.admin_approved is True
        assert quote_request.tradesperson_quoted is True
        assert quote_request.chat_enabled is True

    def test_quote_before_admin_approval_raises(self, quote_request):
        with pytest.raises(InvalidTransitionError):
            quote_request.record_quote()
        assert quote_request.status == QuoteRequestStatus.PENDING

    def test_rejected_request_is_final(self, quote_request):
        quote_request.reject_by_admin()

        with pytest.raises(InvalidTransitionError):
            quote_request.approve_by_admin()

    def test_quote_answered_once(self, quote_request):
        quote = Quote(
            quote_request_id=quote_request.id,
            tradesperson_id=quote_request.tradesperson_id,
            quote_amount=2500,
        )
        quote.reject()
        assert quote.status == QuoteStatus.CLIENT_REJECTED

        with pytest.raises(InvalidTransitionError):
            quote.approve()

    def test_non_positive_quote_raises(self, quote_request):
        with pytest.raises(ValueError):
            Quote(
                quote_request_id=quote_request.id,
                tradesperson_id=quote_request.tradesperson_id,
                quote_amount=0,
            )
