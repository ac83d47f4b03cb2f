"""
Unit tests for ApplyToJobUseCase.
"""

from uuid import uuid4

import pytest

from marketplace.application.use_cases.apply_to_job import (
    ApplyToJobRequest,
    ApplyToJobUseCase,
)
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.exceptions.workflow_error import (
    AuthorizationError,
    ConflictError,
    InvalidTransitionError,
)
from marketplace.domain.value_objects.application_status import ApplicationStatus
from marketplace.domain.value_objects.job_stage import JobStage


class TestApplyToJobUseCase:
    """Test cases for ApplyToJobUseCase."""

    @pytest.fixture
    def use_case(
        self,
        mock_job_repository,
        mock_application_repository,
        mock_tradesperson_repository,
        mock_transaction_service,
    ):
        return ApplyToJobUseCase(
            job_repo=mock_job_repository,
            application_repo=mock_application_repository,
            tradesperson_repo=mock_tradesperson_repository,
            transaction_service=mock_transaction_service,
        )

    @pytest.fixture
    def request_for(self, open_job, sample_tradesperson):
        def build(amount=180):
            return ApplyToJobRequest(
                job_id=open_job.id,
                tradesperson_id=sample_tradesperson.id,
                quotation_amount=amount,
                quotation_notes="Can start Monday",
            )

        return build

    @pytest.fixture(autouse=True)
    def repositories(
        self,
        open_job,
        sample_tradesperson,
        mock_job_repository,
        mock_tradesperson_repository,
    ):
        mock_job_repository.get_by_id.return_value = open_job
        mock_tradesperson_repository.get_by_id.return_value = sample_tradesperson

    @pytest.mark.asyncio
    async def test_apply_success(self, use_case, request_for, mock_application_repository):
        application = await use_case.execute(request_for())

        assert application.status == ApplicationStatus.PENDING
        assert application.quotation_amount == 180
        assert application.quotation_notes == "Can start Monday"
        mock_application_repository.create.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -10])
    async def test_non_positive_quotation(self, use_case, request_for, amount, mock_job_repository):
        with pytest.raises(ValidationError):
            await use_case.execute(request_for(amount))
        mock_job_repository.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_application(
        self, use_case, request_for, pending_application, mock_application_repository
    ):
        mock_application_repository.get_by_job_and_tradesperson.return_value = (
            pending_application
        )

        with pytest.raises(ConflictError, match="already applied"):
            await use_case.execute(request_for())
        mock_application_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_unapproved_tradesperson(self, use_case, request_for, sample_tradesperson):
        sample_tradesperson.is_approved = False

        with pytest.raises(AuthorizationError):
            await use_case.execute(request_for())

    @pytest.mark.asyncio
    async def test_job_not_open(self, use_case, request_for, open_job):
        open_job.status = JobStage.PENDING_APPROVAL

        with pytest.raises(InvalidTransitionError, match="not approved yet"):
            await use_case.execute(request_for())

    @pytest.mark.asyncio
    async def test_tradesperson_not_found(
        self, use_case, open_job, mock_tradesperson_repository
    ):
        mock_tradesperson_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ApplyToJobRequest(
                    job_id=open_job.id, tradesperson_id=uuid4(), quotation_amount=100
                )
            )
