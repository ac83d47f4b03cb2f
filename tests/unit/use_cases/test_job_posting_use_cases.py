"""
Unit tests for posting, approving and listing jobs.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from marketplace.application.interfaces.repositories import ClientRepositoryInterface
from marketplace.application.use_cases.approve_job import ApproveJobUseCase
from marketplace.application.use_cases.listings import AvailableJobsUseCase, ListJobsUseCase
from marketplace.application.use_cases.post_job import PostJobRequest, PostJobUseCase
from marketplace.domain.entities.client import Client
from marketplace.domain.entities.job import Job
from marketplace.domain.exceptions.not_found_error import NotFoundError
from marketplace.domain.exceptions.validation_error import ValidationError
from marketplace.domain.value_objects.job_stage import JobStage


class TestPostJobUseCase:
    """Test cases for PostJobUseCase."""

    @pytest.fixture
    def sample_client(self):
        return Client(email="jane@example.com", first_name="Jane", last_name="Doe")

    @pytest.fixture
    def mock_client_repository(self, sample_client):
        mock_repo = AsyncMock(spec=ClientRepositoryInterface)
        mock_repo.get_by_id = AsyncMock(return_value=sample_client)
        return mock_repo

    @pytest.fixture
    def use_case(self, mock_job_repository, mock_client_repository, mock_transaction_service):
        return PostJobUseCase(
            job_repo=mock_job_repository,
            client_repo=mock_client_repository,
            transaction_service=mock_transaction_service,
        )

    @pytest.mark.asyncio
    async def test_post_job(self, use_case, sample_client, mock_job_repository):
        result = await use_case.execute(
            PostJobRequest(
                client_id=sample_client.id,
                trade="Plumber",
                description="Fix leaking kitchen tap",
                postcode="sw1a 1aa",
                budget=200,
            )
        )

        assert result.job.status == JobStage.PENDING_APPROVAL
        assert result.job.is_approved is False
        assert result.job.postcode == "SW1A 1AA"
        mock_job_repository.create.assert_called_once()

    @pytest.mark.asyncio
    async def test_unknown_client(self, use_case, mock_client_repository):
        mock_client_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.execute(
                PostJobRequest(
                    client_id=uuid4(),
                    trade="Plumber",
                    description="Fix tap",
                    postcode="SW1A 1AA",
                    budget=200,
                )
            )

    @pytest.mark.asyncio
    async def test_blank_trade(self, use_case, sample_client, mock_job_repository):
        with pytest.raises(ValidationError, match="Trade is required"):
            await use_case.execute(
                PostJobRequest(
                    client_id=sample_client.id,
                    trade="  ",
                    description="Fix tap",
                    postcode="SW1A 1AA",
                    budget=200,
                )
            )
        mock_job_repository.create.assert_not_called()


class TestApproveJobUseCase:
    """Test cases for ApproveJobUseCase."""

    @pytest.mark.asyncio
    async def test_approve_then_repeat(self, mock_job_repository, mock_transaction_service):
        job = Job(
            client_id=uuid4(),
            trade="Plumber",
            description="Fix tap",
            postcode="SW1A 1AA",
            budget=200,
        )
        mock_job_repository.get_by_id.return_value = job
        use_case = ApproveJobUseCase(mock_job_repository, mock_transaction_service)

        first = await use_case.execute(job.id)
        second = await use_case.execute(job.id)

        assert first.changed is True
        assert first.job.status == JobStage.OPEN
        assert second.changed is False
        mock_job_repository.update.assert_called_once_with(job)

    @pytest.mark.asyncio
    async def test_missing_job(self, mock_job_repository, mock_transaction_service):
        mock_job_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await ApproveJobUseCase(mock_job_repository, mock_transaction_service).execute(
                uuid4()
            )


class TestListingUseCases:
    @pytest.mark.asyncio
    async def test_list_limit_capped(self, mock_job_repository):
        use_case = ListJobsUseCase(mock_job_repository, max_results=50)

        await use_case.execute(limit=1000)

        mock_job_repository.list_jobs.assert_called_once_with(
            client_id=None, stage=None, limit=50
        )

    @pytest.mark.asyncio
    async def test_available_jobs_filtered_by_district(
        self,
        open_job,
        sample_tradesperson,
        mock_job_repository,
        mock_tradesperson_repository,
    ):
        mock_tradesperson_repository.get_by_id.return_value = sample_tradesperson
        mock_job_repository.find_open_by_trade.return_value = [open_job]

        jobs = await AvailableJobsUseCase(
            mock_job_repository, mock_tradesperson_repository, max_results=1
        ).execute(sample_tradesperson.id)

        assert jobs == [open_job]
        mock_job_repository.find_open_by_trade.assert_called_once_with(
            "Plumber", exclude_applied_by=sample_tradesperson.id, district="SW1A", limit=1
        )

    @pytest.mark.asyncio
    async def test_available_jobs_without_district_match(
        self,
        open_job,
        sample_tradesperson,
        mock_job_repository,
        mock_tradesperson_repository,
    ):
        far_job = Job(
            client_id=uuid4(),
            trade="Plumber",
            description="Boiler service",
            postcode="M1 1AE",
            budget=90,
            status=JobStage.OPEN,
            is_approved=True,
        )
        mock_tradesperson_repository.get_by_id.return_value = sample_tradesperson
        mock_job_repository.find_open_by_trade.return_value = [open_job, far_job]

        jobs = await AvailableJobsUseCase(
            mock_job_repository, mock_tradesperson_repository, match_postcode=False
        ).execute(sample_tradesperson.id)

        assert jobs == [open_job, far_job]
        mock_job_repository.find_open_by_trade.assert_called_once_with(
            "Plumber", exclude_applied_by=sample_tradesperson.id, district=None, limit=500
        )
