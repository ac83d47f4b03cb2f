#!/usr/bin/env python3
"""
Seed database with test data for development.
"""

import asyncio
import logging
import os

from sqlalchemy import func, select

from marketplace.config.database import get_async_session_factory
from marketplace.domain.entities.client import Client
from marketplace.domain.entities.job import Job
from marketplace.domain.entities.job_application import JobApplication
from marketplace.domain.entities.tradesperson import Tradesperson
from marketplace.infrastructure.database.models import ClientModel
from marketplace.infrastructure.database.repositories import (
    ClientRepository,
    JobApplicationRepository,
    JobRepository,
    TradespersonRepository,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


TRADESPEOPLE = [
    ("dave@plumbing.example.com", "Dave", "Pipe", "Plumber", "SW1A 2BB", 12, 45.0),
    ("sara@sparks.example.com", "Sara", "Volt", "Electrician", "SW1A 0AA", 8, 50.0),
    ("tom@roofs.example.com", "Tom", "Slate", "Roofer", "M1 1AE", 20, 40.0),
    ("newbie@plumbing.example.com", "Nia", "Fresh", "Plumber", "SW1A 1AB", 1, 30.0),
]

JOBS = [
    ("Plumber", "Fix leaking kitchen tap", "SW1A 1AA", 200),
    ("Electrician", "Install outdoor socket", "SW1A 2AA", 150),
    ("Roofer", "Replace broken ridge tiles", "M1 2AB", 600),
]


async def seed_database():
    """Seed database with test data."""
    database_url = os.getenv("MIGRATION_DATABASE_URL")
    session_factory = get_async_session_factory(database_url)

    async with session_factory() as session:
        # Check if data already exists
        existing_clients = await session.execute(select(func.count(ClientModel.id)))
        if existing_clients.scalar() > 0:
            logger.info("Database already has data, skipping seed.")
            return

        client_repo = ClientRepository(session)
        tradesperson_repo = TradespersonRepository(session)
        job_repo = JobRepository(session)
        application_repo = JobApplicationRepository(session)

        logger.info("Creating test client...")
        client = await client_repo.create(
            Client(
                email="jane@example.com",
                first_name="Jane",
                last_name="Doe",
                postcode="SW1A 1AA",
            )
        )

        logger.info("Creating test tradespeople...")
        tradespeople = []
        for email, first, last, trade, postcode, years, rate in TRADESPEOPLE:
            tradesperson = Tradesperson(
                email=email,
                first_name=first,
                last_name=last,
                trade=trade,
                postcode=postcode,
                years_experience=years,
                hourly_rate=rate,
            )
            # The newest plumber still waits for document checks
            if not email.startswith("newbie"):
                tradesperson.verify()
            tradespeople.append(await tradesperson_repo.create(tradesperson))

        logger.info("Creating test jobs...")
        jobs = []
        for trade, description, postcode, budget in JOBS:
            job = Job(
                client_id=client.id,
                trade=trade,
                description=description,
                postcode=postcode,
                budget=budget,
            )
            job.approve()
            jobs.append(await job_repo.create(job))

        # One pending application so the assign flow can be tried straight away
        await application_repo.create(
            JobApplication(
                job_id=jobs[0].id,
                tradesperson_id=tradespeople[0].id,
                quotation_amount=180,
                quotation_notes="Parts included",
            )
        )

        await session.commit()

        logger.info("Database seeded successfully!")
        logger.info(f"Client: {client.email} ({client.id})")
        for tradesperson in tradespeople:
            logger.info(f"Tradesperson: {tradesperson.full_name} - {tradesperson.trade} ({tradesperson.id})")
        for job in jobs:
            logger.info(f"Job: {job.description} - {job.status.value} ({job.id})")


if __name__ == "__main__":
    asyncio.run(seed_database())
