"""Initial marketplace schema

Revision ID: 3f1c2a7d9b10
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a7d9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create clients table
    op.create_table(
        'clients',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('postcode', sa.String(length=10), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_clients_email', 'clients', ['email'], unique=True)

    # Create tradespeople table
    op.create_table(
        'tradespeople',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('trade', sa.String(length=100), nullable=False),
        sa.Column('postcode', sa.String(length=10), nullable=False),
        sa.Column('years_experience', sa.Integer(), nullable=True),
        sa.Column('hourly_rate', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tradespeople_email', 'tradespeople', ['email'], unique=True)
    op.create_index('ix_tradespeople_trade', 'tradespeople', ['trade'])
    op.create_index('ix_tradespeople_is_approved', 'tradespeople', ['is_approved'])
    op.create_index('idx_tradespeople_trade_approved', 'tradespeople', ['trade', 'is_approved'])

    # Create jobs table
    op.create_table(
        'jobs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('client_id', sa.Uuid(), nullable=False),
        sa.Column('trade', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('postcode', sa.String(length=10), nullable=False),
        sa.Column('budget', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('budget_type', sa.String(length=20), nullable=False, server_default='fixed'),
        sa.Column('preferred_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=30), nullable=False, server_default='pending_approval'),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('assigned_tradesperson_id', sa.Uuid(), nullable=True),
        sa.Column('assigned_by', sa.String(length=20), nullable=True),
        sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('quotation_amount', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('quotation_notes', sa.Text(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_by', sa.String(length=20), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['client_id'], ['clients.id'], ),
        sa.ForeignKeyConstraint(['assigned_tradesperson_id'], ['tradespeople.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_jobs_client_id', 'jobs', ['client_id'])
    op.create_index('ix_jobs_trade', 'jobs', ['trade'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])
    op.create_index('ix_jobs_assigned_tradesperson_id', 'jobs', ['assigned_tradesperson_id'])
    op.create_index('idx_jobs_trade_status', 'jobs', ['trade', 'status'])
    op.create_index('idx_jobs_client_created', 'jobs', ['client_id', 'created_at'])

    # Create job_applications table
    op.create_table(
        'job_applications',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('tradesperson_id', sa.Uuid(), nullable=False),
        sa.Column('quotation_amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('quotation_notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('applied_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        *_timestamps(),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ),
        sa.ForeignKeyConstraint(['tradesperson_id'], ['tradespeople.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_job_applications_job_id', 'job_applications', ['job_id'])
    op.create_index('ix_job_applications_tradesperson_id', 'job_applications', ['tradesperson_id'])
    op.create_index('ix_job_applications_status', 'job_applications', ['status'])
    op.create_index(
        'uq_job_applications_job_tradesperson',
        'job_applications',
        ['job_id', 'tradesperson_id'],
        unique=True,
    )
    op.create_index(
        'uq_job_applications_one_accepted',
        'job_applications',
        ['job_id'],
        unique=True,
        postgresql_where=sa.text("status = 'accepted'"),
        sqlite_where=sa.text("status = 'accepted'"),
    )

    # Create job_reviews table
    op.create_table(
        'job_reviews',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('tradesperson_id', sa.Uuid(), nullable=False),
        sa.Column('reviewer_type', sa.String(length=20), nullable=False),
        sa.Column('reviewer_id', sa.Uuid(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('review_text', sa.Text(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        *_timestamps(),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_job_reviews_rating'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ),
        sa.ForeignKeyConstraint(['tradesperson_id'], ['tradespeople.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_job_reviews_job_id', 'job_reviews', ['job_id'])
    op.create_index('ix_job_reviews_tradesperson_id', 'job_reviews', ['tradesperson_id'])
    op.create_index(
        'idx_job_reviews_reviewer',
        'job_reviews',
        ['job_id', 'tradesperson_id', 'reviewer_type', 'reviewer_id'],
    )

    # Create quote_requests table
    op.create_table(
        'quote_requests',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tradesperson_id', sa.Uuid(), nullable=False),
        sa.Column('customer_name', sa.String(length=255), nullable=False),
        sa.Column('customer_email', sa.String(length=255), nullable=False),
        sa.Column('customer_phone', sa.String(length=30), nullable=True),
        sa.Column('project_type', sa.String(length=100), nullable=True),
        sa.Column('project_description', sa.Text(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('timeframe', sa.String(length=100), nullable=True),
        sa.Column('budget_range', sa.String(length=100), nullable=True),
        sa.Column('status', sa.String(length=30), nullable=False, server_default='pending'),
        sa.Column('admin_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('tradesperson_quoted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('client_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(['tradesperson_id'], ['tradespeople.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_quote_requests_tradesperson_id', 'quote_requests', ['tradesperson_id'])
    op.create_index('ix_quote_requests_customer_email', 'quote_requests', ['customer_email'])
    op.create_index('ix_quote_requests_status', 'quote_requests', ['status'])

    # Create quotes table
    op.create_table(
        'quotes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('quote_request_id', sa.Uuid(), nullable=False),
        sa.Column('tradesperson_id', sa.Uuid(), nullable=False),
        sa.Column('quote_amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('quote_description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=30), nullable=False, server_default='pending'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['quote_request_id'], ['quote_requests.id'], ),
        sa.ForeignKeyConstraint(['tradesperson_id'], ['tradespeople.id'], ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_quotes_quote_request_id', 'quotes', ['quote_request_id'])
    op.create_index('ix_quotes_tradesperson_id', 'quotes', ['tradesperson_id'])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables in reverse order
    op.drop_table('quotes')
    op.drop_table('quote_requests')
    op.drop_table('job_reviews')
    op.drop_table('job_applications')
    op.drop_table('jobs')
    op.drop_table('tradespeople')
    op.drop_table('clients')
