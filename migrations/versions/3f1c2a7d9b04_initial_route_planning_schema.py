"""Initial route planning schema

Revision ID: 3f1c2a7d9b04
Revises: 
Create Date: 2026-10-19 09:12:44.218301

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a7d9b04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'technicians',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('role', sa.String(length=50), nullable=False, server_default='lead_tech'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_technicians_role', 'technicians', ['role'])

    op.create_table(
        'jobs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('store_number', sa.String(length=50), nullable=True),
        sa.Column('job_type', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('service_ticket_number', sa.String(length=100), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('special_instructions', sa.Text(), nullable=True),
        sa.Column('start_time', sa.String(length=20), nullable=True),
        sa.Column('street', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('state', sa.String(length=2), nullable=False, server_default=''),
        sa.Column('zip_code', sa.String(length=10), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='unassigned'),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('scheduled_date', sa.Date(), nullable=True),
        sa.Column('route_order', sa.Integer(), nullable=True),
        sa.Column('lead_tech_id', sa.Uuid(), nullable=True),
        sa.Column('assistant_tech_id', sa.Uuid(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['lead_tech_id'], ['technicians.id'], ),
        sa.ForeignKeyConstraint(['assistant_tech_id'], ['technicians.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('lead_tech_id', 'scheduled_date', 'route_order', name='uq_jobs_lead_tech_date_route_order')
    )
    op.create_index('ix_jobs_state', 'jobs', ['state'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])
    op.create_index('ix_jobs_scheduled_date', 'jobs', ['scheduled_date'])
    op.create_index('ix_jobs_lead_tech_date', 'jobs', ['lead_tech_id', 'scheduled_date'])
    op.create_index('ix_jobs_assistant_tech_date', 'jobs', ['assistant_tech_id', 'scheduled_date'])

    # A scheduled job always carries a lead technician and a route position
    op.create_check_constraint(
        'ck_jobs_scheduled_has_crew',
        'jobs',
        'scheduled_date IS NULL OR (lead_tech_id IS NOT NULL AND route_order IS NOT NULL)'
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_constraint('ck_jobs_scheduled_has_crew', 'jobs', type_='check')
    op.drop_index('ix_jobs_assistant_tech_date', table_name='jobs')
    op.drop_index('ix_jobs_lead_tech_date', table_name='jobs')
    op.drop_index('ix_jobs_scheduled_date', table_name='jobs')
    op.drop_index('ix_jobs_status', table_name='jobs')
    op.drop_index('ix_jobs_state', table_name='jobs')
    op.drop_table('jobs')
    op.drop_index('ix_technicians_role', table_name='technicians')
    op.drop_table('technicians')
