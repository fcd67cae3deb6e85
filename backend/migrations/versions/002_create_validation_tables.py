"""Create validation_results and validation_summaries tables

Revision ID: 002
Revises: 001
Create Date: 2026-06-02 09:30:00.000000

Results are short-lived (expires_at) and replaced on every run; the
summary keeps one row per validated entity.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '002'
down_revision = '001'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'validation_results',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('entity_type', sa.String(), nullable=False),
        sa.Column('entity_id', sa.String(), nullable=False),
        sa.Column('check_type', sa.String(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('severity', sa.String(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('details', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('suggested_action', sa.Text(), nullable=True),
        sa.Column('related_entity_type', sa.String(), nullable=True),
        sa.Column('related_entity_id', sa.String(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('created_by_user_id', sa.String(), nullable=True),
        sa.Column('acknowledged_at', sa.DateTime(), nullable=True),
        sa.Column('acknowledged_by_user_id', sa.String(), nullable=True),
        sa.Column('acknowledgment_note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_validation_results_entity', 'validation_results', ['entity_type', 'entity_id'])
    op.create_index('ix_validation_results_expires_at', 'validation_results', ['expires_at'])

    op.create_table(
        'validation_summaries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('entity_type', sa.String(), nullable=False),
        sa.Column('entity_id', sa.String(), nullable=False),
        sa.Column('total_checks', sa.Integer(), server_default='0', nullable=False),
        sa.Column('passed', sa.Integer(), server_default='0', nullable=False),
        sa.Column('warnings', sa.Integer(), server_default='0', nullable=False),
        sa.Column('errors', sa.Integer(), server_default='0', nullable=False),
        sa.Column('skipped', sa.Integer(), server_default='0', nullable=False),
        sa.Column('overall_status', sa.String(), nullable=False),
        sa.Column('validated_at', sa.DateTime(), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('valid_until', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('entity_type', 'entity_id', name='uq_validation_summaries_entity')
    )


def downgrade():
    op.drop_table('validation_summaries')
    op.drop_index('ix_validation_results_expires_at', table_name='validation_results')
    op.drop_index('ix_validation_results_entity', table_name='validation_results')
    op.drop_table('validation_results')
