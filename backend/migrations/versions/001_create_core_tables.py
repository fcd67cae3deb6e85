"""Create organizations, users, orders, line items, design jobs

Revision ID: 001
Revises:
Create Date: 2026-06-02 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None

ORDER_STATUSES = ('new', 'waiting_sizes', 'invoiced', 'production', 'shipped', 'completed', 'cancelled')
ORDER_PRIORITIES = ('low', 'normal', 'high')
DESIGN_JOB_STATUSES = ('pending', 'assigned', 'in_progress', 'review', 'approved', 'rejected', 'completed')
SIZE_COLUMNS = ('yxs', 'ys', 'ym', 'yl', 'xs', 's', 'm', 'l', 'xl', 'xxl', 'xxxl', 'xxxxl')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('NOW()'), nullable=False),
    ]


def upgrade():
    op.create_table(
        'organizations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('state', sa.String(), nullable=True),
        sa.Column('shipping_address', sa.Text(), nullable=True),
        sa.Column('client_type', sa.String(), nullable=True),
        sa.Column('archived', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('role', sa.String(), server_default='ops', nullable=False),
        sa.Column('status', sa.String(), server_default='ACTIVE', nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_users_email'),
        sa.CheckConstraint(
            "role IN ('admin', 'sales', 'designer', 'ops', 'manufacturer')",
            name='ck_users_role'
        ),
        sa.CheckConstraint("status IN ('ACTIVE', 'DISABLED')", name='ck_users_status')
    )

    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_code', sa.String(), nullable=False),
        sa.Column('org_id', sa.Integer(), nullable=True),
        sa.Column('salesperson_id', sa.String(), nullable=True),
        sa.Column('order_name', sa.String(), nullable=False),
        sa.Column('status', postgresql.ENUM(*ORDER_STATUSES, name='order_status'), server_default='new', nullable=False),
        sa.Column('priority', postgresql.ENUM(*ORDER_PRIORITIES, name='order_priority'), server_default='normal', nullable=False),
        sa.Column('design_approved', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('sizes_validated', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('deposit_received', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('est_delivery', sa.Date(), nullable=True),
        sa.Column('tracking_number', sa.Text(), nullable=True),
        sa.Column('shipping_address', sa.Text(), nullable=True),
        sa.Column('bill_to_address', sa.Text(), nullable=True),
        sa.Column('contact_name', sa.String(), nullable=True),
        sa.Column('contact_email', sa.String(), nullable=True),
        sa.Column('contact_phone', sa.String(), nullable=True),
        sa.Column('validation_status', sa.String(), nullable=True),
        sa.Column('validation_last_run_at', sa.DateTime(), nullable=True),
        sa.Column('has_unresolved_warnings', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('order_code'),
        sa.ForeignKeyConstraint(['org_id'], ['organizations.id']),
        sa.ForeignKeyConstraint(['salesperson_id'], ['users.id'])
    )
    op.create_index('ix_orders_org_id', 'orders', ['org_id'])
    op.create_index('ix_orders_status', 'orders', ['status'])

    op.create_table(
        'order_line_items',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('variant_id', sa.Integer(), nullable=True, comment='Catalog product variant'),
        sa.Column('item_name', sa.String(), nullable=True),
        sa.Column('color_notes', sa.Text(), nullable=True),
        *[sa.Column(size, sa.Integer(), server_default='0', nullable=True) for size in SIZE_COLUMNS],
        sa.Column('unit_price', sa.Numeric(10, 2), server_default='0.00', nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'], ondelete='CASCADE')
    )
    op.create_index('ix_order_line_items_order_id', 'order_line_items', ['order_id'])

    op.create_table(
        'design_jobs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('job_code', sa.String(), nullable=False),
        sa.Column('org_id', sa.Integer(), nullable=True),
        sa.Column('order_id', sa.Integer(), nullable=True),
        sa.Column('salesperson_id', sa.String(), nullable=True),
        sa.Column('brief', sa.Text(), nullable=True),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('urgency', sa.String(), server_default='normal', nullable=False),
        sa.Column('status', postgresql.ENUM(*DESIGN_JOB_STATUSES, name='design_job_status'), server_default='pending', nullable=False),
        sa.Column('assigned_designer_id', sa.String(), nullable=True),
        sa.Column('deadline', sa.Date(), nullable=True),
        sa.Column('priority', sa.String(), server_default='normal', nullable=False),
        sa.Column('reference_files', postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column('logo_urls', postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column('rendition_urls', postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column('rendition_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('validation_status', sa.String(), nullable=True),
        sa.Column('archived', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('job_code'),
        sa.ForeignKeyConstraint(['org_id'], ['organizations.id']),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id']),
        sa.ForeignKeyConstraint(['salesperson_id'], ['users.id']),
        sa.ForeignKeyConstraint(['assigned_designer_id'], ['users.id'])
    )
    op.create_index('ix_design_jobs_org_id', 'design_jobs', ['org_id'])
    op.create_index('ix_design_jobs_status', 'design_jobs', ['status'])


def downgrade():
    op.drop_index('ix_design_jobs_status', table_name='design_jobs')
    op.drop_index('ix_design_jobs_org_id', table_name='design_jobs')
    op.drop_table('design_jobs')

    op.drop_index('ix_order_line_items_order_id', table_name='order_line_items')
    op.drop_table('order_line_items')

    op.drop_index('ix_orders_status', table_name='orders')
    op.drop_index('ix_orders_org_id', table_name='orders')
    op.drop_table('orders')

    op.drop_table('users')
    op.drop_table('organizations')

    op.execute('DROP TYPE IF EXISTS design_job_status')
    op.execute('DROP TYPE IF EXISTS order_priority')
    op.execute('DROP TYPE IF EXISTS order_status')
