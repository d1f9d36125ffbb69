"""Initial migration

Revision ID: 001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from erp_bridge.models.types import Money, UTCDateTime

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create purchase_orders table
    op.create_table(
        'purchase_orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('po_number', sa.String(), nullable=False),
        sa.Column('partner_id', sa.String(), nullable=False),
        sa.Column('order_date', UTCDateTime(), nullable=False),
        sa.Column('total_amount', Money(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_purchase_orders_id'), 'purchase_orders', ['id'], unique=False)
    op.create_index(op.f('ix_purchase_orders_po_number'), 'purchase_orders', ['po_number'], unique=False)
    op.create_index(op.f('ix_purchase_orders_partner_id'), 'purchase_orders', ['partner_id'], unique=False)

    # Create po_line_items table
    op.create_table(
        'po_line_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('purchase_order_id', sa.Integer(), nullable=False),
        sa.Column('sku', sa.String(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', Money(), nullable=False),
        sa.ForeignKeyConstraint(['purchase_order_id'], ['purchase_orders.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_po_line_items_id'), 'po_line_items', ['id'], unique=False)
    op.create_index(op.f('ix_po_line_items_purchase_order_id'), 'po_line_items', ['purchase_order_id'], unique=False)
    op.create_index(op.f('ix_po_line_items_sku'), 'po_line_items', ['sku'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_po_line_items_sku'), table_name='po_line_items')
    op.drop_index(op.f('ix_po_line_items_purchase_order_id'), table_name='po_line_items')
    op.drop_index(op.f('ix_po_line_items_id'), table_name='po_line_items')
    op.drop_table('po_line_items')
    op.drop_index(op.f('ix_purchase_orders_partner_id'), table_name='purchase_orders')
    op.drop_index(op.f('ix_purchase_orders_po_number'), table_name='purchase_orders')
    op.drop_index(op.f('ix_purchase_orders_id'), table_name='purchase_orders')
    op.drop_table('purchase_orders')
