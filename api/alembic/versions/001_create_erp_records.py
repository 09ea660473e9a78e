"""create_erp_records

Revision ID: 001_create_erp_records
Revises:
Create Date: 2026-10-12 09:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_create_erp_records'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('erp_records'):
        op.create_table('erp_records',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('entity_name', sa.String(length=100), nullable=False),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('synced_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_erp_records_entity_name'), 'erp_records', ['entity_name'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if inspector.has_table('erp_records'):
        indexes = [idx['name'] for idx in inspector.get_indexes('erp_records')]
        if 'ix_erp_records_entity_name' in indexes:
            op.drop_index(op.f('ix_erp_records_entity_name'), table_name='erp_records')
        op.drop_table('erp_records')
